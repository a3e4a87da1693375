"""CLI entry point for linkharvest.

Usage:
    python -m linkharvest ADDRESS [--origin URL] [--text TEXT] [options]
"""

import argparse
import sys

from .classifier import classify_as_url
from .config import HarvestConfig
from .pipeline import discover_links


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkharvest",
        description="linkharvest - Find the same-site links on a page that are worth "
                    "following when looking for contact information.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Candidate links of a site's home page
  python -m linkharvest "https://example.com"

  # Only links labelled exactly "Contact"
  python -m linkharvest "https://example.com" --text Contact

  # A saved page, resolving its links against the live site
  python -m linkharvest ./saved/index.html --origin "https://example.com"
        """,
    )

    parser.add_argument(
        "address",
        nargs="?",
        help="URL or local file path of the page to scan",
    )

    parser.add_argument(
        "--origin",
        default=None,
        help="Base address for relative links and the domain to stay on "
             "(default: scheme and host of ADDRESS; required for file paths)",
    )

    parser.add_argument(
        "--text",
        default=None,
        help="Only follow anchors whose text is exactly this string",
    )

    parser.add_argument(
        "--strict-host",
        action="store_true",
        default=False,
        help="Compare link hosts with the origin host instead of a plain string prefix",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: none)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print diagnostics while loading and filtering",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace | None:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        The parsed namespace, or None when no address was given and usage
        has been printed instead.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.address is None:
        parser.print_help()
        return None

    if not args.origin and not classify_as_url(args.address):
        parser.error(f"--origin is required when ADDRESS is a file path: {args.address}")

    return args


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    if args is None:
        return

    config = HarvestConfig(
        verbose=args.verbose,
        timeout=args.timeout,
        strict_host=args.strict_host,
    )

    try:
        links = discover_links(args.address, origin=args.origin, text=args.text, config=config)
    except KeyboardInterrupt:
        print("\n\n[INTERRUPTED] Stopped by user.")
        sys.exit(1)

    for link in links:
        print(link)

    if config.verbose:
        print(f"[DONE] {len(links)} candidate link(s)")


if __name__ == "__main__":
    main()
