"""Configuration dataclass for linkharvest."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class HarvestConfig:
    """Options threaded through the loading and filtering pipeline."""

    verbose: bool = False
    timeout: Optional[float] = None  # None = wait for the server indefinitely
    strict_host: bool = False  # Compare real host names instead of a literal prefix
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/131.0.0.0 Safari/537.36 linkharvest/1.0"
    )


DEFAULT_CONFIG = HarvestConfig()
