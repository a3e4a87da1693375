"""Exceptions raised when an address cannot be retrieved."""


class RetrievalError(Exception):
    """Base class for failures to load an address.

    Attributes:
        address: The address that was being loaded.
    """

    def __init__(self, address: str, message: str):
        super().__init__(message)
        self.address = address


class NetworkError(RetrievalError):
    """The HTTP request failed before a response was received."""


class FileNotFound(RetrievalError):
    """The address resolved to a local path that does not exist or is not a file."""


class InvalidAddress(RetrievalError):
    """The address is neither an HTTP(S) URL nor a valid file path."""
