from __future__ import annotations


class ResourceProbeError(Exception):
    """Base class for errors raised while probing a resource."""


class NotFound(ResourceProbeError, FileNotFoundError):
    """A filesystem path (or the file containing an archive member) does not exist."""


class UnsupportedLocator(ResourceProbeError, FileNotFoundError):
    """A filesystem-only operation was requested for a locator that is not a file."""

    def __init__(self, description: str, url: str) -> None:
        super().__init__(
            f"{description} cannot be resolved to absolute file path "
            f"because it does not reside in the file system: {url}"
        )
        self.description = description
        self.url = url


class ConnectionFailure(ResourceProbeError, ConnectionError):
    """A connection to a resource could not be opened or read."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        msg = f"could not connect to {url}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.url = url
