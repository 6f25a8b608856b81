from __future__ import annotations

from datetime import timezone
from email.utils import parsedate_to_datetime
from types import TracebackType
from typing import BinaryIO, Protocol, runtime_checkable

UNKNOWN_LENGTH = -1
UNKNOWN_TIMESTAMP = 0


@runtime_checkable
class Connection(Protocol):
    """Protocol for the transient handle a probe opens against a locator.

    Implementations are cheap to construct and only talk to the resource
    when metadata or a stream is first requested. A connection MUST be
    released with close(); using it as a context manager does that on
    every exit path.

    ``header_capable`` is True when the protocol supports a metadata-only
    request (HTTP HEAD). Only header-capable connections report a status.
    """

    url: str
    header_capable: bool

    def use_header_only(self) -> None:
        """Switch to a metadata-only request. Must be called before any metadata is read."""
        ...

    @property
    def status_code(self) -> int | None:
        """Response status, or None when the protocol has no status concept."""
        ...

    @property
    def content_length(self) -> int:
        """Content length in bytes, UNKNOWN_LENGTH when not supplied."""
        ...

    @property
    def last_modified(self) -> int:
        """Modification time in ms since the epoch, UNKNOWN_TIMESTAMP when not supplied."""
        ...

    def open_stream(self) -> BinaryIO:
        """Return a readable stream over the full content. The caller closes it."""
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> Connection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def parse_content_length(value: str | None) -> int:
    if value is None:
        return UNKNOWN_LENGTH
    value = value.strip()
    if not value.isdigit():
        return UNKNOWN_LENGTH
    return int(value)


def http_date_to_millis(value: str | None) -> int:
    """Parse an HTTP date header (RFC 7231) into epoch milliseconds, 0 when absent or malformed."""
    if not value:
        return UNKNOWN_TIMESTAMP
    try:
        dt = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return UNKNOWN_TIMESTAMP
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)
