from __future__ import annotations

import urllib.request
from typing import Any, BinaryIO

from ..config import Settings
from ..exceptions import ConnectionFailure
from .base import Connection, http_date_to_millis, parse_content_length


class URLLibConnection(Connection):
    """Fallback connection for schemes requests does not speak (ftp:, data: and the like)."""

    header_capable = False

    def __init__(self, url: str, settings: Settings) -> None:
        self.url = url
        self.settings = settings
        self._response: Any = None

    def use_header_only(self) -> None:
        pass

    def _open(self) -> Any:
        if self._response is None:
            try:
                self._response = urllib.request.urlopen(self.url, timeout=self.settings.timeout)
            except (OSError, ValueError) as exc:
                # URLError is an OSError; ValueError covers malformed URLs
                raise ConnectionFailure(self.url, str(exc)) from exc
        return self._response

    @property
    def status_code(self) -> int | None:
        return None

    @property
    def content_length(self) -> int:
        return parse_content_length(self._open().headers.get("Content-Length"))

    @property
    def last_modified(self) -> int:
        return http_date_to_millis(self._open().headers.get("Last-Modified"))

    def open_stream(self) -> BinaryIO:
        return self._open()

    def close(self) -> None:
        if self._response is not None:
            self._response.close()
            self._response = None
