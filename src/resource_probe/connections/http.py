from __future__ import annotations

import logging
from typing import Any, BinaryIO

import requests

from ..config import Settings
from ..exceptions import ConnectionFailure
from .base import Connection, http_date_to_millis, parse_content_length

logger = logging.getLogger(__name__)


class HTTPConnection(Connection):
    """HTTP(S) connection backed by a requests session.

    No request is sent until metadata or content is first asked for. After
    use_header_only() that request is a HEAD; otherwise it is a streamed GET
    whose body is only read through open_stream().
    """

    header_capable = True

    def __init__(self, url: str, session: requests.Session, settings: Settings) -> None:
        self.url = url
        self.session = session
        self.settings = settings
        self.method = "GET"
        self._response: Any = None
        self.closed = False

    def use_header_only(self) -> None:
        if self._response is not None:
            raise RuntimeError(f"request to {self.url} was already sent")
        self.method = "HEAD"

    def _request_kwargs(self) -> dict[str, Any]:
        return {
            "headers": self.settings.request_headers(),
            "timeout": self.settings.timeout,
            "allow_redirects": self.settings.follow_redirects,
            "verify": self.settings.verify_tls,
        }

    def _send(self) -> Any:
        if self.closed:
            raise ConnectionFailure(self.url, "connection already closed")
        if self._response is None:
            logger.debug("%s %s", self.method, self.url)
            try:
                if self.method == "HEAD":
                    self._response = self.session.head(self.url, **self._request_kwargs())
                else:
                    self._response = self.session.get(self.url, stream=True, **self._request_kwargs())
            except requests.RequestException as exc:
                raise ConnectionFailure(self.url, str(exc)) from exc
        return self._response

    @property
    def status_code(self) -> int | None:
        return self._send().status_code

    @property
    def content_length(self) -> int:
        return parse_content_length(self._send().headers.get("Content-Length"))

    @property
    def last_modified(self) -> int:
        return http_date_to_millis(self._send().headers.get("Last-Modified"))

    def open_stream(self) -> BinaryIO:
        if self.method == "HEAD":
            raise ConnectionFailure(self.url, "a header-only request has no content stream")
        response = self._send()
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise ConnectionFailure(self.url, str(exc)) from exc
        return response.raw

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self._response is not None:
            self._response.close()
