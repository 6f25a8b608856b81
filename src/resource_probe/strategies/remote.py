from __future__ import annotations

import logging
from http import HTTPStatus

from ..connections.base import Connection
from ..connections.opener import ConnectionOpener
from ..exceptions import ResourceProbeError
from ..locator import Locator

logger = logging.getLogger(__name__)


class RemoteStrategy:
    """Probe a locator through a connection, preferring header-only requests.

    Every connection is opened for a single call and closed before the call
    returns, whatever the outcome.
    """

    def __init__(self, opener: ConnectionOpener) -> None:
        self.opener = opener

    def exists(self, locator: Locator) -> bool:
        """Return True when the resource answers, False when it is absent or unreachable.

        Steps, each either resolving the answer or passing on:
            1. header attempt: HEAD status 200 -> True, 404 -> False
            2. length attempt: a content length >= 0 -> True; a header-capable
               connection that got this far -> False
            3. fallback attempt: open and close the full content stream
        """
        try:
            con = locator.open_connection(self.opener)
        except (ResourceProbeError, OSError, ValueError):
            logger.debug("could not open connection to %s", locator.url, exc_info=True)
            return False
        with con:
            try:
                return self._probe_existence(con)
            except (ResourceProbeError, OSError, ValueError):
                logger.debug("existence probe failed for %s", locator.url, exc_info=True)
                return False

    def _probe_existence(self, con: Connection) -> bool:
        for step in (self._header_attempt, self._length_attempt):
            outcome = step(con)
            if outcome is not None:
                logger.debug("%s resolved by %s: %s", con.url, step.__name__, outcome)
                return outcome
        return self._fallback_attempt(con)

    def _header_attempt(self, con: Connection) -> bool | None:
        if not con.header_capable:
            return None
        con.use_header_only()
        status = con.status_code
        if status == HTTPStatus.OK:
            return True
        if status == HTTPStatus.NOT_FOUND:
            return False
        return None

    def _length_attempt(self, con: Connection) -> bool | None:
        if con.content_length >= 0:
            return True
        if con.header_capable:
            # no usable status and no content length: give up
            return False
        return None

    def _fallback_attempt(self, con: Connection) -> bool:
        logger.debug("falling back to a content stream for %s", con.url)
        with con.open_stream():
            pass
        return True

    def is_readable(self, locator: Locator) -> bool:
        return True

    def _metadata_connection(self, locator: Locator) -> Connection:
        con = locator.open_connection(self.opener)
        if con.header_capable:
            try:
                con.use_header_only()
            except BaseException:
                con.close()
                raise
        return con

    def content_length(self, locator: Locator) -> int:
        with self._metadata_connection(locator) as con:
            return con.content_length

    def last_modified(self, locator: Locator) -> int:
        with self._metadata_connection(locator) as con:
            return con.last_modified
