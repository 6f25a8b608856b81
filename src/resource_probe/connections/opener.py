from __future__ import annotations

import logging
from functools import lru_cache

import requests

from ..config import Settings
from ..locator import Locator, LocatorKind
from .archive import ArchiveConnection
from .base import Connection
from .generic import URLLibConnection
from .http import HTTPConnection

logger = logging.getLogger(__name__)

HTTP_SCHEMES = frozenset({"http", "https"})


class ConnectionOpener:
    """Turn locators into unopened connection handles.

    Args:
        settings: Timeouts and header policy; defaults to Settings() from the environment.
        session: Optional requests.Session shared by all HTTP connections (useful for
            connection pooling, authentication or test doubles).
    """

    def __init__(self, settings: Settings | None = None, session: requests.Session | None = None) -> None:
        self.settings = settings or Settings()
        self.session = session or requests.Session()

    def open(self, locator: Locator) -> Connection:
        """Return an unopened connection; filesystem locators are stat-ed, never connected to."""
        logger.debug("opening connection for %s (%s)", locator.url, locator.kind.value)
        if locator.kind is LocatorKind.ARCHIVE_MEMBER:
            return ArchiveConnection(locator)
        if locator.scheme in HTTP_SCHEMES:
            return HTTPConnection(locator.url, self.session, self.settings)
        if locator.kind is LocatorKind.FILESYSTEM:
            raise ValueError(f"{locator.description()} is a filesystem path, not a connectable URL")
        return URLLibConnection(locator.url, self.settings)


@lru_cache(maxsize=1)
def default_opener() -> ConnectionOpener:
    return ConnectionOpener()
