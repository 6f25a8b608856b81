from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import TypeAlias

import requests

from .config import Settings
from .connections.base import UNKNOWN_TIMESTAMP
from .connections.opener import ConnectionOpener
from .exceptions import ResourceProbeError
from .locator import Locator, LocatorKind, classify
from .models import ResourceInfo
from .strategies.archive import ArchiveStrategy
from .strategies.filesystem import FilesystemStrategy
from .strategies.remote import RemoteStrategy

logger = logging.getLogger(__name__)

LocatorLike: TypeAlias = Locator | str | os.PathLike[str]


class ResourceProbe:
    """Answer existence, readability, size and freshness questions for any locator.

    Each call classifies the locator (filesystem path, archive member or
    remote URL) and hands it to exactly one strategy. Nothing is cached
    between calls.

    Args:
        settings: Network settings; defaults to Settings() from the environment.
        opener: Connection factory used for archive members and remote URLs.
        session: requests.Session for the default opener. Ignored when opener is given.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        opener: ConnectionOpener | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.opener = opener or ConnectionOpener(self.settings, session=session)
        self.filesystem = FilesystemStrategy()
        self.archive = ArchiveStrategy(self.filesystem)
        self.remote = RemoteStrategy(self.opener)

    def exists(self, locator: LocatorLike) -> bool:
        try:
            locator = Locator.parse(locator)
            kind = classify(locator)
            logger.debug("exists(%s) via %s", locator.url, kind.value)
            if kind is LocatorKind.FILESYSTEM:
                return self.filesystem.exists(locator.to_filesystem_path())
            return self.remote.exists(locator)
        except (ResourceProbeError, OSError, ValueError):
            logger.debug("exists(%s) failed", locator, exc_info=True)
            return False

    def is_readable(self, locator: LocatorLike) -> bool:
        try:
            locator = Locator.parse(locator)
            kind = classify(locator)
            logger.debug("is_readable(%s) via %s", locator.url, kind.value)
            if kind is LocatorKind.FILESYSTEM:
                return self.filesystem.is_readable(locator.to_filesystem_path())
            return self.remote.is_readable(locator)
        except (ResourceProbeError, OSError, ValueError):
            logger.debug("is_readable(%s) failed", locator, exc_info=True)
            return False

    def content_length(self, locator: LocatorLike) -> int:
        """Size in bytes; -1 when a remote resource does not report one.

        Raises NotFound for a missing local file and ConnectionFailure when a
        remote resource cannot be reached.
        """
        locator = Locator.parse(locator)
        kind = classify(locator)
        logger.debug("content_length(%s) via %s", locator.url, kind.value)
        if kind is LocatorKind.FILESYSTEM:
            return self.filesystem.content_length(locator.to_filesystem_path())
        return self.remote.content_length(locator)

    def last_modified(self, locator: LocatorLike) -> int:
        """Modification time in ms since the epoch; 0 when a remote resource does not report one.

        Archive members report the modification time of the archive file.
        """
        locator = Locator.parse(locator)
        kind = classify(locator)
        logger.debug("last_modified(%s) via %s", locator.url, kind.value)
        if kind is LocatorKind.FILESYSTEM:
            return self.filesystem.last_modified(locator.to_filesystem_path())
        if kind is LocatorKind.ARCHIVE_MEMBER:
            return self.archive.last_modified(locator)
        return self.remote.last_modified(locator)

    def get_file(self, locator: LocatorLike) -> Path:
        locator = Locator.parse(locator)
        return locator.to_filesystem_path()

    def file_for_last_modified_check(self, locator: LocatorLike) -> Path:
        """The file whose timestamp decides freshness: the archive for members, else the file itself."""
        locator = Locator.parse(locator)
        if classify(locator) is LocatorKind.ARCHIVE_MEMBER:
            return self.archive.archive_file(locator)
        return locator.to_filesystem_path()

    def describe(self, locator: LocatorLike) -> ResourceInfo:
        locator = Locator.parse(locator)
        size: int | None = None
        modified: datetime | None = None
        try:
            length = self.content_length(locator)
            size = length if length >= 0 else None
        except (ResourceProbeError, OSError, ValueError):
            logger.debug("content_length failed for %s", locator.url, exc_info=True)
        try:
            millis = self.last_modified(locator)
            if millis != UNKNOWN_TIMESTAMP:
                modified = datetime.fromtimestamp(millis / 1000, tz=UTC)
        except (ResourceProbeError, OSError, ValueError):
            logger.debug("last_modified failed for %s", locator.url, exc_info=True)
        return ResourceInfo(
            locator=locator.url,
            kind=classify(locator),
            exists=self.exists(locator),
            readable=self.is_readable(locator),
            size=size,
            last_modified=modified,
        )
