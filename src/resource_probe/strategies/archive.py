from __future__ import annotations

from pathlib import Path

from ..locator import Locator
from .filesystem import FilesystemStrategy


class ArchiveStrategy:
    """Freshness of an archive member is the freshness of the archive file itself."""

    def __init__(self, filesystem: FilesystemStrategy | None = None) -> None:
        self.filesystem = filesystem or FilesystemStrategy()

    def archive_file(self, locator: Locator) -> Path:
        return locator.containing_archive_locator().to_filesystem_path("Archive URL")

    def last_modified(self, locator: Locator) -> int:
        return self.filesystem.last_modified(self.archive_file(locator))
