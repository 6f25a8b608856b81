from __future__ import annotations

import zipfile
from datetime import datetime
from typing import BinaryIO

from ..exceptions import ConnectionFailure, NotFound, UnsupportedLocator
from ..locator import Locator
from .base import UNKNOWN_LENGTH, Connection


class ArchiveConnection(Connection):
    """Connection to a single member of a local zip/jar archive.

    Archives have no header-only request and no status; metadata comes from
    the member's entry in the central directory.
    """

    header_capable = False

    def __init__(self, locator: Locator) -> None:
        self.url = locator.url
        self.locator = locator
        self.member = locator.member_name
        self._zip: zipfile.ZipFile | None = None
        self._info: zipfile.ZipInfo | None = None

    def use_header_only(self) -> None:
        pass

    def _entry(self) -> tuple[zipfile.ZipFile, zipfile.ZipInfo]:
        if self._zip is not None and self._info is not None:
            return self._zip, self._info
        if not self.member:
            raise ConnectionFailure(self.url, "no archive entry addressed")
        try:
            archive_path = self.locator.containing_archive_locator().to_filesystem_path("Archive URL")
        except UnsupportedLocator as exc:
            raise ConnectionFailure(self.url, str(exc)) from exc
        if self._zip is None:
            try:
                self._zip = zipfile.ZipFile(archive_path)
            except FileNotFoundError as exc:
                raise NotFound(f"archive {archive_path} does not exist") from exc
            except (OSError, zipfile.BadZipFile) as exc:
                raise ConnectionFailure(self.url, str(exc)) from exc
        try:
            self._info = self._zip.getinfo(self.member)
        except KeyError as exc:
            raise NotFound(f"no entry {self.member!r} in {archive_path}") from exc
        return self._zip, self._info

    @property
    def status_code(self) -> int | None:
        return None

    @property
    def content_length(self) -> int:
        _, info = self._entry()
        if info.is_dir():
            return UNKNOWN_LENGTH
        return info.file_size

    @property
    def last_modified(self) -> int:
        """Member timestamp from the central directory.

        Only for direct users of the connection: ResourceProbe.last_modified
        reports the archive file's own mtime. Zip timestamps are local
        wall-clock time with two-second resolution.
        """
        _, info = self._entry()
        return int(datetime(*info.date_time).timestamp() * 1000)

    def open_stream(self) -> BinaryIO:
        zf, info = self._entry()
        try:
            return zf.open(info)
        except (OSError, zipfile.BadZipFile, RuntimeError) as exc:
            # RuntimeError: encrypted member without a password
            raise ConnectionFailure(self.url, str(exc)) from exc

    def close(self) -> None:
        if self._zip is not None:
            self._zip.close()
            self._zip = None
            self._info = None
