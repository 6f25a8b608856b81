from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse
from urllib.request import url2pathname

from .exceptions import UnsupportedLocator

if TYPE_CHECKING:
    from .connections.base import Connection
    from .connections.opener import ConnectionOpener


class LocatorKind(str, Enum):
    FILESYSTEM = "filesystem"
    ARCHIVE_MEMBER = "archive_member"
    REMOTE = "remote"


FILE_SCHEMES = frozenset({"file", "vfsfile", "vfs"})
ARCHIVE_SCHEMES = frozenset({"jar", "zip", "vfszip"})
# WebSphere-style archive URLs only address a member when they carry the separator
WSJAR_SCHEME = "wsjar"
ARCHIVE_SEPARATOR = "!/"


def _scheme_of(url: str) -> str:
    scheme = urlparse(url).scheme.lower()
    # "C:\\data\\x.txt" parses with scheme "c"
    if len(scheme) == 1:
        return ""
    return scheme


def classify(locator: Locator | str) -> LocatorKind:
    """Decide how a locator is probed from its scheme alone.

    No I/O is performed, so the answer for a given URL never changes.
    """
    url = locator.url if isinstance(locator, Locator) else str(locator)
    scheme = _scheme_of(url)
    if not scheme or scheme in FILE_SCHEMES:
        return LocatorKind.FILESYSTEM
    if scheme in ARCHIVE_SCHEMES:
        return LocatorKind.ARCHIVE_MEMBER
    if scheme == WSJAR_SCHEME and ARCHIVE_SEPARATOR in url:
        return LocatorKind.ARCHIVE_MEMBER
    return LocatorKind.REMOTE


@dataclass(frozen=True)
class Locator:
    """A resolved resource location.

    ``url`` is either a URL (``file:``, ``jar:``/``zip:`` archive members,
    ``http(s):`` and anything urllib can open) or a bare filesystem path.
    """

    url: str

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> Locator:
        return cls(Path(path).absolute().as_uri())

    @classmethod
    def parse(cls, text: str | os.PathLike[str] | Locator) -> Locator:
        """Build a locator from a URL, a bare path or an existing locator."""
        if isinstance(text, Locator):
            return text
        if isinstance(text, os.PathLike):
            return cls.from_path(text)
        if not _scheme_of(text):
            return cls.from_path(text)
        return cls(text)

    @property
    def scheme(self) -> str:
        return _scheme_of(self.url)

    @property
    def kind(self) -> LocatorKind:
        return classify(self)

    def description(self) -> str:
        return f"URL [{self.url}]"

    def to_filesystem_path(self, description: str | None = None) -> Path:
        """Return the local path this locator denotes.

        Raises UnsupportedLocator (carrying ``description``) when the locator
        does not reside in the file system.
        """
        if self.kind is not LocatorKind.FILESYSTEM:
            raise UnsupportedLocator(description or self.description(), self.url)
        if not self.scheme:
            return Path(self.url)
        parsed = urlparse(self.url)
        path = parsed.path
        if parsed.netloc and parsed.netloc.lower() != "localhost":
            # UNC share: file://server/share/x
            path = f"//{parsed.netloc}{path}"
        return Path(url2pathname(path))

    def containing_archive_locator(self) -> Locator:
        """Return the locator of the archive file holding this member.

        A member URL without a separator is returned unchanged; converting it
        to a filesystem path then fails with UnsupportedLocator.
        """
        if self.kind is not LocatorKind.ARCHIVE_MEMBER:
            raise ValueError(f"{self.description()} does not address an archive member")
        rest = self.url[len(self.scheme) + 1 :]
        idx = rest.find(ARCHIVE_SEPARATOR)
        if idx == -1:
            return self
        archive = rest[:idx]
        if _scheme_of(archive):
            return Locator(archive)
        if not archive.startswith("/"):
            archive = "/" + archive
        return Locator("file:" + archive)

    @property
    def member_name(self) -> str | None:
        """Entry name inside the containing archive, or None for non-members."""
        if self.kind is not LocatorKind.ARCHIVE_MEMBER:
            return None
        idx = self.url.find(ARCHIVE_SEPARATOR)
        if idx == -1:
            return None
        return self.url[idx + len(ARCHIVE_SEPARATOR) :]

    def open_connection(self, opener: ConnectionOpener | None = None) -> Connection:
        if opener is None:
            from .connections.opener import default_opener

            opener = default_opener()
        return opener.open(self)

    def __str__(self) -> str:
        return self.url
