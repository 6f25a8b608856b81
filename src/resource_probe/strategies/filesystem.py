from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..exceptions import NotFound

logger = logging.getLogger(__name__)


class FilesystemStrategy:
    """Probe a local path with plain stat calls.

    exists/is_readable report False on any OSError; content_length and
    last_modified raise NotFound for a missing entry and let other OS errors
    propagate.
    """

    def exists(self, path: Path) -> bool:
        try:
            path.stat()
        except (OSError, ValueError):
            # ValueError: embedded NUL in the path
            logger.debug("stat failed for %s", path, exc_info=True)
            return False
        return True

    def is_readable(self, path: Path) -> bool:
        try:
            st = path.stat()
        except (OSError, ValueError):
            # ValueError: embedded NUL in the path
            logger.debug("stat failed for %s", path, exc_info=True)
            return False
        if stat.S_ISDIR(st.st_mode):
            return False
        return os.access(path, os.R_OK)

    def _stat(self, path: Path) -> os.stat_result:
        try:
            return path.stat()
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise NotFound(f"{path} does not exist") from exc

    def content_length(self, path: Path) -> int:
        return self._stat(path).st_size

    def last_modified(self, path: Path) -> int:
        """Modification time in milliseconds since the epoch."""
        return self._stat(path).st_mtime_ns // 1_000_000
