from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from .locator import LocatorKind


class ResourceInfo(BaseModel):
    """Snapshot of every probe for one locator.

    size and last_modified are None when unknown or when the probe failed.
    """

    locator: str
    kind: LocatorKind
    exists: bool
    readable: bool
    size: int | None = None
    last_modified: datetime | None = None
