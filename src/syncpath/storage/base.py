"""Storage adapter interface and shared storage types."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from ..exceptions import SyncPathError


FILE = "file"
FOLDER = "folder"


@dataclass
class EntryStat:
    """Metadata for a single file or folder, times in milliseconds since epoch."""

    type: str
    ctime: Optional[float] = None
    mtime: Optional[float] = None
    size: Optional[int] = None

    @property
    def is_folder(self) -> bool:
        return self.type == FOLDER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "ctime": self.ctime,
            "mtime": self.mtime,
            "size": self.size
        }


class StorageError(SyncPathError):
    """Raised when the storage backend fails for a specific path."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is None:
            return message
        return f"{message} (path: {self.path})"


class StorageAdapter(ABC):
    """Minimal filesystem capability needed to materialize folders.

    Implementations may raise ``FileExistsError`` from :meth:`mkdir` when the
    folder already exists; callers treat that as success.
    """

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check whether a file or folder exists at path.

        Raises:
            StorageError: If the backend cannot answer
        """
        pass

    @abstractmethod
    async def mkdir(self, path: str) -> None:
        """Create a single folder whose parent already exists.

        Raises:
            FileExistsError: If the folder already exists
            StorageError: If the folder cannot be created
        """
        pass

    @abstractmethod
    async def stat(self, path: str) -> Optional[EntryStat]:
        """Return metadata for path, or None when nothing exists there."""
        pass


def _is_missing(value: Optional[float]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def fix_stat(stat: Optional[EntryStat]) -> Optional[EntryStat]:
    """Repair unreliable stat values reported by some backends.

    Missing or NaN times become None, and a folder without a usable size
    reports a size of 0. The input is not modified.
    """
    if stat is None:
        return None

    fixed = replace(stat)
    if _is_missing(fixed.ctime):
        fixed.ctime = None
    if _is_missing(fixed.mtime):
        fixed.mtime = None
    if _is_missing(fixed.size) and fixed.is_folder:
        fixed.size = 0
    return fixed


async def stat_fixed(adapter: StorageAdapter, path: str) -> Optional[EntryStat]:
    """Stat a path through the adapter and repair the result."""
    return fix_stat(await adapter.stat(path))
