"""In-memory storage adapter for dry runs and tests."""

import time
from typing import Dict, List, Optional, Tuple

from ..paths import dirname, normalize_path
from .base import FILE, FOLDER, EntryStat, StorageAdapter, StorageError


class MemoryStorageAdapter(StorageAdapter):
    """Keeps folders and file sizes in dictionaries.

    Behaves like a local filesystem: ``mkdir`` needs an existing parent and
    raises ``FileExistsError`` for a folder that is already there. Every call
    is recorded in ``calls`` as ``(operation, path)``.
    """

    def __init__(self):
        self.folders: Dict[str, float] = {}
        self.files: Dict[str, Tuple[int, float]] = {}
        self.calls: List[Tuple[str, str]] = []

    @staticmethod
    def _key(path: str) -> str:
        return normalize_path(path) if path not in ("", "/") else ""

    def _parent_exists(self, key: str) -> bool:
        parent = dirname(key)
        return parent == "/" or parent in self.folders

    def add_file(self, path: str, size: int) -> None:
        """Register a file, creating its parent folders implicitly."""
        key = self._key(path)
        parent = dirname(key)
        now = time.time() * 1000
        while parent != "/" and parent not in self.folders:
            self.folders[parent] = now
            parent = dirname(parent)
        self.files[key] = (size, now)

    async def exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        key = self._key(path)
        return key == "" or key in self.folders or key in self.files

    async def mkdir(self, path: str) -> None:
        self.calls.append(("mkdir", path))
        key = self._key(path)
        if key == "" or key in self.folders:
            raise FileExistsError(path)
        if key in self.files:
            raise StorageError("A file already exists at this path", path=path)
        if not self._parent_exists(key):
            raise StorageError("Parent folder does not exist", path=path)
        self.folders[key] = time.time() * 1000

    async def stat(self, path: str) -> Optional[EntryStat]:
        self.calls.append(("stat", path))
        key = self._key(path)
        if key in self.folders:
            created = self.folders[key]
            return EntryStat(type=FOLDER, ctime=created, mtime=created)
        if key in self.files:
            size, created = self.files[key]
            return EntryStat(type=FILE, ctime=created, mtime=created, size=size)
        return None
