"""Storage adapter backed by a local directory tree."""

import asyncio
import os
import stat as stat_module
from pathlib import Path
from typing import Optional, Union

from ..exceptions import InvalidArgumentError
from ..paths import normalize_path
from ..utils.logging import LoggerMixin
from .base import FILE, FOLDER, EntryStat, StorageAdapter, StorageError


class LocalStorageAdapter(StorageAdapter, LoggerMixin):
    """Async adapter that maps canonical paths onto a local root folder.

    Blocking filesystem calls run in the event loop's default executor.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()

    def resolve(self, path: str) -> Path:
        """Map a sync path to an absolute local path under the root.

        Raises:
            InvalidArgumentError: If the path resolves outside the root
        """
        canonical = normalize_path(path) if path not in ("", "/") else ""
        full = (self.root / canonical).resolve() if canonical else self.root

        try:
            full.relative_to(self.root)
        except ValueError:
            raise InvalidArgumentError(f"path {path} escapes storage root {self.root}")
        return full

    async def _run(self, func, *args):
        return await asyncio.get_running_loop().run_in_executor(None, func, *args)

    async def exists(self, path: str) -> bool:
        full = self.resolve(path)
        try:
            return await self._run(os.path.lexists, full)
        except OSError as e:
            raise StorageError(f"Failed to check existence: {e}", path=path) from e

    async def mkdir(self, path: str) -> None:
        full = self.resolve(path)
        try:
            await self._run(full.mkdir)
        except FileExistsError:
            raise
        except OSError as e:
            raise StorageError(f"Failed to create folder: {e}", path=path) from e

        self.logger.debug("Created local folder", path=path, local_path=str(full))

    async def stat(self, path: str) -> Optional[EntryStat]:
        full = self.resolve(path)
        try:
            result = await self._run(os.stat, full)
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to stat: {e}", path=path) from e

        is_folder = stat_module.S_ISDIR(result.st_mode)
        return EntryStat(
            type=FOLDER if is_folder else FILE,
            ctime=result.st_ctime * 1000,
            mtime=result.st_mtime * 1000,
            size=None if is_folder else result.st_size
        )
