"""Storage adapters and folder materialization."""

from .base import (
    FILE,
    FOLDER,
    EntryStat,
    StorageAdapter,
    StorageError,
    fix_stat,
    stat_fixed
)
from .local import LocalStorageAdapter
from .memory import MemoryStorageAdapter
from .materializer import mkdirp

__all__ = [
    # Interface and types
    "FILE",
    "FOLDER",
    "EntryStat",
    "StorageAdapter",
    "StorageError",
    "fix_stat",
    "stat_fixed",

    # Adapters
    "LocalStorageAdapter",
    "MemoryStorageAdapter",

    # Materialization
    "mkdirp"
]
