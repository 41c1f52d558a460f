"""Path canonicalization, folder materialization and byte range planning
for filesystem synchronization."""

from .exceptions import SyncPathError, InvalidInputError, InvalidArgumentError
from .paths import (
    normalize_path,
    is_hidden_path,
    dirname,
    get_folder_levels,
    get_path_folder,
    get_parent_folder,
    at_which_level,
    has_special_char_for_dir
)
from .storage import StorageAdapter, StorageError, EntryStat, mkdirp
from .transfer import SplitRange, get_split_ranges

__version__ = "1.0.0"

__all__ = [
    "SyncPathError",
    "InvalidInputError",
    "InvalidArgumentError",
    "normalize_path",
    "is_hidden_path",
    "dirname",
    "get_folder_levels",
    "get_path_folder",
    "get_parent_folder",
    "at_which_level",
    "has_special_char_for_dir",
    "StorageAdapter",
    "StorageError",
    "EntryStat",
    "mkdirp",
    "SplitRange",
    "get_split_ranges"
]
