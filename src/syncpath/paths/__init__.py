"""Path canonicalization, classification and folder level helpers."""

from .normalize import (
    normalize_path,
    is_hidden_path,
    dirname,
    get_path_folder,
    get_parent_folder,
    has_special_char_for_dir
)
from .levels import get_folder_levels, at_which_level
from .filters import is_hidden_by_settings, drop_hidden

__all__ = [
    "normalize_path",
    "is_hidden_path",
    "dirname",
    "get_path_folder",
    "get_parent_folder",
    "has_special_char_for_dir",
    "get_folder_levels",
    "at_which_level",
    "is_hidden_by_settings",
    "drop_hidden"
]
