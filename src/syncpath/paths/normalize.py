"""Path canonicalization and classification.

All functions here are pure: they work on plain strings with ``/`` as the
only separator and never touch the filesystem.
"""

import re
from typing import List, Optional

from ..exceptions import InvalidArgumentError, InvalidInputError


_MULTI_SLASH = re.compile(r"/{2,}")
_DIR_SPECIAL_CHARS = re.compile(r"[?/\\]")


def normalize_path(path: Optional[str]) -> str:
    """Normalize a path to its canonical slash-delimited form.

    Backslashes become forward slashes, repeated slashes collapse, ``.`` and
    empty segments are dropped and every ``..`` removes the segment before it.
    A ``..`` with nothing left to remove is dropped silently, so ``"../a"``
    normalizes to ``"a"``. Leading and trailing slashes do not survive.

    Args:
        path: Raw path from the user or a remote listing

    Returns:
        Canonical path, possibly empty (``"/"`` normalizes to ``""``)

    Raises:
        InvalidInputError: If path is None or empty
    """
    if not path:
        raise InvalidInputError("missing path for normalize_path")

    path = path.replace("\\", "/")
    path = _MULTI_SLASH.sub("/", path)

    result: List[str] = []
    for part in path.split("/"):
        if part == "..":
            if result:
                result.pop()
        elif part != "." and part != "":
            result.append(part)

    return "/".join(result)


def is_hidden_path(path: str, dot: bool = True, underscore: bool = True) -> bool:
    """Check whether any segment of the path is hidden.

    A segment is hidden when it starts with ``.`` (if ``dot``) or ``_``
    (if ``underscore``).

    Raises:
        InvalidArgumentError: If both ``dot`` and ``underscore`` are False
        InvalidInputError: If path is None or empty
    """
    if not (dot or underscore):
        raise InvalidArgumentError("at least one of dot or underscore must be enabled")

    for part in normalize_path(path).split("/"):
        if part in (".", "..", ""):
            continue
        if dot and part[0] == ".":
            return True
        if underscore and part[0] == "_":
            return True
    return False


def dirname(path: str) -> str:
    """Drop the final component of a path.

    Only backslashes are rewritten; ``.`` and ``..`` are kept as written so the
    parent of a path that does not exist yet keeps its literal shape. Returns
    ``"/"`` for the root, for an empty result and for ``"."``.
    """
    parts = path.replace("\\", "/").split("/")
    parts.pop()
    parent = "/".join(parts)

    if parent in ("", "/", "."):
        return "/"
    return parent


def get_path_folder(path: str) -> str:
    """Return the folder a path lives in, with a trailing slash.

    A path that already ends with ``/`` is a folder and is returned as is.
    """
    if path.endswith("/"):
        return path
    parent = dirname(path)
    return parent if parent.endswith("/") else f"{parent}/"


def get_parent_folder(path: str) -> str:
    """Return the parent folder of a file or folder path, with a trailing slash."""
    parent = dirname(path)
    if parent in (".", "/"):
        return "/"
    if parent.endswith("/"):
        return parent
    return f"{parent}/"


def has_special_char_for_dir(name: str) -> bool:
    """Check whether a folder name contains ``?``, ``/`` or ``\\``."""
    return _DIR_SPECIAL_CHARS.search(name) is not None
