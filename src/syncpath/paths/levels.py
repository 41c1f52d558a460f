"""Folder level enumeration for mkdir -p style materialization."""

from typing import List, Optional

from ..utils.logging import get_logger


logger = get_logger(__name__)


def get_folder_levels(path: str, add_ending_slash: bool = False) -> List[str]:
    """List the folders that must exist before ``path`` can be written.

    Levels are ordered shallowest first and never include the full path
    itself. The path is split as given, without normalization::

        "a/b/c/"        -> ["a", "a/b", "a/b/c"]
        "a/b/c/d/e.txt" -> ["a", "a/b", "a/b/c", "a/b/c/d"]

    Args:
        path: Path of a file, or of a folder when it ends with ``/``
        add_ending_slash: Append ``/`` to every returned level

    Returns:
        Ordered list of folder paths, possibly empty
    """
    levels: List[str] = []

    if path == "" or path == "/":
        return levels

    segments = path.split("/")
    for index in range(len(segments) - 1):
        level = "/".join(segments[:index + 1])
        if level == "" or level == "/":
            continue
        if add_ending_slash:
            level = f"{level}/"
        levels.append(level)
    return levels


def at_which_level(path: Optional[str]) -> int:
    """Return the 1-based depth of a path, ignoring one trailing slash."""
    if path is None or path in ("", ".", "..") or path.startswith("/"):
        logger.debug("Cannot determine level reliably", path=path)
    if path is None:
        path = ""

    trimmed = path[:-1] if path.endswith("/") else path
    return len(trimmed.split("/"))
