"""Create the missing parent folders of a path, shallowest first."""

from typing import List

from ..paths import get_folder_levels
from ..utils.logging import get_logger, log_async_execution_time
from .base import StorageAdapter, StorageError


logger = get_logger(__name__)


def _already_exists(error: BaseException) -> bool:
    return isinstance(error, FileExistsError) or isinstance(error.__cause__, FileExistsError)


@log_async_execution_time
async def mkdirp(path: str, adapter: StorageAdapter) -> List[str]:
    """Ensure every folder level above ``path`` exists.

    Levels are checked and created one at a time, parents before children.
    A level that another writer created between the existence check and our
    ``mkdir`` counts as created. Nothing is rolled back on failure.

    Args:
        path: File path, or folder path ending with ``/``
        adapter: Storage backend to check and create folders through

    Returns:
        The levels this call actually created, in creation order

    Raises:
        StorageError: If checking or creating a level fails; ``path`` on the
            error names that level
    """
    created: List[str] = []

    for level in get_folder_levels(path):
        try:
            if await adapter.exists(level):
                continue
        except Exception as e:
            _raise_storage_error("Failed to check folder", level, e)

        try:
            await adapter.mkdir(level)
        except Exception as e:
            if _already_exists(e):
                logger.debug("Folder appeared concurrently", level=level)
                continue
            _raise_storage_error("Failed to create folder", level, e)

        logger.debug("Created folder", level=level)
        created.append(level)

    return created


def _raise_storage_error(message: str, level: str, error: Exception) -> None:
    logger.error(message, level=level, error=str(error))
    if isinstance(error, StorageError):
        if error.path is None:
            error.path = level
        raise error
    raise StorageError(f"{message}: {error}", path=level) from error
