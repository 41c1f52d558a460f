"""Exceptions raised by the path, storage and transfer helpers."""


class SyncPathError(Exception):
    """Base class for all syncpath errors."""
    pass


class InvalidInputError(SyncPathError, ValueError):
    """Raised when a required path argument is missing or empty."""
    pass


class InvalidArgumentError(SyncPathError, ValueError):
    """Raised when an argument is outside its accepted domain."""
    pass
