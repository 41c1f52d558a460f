"""Hidden-path filtering driven by application settings."""

from typing import Iterable, List, Optional

from ..config.settings import HiddenPathSettings, get_settings
from .normalize import is_hidden_path


def is_hidden_by_settings(path: str, hidden: Optional[HiddenPathSettings] = None) -> bool:
    """Classify a path using the configured dot/underscore flags."""
    hidden = hidden or get_settings().hidden
    return is_hidden_path(path, dot=hidden.match_dot, underscore=hidden.match_underscore)


def drop_hidden(paths: Iterable[str], hidden: Optional[HiddenPathSettings] = None) -> List[str]:
    """Keep only the paths that are not hidden, preserving order."""
    hidden = hidden or get_settings().hidden
    return [path for path in paths if not is_hidden_by_settings(path, hidden)]
