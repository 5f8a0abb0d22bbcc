"""Chart theme utilities."""

from .dark_theme import DARK_THEME
from .light_theme import LIGHT_THEME

DEFAULT_THEME = LIGHT_THEME

__all__ = ["DARK_THEME", "LIGHT_THEME", "DEFAULT_THEME"]
