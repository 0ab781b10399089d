"""
Theme settings for Tasknote
"""
from enum import Enum
from typing import Optional, Union

from ..config import settings


class AppTheme(str, Enum):
    """Appearance options"""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def color_scheme(self) -> Optional[str]:
        """Explicit scheme, or None to follow the system setting."""
        return None if self is AppTheme.SYSTEM else self.value

    @property
    def icon(self) -> str:
        return _THEME_ICONS[self]


_THEME_ICONS = {
    AppTheme.LIGHT: "sun.max.fill",
    AppTheme.DARK: "moon.fill",
    AppTheme.SYSTEM: "gear",
}


class ThemeManager:
    """Holds the selected theme; falls back to settings.default_theme."""

    def __init__(self, default: Union[AppTheme, str, None] = None):
        self.current_theme = AppTheme(default or settings.default_theme)

    @property
    def color_scheme(self) -> Optional[str]:
        return self.current_theme.color_scheme

    def set_theme(self, theme: Union[AppTheme, str]) -> AppTheme:
        """
        Raises:
            ValueError: If theme is not light, dark or system
        """
        self.current_theme = AppTheme(theme)
        return self.current_theme


__all__ = ["AppTheme", "ThemeManager"]
