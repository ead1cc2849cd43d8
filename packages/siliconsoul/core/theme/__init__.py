"""Theme preference handling."""

from siliconsoul.core.theme.preference import Theme, ThemeStore, resolve_theme, toggle_theme

__all__ = [
    "Theme",
    "ThemeStore",
    "resolve_theme",
    "toggle_theme",
]
