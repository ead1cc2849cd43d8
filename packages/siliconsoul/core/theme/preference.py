"""Theme preference resolution and persistence.

The stored preference wins when it names a valid theme; otherwise the
system preference decides, and dark is the default when neither is known.
"""

from __future__ import annotations

from enum import Enum
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class Theme(str, Enum):
    """Color theme."""

    DARK = "dark"
    LIGHT = "light"


def resolve_theme(stored: str | None, system_prefers_dark: bool | None = None) -> Theme:
    """Pick the active theme.

    Args:
        stored: Previously saved preference ("dark" or "light"); anything
            else is ignored
        system_prefers_dark: Operating system preference, None if unknown

    Returns:
        The resolved Theme

    Example:
        >>> resolve_theme("light", system_prefers_dark=True)
        <Theme.LIGHT: 'light'>
        >>> resolve_theme(None, system_prefers_dark=False)
        <Theme.LIGHT: 'light'>
    """
    if stored in (Theme.DARK.value, Theme.LIGHT.value):
        return Theme(stored)
    if system_prefers_dark is None:
        return Theme.DARK
    return Theme.DARK if system_prefers_dark else Theme.LIGHT


def toggle_theme(theme: Theme) -> Theme:
    """Return the opposite theme."""
    return Theme.LIGHT if theme == Theme.DARK else Theme.DARK


class ThemeStore:
    """JSON-file backed theme preference.

    Args:
        path: File holding {"theme": "dark" | "light"}
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> str | None:
        """Return the stored preference string, or None if unavailable."""
        if not self.path.exists():
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable theme preference %s: %s", self.path, e)
            return None

        if not isinstance(data, dict):
            logger.warning("Ignoring malformed theme preference %s", self.path)
            return None

        value = data.get("theme")
        return value if isinstance(value, str) else None

    def save(self, theme: Theme) -> None:
        """Persist the preference, creating parent directories as needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"theme": Theme(theme).value}, indent=2), encoding="utf-8")
        logger.debug("Saved theme preference %s to %s", Theme(theme).value, self.path)

    def resolve(self, system_prefers_dark: bool | None = None) -> Theme:
        """Resolve the active theme from the stored and system preferences."""
        return resolve_theme(self.load(), system_prefers_dark)

    def toggle(self, system_prefers_dark: bool | None = None) -> Theme:
        """Flip the active theme and persist the result."""
        theme = toggle_theme(self.resolve(system_prefers_dark))
        self.save(theme)
        return theme
