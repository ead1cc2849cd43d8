"""Configuration management for Silicon Soul."""

from siliconsoul.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_app_config,
    load_config,
)
from siliconsoul.core.config.models import (
    AppConfig,
    BootConfig,
    LoggingConfig,
    ScrollConfig,
    ThemeConfig,
)

__all__ = [
    "AppConfig",
    "BootConfig",
    "LoggingConfig",
    "ScrollConfig",
    "ThemeConfig",
    "configure_logging_from_config",
    "detect_format",
    "load_app_config",
    "load_config",
]
