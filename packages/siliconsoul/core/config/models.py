"""Configuration models for Silicon Soul."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from siliconsoul.core.boot.sequence import BOOT_DONE_MS
from siliconsoul.core.scroll.layers import DEFAULT_LAYER_TABLE, LayerRange, LayerTable


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file (stdout when unset)")


class ScrollConfig(BaseModel):
    """Scroll-driven layer state machine configuration."""

    glitch_duration_ms: int = Field(
        default=300, gt=0, description="Length of the glitch pulse on each layer change"
    )

    layers: list[LayerRange] | None = Field(
        default=None,
        description="Custom layer table as [{name, from, to}, ...]; built-in table when unset",
    )

    @model_validator(mode="after")
    def _validate_layers(self) -> ScrollConfig:
        if self.layers is not None:
            self.layer_table()
        return self

    @property
    def glitch_duration_s(self) -> float:
        return self.glitch_duration_ms / 1000

    def layer_table(self) -> LayerTable:
        """Build the configured layer table.

        Raises:
            ValidationError: If the custom ranges do not partition [0, 1]
        """
        if self.layers is None:
            return DEFAULT_LAYER_TABLE
        return LayerTable.from_ranges(self.layers)


class BootConfig(BaseModel):
    """Hero boot sequence configuration."""

    done_ms: int = Field(default=BOOT_DONE_MS, ge=0, description="Boot completion time")


class ThemeConfig(BaseModel):
    """Theme preference configuration."""

    store_path: str = Field(
        default="~/.config/siliconsoul/theme.json",
        description="File holding the saved theme preference",
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    scroll: ScrollConfig = ScrollConfig()
    boot: BootConfig = BootConfig()
    theme: ThemeConfig = ThemeConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("siliconsoul.yaml")
