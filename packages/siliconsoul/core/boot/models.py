"""Boot sequence data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BootLine(BaseModel):
    """One line of the hero bootloader terminal.

    Attributes:
        text: Line text as shown in the terminal.
        delay_ms: Time after boot start at which the line appears.
        color: CSS color the renderer should use for the line.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    delay_ms: int = Field(ge=0)
    color: str = "#b0ffcc"


class BootProgress(BaseModel):
    """Snapshot delivered each time a boot line becomes visible."""

    model_config = ConfigDict(frozen=True)

    visible_lines: int = Field(ge=0)
    percent: int = Field(ge=0, le=100)
    line: BootLine
