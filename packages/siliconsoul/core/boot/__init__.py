"""Hero boot sequence and uptime counter."""

from siliconsoul.core.boot.models import BootLine, BootProgress
from siliconsoul.core.boot.sequence import (
    BOOT_DONE_MS,
    BOOT_LINES,
    BootSequence,
    boot_percent,
)
from siliconsoul.core.boot.uptime import format_uptime

__all__ = [
    "BOOT_DONE_MS",
    "BOOT_LINES",
    "BootLine",
    "BootProgress",
    "BootSequence",
    "boot_percent",
    "format_uptime",
]
