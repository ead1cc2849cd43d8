"""Command-line interface for Silicon Soul.

Replays the presentation state machines on a virtual clock so their
output can be inspected without a browser.
"""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from siliconsoul.core.boot import BootProgress, BootSequence, format_uptime
from siliconsoul.core.config import AppConfig, configure_logging_from_config, load_app_config
from siliconsoul.core.scheduling import FakeScheduler
from siliconsoul.core.scroll import LayerName, TransitionController, resolve_layer
from siliconsoul.core.theme import ThemeStore
from siliconsoul.core.utils.math import linear_grid

console = Console()
logger = logging.getLogger(__name__)


def _load_config(args: argparse.Namespace) -> AppConfig | None:
    """Load config for a subcommand, reporting failures on the console."""
    path = Path(args.config) if args.config else None
    try:
        config = load_app_config(path)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return None
    configure_logging_from_config(config)
    return config


def run_sweep(args: argparse.Namespace) -> int:
    """Feed an evenly spaced progress sweep through a transition controller."""
    config = _load_config(args)
    if config is None:
        return 1

    scheduler = FakeScheduler()
    table = config.scroll.layer_table()
    interval_s = args.interval_ms / 1000

    current_progress = 0.0
    rows: list[tuple[float, float, LayerName]] = []
    glitch_ends = 0

    def on_layer(layer: LayerName) -> None:
        rows.append((scheduler.time(), current_progress, layer))

    def on_glitch(active: bool) -> None:
        nonlocal glitch_ends
        if not active:
            glitch_ends += 1

    controller = TransitionController(
        on_layer,
        on_glitch,
        scheduler=scheduler,
        table=table,
        glitch_duration_s=config.scroll.glitch_duration_s,
        view="cli-sweep",
    )
    with controller:
        for current_progress in linear_grid(args.steps):
            controller.on_progress_update(current_progress)
            scheduler.advance(interval_s)
        scheduler.run_until_idle()

    out = Table(title=f"Layer sweep ({args.steps} steps, {args.interval_ms} ms apart)")
    out.add_column("t (ms)", justify="right")
    out.add_column("progress", justify="right")
    out.add_column("layer")
    for at, progress, layer in rows:
        out.add_row(f"{at * 1000:.0f}", f"{progress:.3f}", layer.value)
    console.print(out)
    console.print(f"Transitions: {len(rows) - 1}  Glitch pulses completed: {glitch_ends}")
    return 0


def run_resolve(args: argparse.Namespace) -> int:
    """Resolve a single progress value."""
    config = _load_config(args)
    if config is None:
        return 1

    layer = resolve_layer(args.progress, config.scroll.layer_table())
    console.print(layer.value)
    return 0


def run_boot(args: argparse.Namespace) -> int:
    """Replay the boot sequence on a virtual clock."""
    config = _load_config(args)
    if config is None:
        return 1

    scheduler = FakeScheduler()

    def on_line(progress: BootProgress) -> None:
        console.print(
            f"[dim]{format_uptime(scheduler.time())} +{scheduler.time() * 1000:5.0f}ms[/dim] "
            f"[{progress.line.color}]{progress.line.text}[/] [bold]{progress.percent:3d}%[/bold]"
        )

    def on_done() -> None:
        console.print(f"[green]Boot complete at {scheduler.time() * 1000:.0f} ms[/green]")

    sequence = BootSequence(on_line, on_done, scheduler=scheduler, done_ms=config.boot.done_ms)
    sequence.start()
    scheduler.run_until_idle()
    sequence.dispose()
    return 0


def run_theme(args: argparse.Namespace) -> int:
    """Show, and optionally toggle, the saved theme preference."""
    config = _load_config(args)
    if config is None:
        return 1

    store = ThemeStore(config.theme.store_path)
    system_prefers_dark = None if args.system is None else args.system == "dark"

    if args.toggle:
        theme = store.toggle(system_prefers_dark)
        console.print(f"Theme set to [bold]{theme.value}[/bold] ({store.path})")
    else:
        theme = store.resolve(system_prefers_dark)
        console.print(theme.value)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="siliconsoul",
        description="Silicon Soul - portfolio presentation state machines",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config (.yaml/.yml/.json, default: siliconsoul.yaml if present)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sweep = sub.add_parser("sweep", help="Sweep scroll progress 0 -> 1 and list layer changes")
    sweep.add_argument("--steps", type=int, default=200, help="Number of intervals (default: 200)")
    sweep.add_argument(
        "--interval-ms",
        type=float,
        default=16.0,
        help="Virtual time between samples in ms (default: 16)",
    )

    resolve = sub.add_parser("resolve", help="Resolve the layer for one progress value")
    resolve.add_argument("progress", type=float, help="Scroll progress in [0, 1]")

    sub.add_parser("boot", help="Replay the hero boot sequence")

    theme = sub.add_parser("theme", help="Show or toggle the theme preference")
    theme.add_argument("--toggle", action="store_true", help="Flip and persist the theme")
    theme.add_argument(
        "--system",
        choices=["dark", "light"],
        default=None,
        help="System color-scheme preference to fall back on",
    )

    return p


COMMANDS = {
    "sweep": run_sweep,
    "resolve": run_resolve,
    "boot": run_boot,
    "theme": run_theme,
}


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)
    if args.cmd == "sweep" and args.steps < 1:
        p.error("--steps must be >= 1")
    if args.cmd == "sweep" and not (math.isfinite(args.interval_ms) and args.interval_ms >= 0):
        p.error("--interval-ms must be a finite number >= 0")
    logger.debug("Running command %s", args.cmd)
    sys.exit(COMMANDS[args.cmd](args))


if __name__ == "__main__":
    main()
