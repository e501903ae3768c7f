"""
FILE: skilog/cli/main.py
PURPOSE: Typer-based CLI for training log reports
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - version() - Show version
  - help() - Show command list and usage
  - insights() - Season overview: streak, weekly, breakdown, monthly
  - history() - Sets inside a time window
  - slalom() - Best/average slalom result and speed step
  - jump() - Jump distances and cuts breakdown
  - trick_stats() - Tricks time and hands/toes split
  - tasks() - Ordered task list with due labels
  - tricks() - Trick catalog search with learned marks
  - prefs() - Show or save display units
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output and log handler)
  - skilog.core.repository (snapshot and preferences loading)
  - skilog.core.exceptions (error handling)
NOTES:
  - All report commands support --json and --raw flags
  - Error messages and logs go to stderr
  - Exit codes: 0=success, 1=error
  - Global options (--snapshot, --now, --verbose) go before the command
"""

import logging
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..core import repository
from ..core.constants import ROPE_UNITS, SPEED_UNITS
from ..core.dates import parse_iso_day
from ..core.exceptions import InvalidInputError, SkilogError
from ..core.models import Preferences, Snapshot

# Typer app setup
app = typer.Typer(
    name="skilog",
    help="Water-ski training log reports",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.4.0"

logger = logging.getLogger("skilog")


@dataclass
class CliState:
    """Global options shared by every command."""

    snapshot_path: Optional[Path] = None
    now: Optional[date] = None


def setup_logging(verbose: bool) -> None:
    """Route skilog logs to stderr through rich."""
    handler = RichHandler(console=error_console, show_path=False, show_time=False)
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


@app.callback()
def default_command(
    ctx: typer.Context,
    snapshot: Optional[Path] = typer.Option(
        None, "--snapshot", "-s", help="Snapshot JSON file (default: ~/.skilog/snapshot.json)"
    ),
    now: Optional[str] = typer.Option(None, "--now", help="Report date YYYY-MM-DD (default: today)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
):
    """
    Global options for every command.

    Example:
        skilog --now 2026-02-22 insights
        skilog --snapshot export.json slalom --range month
    """
    setup_logging(verbose)

    report_day = None
    if now:
        report_day = parse_iso_day(now)
        if report_day is None or len(now) != 10:
            error_console.print(f"[red]Error:[/red] Invalid --now date '{escape(now)}'. Use YYYY-MM-DD")
            raise typer.Exit(1)

    ctx.obj = CliState(snapshot_path=snapshot, now=report_day)


def get_state(ctx: typer.Context) -> CliState:
    return ctx.obj if isinstance(ctx.obj, CliState) else CliState()


def load_snapshot_or_exit(ctx: typer.Context) -> Snapshot:
    """Load the snapshot for a command, printing errors and exiting on failure."""
    try:
        return repository.load_snapshot(get_state(ctx).snapshot_path)
    except SkilogError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def resolve_preferences(rope_unit: Optional[str], speed_unit: Optional[str]) -> Preferences:
    """
    Merge command-line units over saved preferences.

    Raises:
        InvalidInputError: If a unit isn't recognised
    """
    saved = repository.load_preferences()
    preferences = Preferences(
        rope_unit=rope_unit or saved.rope_unit,
        speed_unit=speed_unit or saved.speed_unit,
    )
    if preferences.rope_unit not in ROPE_UNITS:
        raise InvalidInputError(
            f"Invalid rope unit '{preferences.rope_unit}'. Must be one of: {', '.join(ROPE_UNITS)}"
        )
    if preferences.speed_unit not in SPEED_UNITS:
        raise InvalidInputError(
            f"Invalid speed unit '{preferences.speed_unit}'. Must be one of: {', '.join(SPEED_UNITS)}"
        )
    return preferences


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    # System commands
    version,
    help,
    # Report commands
    insights,
    history,
    slalom,
    jump,
    trick_stats,
    tasks,
    tricks,
    prefs,
)


def main():
    """Main entry point for CLI."""
    app()

