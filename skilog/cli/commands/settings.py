"""
FILE: skilog/cli/commands/settings.py
PURPOSE: Display preference command (prefs)
"""

import json
from typing import Optional

import typer
from rich.markup import escape

from ..main import app, console, error_console, resolve_preferences
from ...core import repository
from ...core.exceptions import SkilogError


@app.command()
def prefs(
    rope_unit: Optional[str] = typer.Option(None, "--rope-unit", help="meters or feet"),
    speed_unit: Optional[str] = typer.Option(None, "--speed-unit", help="mph or kmh"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show or change the units slalom results are shown in.

    Example:
        skilog prefs
        skilog prefs --rope-unit feet --speed-unit kmh
    """
    try:
        preferences = resolve_preferences(rope_unit, speed_unit)
        if rope_unit or speed_unit:
            repository.save_preferences(preferences)

        if json_output:
            console.print(
                json.dumps({"rope_unit": preferences.rope_unit, "speed_unit": preferences.speed_unit}, indent=2),
                markup=False,
            )
        else:
            console.print(f"Rope unit: [bold]{preferences.rope_unit}[/bold]")
            console.print(f"Speed unit: [bold]{preferences.speed_unit}[/bold]")

    except (SkilogError, OSError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
