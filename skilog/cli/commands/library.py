"""
FILE: skilog/cli/commands/library.py
PURPOSE: Trick library command (tricks)
"""

import json
from typing import Optional

import typer
from rich.markup import escape

from ..main import app, console, error_console, load_snapshot_or_exit
from ...core.exceptions import SkilogError
from ...core.tricks import learned_points, search_tricks
from ...formatting import TrickFormatter


@app.command()
def tricks(
    ctx: typer.Context,
    query: Optional[str] = typer.Argument(None, help="Case-insensitive name search"),
    learned_only: bool = typer.Option(False, "--learned", help="Only show learned tricks"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Search the trick catalog and show which tricks are learned.

    Example:
        skilog tricks
        skilog tricks bfl
        skilog tricks --learned
    """
    snapshot = load_snapshot_or_exit(ctx)
    learned = snapshot.learned_trick_ids

    try:
        results = search_tricks(query)
        if learned_only:
            results = [trick for trick in results if trick.id in learned]
        points = learned_points(learned)

        if json_output:
            tricks_data = [
                {
                    "id": trick.id,
                    "name": trick.name,
                    "points": trick.points,
                    "learned": trick.id in learned,
                }
                for trick in results
            ]
            console.print(json.dumps({"tricks": tricks_data, "learned_points": points}, indent=2), markup=False)
        elif raw:
            for line in TrickFormatter.to_raw_lines(results, learned):
                console.print(line, markup=False)
        else:
            if not results:
                console.print("[dim]No tricks found[/dim]")
                return
            console.print(TrickFormatter.create_table(results, learned))
            console.print(f"\n[dim]Learned: {len(learned)} trick(s), {points} points[/dim]")

    except SkilogError as e:
        error_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
