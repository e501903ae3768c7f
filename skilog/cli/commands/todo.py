"""
FILE: skilog/cli/commands/todo.py
PURPOSE: Task list command (tasks)
"""

import typer
from rich.markup import escape

from ..main import app, console, error_console, get_state, load_snapshot_or_exit
from ...core.dates import today_local_iso
from ...core.exceptions import SkilogError
from ...core.tasks import sort_tasks
from ...formatting import TaskFormatter


@app.command()
def tasks(
    ctx: typer.Context,
    open_only: bool = typer.Option(False, "--open", help="Hide completed tasks"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    List tasks: overdue first, then today, upcoming, no deadline, then done.

    Example:
        skilog tasks
        skilog tasks --open
        skilog --now 2026-02-22 tasks --json
    """
    snapshot = load_snapshot_or_exit(ctx)
    today = today_local_iso(get_state(ctx).now)

    try:
        ordered = sort_tasks(snapshot.tasks, today)
        if open_only:
            ordered = [task for task in ordered if not task.is_done]

        if json_output:
            console.print(TaskFormatter.to_json_array(ordered, today), markup=False)
        elif raw:
            for line in TaskFormatter.to_raw_lines(ordered, today):
                console.print(line, markup=False)
        else:
            if not ordered:
                console.print("[dim]No tasks found[/dim]")
                return
            console.print(TaskFormatter.create_table(ordered, today))
            open_count = sum(1 for task in ordered if not task.is_done)
            console.print(f"\n[dim]Total: {len(ordered)} task(s), {open_count} open[/dim]")

    except SkilogError as e:
        error_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
