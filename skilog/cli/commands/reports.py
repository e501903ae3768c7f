"""
FILE: skilog/cli/commands/reports.py
PURPOSE: Report commands (insights, history, slalom, jump, trick-stats)
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from ..main import (
    app,
    console,
    error_console,
    get_state,
    load_snapshot_or_exit,
    resolve_preferences,
)
from ...core.constants import DEFAULT_MONTHS, NO_VALUE, RANGE_SEASON, RANGE_WEEK
from ...core.disciplines import jump_stats, tricks_stats
from ...core.exceptions import InvalidInputError, SkilogError
from ...core.insights import (
    current_streak,
    event_breakdown,
    format_delta_text,
    monthly_progress,
    monthly_training_days,
    most_practiced_event,
    weekly_chart_bars,
    weekly_stats,
)
from ...core.ranges import filter_by_date_range
from ...core.slalom import (
    average_tournament_speed_step,
    format_average_result,
    format_best_set,
    slalom_stats,
    trim_number,
)
from ...core.store import SetsStore
from ...formatting import InsightsFormatter, SetFormatter


@app.command()
def insights(
    ctx: typer.Context,
    season_id: Optional[str] = typer.Option(None, "--season", help="Season ID (default: active season)"),
    months: int = typer.Option(DEFAULT_MONTHS, "--months", "-m", help="Months of progress to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Season overview: streak, weekly activity, event breakdown, monthly progress.

    Example:
        skilog insights
        skilog --now 2026-02-22 insights --months 6
        skilog insights --json
    """
    snapshot = load_snapshot_or_exit(ctx)
    now = get_state(ctx).now

    try:
        if months < 1:
            raise InvalidInputError("--months must be at least 1")

        store = SetsStore.from_snapshot(snapshot)
        season_sets = store.season_sets(season_id)

        weekly = weekly_stats(season_sets, now)
        chart = weekly_chart_bars(season_sets, now)
        streak = current_streak(season_sets, now)
        breakdown = event_breakdown(season_sets)
        top = most_practiced_event(season_sets)
        # Month figures span every season, like the monthly progress list
        days_this_month = monthly_training_days(store.sets, now)
        progress = monthly_progress(store.sets, now, months)

        if json_output:
            console.print(InsightsFormatter.to_json({
                "total_sets": len(season_sets),
                "current_streak": streak,
                "weekly": weekly,
                "training_days_this_month": days_this_month,
                "most_practiced": top,
                "event_breakdown": breakdown,
                "monthly_progress": progress,
            }), markup=False)

        elif raw:
            console.print(f"Total sets: {len(season_sets)}")
            console.print(f"Current streak: {streak}")
            console.print(f"Avg sets per training day: {weekly.avg_per_training_day:.2f}")
            console.print(f"Weekly change: {format_delta_text(weekly.delta_percent, 'vs last week')}")
            console.print(f"Training days this month: {days_this_month}")
            console.print(f"Most practiced: {top.event.value} ({top.count} sets)")
            for item in breakdown:
                console.print(f"{item.event.value}: {item.count} ({item.percentage}%)")
            for item in progress:
                delta = "-" if item.delta_percent is None else f"{item.delta_percent}%"
                console.print(f"{item.month_key}: {item.training_days} days, {item.total_sets} sets, {delta}")

        else:
            console.print(Panel(
                f"[bold]{len(season_sets)}[/bold] sets this season\n"
                f"Current streak: [bold]{streak}[/bold] day(s)\n"
                f"Avg per training day: [bold]{weekly.avg_per_training_day:.2f}[/bold] "
                f"[dim]{format_delta_text(weekly.delta_percent, 'vs last week')}[/dim]\n"
                f"Training days this month: [bold]{days_this_month}[/bold]\n"
                f"Most practiced: [bold]{top.event.value}[/bold] [dim]({top.count} sets)[/dim]",
                title="Season Overview",
                expand=False,
            ))
            console.print(InsightsFormatter.breakdown_table(breakdown))
            console.print("\n[bold]Weekly Activity[/bold]")
            for line in InsightsFormatter.weekly_bars_lines(chart):
                console.print(line, markup=False)
            console.print()
            console.print(InsightsFormatter.monthly_table(progress))

    except SkilogError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def history(
    ctx: typer.Context,
    range_kind: str = typer.Option(RANGE_WEEK, "--range", "-r", help="day, week, month, season, custom, all"),
    start: Optional[str] = typer.Option(None, "--start", help="Custom range start (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, "--end", help="Custom range end (YYYY-MM-DD)"),
    season_id: Optional[str] = typer.Option(None, "--season", help="Season ID (default: active season)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    List sets inside a time window.

    Example:
        skilog history
        skilog history --range month
        skilog history --range custom --start 2026-02-01 --end 2026-02-14
    """
    snapshot = load_snapshot_or_exit(ctx)
    now = get_state(ctx).now

    try:
        season_sets = SetsStore.from_snapshot(snapshot).season_sets(season_id)
        sets = filter_by_date_range(season_sets, range_kind, start, end, now)

        if json_output:
            console.print(SetFormatter.to_json_array(sets), markup=False)
        elif raw:
            for line in SetFormatter.to_raw_lines(sets):
                console.print(line, markup=False)
        else:
            if not sets:
                console.print("[dim]No sets found[/dim]")
                return
            console.print(SetFormatter.create_table(sets, title=f"Sets ({range_kind})"))
            console.print(f"\n[dim]Total: {len(sets)} set(s)[/dim]")

    except SkilogError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def slalom(
    ctx: typer.Context,
    range_kind: str = typer.Option(RANGE_SEASON, "--range", "-r", help="day, week, month, season, custom, all"),
    start: Optional[str] = typer.Option(None, "--start", help="Custom range start (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, "--end", help="Custom range end (YYYY-MM-DD)"),
    season_id: Optional[str] = typer.Option(None, "--season", help="Season ID (default: active season)"),
    speed_unit: Optional[str] = typer.Option(None, "--speed-unit", help="mph or kmh (default: preference)"),
    rope_unit: Optional[str] = typer.Option(None, "--rope-unit", help="meters or feet (default: preference)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Best and average slalom result with the average tournament speed step.

    Example:
        skilog slalom
        skilog slalom --range month --speed-unit kmh --rope-unit feet
    """
    snapshot = load_snapshot_or_exit(ctx)
    now = get_state(ctx).now

    try:
        preferences = resolve_preferences(rope_unit, speed_unit)
        season_sets = SetsStore.from_snapshot(snapshot).season_sets(season_id)
        sets = filter_by_date_range(season_sets, range_kind, start, end, now)

        stats = slalom_stats(sets)
        step = average_tournament_speed_step(sets)

        if stats.total_sets == 0:
            best_text = average_text = "No sets yet"
        else:
            best_text = format_best_set(stats.best_set, preferences.speed_unit, preferences.rope_unit)
            average_text = format_average_result(
                stats.average_score, stats.average_speed, preferences.speed_unit, preferences.rope_unit
            )
        step_text = "-" if step is None else f"{step.kph} kph / {step.mph} mph"

        if json_output:
            console.print(InsightsFormatter.to_json({
                "total_sets": stats.total_sets,
                "average_score": stats.average_score,
                "average_speed_mph": stats.average_speed,
                "best_set_id": stats.best_set.id if stats.best_set else None,
                "best_result": best_text,
                "average_result": average_text,
                "speed_step": None if step is None else {"kph": step.kph, "mph": step.mph},
            }), markup=False)
        elif raw:
            console.print(f"Slalom sets: {stats.total_sets}")
            console.print(f"Best result: {best_text}")
            console.print(f"Average result: {average_text}")
            console.print(f"Average speed step: {step_text}")
        else:
            console.print(Panel(
                f"Slalom sets: [bold]{stats.total_sets}[/bold]\n"
                f"Best result: [bold]{best_text}[/bold]\n"
                f"Average result: [bold]{average_text}[/bold]\n"
                f"Average speed step: [bold]{step_text}[/bold]",
                title=f"Slalom ({range_kind})",
                expand=False,
            ))

    except SkilogError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _meters(value) -> str:
    return NO_VALUE if value is None else f"{trim_number(value)} m"


@app.command()
def jump(
    ctx: typer.Context,
    range_kind: str = typer.Option(RANGE_SEASON, "--range", "-r", help="day, week, month, season, custom, all"),
    start: Optional[str] = typer.Option(None, "--start", help="Custom range start (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, "--end", help="Custom range end (YYYY-MM-DD)"),
    season_id: Optional[str] = typer.Option(None, "--season", help="Season ID (default: active season)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Jump distances, jump/cuts split and cuts breakdown.

    Example:
        skilog jump
        skilog jump --range month --raw
    """
    snapshot = load_snapshot_or_exit(ctx)
    now = get_state(ctx).now

    try:
        season_sets = SetsStore.from_snapshot(snapshot).season_sets(season_id)
        sets = filter_by_date_range(season_sets, range_kind, start, end, now)
        stats = jump_stats(sets, now, history=season_sets)

        delta = stats.average_delta_vs_last_month
        delta_text = NO_VALUE if delta is None else f"{'+' if delta >= 0 else '-'}{trim_number(abs(delta))} m"

        if json_output:
            console.print(InsightsFormatter.to_json({"jump": stats}), markup=False)
        elif raw:
            console.print(f"Jump sets: {stats.total_sets}")
            console.print(f"Best distance: {_meters(stats.best_distance)}")
            console.print(f"Average distance: {_meters(stats.average_distance)}")
            console.print(f"Vs last month: {delta_text}")
            console.print(f"Split: {stats.jump_percent}% jump / {stats.cuts_percent}% cuts")
            console.print(f"Jumped: {stats.total_made}, passed: {stats.total_passed}")
            console.print(f"Open cuts: {stats.open_cuts_count}, cut pass: {stats.cut_pass_count}")
        else:
            console.print(Panel(
                f"Jump sets: [bold]{stats.total_sets}[/bold]\n"
                f"Best distance: [bold]{_meters(stats.best_distance)}[/bold]\n"
                f"Average distance: [bold]{_meters(stats.average_distance)}[/bold] "
                f"[dim]{delta_text} vs last month[/dim]\n"
                f"Split: [bold]{stats.jump_percent}%[/bold] jump / [bold]{stats.cuts_percent}%[/bold] cuts\n"
                f"Jumped: [bold]{stats.total_made}[/bold], passed: [bold]{stats.total_passed}[/bold]\n"
                f"Open cuts: [bold]{stats.open_cuts_count}[/bold], cut pass: [bold]{stats.cut_pass_count}[/bold]",
                title=f"Jump ({range_kind})",
                expand=False,
            ))

    except SkilogError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command("trick-stats")
def trick_stats(
    ctx: typer.Context,
    range_kind: str = typer.Option(RANGE_SEASON, "--range", "-r", help="day, week, month, season, custom, all"),
    start: Optional[str] = typer.Option(None, "--start", help="Custom range start (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, "--end", help="Custom range end (YYYY-MM-DD)"),
    season_id: Optional[str] = typer.Option(None, "--season", help="Season ID (default: active season)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Tricks time on the water and the hands/toes split.

    Example:
        skilog trick-stats
        skilog trick-stats --range week --json
    """
    snapshot = load_snapshot_or_exit(ctx)
    now = get_state(ctx).now

    try:
        season_sets = SetsStore.from_snapshot(snapshot).season_sets(season_id)
        stats = tricks_stats(filter_by_date_range(season_sets, range_kind, start, end, now))

        if json_output:
            console.print(
                InsightsFormatter.to_json({"tricks": stats, "total_hours": stats.total_hours_text}),
                markup=False,
            )
        elif raw:
            console.print(f"Trick sets: {stats.total_sets}")
            console.print(f"Total time: {stats.total_hours_text} h ({stats.total_minutes} min)")
            console.print(f"Hands: {stats.hands_percent}% ({stats.hands_count})")
            console.print(f"Toes: {stats.toes_percent}% ({stats.toes_count})")
        else:
            console.print(Panel(
                f"Trick sets: [bold]{stats.total_sets}[/bold]\n"
                f"Total time: [bold]{stats.total_hours_text} h[/bold] [dim]({stats.total_minutes} min)[/dim]\n"
                f"Hands: [bold]{stats.hands_percent}%[/bold] [dim]({stats.hands_count})[/dim]\n"
                f"Toes: [bold]{stats.toes_percent}%[/bold] [dim]({stats.toes_count})[/dim]",
                title=f"Tricks ({range_kind})",
                expand=False,
            ))

    except SkilogError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
