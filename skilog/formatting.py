"""
FILE: skilog/formatting.py
PURPOSE: Shared formatting utilities for CLI output
EXPORTS:
  - SetFormatter: Tables, JSON and raw lines for training sets
  - InsightsFormatter: Tables for breakdowns, monthly progress, weekly bars
  - TaskFormatter: Tables, JSON and raw lines for ordered tasks
  - TrickFormatter: Tables and raw lines for the trick catalog
DEPENDENCIES:
  - rich (for table formatting)
  - json (for JSON serialization)
  - typing (type hints)
  - skilog.core (models, insights, tasks)
NOTES:
  - Centralized formatting logic for consistency across commands
  - Formatters never compute statistics; they render engine output
  - User text (notes, titles, names) is escaped before it reaches a table
"""

import json
from dataclasses import asdict
from typing import Any, Dict, FrozenSet, List, Sequence

from rich.markup import escape
from rich.table import Table

from .core.insights import EventBreakdownItem, MonthlyProgressItem, WeeklyChartBars
from .core.models import SkiSet, Task, TrickCatalogItem
from .core.tasks import format_due_label

# Color per event, shared by every set table
EVENT_STYLES = {
    "slalom": "blue",
    "tricks": "magenta",
    "jump": "yellow",
    "cuts": "green",
    "other": "cyan",
}


def _delta_markup(delta_percent) -> str:
    if delta_percent is None:
        return "[dim]—[/dim]"
    if delta_percent > 0:
        return f"[green]+{delta_percent}%[/green]"
    if delta_percent < 0:
        return f"[red]{delta_percent}%[/red]"
    return f"{delta_percent}%"


class SetFormatter:
    """Training set display formatting."""

    @staticmethod
    def summary(ski_set: SkiSet) -> str:
        """One-line description of the event-specific fields."""
        data = asdict(ski_set.data)
        parts = [f"{key}={value}" for key, value in data.items() if value not in (None, "")]
        return ", ".join(parts)

    @staticmethod
    def create_table(sets: Sequence[SkiSet], title: str = "Sets") -> Table:
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Date", style="white", no_wrap=True)
        table.add_column("Event", width=8)
        table.add_column("Details", style="white")
        table.add_column("★", width=2, justify="center")
        table.add_column("Notes", style="dim")

        for ski_set in sets:
            style = EVENT_STYLES.get(ski_set.event.value, "white")
            table.add_row(
                ski_set.date[:10],
                f"[{style}]{ski_set.event.value}[/{style}]",
                escape(SetFormatter.summary(ski_set)),
                "[yellow]★[/yellow]" if ski_set.is_favorite else "",
                escape(ski_set.notes),
            )
        return table

    @staticmethod
    def to_json_array(sets: Sequence[SkiSet]) -> str:
        return json.dumps([ski_set.to_dict() for ski_set in sets], indent=2)

    @staticmethod
    def to_raw_lines(sets: Sequence[SkiSet]) -> List[str]:
        lines = []
        for ski_set in sets:
            marker = "*" if ski_set.is_favorite else " "
            lines.append(f"{ski_set.date[:10]} [{marker}] {ski_set.event.value}: {SetFormatter.summary(ski_set)}")
        return lines


class InsightsFormatter:
    """Aggregate statistics display formatting."""

    @staticmethod
    def breakdown_table(items: Sequence[EventBreakdownItem]) -> Table:
        table = Table(title="Event Breakdown", show_header=True, header_style="bold cyan")
        table.add_column("Event")
        table.add_column("Sets", justify="right")
        table.add_column("Share", justify="right")

        for item in items:
            style = EVENT_STYLES.get(item.event.value, "white")
            table.add_row(f"[{style}]{item.event.value}[/{style}]", str(item.count), f"{item.percentage}%")
        return table

    @staticmethod
    def monthly_table(items: Sequence[MonthlyProgressItem]) -> Table:
        table = Table(title="Monthly Progress", show_header=True, header_style="bold cyan")
        table.add_column("Month")
        table.add_column("Training days", justify="right")
        table.add_column("Sets", justify="right")
        table.add_column("Change", justify="right")

        for item in items:
            table.add_row(
                item.month_label,
                str(item.training_days),
                str(item.total_sets),
                _delta_markup(item.delta_percent),
            )
        return table

    @staticmethod
    def weekly_bars_lines(chart: WeeklyChartBars, width: int = 20) -> List[str]:
        """Horizontal text bars, one line per weekday."""
        lines = []
        for bar in chart.bars:
            filled = round(bar.height_percent / 100 * width)
            lines.append(f"{bar.day} {'█' * filled}{' ' * (width - filled)} {bar.count}")
        lines.append(chart.total_text)
        lines.append(chart.delta_text)
        return lines

    @staticmethod
    def to_json(report: Dict[str, Any]) -> str:
        """Serialize a report dict whose values may be engine dataclasses."""
        return json.dumps(report, indent=2, default=_json_default)


def _json_default(value):
    if hasattr(value, "__dataclass_fields__"):
        return asdict(value)
    if hasattr(value, "value"):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"Cannot serialize {type(value).__name__}")


class TaskFormatter:
    """Task display formatting."""

    @staticmethod
    def create_table(tasks: Sequence[Task], today: str, title: str = "Tasks") -> Table:
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Status", width=6, justify="center")
        table.add_column("Title", style="white")
        table.add_column("Due", width=12)

        for task in tasks:
            label = format_due_label(task.due_date, today)
            if task.is_done:
                status = "[green]✓[/green]"
                due = f"[dim]{label}[/dim]"
            else:
                status = "[yellow]○[/yellow]"
                due_style = {"Overdue": "red", "Today": "bright_magenta"}.get(label, "white")
                due = f"[{due_style}]{label}[/{due_style}]"
            table.add_row(status, escape(task.title), due)
        return table

    @staticmethod
    def to_json_array(tasks: Sequence[Task], today: str) -> str:
        tasks_data = [
            dict(asdict(task), due_label=format_due_label(task.due_date, today))
            for task in tasks
        ]
        return json.dumps(tasks_data, indent=2)

    @staticmethod
    def to_raw_lines(tasks: Sequence[Task], today: str) -> List[str]:
        lines = []
        for task in tasks:
            status_marker = "✓" if task.is_done else " "
            lines.append(f"{task.id}: [{status_marker}] {task.title} ({format_due_label(task.due_date, today)})")
        return lines


class TrickFormatter:
    """Trick catalog display formatting."""

    @staticmethod
    def create_table(tricks: Sequence[TrickCatalogItem], learned: FrozenSet[str]) -> Table:
        table = Table(title="Tricks", show_header=True, header_style="bold cyan")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Points", justify="right")
        table.add_column("Learned", justify="center")

        for trick in tricks:
            table.add_row(
                trick.id,
                trick.name,
                str(trick.points),
                "[green]✓[/green]" if trick.id in learned else "",
            )
        return table

    @staticmethod
    def to_raw_lines(tricks: Sequence[TrickCatalogItem], learned: FrozenSet[str]) -> List[str]:
        return [
            f"{trick.id}: [{'✓' if trick.id in learned else ' '}] {trick.name} ({trick.points})"
            for trick in tricks
        ]
