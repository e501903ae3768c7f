"""
FILE: skilog/core/tasks.py
PURPOSE: Due-date classification, ordering and completion for tasks
EXPORTS:
  - is_today(due_date, today) -> bool
  - is_overdue(due_date, today) -> bool
  - due_bucket(due_date, today) -> int
  - sort_tasks(tasks, today) -> List[Task]
  - format_due_label(due_date, today) -> str
  - set_task_done(task, done, now) -> Task
DEPENDENCIES:
  - skilog.core.dates (local date helpers)
  - skilog.core.models (Task)
NOTES:
  - Open tasks come first: overdue, due today, future, then no deadline.
    Dated tasks go earliest first; ties break by most recently updated
  - Done tasks are ordered purely by most recently updated
  - Malformed due dates sort with "no deadline"; malformed timestamps
    sort as the oldest
"""

import re
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence, Union

from .dates import parse_iso_day, today_local_iso
from .models import Task

BUCKET_OVERDUE = 0
BUCKET_TODAY = 1
BUCKET_FUTURE = 2
BUCKET_NONE = 3

# Seconds fraction of an ISO timestamp; fromisoformat before 3.11 wants 3 or 6 digits
_FRACTION_RE = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")


def _valid_due(due_date: Optional[str]) -> Optional[str]:
    if not due_date or parse_iso_day(due_date) is None:
        return None
    return due_date[:10]


def is_today(due_date: Optional[str], today: Optional[str] = None) -> bool:
    due = _valid_due(due_date)
    if due is None:
        return False
    return due == (today or today_local_iso())


def is_overdue(due_date: Optional[str], today: Optional[str] = None) -> bool:
    due = _valid_due(due_date)
    if due is None:
        return False
    return due < (today or today_local_iso())


def due_bucket(due_date: Optional[str], today: str) -> int:
    due = _valid_due(due_date)
    if due is None:
        return BUCKET_NONE
    if due < today:
        return BUCKET_OVERDUE
    if due == today:
        return BUCKET_TODAY
    return BUCKET_FUTURE


def _timestamp(value: Optional[str]) -> float:
    """Epoch seconds for an ISO timestamp; 0 when missing or unparseable."""
    if not value or not isinstance(value, str):
        return 0.0
    try:
        normalized = _FRACTION_RE.sub(
            lambda match: f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}",
            value.replace("Z", "+00:00"),
        )
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return 0.0
    return parsed.timestamp()


def _open_key(task: Task, today: str):
    # Dated buckets order by due date too, so older overdue tasks lead
    due = _valid_due(task.due_date)
    return (due_bucket(task.due_date, today), due or "", -_timestamp(task.updated_at))


def sort_tasks(tasks: Sequence[Task], today: Optional[str] = None) -> List[Task]:
    """
    Order tasks for display.

    Args:
        tasks: Snapshot of tasks to order
        today: Local date string (defaults to today)

    Returns:
        New list: open tasks by due bucket, then done tasks newest first
    """
    today = today or today_local_iso()

    open_tasks = sorted((t for t in tasks if not t.is_done), key=lambda t: _open_key(t, today))
    done_tasks = sorted((t for t in tasks if t.is_done), key=lambda t: -_timestamp(t.updated_at))
    return open_tasks + done_tasks


def format_due_label(due_date: Optional[str], today: Optional[str] = None) -> str:
    """Human label: 'No deadline', 'Today', 'Overdue' or e.g. 'Feb 24'."""
    today = today or today_local_iso()
    due = parse_iso_day(due_date) if due_date else None

    if due is None:
        return "No deadline"
    if is_today(due_date, today):
        return "Today"
    if is_overdue(due_date, today):
        return "Overdue"
    return f"{due.strftime('%b')} {due.day}"


def set_task_done(task: Task, done: bool, now: Optional[Union[date, datetime]] = None) -> Task:
    """Return a copy with completion stamped (or cleared) and updated_at refreshed."""
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    return replace(
        task,
        is_done=done,
        completed_at=stamp if done else None,
        updated_at=stamp,
    )
