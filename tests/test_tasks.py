"""
Test suite for task ordering, due labels and completion.
"""

from datetime import datetime, timezone

import pytest

from skilog.core.models import Task
from skilog.core.tasks import (
    BUCKET_FUTURE,
    BUCKET_NONE,
    BUCKET_OVERDUE,
    BUCKET_TODAY,
    due_bucket,
    format_due_label,
    is_overdue,
    is_today,
    set_task_done,
    sort_tasks,
)

TODAY = "2026-02-22"


def make_task(task_id, due_date=None, is_done=False, updated_at="2026-02-20T10:00:00Z"):
    return Task(id=task_id, title=f"Task {task_id}", due_date=due_date, is_done=is_done, updated_at=updated_at)


def test_is_today_and_overdue():
    assert is_today("2026-02-22", TODAY)
    assert not is_today("2026-02-23", TODAY)
    assert is_overdue("2026-02-21", TODAY)
    assert not is_overdue("2026-02-22", TODAY)
    assert not is_overdue(None, TODAY)
    assert not is_today("garbage", TODAY)


@pytest.mark.parametrize("due,bucket", [
    ("2026-01-01", BUCKET_OVERDUE),
    ("2026-02-22", BUCKET_TODAY),
    ("2026-03-01", BUCKET_FUTURE),
    (None, BUCKET_NONE),
    ("not-a-date", BUCKET_NONE),
])
def test_due_bucket(due, bucket):
    assert due_bucket(due, TODAY) == bucket


def test_open_tasks_ordered_by_bucket():
    tasks = [
        make_task("none"),
        make_task("future", "2026-03-01"),
        make_task("today", "2026-02-22"),
        make_task("overdue", "2026-02-10"),
    ]
    assert [t.id for t in sort_tasks(tasks, TODAY)] == ["overdue", "today", "future", "none"]


def test_dated_tasks_earliest_first():
    tasks = [
        make_task("later", "2026-03-10"),
        make_task("sooner", "2026-02-25"),
        make_task("recent-overdue", "2026-02-20"),
        make_task("old-overdue", "2026-01-05"),
    ]
    assert [t.id for t in sort_tasks(tasks, TODAY)] == ["old-overdue", "recent-overdue", "sooner", "later"]


def test_same_due_date_most_recently_updated_first():
    tasks = [
        make_task("older", "2026-02-22", updated_at="2026-02-01T08:00:00Z"),
        make_task("newer", "2026-02-22", updated_at="2026-02-21T08:00:00Z"),
    ]
    assert [t.id for t in sort_tasks(tasks, TODAY)] == ["newer", "older"]


def test_done_tasks_last_by_updated_desc():
    tasks = [
        make_task("done-old", "2026-02-01", is_done=True, updated_at="2026-02-01T08:00:00Z"),
        make_task("open", None),
        make_task("done-new", None, is_done=True, updated_at="2026-02-21T08:00:00Z"),
    ]
    assert [t.id for t in sort_tasks(tasks, TODAY)] == ["open", "done-new", "done-old"]


def test_malformed_values_do_not_break_sorting():
    tasks = [
        make_task("bad-due", "someday"),
        make_task("bad-stamp", "2026-02-22", updated_at="yesterday"),
        make_task("fine", "2026-02-22"),
    ]
    assert [t.id for t in sort_tasks(tasks, TODAY)] == ["fine", "bad-stamp", "bad-due"]


def test_sort_returns_new_list():
    tasks = [make_task("b", "2026-03-01"), make_task("a", "2026-02-01")]
    ordered = sort_tasks(tasks, TODAY)
    assert ordered is not tasks
    assert [t.id for t in tasks] == ["b", "a"]


@pytest.mark.parametrize("due,label", [
    (None, "No deadline"),
    ("", "No deadline"),
    ("soon", "No deadline"),
    ("2026-02-22", "Today"),
    ("2026-02-01", "Overdue"),
    ("2026-02-24", "Feb 24"),
    ("2026-12-05", "Dec 5"),
])
def test_format_due_label(due, label):
    assert format_due_label(due, TODAY) == label


def test_set_task_done_stamps_completion():
    stamp = datetime(2026, 2, 22, 9, 30, tzinfo=timezone.utc)
    task = set_task_done(make_task("t1"), True, stamp)

    assert task.is_done
    assert task.completed_at == "2026-02-22T09:30:00+00:00"
    assert task.updated_at == task.completed_at


def test_set_task_done_reopen_clears_completion():
    stamp = datetime(2026, 2, 23, 7, 0, tzinfo=timezone.utc)
    done = Task(id="t1", title="Wax skis", is_done=True, completed_at="2026-02-20T10:00:00+00:00")
    reopened = set_task_done(done, False, stamp)

    assert not reopened.is_done
    assert reopened.completed_at is None
    assert reopened.updated_at == "2026-02-23T07:00:00+00:00"
    assert done.is_done


def test_timestamps_with_odd_fraction_digits_sort_by_time():
    tasks = [
        make_task("plain", "2026-02-22", updated_at="2026-02-21T08:00:00Z"),
        make_task("five-digits", "2026-02-22", updated_at="2026-02-21T09:00:00.12345+00:00"),
        make_task("seven-digits", "2026-02-22", updated_at="2026-02-21T10:00:00.1234567Z"),
    ]
    assert [t.id for t in sort_tasks(tasks, TODAY)] == ["seven-digits", "five-digits", "plain"]


def test_non_string_timestamp_sorts_as_oldest():
    tasks = [
        make_task("numeric", "2026-02-22", updated_at=1700000000),
        make_task("fine", "2026-02-22"),
    ]
    assert [t.id for t in sort_tasks(tasks, TODAY)] == ["fine", "numeric"]
