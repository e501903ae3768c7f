"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from datetime import date
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from skilog.core.models import (  # noqa: E402
    Event,
    EVENT_DATA_TYPES,
    SkiSet,
    SlalomData,
)


@pytest.fixture
def now():
    """Fixed report date: Sunday 22 February 2026."""
    return date(2026, 2, 22)


@pytest.fixture
def make_set():
    """Build a SkiSet with sensible defaults; unique ids per call."""
    counter = {"n": 0}

    def _make(event=Event.TRICKS, day="2026-02-22", data=None, **kwargs):
        counter["n"] += 1
        event = Event(event)
        return SkiSet(
            id=kwargs.pop("id", f"{event.value}-{counter['n']}"),
            event=event,
            date=day,
            data=data if data is not None else EVENT_DATA_TYPES[event](),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_slalom(make_set):
    """Build a slalom SkiSet from rope length, buoys and speed (mph)."""

    def _make(rope_length="18", buoys=6, speed="32.3", day="2026-02-22", **kwargs):
        data = SlalomData(buoys=buoys, rope_length=rope_length, speed=speed)
        return make_set(Event.SLALOM, day=day, data=data, **kwargs)

    return _make
