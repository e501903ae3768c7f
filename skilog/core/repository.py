"""
FILE: skilog/core/repository.py
PURPOSE: Load exported snapshots and display preferences from disk
EXPORTS:
  - DATA_DIR, SNAPSHOT_PATH, PREFERENCES_PATH
  - load_snapshot(path) -> Snapshot
  - load_preferences(path) -> Preferences
  - save_preferences(preferences, path) -> None
DEPENDENCIES:
  - json, os, pathlib, logging (stdlib)
  - skilog.core.models (SkiSet, Task, Snapshot, Preferences)
  - skilog.core.exceptions (SnapshotNotFoundError, InvalidSnapshotError)
NOTES:
  - Data stored at ~/.skilog (override with SKILOG_HOME)
  - Read-only for sets and tasks: the backend owns them, this module only
    reads an exported JSON snapshot for the report CLI
  - Individual malformed sets/tasks are skipped with a warning
  - Missing or corrupt preferences fall back to defaults
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import (
    DEFAULT_ROPE_UNIT,
    DEFAULT_SPEED_UNIT,
    ROPE_UNITS,
    SPEED_UNITS,
)
from .exceptions import InvalidSnapshotError, SnapshotNotFoundError
from .models import Preferences, SkiSet, Snapshot, Task

logger = logging.getLogger(__name__)

# Data file locations (cross-platform)
DATA_DIR = Path(os.environ.get("SKILOG_HOME", Path.home() / ".skilog"))
SNAPSHOT_PATH = DATA_DIR / "snapshot.json"
PREFERENCES_PATH = DATA_DIR / "preferences.json"


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_snapshot(path: Optional[Path] = None) -> Snapshot:
    """
    Load an exported snapshot of sets, tasks and learned tricks.

    Args:
        path: Snapshot file (defaults to SNAPSHOT_PATH)

    Returns:
        Snapshot with hydrated SkiSet and Task objects

    Raises:
        SnapshotNotFoundError: If the file doesn't exist
        InvalidSnapshotError: If the file isn't a JSON object

    Notes:
        Accepts camelCase (app export) and snake_case keys
    """
    path = Path(path) if path is not None else SNAPSHOT_PATH
    if not path.exists():
        raise SnapshotNotFoundError(path)

    try:
        payload = _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidSnapshotError(path, str(e)) from e

    if not isinstance(payload, dict):
        raise InvalidSnapshotError(path, "expected a JSON object at the top level")

    sets = []
    for raw in payload.get("sets") or []:
        try:
            sets.append(SkiSet.from_dict(raw))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping malformed set %r: %s", _entry_id(raw), e)

    tasks = []
    for raw in payload.get("tasks") or []:
        try:
            tasks.append(Task.from_dict(raw))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping malformed task %r: %s", _entry_id(raw), e)

    learned = payload.get("learnedTrickIds", payload.get("learned_trick_ids")) or []
    learned_ids = frozenset(value for value in learned if isinstance(value, str) and value)

    active_season_id = payload.get("activeSeasonId", payload.get("active_season_id"))

    logger.debug(
        "Loaded snapshot %s: %d sets, %d tasks, %d learned tricks",
        path, len(sets), len(tasks), len(learned_ids),
    )
    return Snapshot(
        sets=tuple(sets),
        tasks=tuple(tasks),
        learned_trick_ids=learned_ids,
        active_season_id=active_season_id,
    )


def _entry_id(raw: Any) -> Any:
    return raw.get("id") if isinstance(raw, dict) else raw


def load_preferences(path: Optional[Path] = None) -> Preferences:
    """Read display preferences; anything missing or unreadable uses defaults."""
    path = Path(path) if path is not None else PREFERENCES_PATH

    try:
        payload: Dict[str, Any] = _read_json(path)
    except FileNotFoundError:
        return Preferences()
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable preferences %s: %s", path, e)
        return Preferences()

    if not isinstance(payload, dict):
        return Preferences()

    rope_unit = payload.get("ropeUnit", payload.get("rope_unit"))
    speed_unit = payload.get("speedUnit", payload.get("speed_unit"))
    return Preferences(
        rope_unit=rope_unit if rope_unit in ROPE_UNITS else DEFAULT_ROPE_UNIT,
        speed_unit=speed_unit if speed_unit in SPEED_UNITS else DEFAULT_SPEED_UNIT,
    )


def save_preferences(preferences: Preferences, path: Optional[Path] = None) -> None:
    """Write display preferences, creating the data directory if needed."""
    path = Path(path) if path is not None else PREFERENCES_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(
            {"ropeUnit": preferences.rope_unit, "speedUnit": preferences.speed_unit},
            f,
            indent=2,
        )
