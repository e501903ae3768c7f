"""
FILE: skilog/core/models.py
PURPOSE: Domain models for training sets, tasks, and the trick catalog
EXPORTS:
  - Event (enum of event keys)
  - SlalomData, TricksData, JumpData, CutsData, OtherData (event variants)
  - EVENT_DATA_TYPES (event -> variant class)
  - SkiSet (dataclass)
  - Task (dataclass)
  - TrickCatalogItem (dataclass)
  - SpeedStep (namedtuple)
  - Preferences (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - enum (stdlib)
  - json (stdlib)
  - typing (stdlib)
NOTES:
  - All models have from_dict() for snapshot payload conversion
  - SkiSet and Task have to_json() for serialization
  - Payload keys are accepted in camelCase (export format) or snake_case
  - Dates stay as local YYYY-MM-DD strings; timestamps as ISO-8601 strings
"""

from dataclasses import dataclass, asdict, field, replace
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Union
import json
import math

from .constants import (
    EVENT_SLALOM,
    EVENT_TRICKS,
    EVENT_JUMP,
    EVENT_CUTS,
    EVENT_OTHER,
    DEFAULT_ROPE_UNIT,
    DEFAULT_SPEED_UNIT,
    SUB_EVENT_JUMP,
    TRICK_TYPE_HANDS,
)


class Event(str, Enum):
    """Training discipline a set belongs to."""

    SLALOM = EVENT_SLALOM
    TRICKS = EVENT_TRICKS
    JUMP = EVENT_JUMP
    CUTS = EVENT_CUTS
    OTHER = EVENT_OTHER


def _pick(payload: Dict[str, Any], *keys: str, default=None):
    """Return the first key present in payload (camelCase or snake_case)."""
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _optional_float(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _optional_int(value) -> Optional[int]:
    number = _optional_float(value)
    return int(number) if number is not None else None


def _text(value) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class SlalomData:
    """Slalom pass result. Rope length and speed are kept as entered."""

    buoys: Optional[float] = None
    rope_length: str = ""
    speed: str = ""
    passes_count: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SlalomData":
        return cls(
            buoys=_optional_float(_pick(payload, "buoys")),
            rope_length=_text(_pick(payload, "ropeLength", "rope_length")),
            speed=_text(_pick(payload, "speed")),
            passes_count=_optional_int(_pick(payload, "passesCount", "passes_count")),
        )


@dataclass(frozen=True)
class TricksData:
    duration: Optional[int] = None
    trick_type: str = TRICK_TYPE_HANDS

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "TricksData":
        return cls(
            duration=_optional_int(_pick(payload, "duration", "duration_minutes")),
            trick_type=_text(_pick(payload, "trickType", "trick_type", default=TRICK_TYPE_HANDS)),
        )


@dataclass(frozen=True)
class JumpData:
    attempts: Optional[int] = None
    passed: Optional[int] = None
    made: Optional[int] = None
    distance: Optional[float] = None
    sub_event: str = SUB_EVENT_JUMP
    cuts_type: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "JumpData":
        return cls(
            attempts=_optional_int(_pick(payload, "attempts")),
            passed=_optional_int(_pick(payload, "passed")),
            made=_optional_int(_pick(payload, "made")),
            distance=_optional_float(_pick(payload, "distance")),
            sub_event=_text(_pick(payload, "subEvent", "sub_event", default=SUB_EVENT_JUMP)),
            cuts_type=_pick(payload, "cutsType", "cuts_type"),
        )


@dataclass(frozen=True)
class CutsData:
    passes: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "CutsData":
        return cls(passes=_optional_int(_pick(payload, "passes")))


@dataclass(frozen=True)
class OtherData:
    name: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "OtherData":
        return cls(name=_text(_pick(payload, "name")))


SetData = Union[SlalomData, TricksData, JumpData, CutsData, OtherData]

EVENT_DATA_TYPES = {
    Event.SLALOM: SlalomData,
    Event.TRICKS: TricksData,
    Event.JUMP: JumpData,
    Event.CUTS: CutsData,
    Event.OTHER: OtherData,
}

# Every event needs a data variant; fail at import rather than at render time
_missing_variants = set(Event) - set(EVENT_DATA_TYPES)
if _missing_variants:
    raise RuntimeError(f"No data variant for events: {sorted(e.value for e in _missing_variants)}")


@dataclass(frozen=True)
class SkiSet:
    """A logged training set. Immutable; edits produce a new SkiSet."""

    id: str
    event: Event
    date: str
    data: SetData
    notes: str = ""
    is_favorite: bool = False
    season_id: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SkiSet":
        """
        Convert an exported set payload to a SkiSet.

        Raises:
            ValueError: If the event key is unknown
            KeyError: If id or date is missing
        """
        event = Event(_pick(payload, "event", "event_type"))
        data_payload = payload.get("data") or {}

        return cls(
            id=str(payload["id"]),
            event=event,
            date=str(payload["date"]),
            data=EVENT_DATA_TYPES[event].from_dict(data_payload),
            notes=_text(_pick(payload, "notes")),
            is_favorite=bool(_pick(payload, "isFavorite", "is_favorite", default=False)),
            season_id=_pick(payload, "seasonId", "season_id"),
        )

    def with_favorite(self, is_favorite: bool) -> "SkiSet":
        return replace(self, is_favorite=is_favorite)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["event"] = self.event.value
        return data

    def to_json(self) -> str:
        """Serialize set to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


@dataclass(frozen=True)
class Task:
    """A to-do item with an optional local due date."""

    id: str
    title: str
    due_date: Optional[str] = None
    is_done: bool = False
    completed_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Task":
        return cls(
            id=str(payload["id"]),
            title=_text(payload.get("title")),
            due_date=_pick(payload, "dueDate", "due_date") or None,
            is_done=bool(_pick(payload, "isDone", "is_done", default=False)),
            completed_at=_pick(payload, "completedAt", "completed_at"),
            created_at=_pick(payload, "createdAt", "created_at"),
            updated_at=_pick(payload, "updatedAt", "updated_at"),
        )

    def to_json(self) -> str:
        """Serialize task to JSON string."""
        return json.dumps(asdict(self), indent=2)


@dataclass(frozen=True)
class TrickCatalogItem:
    """A trick from the fixed catalog with its two-ski point value."""

    id: str
    name: str
    points: int


class SpeedStep(NamedTuple):
    """A tournament boat speed step."""

    kph: int
    mph: float


@dataclass(frozen=True)
class Preferences:
    """Display units for slalom results."""

    rope_unit: str = DEFAULT_ROPE_UNIT
    speed_unit: str = DEFAULT_SPEED_UNIT


@dataclass(frozen=True)
class Snapshot:
    """Everything the report CLI needs, already fetched from the backend."""

    sets: tuple = field(default_factory=tuple)
    tasks: tuple = field(default_factory=tuple)
    learned_trick_ids: frozenset = field(default_factory=frozenset)
    active_season_id: Optional[str] = None
