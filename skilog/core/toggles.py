"""
FILE: skilog/core/toggles.py
PURPOSE: Optimistic boolean toggles reconciled against out-of-order outcomes
EXPORTS:
  - ToggleRequest (dataclass)
  - ToggleOutcome (dataclass)
  - ToggleCounter (dataclass)
  - ToggleGuard (class)
  - apply_toggle_response(current, latest_version, response_version, succeeded, previous_value) -> bool
  - set_membership(current, entity_id, member) -> frozenset
  - apply_membership_response(current, entity_id, latest_version, response_version, succeeded, previous_member) -> frozenset
DEPENDENCIES:
  - dataclasses, logging, typing (stdlib)
NOTES:
  - Last write wins by issuance order, not completion order
  - Each entity id owns its own version counter; toggles on different
    entities never make each other stale
  - Superseded requests are not cancelled, only ignored when they settle
  - Failure of the current request rolls back to the value captured when
    that request was issued
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleRequest:
    """An issued toggle. Hand it back to settle_request() when I/O finishes."""

    entity_id: str
    version: int
    previous_value: bool
    next_value: bool


@dataclass(frozen=True)
class ToggleOutcome:
    """Completion notice for one request, delivered in any order."""

    entity_id: str
    request_version: int
    succeeded: bool
    previous_value: bool


@dataclass
class ToggleCounter:
    version: int = 0
    displayed: bool = False


def apply_toggle_response(
    current: bool,
    latest_version: int,
    response_version: int,
    succeeded: bool,
    previous_value: bool,
) -> bool:
    """
    Compute the value to display once a toggle request settles.

    Args:
        current: Value on screen right now
        latest_version: Newest version issued for this entity
        response_version: Version of the request that just settled
        succeeded: Whether the request succeeded
        previous_value: Value captured before that request's optimistic flip

    Returns:
        current for stale responses and successes, previous_value when the
        latest request failed
    """
    if response_version != latest_version:
        return current
    if succeeded:
        return current
    return previous_value


def set_membership(current: Iterable[str], entity_id: str, member: bool) -> FrozenSet[str]:
    """Return a new set with entity_id added (member=True) or removed."""
    next_ids = set(current)
    if member:
        next_ids.add(entity_id)
    else:
        next_ids.discard(entity_id)
    return frozenset(next_ids)


def apply_membership_response(
    current: Iterable[str],
    entity_id: str,
    latest_version: int,
    response_version: int,
    succeeded: bool,
    previous_member: bool,
) -> FrozenSet[str]:
    """apply_toggle_response() for set-valued state such as learned tricks."""
    current = frozenset(current)
    is_member = entity_id in current
    settled = apply_toggle_response(
        is_member, latest_version, response_version, succeeded, previous_member
    )
    if settled == is_member:
        return current
    return set_membership(current, entity_id, settled)


class ToggleGuard:
    """
    Per-entity optimistic toggle state.

    Usage:
        guard = ToggleGuard({"set-1": False})
        request = guard.begin("set-1", True)      # shows True immediately
        ...                                       # caller performs the I/O
        guard.settle_request(request, succeeded)  # returns value to show
    """

    def __init__(self, initial: Optional[Mapping[str, bool]] = None):
        self._counters: Dict[str, ToggleCounter] = {}
        for entity_id, value in (initial or {}).items():
            self._counters[entity_id] = ToggleCounter(displayed=bool(value))

    def _counter(self, entity_id: str) -> ToggleCounter:
        counter = self._counters.get(entity_id)
        if counter is None:
            counter = ToggleCounter()
            self._counters[entity_id] = counter
        return counter

    def displayed(self, entity_id: str) -> bool:
        counter = self._counters.get(entity_id)
        return counter.displayed if counter else False

    def latest_version(self, entity_id: str) -> int:
        counter = self._counters.get(entity_id)
        return counter.version if counter else 0

    def begin(self, entity_id: str, intended: bool) -> ToggleRequest:
        """Issue a new request: bump the version and show the intended value."""
        counter = self._counter(entity_id)
        counter.version += 1
        request = ToggleRequest(
            entity_id=entity_id,
            version=counter.version,
            previous_value=counter.displayed,
            next_value=intended,
        )
        counter.displayed = intended
        return request

    def settle(self, outcome: ToggleOutcome) -> bool:
        """Apply a completion notice and return the value to display."""
        counter = self._counters.get(outcome.entity_id)

        # Only the newest request actually issued by begin() may settle
        if counter is None or counter.version == 0 or outcome.request_version != counter.version:
            logger.debug(
                "Discarding stale toggle outcome for %s (v%d, latest v%d)",
                outcome.entity_id, outcome.request_version, counter.version if counter else 0,
            )
            return counter.displayed if counter else False

        counter.displayed = apply_toggle_response(
            counter.displayed,
            counter.version,
            outcome.request_version,
            outcome.succeeded,
            outcome.previous_value,
        )
        if not outcome.succeeded:
            logger.debug("Toggle for %s failed; rolled back to %s", outcome.entity_id, counter.displayed)
        return counter.displayed

    def settle_request(self, request: ToggleRequest, succeeded: bool) -> bool:
        return self.settle(ToggleOutcome(
            entity_id=request.entity_id,
            request_version=request.version,
            succeeded=succeeded,
            previous_value=request.previous_value,
        ))

    def snapshot(self) -> Dict[str, bool]:
        """Displayed value per entity."""
        return {entity_id: counter.displayed for entity_id, counter in self._counters.items()}
