"""
FILE: skilog/core/store.py
PURPOSE: Explicit, passed-in state for hydrated sets and learned tricks
EXPORTS:
  - SetsStore (dataclass)
DEPENDENCIES:
  - skilog.core.models (SkiSet, Snapshot)
  - skilog.core.exceptions (SetNotFoundError)
NOTES:
  - Replaces a module-level store: callers own a SetsStore and pass it in
  - Immutable; every update returns a new store
  - Favourite and learned flags are written here after ToggleGuard decides
    what to display
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Optional, Tuple

from .exceptions import SetNotFoundError
from .models import SkiSet, Snapshot
from .toggles import set_membership


@dataclass(frozen=True)
class SetsStore:
    sets: Tuple[SkiSet, ...] = field(default_factory=tuple)
    learned_trick_ids: FrozenSet[str] = field(default_factory=frozenset)
    active_season_id: Optional[str] = None

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "SetsStore":
        return cls(
            sets=tuple(snapshot.sets),
            learned_trick_ids=frozenset(snapshot.learned_trick_ids),
            active_season_id=snapshot.active_season_id,
        )

    def get(self, set_id: str) -> SkiSet:
        """
        Fetch a set by ID.

        Raises:
            SetNotFoundError: If no set has that ID
        """
        for ski_set in self.sets:
            if ski_set.id == set_id:
                return ski_set
        raise SetNotFoundError(set_id)

    def season_sets(self, season_id: Optional[str] = None) -> List[SkiSet]:
        """
        Sets belonging to a season (defaults to the active season).

        Without any season id at all every set is returned, which is how
        a snapshot exported without season tags behaves.
        """
        season_id = season_id or self.active_season_id
        if season_id is None:
            return list(self.sets)
        return [ski_set for ski_set in self.sets if ski_set.season_id == season_id]

    def with_favorite(self, set_id: str, is_favorite: bool) -> "SetsStore":
        self.get(set_id)
        updated = tuple(
            ski_set.with_favorite(is_favorite) if ski_set.id == set_id else ski_set
            for ski_set in self.sets
        )
        return replace(self, sets=updated)

    def with_learned(self, trick_id: str, learned: bool) -> "SetsStore":
        return replace(
            self,
            learned_trick_ids=set_membership(self.learned_trick_ids, trick_id, learned),
        )
