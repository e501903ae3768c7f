"""
Test suite for SetsStore and favourite toggling through ToggleGuard.
"""

import pytest

from skilog.core.exceptions import SetNotFoundError
from skilog.core.models import Event, Snapshot
from skilog.core.store import SetsStore
from skilog.core.toggles import ToggleGuard


@pytest.fixture
def store(make_set):
    return SetsStore(
        sets=(
            make_set(Event.SLALOM, id="s1", season_id="s2026"),
            make_set(Event.TRICKS, id="s2", season_id="s2026", is_favorite=True),
            make_set(Event.JUMP, id="s3", season_id="s2025"),
        ),
        learned_trick_ids=frozenset({"trick_001"}),
        active_season_id="s2026",
    )


def test_from_snapshot(make_set):
    snapshot = Snapshot(
        sets=(make_set(id="a"),),
        learned_trick_ids=frozenset({"trick_002"}),
        active_season_id="s1",
    )
    store = SetsStore.from_snapshot(snapshot)

    assert [s.id for s in store.sets] == ["a"]
    assert store.learned_trick_ids == {"trick_002"}
    assert store.active_season_id == "s1"


def test_get(store):
    assert store.get("s2").event is Event.TRICKS
    with pytest.raises(SetNotFoundError):
        store.get("missing")


def test_season_sets_defaults_to_active_season(store):
    assert [s.id for s in store.season_sets()] == ["s1", "s2"]
    assert [s.id for s in store.season_sets("s2025")] == ["s3"]
    assert store.season_sets("s1999") == []


def test_season_sets_without_any_season_returns_all(make_set):
    store = SetsStore(sets=(make_set(id="a"), make_set(id="b")))
    assert [s.id for s in store.season_sets()] == ["a", "b"]


def test_with_favorite_returns_new_store(store):
    updated = store.with_favorite("s1", True)

    assert updated.get("s1").is_favorite
    assert not store.get("s1").is_favorite
    assert updated.get("s2") is store.get("s2")


def test_with_favorite_unknown_set(store):
    with pytest.raises(SetNotFoundError):
        store.with_favorite("missing", True)


def test_with_learned(store):
    updated = store.with_learned("trick_005", True).with_learned("trick_001", False)
    assert updated.learned_trick_ids == {"trick_005"}
    assert store.learned_trick_ids == {"trick_001"}


def test_favorite_toggle_flow_rolls_back_on_failure(store):
    guard = ToggleGuard({s.id: s.is_favorite for s in store.sets})

    request = guard.begin("s1", True)
    store = store.with_favorite("s1", guard.displayed("s1"))
    assert store.get("s1").is_favorite

    store = store.with_favorite("s1", guard.settle_request(request, succeeded=False))
    assert not store.get("s1").is_favorite


def test_favorite_toggle_flow_keeps_last_click(store):
    guard = ToggleGuard({s.id: s.is_favorite for s in store.sets})

    first = guard.begin("s2", False)
    second = guard.begin("s2", True)
    store = store.with_favorite("s2", guard.displayed("s2"))

    store = store.with_favorite("s2", guard.settle_request(second, succeeded=True))
    store = store.with_favorite("s2", guard.settle_request(first, succeeded=True))
    assert store.get("s2").is_favorite
