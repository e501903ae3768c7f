"""
FILE: skilog/core/tricks.py
PURPOSE: Trick catalog, search and learned-trick totals
EXPORTS:
  - TRICK_CATALOG: Tuple[TrickCatalogItem, ...] sorted by name
  - search_tricks(query) -> List[TrickCatalogItem]
  - get_trick(trick_id) -> Optional[TrickCatalogItem]
  - learned_points(learned_ids) -> int
DEPENDENCIES:
  - skilog.core.models (TrickCatalogItem)
NOTES:
  - Points are two-ski values
  - Learned state itself is toggled through skilog.core.toggles
"""

from typing import Iterable, List, Optional

from .models import TrickCatalogItem

_CATALOG_ROWS = (
    ("trick_001", "S", 40),
    ("trick_002", "TS", 130),
    ("trick_003", "B", 60),
    ("trick_004", "F", 60),
    ("trick_005", "O", 90),
    ("trick_006", "BB", 90),
    ("trick_007", "5B", 110),
    ("trick_008", "5F", 110),
    ("trick_009", "7F", 130),
    ("trick_010", "7B", 130),
    ("trick_011", "LB", 110),
    ("trick_012", "LF", 110),
    ("trick_013", "TB", 100),
    ("trick_014", "TF", 100),
    ("trick_015", "TO", 200),
    ("trick_016", "TBB", 200),
    ("trick_017", "T5B", 350),
    ("trick_018", "T7F", 450),
    ("trick_019", "T5F", 350),
    ("trick_020", "WB", 80),
    ("trick_021", "WF", 80),
    ("trick_022", "WO", 150),
    ("trick_023", "WBB", 150),
    ("trick_024", "W5B", 310),
    ("trick_025", "W5F", 310),
    ("trick_026", "W7F", 800),
    ("trick_027", "W7B", 480),
    ("trick_028", "W9B", 850),
    ("trick_029", "W9F", 850),
    ("trick_030", "WLB", 160),
    ("trick_031", "WLF", 160),
    ("trick_032", "WLO", 260),
    ("trick_033", "WLBB", 260),
    ("trick_034", "WL5B", 420),
    ("trick_035", "WL5LB", 500),
    ("trick_036", "WL7F", 700),
    ("trick_037", "WL9B", 800),
    ("trick_038", "WL5F", 420),
    ("trick_039", "WL5LF", 500),
    ("trick_040", "WL7B", 550),
    ("trick_041", "WL9F", 800),
    ("trick_042", "TWB", 150),
    ("trick_043", "TWF", 150),
    ("trick_044", "TWO", 300),
    ("trick_045", "TWBB", 330),
    ("trick_046", "TW5B", 500),
    ("trick_047", "TW7F", 650),
    ("trick_048", "TW5F", 500),
    ("trick_049", "TW7B", 650),
    ("trick_050", "TWLB", 320),
    ("trick_051", "TWLF", 380),
    ("trick_052", "TWLO", 480),
    ("trick_053", "TWLBB", 480),
    ("trick_054", "TWL5B", 600),
    ("trick_055", "TWL5F", 700),
    ("trick_056", "WflipF", 800),
    ("trick_057", "WflipB", 500),
    ("trick_058", "WDflipB", 1000),
    ("trick_059", "WflipBFF", 800),
    ("trick_060", "WflipBBB", 800),
    ("trick_061", "WflipBFB", 750),
    ("trick_062", "WflipBLB", 800),
    ("trick_063", "WflipBBF", 550),
    ("trick_064", "WflipB5F", 850),
    ("trick_065", "WflipB5B", 900),
    ("trick_066", "FFLB", 850),
    ("trick_067", "SLB", 350),
    ("trick_068", "SLF", 400),
    ("trick_069", "SLO", 400),
    ("trick_070", "SLBB", 450),
    ("trick_071", "SL5B", 550),
    ("trick_072", "SL5F", 550),
    ("trick_073", "SL7B", 750),
    ("trick_074", "SL7F", 800),
)

# Case-insensitive by name, lowercase first on exact case-folded ties
TRICK_CATALOG = tuple(sorted(
    (TrickCatalogItem(id=trick_id, name=name, points=points) for trick_id, name, points in _CATALOG_ROWS),
    key=lambda trick: (trick.name.casefold(), trick.name.swapcase()),
))

_BY_ID = {trick.id: trick for trick in TRICK_CATALOG}


def search_tricks(query: Optional[str]) -> List[TrickCatalogItem]:
    """Case-insensitive substring match on trick names; blank returns all."""
    normalized = (query or "").strip().lower()
    if not normalized:
        return list(TRICK_CATALOG)
    return [trick for trick in TRICK_CATALOG if normalized in trick.name.lower()]


def get_trick(trick_id: str) -> Optional[TrickCatalogItem]:
    return _BY_ID.get(trick_id)


def learned_points(learned_ids: Iterable[str]) -> int:
    """Sum of points for learned tricks; unknown ids are ignored."""
    return sum(_BY_ID[trick_id].points for trick_id in set(learned_ids) if trick_id in _BY_ID)
