"""
FILE: skilog/core/numbers.py
PURPOSE: Lenient number parsing and rounding shared by insights and slalom
EXPORTS:
  - parse_number(value) -> Optional[float]
  - round_half_up(value) -> int
DEPENDENCIES:
  - math, re (stdlib)
NOTES:
  - Free-text fields like "32.3 mph" or "11.25m" yield their first number
  - round_half_up() rounds .5 toward +infinity; Python's round() would
    round half to even and shift displayed percentages
"""

import math
import re
from typing import Optional

_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_number(value) -> Optional[float]:
    """
    Extract a finite number from a stored value.

    Returns:
        The number, or None for missing, empty, non-finite or text without digits
    """
    if value is None or value == "" or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None

    match = _NUMBER_RE.search(str(value))
    if not match:
        return None

    number = float(match.group(0))
    return number if math.isfinite(number) else None


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
