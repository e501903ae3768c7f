"""
FILE: skilog/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - EVENT_KEYS: All event keys in display/enumeration order
  - ROPE_LENGTHS / ROPE_OFF: Slalom rope ladder (meters and feet-off labels)
  - TOURNAMENT_SPEED_STEPS: Standard boat speed steps (kph, mph)
  - RANGE_*: Time window keys
  - SUB_EVENT_* / CUTS_TYPE_* / TRICK_TYPE_*: Jump and tricks set kinds
  - Preference defaults and units
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Centralized constants to avoid magic strings and numbers
  - Ladders are ordered longest rope first; index 0 is the easiest rung
"""

# Event keys (order matters: breakdowns and tie-breaks follow it)
EVENT_SLALOM = "slalom"
EVENT_TRICKS = "tricks"
EVENT_JUMP = "jump"
EVENT_CUTS = "cuts"
EVENT_OTHER = "other"
EVENT_KEYS = (EVENT_SLALOM, EVENT_TRICKS, EVENT_JUMP, EVENT_CUTS, EVENT_OTHER)

# Time window keys
RANGE_DAY = "day"
RANGE_WEEK = "week"
RANGE_MONTH = "month"
RANGE_SEASON = "season"
RANGE_CUSTOM = "custom"
RANGE_ALL = "all"
VALID_RANGES = (RANGE_DAY, RANGE_WEEK, RANGE_MONTH, RANGE_SEASON, RANGE_CUSTOM, RANGE_ALL)

# Slalom rope ladder, longest (easiest) first
ROPE_LENGTHS = (18, 16, 14, 13, 12, 11.25, 10.75, 10.25, 9.75)
ROPE_OFF = ("15off", "22off", "28off", "32off", "35off", "38off", "39.5off", "41off", "43off")
ROPE_MATCH_TOLERANCE = 0.01
BUOYS_PER_PASS = 6

# Jump sets are either jumps or cuts; cuts are open cuts or a cut pass
SUB_EVENT_JUMP = "jump"
SUB_EVENT_CUTS = "cuts"
CUTS_TYPE_OPEN = "open_cuts"
CUTS_TYPE_PASS = "cut_pass"

# Trick sets are on hands or toes
TRICK_TYPE_HANDS = "hands"
TRICK_TYPE_TOES = "toes"

# Tournament speed steps as (kph, mph), ascending
TOURNAMENT_SPEED_STEPS = (
    (28, 17.4),
    (31, 19.3),
    (34, 21.1),
    (37, 23.0),
    (40, 24.9),
    (43, 26.7),
    (46, 28.6),
    (49, 30.4),
    (52, 32.3),
    (55, 34.2),
    (58, 36.0),
)
KPH_PER_MPH = 1.60934

# Insights defaults
DEFAULT_MONTHS = 3
DAYS_PER_WEEK = 7
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Preferences
ROPE_UNIT_METERS = "meters"
ROPE_UNIT_FEET = "feet"
ROPE_UNITS = (ROPE_UNIT_METERS, ROPE_UNIT_FEET)
SPEED_UNIT_MPH = "mph"
SPEED_UNIT_KMH = "kmh"
SPEED_UNITS = (SPEED_UNIT_MPH, SPEED_UNIT_KMH)
DEFAULT_ROPE_UNIT = ROPE_UNIT_METERS
DEFAULT_SPEED_UNIT = SPEED_UNIT_MPH

# Display placeholders
NO_VALUE = "—"
NO_SPEED = "--"
