"""
FILE: skilog/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .reports import (
    insights,
    history,
    slalom,
    jump,
    trick_stats,
)
from .todo import (
    tasks,
)
from .library import (
    tricks,
)
from .settings import (
    prefs,
)
from .system import (
    version,
    help,
)

__all__ = [
    "insights",
    "history",
    "slalom",
    "jump",
    "trick_stats",
    "tasks",
    "tricks",
    "prefs",
    "version",
    "help",
]
