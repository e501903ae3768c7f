"""
FILE: skilog/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - SkilogError (base exception)
  - SnapshotNotFoundError
  - InvalidSnapshotError
  - SetNotFoundError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from SkilogError for easy catching
  - The analytics engine never raises these for bad data; it degrades to
    neutral values. Loader, store and CLI input validation raise them.
"""


class SkilogError(Exception):
    """Base exception for all skilog errors."""
    pass


class SnapshotNotFoundError(SkilogError):
    """Snapshot file doesn't exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Snapshot {path} not found")


class InvalidSnapshotError(SkilogError):
    """Snapshot file exists but can't be read as a training log export."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Snapshot {path} is invalid: {reason}")


class SetNotFoundError(SkilogError):
    """Set with given ID doesn't exist in the store."""

    def __init__(self, set_id: str):
        self.set_id = set_id
        super().__init__(f"Set {set_id} not found")


class InvalidInputError(SkilogError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)
