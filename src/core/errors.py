"""Scheduler exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations

from pathlib import Path


class SchedulerError(Exception):
    """Base exception for all Scheduler failures."""


class SchedulerConfigError(SchedulerError):
    """Raised for invalid runtime configuration."""


class SchedulerIndexError(SchedulerError):
    """Raised when a list position does not exist."""


class RecordStoreError(SchedulerError):
    """Raised for record store persistence failures.

    Attributes:
        path: Backing file the failing operation targeted.
    """

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class RecordDecodeError(RecordStoreError):
    """Raised when a backing file does not hold a sequence of records."""


class RecordWriteError(RecordStoreError):
    """Raised when records cannot be persisted to the backing file."""


class RecordEncodeError(RecordWriteError):
    """Raised when records cannot be encoded as a property list."""


class RecordDeleteError(RecordStoreError):
    """Raised when the collection cannot be persisted after a removal."""
