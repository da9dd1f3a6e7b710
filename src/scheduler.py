"""Public SDK surface for Scheduler.

This module provides a stable import path for library users.
It re-exports the stores, the schedule book and typed models.
"""

from __future__ import annotations

from core.config import SchedulerConfig
from core.errors import (
    RecordDecodeError,
    RecordDeleteError,
    RecordEncodeError,
    RecordStoreError,
    RecordWriteError,
    SchedulerError,
)
from core.types import RecordCodec, ScheduledEvent
from store.change_observer import ChangeObserver
from store.event_payload import EVENT_CODEC
from store.record_store import RecordStore
from store.schedule_book import CompletionArchiver, ScheduleBook

__all__ = [
    "ChangeObserver",
    "CompletionArchiver",
    "EVENT_CODEC",
    "RecordCodec",
    "RecordDecodeError",
    "RecordDeleteError",
    "RecordEncodeError",
    "RecordStore",
    "RecordStoreError",
    "RecordWriteError",
    "ScheduleBook",
    "ScheduledEvent",
    "SchedulerConfig",
    "SchedulerError",
]
