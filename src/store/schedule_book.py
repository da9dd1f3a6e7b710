"""Python SDK for schedule operations.

This module composes a pending schedules store with a completed events
store. Completing an event deletes it from the schedules store, whose
observer archives it into the completed store.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any

from core.config import SchedulerConfig
from core.errors import SchedulerIndexError
from core.logging_config import get_logger
from core.types import ScheduledEvent
from store.event_payload import EVENT_CODEC
from store.record_store import RecordStore

_LOGGER = get_logger(__name__)


class CompletionArchiver:
    """Observer that copies deleted events into the completed store."""

    def __init__(self, completed_store: RecordStore[ScheduledEvent]) -> None:
        self._completed_store = completed_store

    def on_deleted(self, store: RecordStore[Any], item: Any) -> None:
        """Persist item into the completed store and refresh its cache.

        Raises:
            RecordWriteError: If the completed store cannot be written.
        """
        self._completed_store.create(item)
        self._completed_store.load()
        _LOGGER.info(
            "event_archived",
            source=store.file_name,
            target=self._completed_store.file_name,
            completed_count=len(self._completed_store),
        )


class ScheduleBook:
    """Primary SDK entry point for schedule workflows."""

    def __init__(self, config: SchedulerConfig | None = None) -> None:
        """Create both stores and wire the archiver.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or SchedulerConfig.from_env()
        self.schedules: RecordStore[ScheduledEvent] = RecordStore(
            self._config.data_root, self._config.schedules_file_name, EVENT_CODEC
        )
        self.completed: RecordStore[ScheduledEvent] = RecordStore(
            self._config.data_root, self._config.completed_file_name, EVENT_CODEC
        )
        # The store holds the archiver weakly; this reference keeps it alive.
        self._archiver = CompletionArchiver(self.completed)
        self.schedules.observer = self._archiver

    def add_event(self, name: str, date: datetime) -> ScheduledEvent:
        """Schedule a new event at the end of the list.

        Raises:
            RecordWriteError: If the schedules store cannot be written.
        """
        event = ScheduledEvent(name=name, date=date)
        self.schedules.create(event)
        return event

    def list_events(self) -> list[ScheduledEvent]:
        """Return pending events in stored order.

        Raises:
            RecordDecodeError: If the schedules file is corrupt.
        """
        return self.schedules.load()

    def list_completed(self) -> list[ScheduledEvent]:
        """Return completed events in completion order.

        Raises:
            RecordDecodeError: If the completed file is corrupt.
        """
        return self.completed.load()

    def complete_event(self, index: int) -> ScheduledEvent:
        """Move the pending event at index into the completed list.

        Raises:
            SchedulerIndexError: If index is not a pending event.
            RecordDeleteError: If the schedules store cannot be written.
            RecordWriteError: If the completed store cannot be written.
        """
        self.schedules.load()
        _check_index(index, len(self.schedules), "pending event")
        return self.schedules.delete_at(index)

    def reschedule_event(
        self,
        index: int,
        name: str | None = None,
        date: datetime | None = None,
    ) -> ScheduledEvent:
        """Change the name and/or date of the pending event at index.

        Returns:
            The updated event.

        Raises:
            SchedulerIndexError: If index is not a pending event.
            RecordWriteError: If the schedules store cannot be written.
        """
        events = self.schedules.load()
        _check_index(index, len(events), "pending event")
        current = events[index]
        updated = replace(
            current,
            name=current.name if name is None else name,
            date=current.date if date is None else date,
        )
        self.schedules.update_at(index, updated)
        return updated

    def move_event(self, from_index: int, to_index: int) -> list[ScheduledEvent]:
        """Reorder pending events by moving one to a new position.

        Returns:
            The reordered pending events.

        Raises:
            SchedulerIndexError: If either index is out of range.
            RecordWriteError: If the schedules store cannot be written.
        """
        events = self.schedules.load()
        _check_index(from_index, len(events), "pending event")
        _check_index(to_index, len(events), "pending event")
        event = events.pop(from_index)
        events.insert(to_index, event)
        self.schedules.synchronize(events)
        return events

    def remove_completed(self, index: int) -> ScheduledEvent:
        """Delete a completed event for good.

        Raises:
            SchedulerIndexError: If index is not a completed event.
            RecordDeleteError: If the completed store cannot be written.
        """
        self.completed.load()
        _check_index(index, len(self.completed), "completed event")
        return self.completed.delete_at(index)

    def clear_completed(self) -> None:
        """Remove every completed event.

        Raises:
            RecordWriteError: If the completed store cannot be written.
        """
        self.completed.clear()

    def is_scheduled(self, event: ScheduledEvent) -> bool:
        """Return whether an equal event is still pending."""
        return self.schedules.contains(event)


def _check_index(index: int, size: int, label: str) -> None:
    """Validate a zero-based list position.

    Raises:
        SchedulerIndexError: If index is outside [0, size).
    """
    if not 0 <= index < size:
        if size == 0:
            raise SchedulerIndexError(f"No {label} at index {index}: the list is empty.")
        raise SchedulerIndexError(
            f"No {label} at index {index}: expected a value from 0 to {size - 1}."
        )
