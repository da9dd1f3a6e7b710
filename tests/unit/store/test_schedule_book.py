"""Unit tests for the schedule book SDK."""

from __future__ import annotations

import gc
from datetime import datetime

import pytest

from core.errors import RecordDecodeError, SchedulerIndexError
from core.types import ScheduledEvent
from store.schedule_book import ScheduleBook


def _date(day: int) -> datetime:
    return datetime(2024, 3, day, 9, 0)


def test_add_event_appends_to_schedules(scheduler_config) -> None:
    """Added events should persist in the schedules file."""
    book = ScheduleBook(scheduler_config)
    book.add_event("standup", _date(1))
    book.add_event("retro", _date(2))

    names = [event.name for event in ScheduleBook(scheduler_config).list_events()]

    assert names == ["standup", "retro"]


def test_stores_use_configured_file_names(scheduler_config) -> None:
    """Both stores should live in the data root under their file names."""
    book = ScheduleBook(scheduler_config)

    assert book.schedules.path == scheduler_config.data_root / "schedules.plist"
    assert book.completed.path == scheduler_config.data_root / "completedEvents.plist"


def test_complete_event_moves_event_to_completed(scheduler_config) -> None:
    """Completing should remove the event from schedules and archive it."""
    book = ScheduleBook(scheduler_config)
    book.add_event("standup", _date(1))
    book.add_event("retro", _date(2))

    completed = book.complete_event(0)

    assert completed.name == "standup"
    assert [event.name for event in book.list_events()] == ["retro"]
    assert book.list_completed() == [completed]


def test_complete_event_keeps_archiver_alive(scheduler_config) -> None:
    """The book should own the archiver so garbage collection keeps it."""
    book = ScheduleBook(scheduler_config)
    book.add_event("standup", _date(1))
    gc.collect()

    book.complete_event(0)

    assert len(book.list_completed()) == 1


def test_complete_event_refreshes_completed_cache(scheduler_config) -> None:
    """The archiver should reload the completed store after writing."""
    book = ScheduleBook(scheduler_config)
    book.add_event("standup", _date(1))

    book.complete_event(0)

    assert [event.name for event in book.completed.items] == ["standup"]


def test_complete_event_rejects_bad_index(scheduler_config) -> None:
    """Completing a missing position should raise an index error."""
    book = ScheduleBook(scheduler_config)

    with pytest.raises(SchedulerIndexError):
        book.complete_event(0)


def test_reschedule_event_updates_in_place(scheduler_config) -> None:
    """Rescheduling should keep the event at its position."""
    book = ScheduleBook(scheduler_config)
    book.add_event("standup", _date(1))
    book.add_event("retro", _date(2))

    updated = book.reschedule_event(0, date=_date(5))

    assert updated == ScheduledEvent(name="standup", date=_date(5))
    assert book.list_events()[0] == updated


def test_reschedule_event_renames(scheduler_config) -> None:
    """Rescheduling with a name only should keep the date."""
    book = ScheduleBook(scheduler_config)
    book.add_event("standup", _date(1))

    updated = book.reschedule_event(0, name="daily")

    assert updated.name == "daily" and updated.date == ScheduledEvent("x", _date(1)).date


def test_reschedule_event_targets_index_among_duplicates(scheduler_config) -> None:
    """Rescheduling should change the row at index even when an equal event precedes it."""
    book = ScheduleBook(scheduler_config)
    book.add_event("standup", _date(1))
    book.add_event("retro", _date(1))
    book.add_event("standup", _date(1))

    book.reschedule_event(2, name="moved")

    names = [event.name for event in ScheduleBook(scheduler_config).list_events()]
    assert names == ["standup", "retro", "moved"]


def test_move_event_reorders_schedules(scheduler_config) -> None:
    """Moving should persist the new order."""
    book = ScheduleBook(scheduler_config)
    for name, day in (("a", 1), ("b", 2), ("c", 3)):
        book.add_event(name, _date(day))

    book.move_event(2, 0)

    names = [event.name for event in ScheduleBook(scheduler_config).list_events()]
    assert names == ["c", "a", "b"]


def test_move_event_rejects_out_of_range_target(scheduler_config) -> None:
    """Moving past the end of the list should raise an index error."""
    book = ScheduleBook(scheduler_config)
    book.add_event("a", _date(1))

    with pytest.raises(SchedulerIndexError):
        book.move_event(0, 1)


def test_remove_completed_does_not_archive_again(scheduler_config) -> None:
    """Removing a completed event should delete it without side effects."""
    book = ScheduleBook(scheduler_config)
    book.add_event("standup", _date(1))
    book.complete_event(0)

    book.remove_completed(0)

    assert book.list_completed() == [] and book.list_events() == []


def test_clear_completed_empties_completed_list(scheduler_config) -> None:
    """Clearing should drop every completed event."""
    book = ScheduleBook(scheduler_config)
    book.add_event("a", _date(1))
    book.add_event("b", _date(2))
    book.complete_event(0)
    book.complete_event(0)

    book.clear_completed()

    assert book.list_completed() == []


def test_is_scheduled_reports_pending_events(scheduler_config) -> None:
    """Pending events should be reported as scheduled until completed."""
    book = ScheduleBook(scheduler_config)
    event = book.add_event("standup", _date(1))

    assert book.is_scheduled(event)
    book.complete_event(0)
    assert not book.is_scheduled(event)


def test_list_events_surfaces_corrupt_file(scheduler_config) -> None:
    """A corrupt schedules file should raise a decode error."""
    book = ScheduleBook(scheduler_config)
    scheduler_config.data_root.mkdir(parents=True, exist_ok=True)
    book.schedules.path.write_bytes(b"corrupt")

    with pytest.raises(RecordDecodeError):
        book.list_events()
