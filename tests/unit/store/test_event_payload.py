"""Unit tests for ScheduledEvent payload conversion."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.types import ScheduledEvent
from store.event_payload import event_from_payload, event_to_payload


def test_event_to_payload_writes_naive_utc_date() -> None:
    """Payload dates should be naive UTC, which plist can carry."""
    event = ScheduledEvent(name="standup", date=datetime(2024, 3, 1, 9, 30))

    payload = event_to_payload(event)

    assert payload == {"name": "standup", "date": datetime(2024, 3, 1, 9, 30)}


def test_event_from_payload_restores_utc_date() -> None:
    """Decoded events should carry aware UTC dates."""
    event = event_from_payload({"name": "standup", "date": datetime(2024, 3, 1, 9, 30)})

    assert event.date.tzinfo == timezone.utc


def test_event_from_payload_rejects_string_date() -> None:
    """A date stored as text is not a valid event payload."""
    with pytest.raises(TypeError):
        event_from_payload({"name": "standup", "date": "2024-03-01"})
