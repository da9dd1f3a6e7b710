"""Property-list payloads for ScheduledEvent records.

This module centralizes ScheduledEvent serialization logic.
It is reused by both schedule stores and the CLI.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core.constants import EVENT_DATE_KEY, EVENT_NAME_KEY
from core.types import RecordCodec, ScheduledEvent


def event_to_payload(event: ScheduledEvent) -> dict[str, Any]:
    """Serialize a ScheduledEvent into a plist-safe payload.

    Property lists carry naive datetimes, so the date is written as naive UTC.

    Args:
        event: Event instance.

    Returns:
        Dictionary payload for plist encoding.
    """
    return {
        EVENT_NAME_KEY: event.name,
        EVENT_DATE_KEY: event.date.astimezone(timezone.utc).replace(tzinfo=None),
    }


def event_from_payload(payload: dict[str, Any]) -> ScheduledEvent:
    """Deserialize a plist payload into a ScheduledEvent.

    Args:
        payload: Serialized event payload.

    Returns:
        Parsed event.

    Raises:
        KeyError: If a field is missing.
        TypeError: If a field has the wrong type.
    """
    name = payload[EVENT_NAME_KEY]
    date = payload[EVENT_DATE_KEY]
    if not isinstance(name, str):
        raise TypeError(f"event name must be a string, got {type(name).__name__}")
    if not isinstance(date, datetime):
        raise TypeError(f"event date must be a datetime, got {type(date).__name__}")
    return ScheduledEvent(name=name, date=date)


EVENT_CODEC: RecordCodec[ScheduledEvent] = RecordCodec(
    to_payload=event_to_payload,
    from_payload=event_from_payload,
)
