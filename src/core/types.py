"""Shared typed models.

This module defines immutable data models used by the store, the
schedule book, and the CLI to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RecordCodec(Generic[T]):
    """Conversion between one record and its property-list payload.

    Attributes:
        to_payload: Build a plist-compatible dictionary from a record.
        from_payload: Rebuild a record, raising KeyError, TypeError or
            ValueError when the payload is malformed.
    """

    to_payload: Callable[[T], dict[str, Any]]
    from_payload: Callable[[dict[str, Any]], T]


@dataclass(frozen=True)
class ScheduledEvent:
    """One scheduled event.

    Dates are normalized to timezone-aware UTC at whole-second precision,
    which is what the property-list encoding preserves. Naive dates are
    taken to be UTC already.

    Attributes:
        name: Event title.
        date: When the event takes place.
    """

    name: str
    date: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", normalize_event_date(self.date))


def normalize_event_date(value: datetime) -> datetime:
    """Return value as aware UTC without sub-second precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=0)
