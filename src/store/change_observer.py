"""Deletion notification capability for record stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from store.record_store import RecordStore


@runtime_checkable
class ChangeObserver(Protocol):
    """Receiver notified after a record store durably deletes a record.

    Stores keep only a weak reference to their observer, so whoever wires
    the observer must also keep it alive.
    """

    def on_deleted(self, store: "RecordStore[Any]", item: Any) -> None:
        """Handle a record that was removed and persisted out of store."""
