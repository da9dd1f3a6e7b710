"""File-backed record collection store.

This module persists one ordered collection of records per file.
It keeps an in-memory cache that matches the file after every
successful mutation, and notifies an observer after deletions.
"""

from __future__ import annotations

import weakref
from pathlib import Path
from typing import Generic, Iterable, TypeVar

from core.config import validate_file_name
from core.errors import RecordDecodeError, RecordDeleteError, RecordWriteError
from core.logging_config import get_logger
from core.types import RecordCodec
from store.change_observer import ChangeObserver
from store.plist_io import decode_records, encode_records, write_bytes_atomic

T = TypeVar("T")

_LOGGER = get_logger(__name__)


class RecordStore(Generic[T]):
    """Ordered, file-backed CRUD store for one record type.

    Every mutation stages a new collection, writes it atomically and only
    then swaps it into the cache. A failed write raises and leaves the
    cache untouched, so cache and file never diverge.
    """

    def __init__(self, directory: Path, file_name: str, codec: RecordCodec[T]) -> None:
        """Create a store over directory/file_name.

        Args:
            directory: Private directory holding the backing file.
            file_name: Bare backing file name.
            codec: Record payload codec.

        Raises:
            SchedulerConfigError: If file_name contains a path component.
        """
        self._file_name = validate_file_name(file_name, "record store file name")
        self._path = Path(directory) / self._file_name
        self._codec = codec
        self._items: list[T] = []
        self._loaded = False
        self._observer_ref: weakref.ref[ChangeObserver] | None = None

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def path(self) -> Path:
        return self._path

    @property
    def items(self) -> list[T]:
        """Return a copy of the cached records."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def observer(self) -> ChangeObserver | None:
        """Return the deletion observer if it is still alive."""
        if self._observer_ref is None:
            return None
        return self._observer_ref()

    @observer.setter
    def observer(self, observer: ChangeObserver | None) -> None:
        """Register observer weakly; None unsubscribes."""
        self._observer_ref = None if observer is None else weakref.ref(observer)

    def load(self) -> list[T]:
        """Read the backing file into the cache.

        Returns:
            Copy of the cached records. A missing file leaves the cache as is.

        Raises:
            RecordDecodeError: If the file exists but cannot be parsed.
        """
        if not self._path.exists():
            self._loaded = True
            return self.items
        try:
            data = self._path.read_bytes()
        except OSError as error:
            raise RecordDecodeError(
                f"Failed to read records file at {self._path}: {error}.",
                self._path,
            ) from error
        self._items = decode_records(data, self._codec, self._path)
        self._loaded = True
        _LOGGER.debug("records_loaded", path=str(self._path), record_count=len(self._items))
        return self.items

    def create(self, item: T) -> None:
        """Append item and persist the whole collection.

        Raises:
            RecordWriteError: If persistence fails; the cache is unchanged.
        """
        self._reload_best_effort()
        self._commit([*self._items, item])

    def update(self, old_item: T, new_item: T) -> bool:
        """Replace the first record equal to old_item with new_item.

        Returns:
            False when old_item is absent (nothing changes), otherwise True.

        Raises:
            RecordWriteError: If persistence fails; the cache is unchanged.
        """
        self._ensure_loaded()
        try:
            index = self._items.index(old_item)
        except ValueError:
            return False
        return self.update_at(index, new_item)

    def update_at(self, index: int, item: T) -> bool:
        """Replace the record at index and persist.

        Returns:
            Always True. Failures raise instead of returning False; the
            return value only mirrors update().

        Raises:
            IndexError: If index is outside the collection.
            RecordWriteError: If persistence fails; the cache is unchanged.
        """
        self._ensure_loaded()
        staged = list(self._items)
        staged[index] = item
        self._commit(staged)
        return True

    def delete_at(self, index: int) -> T:
        """Remove the record at index, persist, then notify the observer.

        Returns:
            The removed record.

        Raises:
            IndexError: If index is outside the collection.
            RecordDeleteError: If persistence fails; the cache is unchanged
                and the observer is not notified.
        """
        self._ensure_loaded()
        staged = list(self._items)
        removed = staged.pop(index)
        try:
            self._commit(staged)
        except RecordWriteError as error:
            raise RecordDeleteError(
                f"Failed to delete record {index} from {self._path}: {error}",
                self._path,
            ) from error
        _LOGGER.info("record_deleted", path=str(self._path), index=index)
        observer = self.observer
        if observer is not None:
            observer.on_deleted(self, removed)
        elif self._observer_ref is not None:
            _LOGGER.debug("observer_released", path=str(self._path))
        return removed

    def synchronize(self, items: Iterable[T]) -> None:
        """Replace the whole collection, e.g. after reordering.

        Raises:
            RecordWriteError: If persistence fails; the cache is unchanged.
        """
        self._commit(list(items))

    def contains(self, item: T) -> bool:
        """Reload from disk and report whether an equal record is stored."""
        self._reload_best_effort()
        return item in self._items

    def clear(self) -> None:
        """Remove every record and persist the empty collection.

        Raises:
            RecordWriteError: If persistence fails; the cache is unchanged.
        """
        self._reload_best_effort()
        self._commit([])

    def _commit(self, staged: list[T]) -> None:
        """Write staged records and adopt them as the cache on success."""
        data = encode_records(staged, self._codec, self._path)
        write_bytes_atomic(self._path, data)
        self._items = staged
        self._loaded = True
        _LOGGER.debug("records_saved", path=str(self._path), record_count=len(staged))

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self._reload_best_effort()

    def _reload_best_effort(self) -> None:
        try:
            self.load()
        except RecordDecodeError as error:
            _LOGGER.warning("reload_skipped", path=str(self._path), error=str(error))
