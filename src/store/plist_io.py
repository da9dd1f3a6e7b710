"""Binary property-list IO for record collections.

This module isolates plist encoding, decoding and atomic file replacement.
It keeps the record store focused on cache and notification flow.
"""

from __future__ import annotations

import os
import plistlib
import struct
import tempfile
from pathlib import Path
from typing import Any, Sequence, TypeVar
from xml.parsers.expat import ExpatError

from core.constants import TEMP_FILE_SUFFIX
from core.errors import RecordDecodeError, RecordEncodeError, RecordWriteError
from core.types import RecordCodec

T = TypeVar("T")


def encode_records(records: Sequence[T], codec: RecordCodec[T], path: Path) -> bytes:
    """Encode a whole record sequence as one binary plist array.

    Args:
        records: Ordered records to encode.
        codec: Record payload codec.
        path: Target file, used in error messages.

    Returns:
        Encoded plist bytes.

    Raises:
        RecordEncodeError: If a record cannot be represented as a plist.
    """
    try:
        payloads = [codec.to_payload(record) for record in records]
        return plistlib.dumps(payloads, fmt=plistlib.FMT_BINARY)
    except (TypeError, ValueError, OverflowError) as error:
        raise RecordEncodeError(
            f"Failed to encode {len(records)} records for {path}: {error}. "
            "Record payloads may only hold property-list types.",
            path,
        ) from error


def decode_records(data: bytes, codec: RecordCodec[T], path: Path) -> list[T]:
    """Decode plist bytes into an ordered record list.

    Args:
        data: Raw file contents.
        codec: Record payload codec.
        path: Source file, used in error messages.

    Returns:
        Parsed records in stored order.

    Raises:
        RecordDecodeError: If bytes are not a plist array of record payloads.
    """
    try:
        payload = plistlib.loads(data)
    except (
        ValueError,
        TypeError,
        AttributeError,
        ExpatError,
        struct.error,
        OverflowError,
        IndexError,
    ) as error:
        raise RecordDecodeError(
            f"Failed to parse records file at {path}: {error}. "
            "Delete or restore the file to continue.",
            path,
        ) from error
    if not isinstance(payload, list):
        raise RecordDecodeError(
            f"Failed to parse records file at {path}: "
            "expected an array at top level.",
            path,
        )
    return [_decode_record(item, index, codec, path) for index, item in enumerate(payload)]


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Replace path with data so readers never observe a partial file.

    The bytes go to a temp file in the same directory, which is flushed,
    synced and then renamed over the target.

    Args:
        path: Target file path.
        data: Full file contents.

    Raises:
        RecordWriteError: If any filesystem step fails.
    """
    temp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handle, temp_name = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=TEMP_FILE_SUFFIX,
        )
        with os.fdopen(handle, "wb") as temp_file:
            temp_file.write(data)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.replace(temp_name, path)
        temp_name = None
    except OSError as error:
        raise RecordWriteError(
            f"Failed to write records file at {path}: {error}. "
            "Check the data root is a writable directory.",
            path,
        ) from error
    finally:
        if temp_name is not None:
            Path(temp_name).unlink(missing_ok=True)


def _decode_record(item: Any, index: int, codec: RecordCodec[T], path: Path) -> T:
    if not isinstance(item, dict):
        raise RecordDecodeError(
            f"Failed to parse record {index} in {path}: expected a dictionary.",
            path,
        )
    try:
        return codec.from_payload(item)
    except (KeyError, TypeError, ValueError) as error:
        raise RecordDecodeError(
            f"Failed to parse record {index} in {path}: {error!r}.",
            path,
        ) from error
