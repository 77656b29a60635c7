"""Internal argument checks shared by the codec operations.

Malformed *data* is never an error in this package; it is reported through
return values.  These helpers reject malformed *calls*: offsets and sizes that
do not describe a region of the buffer the caller passed in.
"""

from __future__ import annotations

from collections.abc import Sized


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _resolve_size(buffer: Sized, size: int | None, name: str) -> int:
    """Return *size*, defaulting to ``len(buffer)``.

    :raises ValueError: If *size* is not an integer in ``0..len(buffer)``.
    """
    if size is None:
        return len(buffer)
    if not _is_int(size) or size < 0:
        msg = f"{name} must be a non-negative integer"
        raise ValueError(msg)
    if size > len(buffer):
        msg = f"{name} ({size}) exceeds buffer size ({len(buffer)})"
        raise ValueError(msg)
    return size


def _validate_start_index(start_index: int) -> None:
    """Raise ValueError if *start_index* is not a non-negative integer."""
    if not _is_int(start_index) or start_index < 0:
        msg = "start_index must be a non-negative integer"
        raise ValueError(msg)


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if not _is_int(max_bytes) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)
