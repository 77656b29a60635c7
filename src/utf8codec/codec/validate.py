"""Well-formedness checks for byte buffers and scalar-value buffers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from utf8codec._utils import _resolve_size
from utf8codec.codec import BytesLike
from utf8codec.codec.classify import classify_scalar
from utf8codec.codec.decode import iter_code_points
from utf8codec.enums import OctetType

logger = logging.getLogger(__name__)


def validate_bytes(buffer: BytesLike, *, length: int | None = None) -> bool:
    """Return ``True`` if the first *length* bytes are well-formed UTF-8.

    Decoding starts at index 0 and must land exactly on *length*; a trailing
    partial sequence makes the buffer invalid.  An empty buffer is valid.
    """
    for index, point in iter_code_points(buffer, length=length):
        if not point.is_valid:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "malformed UTF-8 sequence at byte %d (lead 0x%02X)",
                    index,
                    buffer[index],
                )
            return False
    return True


def validate_scalar(value: int) -> bool:
    """Return ``True`` if *value* is a Unicode scalar value (not a surrogate)."""
    return classify_scalar(value) is not OctetType.INVALID


def validate_scalars(values: Sequence[int], *, count: int | None = None) -> bool:
    """Return ``True`` if the first *count* values are all valid scalars."""
    count = _resolve_size(values, count, "count")
    return all(validate_scalar(values[i]) for i in range(count))
