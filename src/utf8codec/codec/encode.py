"""Encoding scalar values into caller-supplied byte buffers."""

from __future__ import annotations

from collections.abc import Sequence

from utf8codec._utils import _resolve_size, _validate_start_index
from utf8codec.codec import CodePoint
from utf8codec.codec.classify import byte_count_for, classify_scalar
from utf8codec.enums import OctetType

# Fixed high bits of the lead byte, and the mask for the payload bits it
# carries, keyed by sequence length.
_LEAD_PREFIX: dict[int, int] = {2: 0xC0, 3: 0xE0, 4: 0xF0}
_LEAD_MASK: dict[int, int] = {2: 0x1F, 3: 0x0F, 4: 0x07}


def _emit(
    dst: bytearray | memoryview,
    capacity: int,
    start_index: int,
    value: int,
    octet_type: OctetType,
) -> int:
    seq_len = byte_count_for(octet_type)
    if seq_len == 0:
        return 0
    if start_index + seq_len > capacity:
        return 0

    if seq_len == 1:
        dst[start_index] = value & 0x7F
        return 1

    shift = 6 * (seq_len - 1)
    lead_bits = (value >> shift) & _LEAD_MASK[seq_len]
    dst[start_index] = _LEAD_PREFIX[seq_len] | lead_bits
    for i in range(start_index + 1, start_index + seq_len):
        shift -= 6
        dst[i] = 0x80 | ((value >> shift) & 0x3F)
    return seq_len


def write_code_point(
    dst: bytearray | memoryview,
    start_index: int,
    value: int,
    *,
    capacity: int | None = None,
) -> int:
    """Write the UTF-8 encoding of *value* into *dst* at *start_index*.

    Writes are all-or-nothing: when *value* cannot be encoded, or the whole
    sequence does not fit below *capacity*, *dst* is left untouched.

    :param dst: Destination buffer.
    :param start_index: Offset of the first byte to write.
    :param value: The scalar value to encode.
    :param capacity: Number of bytes of *dst* that may be written.  Defaults
        to ``len(dst)``.
    :returns: The number of bytes written (``1``-``4``), or ``0`` if nothing
        was written.
    :raises ValueError: If *start_index* is negative or *capacity* exceeds
        the buffer.
    """
    capacity = _resolve_size(dst, capacity, "capacity")
    _validate_start_index(start_index)
    return _emit(dst, capacity, start_index, value, classify_scalar(value))


def write_decoded(
    dst: bytearray | memoryview,
    start_index: int,
    code_point: CodePoint,
    *,
    capacity: int | None = None,
) -> int:
    """Write an already classified *code_point* into *dst* at *start_index*.

    Same as :func:`write_code_point`, but the sequence length comes from
    ``code_point.octet_type`` instead of classifying the value again.  Only
    the payload bits that fit the given length are written.

    :returns: The number of bytes written, or ``0`` if the code point is not
        valid or does not fit.
    """
    capacity = _resolve_size(dst, capacity, "capacity")
    _validate_start_index(start_index)
    return _emit(dst, capacity, start_index, code_point.value, code_point.octet_type)


def encoded_length(values: Sequence[int], *, count: int | None = None) -> int:
    """Return the number of bytes needed to encode the first *count* values.

    Values that cannot be encoded contribute ``0``, matching what
    :func:`write_code_point` writes for them.
    """
    count = _resolve_size(values, count, "count")
    return sum(byte_count_for(classify_scalar(values[i])) for i in range(count))
