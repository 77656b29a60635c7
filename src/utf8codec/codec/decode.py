"""Decoding one code point at a time, and walking a buffer with a cursor."""

from __future__ import annotations

from collections.abc import Iterator

from utf8codec._utils import _resolve_size, _validate_start_index
from utf8codec.codec import INVALID_CODE_POINT, BytesLike, CodePoint
from utf8codec.codec.classify import classify_byte, classify_scalar
from utf8codec.enums import SEQUENCE_LENGTH, OctetType


def _decode_at(buffer: BytesLike, start_index: int, length: int) -> CodePoint:
    """Decode the sequence at *start_index*; arguments are already checked."""
    lead = buffer[start_index]
    lead_type = classify_byte(lead)
    if lead_type is OctetType.ONE:
        return CodePoint(lead, OctetType.ONE)

    # NEXT and INVALID cannot start a sequence.
    seq_len = SEQUENCE_LENGTH.get(lead_type, 0)
    if seq_len == 0:
        return INVALID_CODE_POINT

    # Truncated: the sequence would run past the end of the buffer.
    end = start_index + seq_len
    if end > length:
        return INVALID_CODE_POINT

    # The lead byte carries 7 - seq_len payload bits, each continuation 6.
    value = lead & ((1 << (7 - seq_len)) - 1)
    for i in range(start_index + 1, end):
        byte = buffer[i]
        if classify_byte(byte) is not OctetType.NEXT:
            return INVALID_CODE_POINT
        value = (value << 6) | (byte & 0x3F)

    # Reject overlong forms, surrogates and values above U+10FFFF: the
    # sequence length must be the one the scalar itself requires.
    if classify_scalar(value) is not lead_type:
        return INVALID_CODE_POINT
    return CodePoint(value, lead_type)


def decode_next(
    buffer: BytesLike, start_index: int = 0, *, length: int | None = None
) -> CodePoint:
    """Decode the code point that starts at *start_index*.

    Never reads at or beyond *length*.  The buffer is not modified and no
    cursor is advanced: the caller moves on by :attr:`CodePoint.byte_count`
    bytes after a valid result.

    :param buffer: The bytes to decode.
    :param start_index: Offset of the lead byte.
    :param length: Number of bytes of *buffer* that may be read.  Defaults to
        ``len(buffer)``.
    :returns: The decoded :class:`CodePoint`, or :data:`INVALID_CODE_POINT` if
        the sequence is malformed, truncated, overlong, a surrogate or above
        ``U+10FFFF``.
    :raises ValueError: If *start_index* is not less than *length*, or
        *length* exceeds the buffer.
    """
    length = _resolve_size(buffer, length, "length")
    _validate_start_index(start_index)
    if start_index >= length:
        msg = f"start_index ({start_index}) must be less than length ({length})"
        raise ValueError(msg)
    return _decode_at(buffer, start_index, length)


def _iter_from(
    buffer: BytesLike, start_index: int, length: int
) -> Iterator[tuple[int, CodePoint]]:
    index = start_index
    while index < length:
        point = _decode_at(buffer, index, length)
        yield index, point
        if not point.is_valid:
            return
        index += point.byte_count


def iter_code_points(
    buffer: BytesLike, start_index: int = 0, *, length: int | None = None
) -> Iterator[tuple[int, CodePoint]]:
    """Iterate over ``(index, code_point)`` pairs from *start_index*.

    The cursor advances by each code point's byte count.  On the first
    malformed sequence the iterator yields its index paired with
    :data:`INVALID_CODE_POINT` and stops.

    Arguments are checked eagerly, before the first item is requested.

    :raises ValueError: If *start_index* is greater than *length*, or
        *length* exceeds the buffer.
    """
    length = _resolve_size(buffer, length, "length")
    _validate_start_index(start_index)
    if start_index > length:
        msg = f"start_index ({start_index}) exceeds length ({length})"
        raise ValueError(msg)
    return _iter_from(buffer, start_index, length)


def count_code_points(buffer: BytesLike, *, length: int | None = None) -> int:
    """Count the code points in *buffer*, stopping at the first malformed one.

    For a malformed buffer the result is the number of valid code points
    before the first failure.  A count says nothing about validity; use
    :func:`~utf8codec.codec.validate.validate_bytes` for that.
    """
    count = 0
    for _, point in iter_code_points(buffer, length=length):
        if not point.is_valid:
            break
        count += 1
    return count
