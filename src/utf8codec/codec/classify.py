"""Classification of raw bytes and scalar values into octet types."""

from __future__ import annotations

from utf8codec.codec import MAX_SCALAR, SURROGATE_MAX, SURROGATE_MIN
from utf8codec.enums import SEQUENCE_LENGTH, OctetType


def classify_byte(byte: int) -> OctetType:
    """Classify a byte by its high bits.

    Only the bit pattern is inspected.  ``0xC0``/``0xC1`` classify as
    :attr:`OctetType.TWO` and ``0xF5``-``0xF7`` as :attr:`OctetType.FOUR`; the
    sequences they start are rejected when decoded.

    :param byte: An integer in ``0..255``.
    :returns: The :class:`OctetType` of *byte*.
    """
    if byte < 0x80:  # 0xxxxxxx
        return OctetType.ONE
    if byte < 0xC0:  # 10xxxxxx
        return OctetType.NEXT
    if byte < 0xE0:  # 110xxxxx
        return OctetType.TWO
    if byte < 0xF0:  # 1110xxxx
        return OctetType.THREE
    if byte < 0xF8:  # 11110xxx
        return OctetType.FOUR
    return OctetType.INVALID


def classify_scalar(value: int) -> OctetType:
    """Return the length category of the shortest encoding of *value*.

    :param value: A scalar value.
    :returns: :attr:`OctetType.ONE` through :attr:`OctetType.FOUR`, or
        :attr:`OctetType.INVALID` for surrogates, negative values and values
        above ``0x10FFFF``.
    """
    if value < 0:
        return OctetType.INVALID
    if value < 0x80:
        return OctetType.ONE
    if value < 0x800:
        return OctetType.TWO
    if value < 0x10000:
        if SURROGATE_MIN <= value <= SURROGATE_MAX:
            return OctetType.INVALID
        return OctetType.THREE
    if value <= MAX_SCALAR:
        return OctetType.FOUR
    return OctetType.INVALID


def byte_count_for(octet_type: OctetType) -> int:
    """Return the sequence length for *octet_type*.

    ``0`` is returned for :attr:`OctetType.NEXT` and :attr:`OctetType.INVALID`
    and means "not a valid sequence length"; callers branch on the type before
    using the count.
    """
    return SEQUENCE_LENGTH.get(octet_type, 0)
