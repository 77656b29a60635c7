"""Enumerations for utf8codec."""

import enum


class OctetType(enum.Enum):
    """Byte-length category of a UTF-8 lead byte or of a Unicode scalar value.

    ``ONE`` through ``FOUR`` give the length of the encoded sequence.
    ``NEXT`` marks a continuation byte, which may only follow a lead byte.
    ``INVALID`` marks a byte that never appears in UTF-8, or a scalar value
    that cannot be encoded.
    """

    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    NEXT = 4
    INVALID = 5


#: Encoded sequence length for each lead type.  ``NEXT`` and ``INVALID`` have
#: no sequence length and no entry.
SEQUENCE_LENGTH: dict[OctetType, int] = {
    OctetType.ONE: 1,
    OctetType.TWO: 2,
    OctetType.THREE: 3,
    OctetType.FOUR: 4,
}
