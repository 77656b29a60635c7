"""UTF-8 codec primitives and shared types."""

from __future__ import annotations

import dataclasses
from typing import TypeAlias

from utf8codec.enums import SEQUENCE_LENGTH, OctetType

#: Largest Unicode scalar value.
MAX_SCALAR: int = 0x10FFFF

#: Inclusive bounds of the UTF-16 surrogate range, which UTF-8 must not encode.
SURROGATE_MIN: int = 0xD800
SURROGATE_MAX: int = 0xDFFF

#: Buffers the decoder and validators read from.  Indexing must yield ints.
BytesLike: TypeAlias = bytes | bytearray | memoryview


@dataclasses.dataclass(frozen=True, slots=True)
class CodePoint:
    """A single decoded code point.

    Frozen dataclass pairing a scalar value with the octet type of the
    sequence it was decoded from.  A failed decode is always
    ``CodePoint(0, OctetType.INVALID)``.
    """

    value: int
    octet_type: OctetType

    @property
    def is_valid(self) -> bool:
        """Whether this is a successfully decoded code point."""
        return self.octet_type in SEQUENCE_LENGTH

    @property
    def byte_count(self) -> int:
        """Number of bytes the sequence occupies, or ``0`` if not valid."""
        return SEQUENCE_LENGTH.get(self.octet_type, 0)


INVALID_CODE_POINT = CodePoint(value=0, octet_type=OctetType.INVALID)
