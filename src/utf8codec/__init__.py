"""Low-level UTF-8 codec: classify, decode, encode and validate."""

from __future__ import annotations

from utf8codec.codec import (
    INVALID_CODE_POINT,
    MAX_SCALAR,
    SURROGATE_MAX,
    SURROGATE_MIN,
    CodePoint,
)
from utf8codec.codec.classify import byte_count_for, classify_byte, classify_scalar
from utf8codec.codec.decode import count_code_points, decode_next, iter_code_points
from utf8codec.codec.encode import encoded_length, write_code_point, write_decoded
from utf8codec.codec.validate import validate_bytes, validate_scalar, validate_scalars
from utf8codec.enums import OctetType

__version__ = "1.0.0"
__all__ = [
    "INVALID_CODE_POINT",
    "MAX_SCALAR",
    "SURROGATE_MAX",
    "SURROGATE_MIN",
    "CodePoint",
    "OctetType",
    "byte_count_for",
    "classify_byte",
    "classify_scalar",
    "count_code_points",
    "decode_next",
    "encoded_length",
    "iter_code_points",
    "validate_bytes",
    "validate_scalar",
    "validate_scalars",
    "write_code_point",
    "write_decoded",
]
