"""zigzag_codec: ZigZag encoding for fixed-width integers

ZigZag encoding maps signed integers to unsigned integers of the same width so
that values of small magnitude, whether positive or negative, map to small
unsigned values. It is the usual preprocessing step before variable-length
integer encoding (varints), whose cost grows with magnitude.

Key Features:
- 8, 16, 32, 64 and 128-bit widths from one shared formula
- Bit-exact round trip for every representable value, extremes included
- Checked and unchecked batch transforms into caller-supplied buffers
- Lazy streaming transforms for unbounded inputs

Quick Start:
    >>> from zigzag_codec import I32, codec_for
    >>>
    >>> [I32.encode(n) for n in (0, -1, 1, -2, 2)]
    [0, 1, 2, 3, 4]
    >>> I32.decode(3)
    -2
    >>> codec_for(8).encode(-128)
    255
"""

from __future__ import annotations

from .codec import (
    I8,
    I16,
    I32,
    I64,
    I128,
    SUPPORTED_WIDTHS,
    ZigZagCodec,
    codec_for,
    to_signed,
    to_unsigned,
)
from .exceptions import (
    BufferOverrunError,
    BufferTooSmallError,
    DecodeError,
    EncodeError,
    ZigZagError,
)

__version__ = "0.1.0"

__all__ = [
    # Core API
    "ZigZagCodec",
    "codec_for",
    "SUPPORTED_WIDTHS",
    # Width instances
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    # Bit-pattern helpers
    "to_signed",
    "to_unsigned",
    # Exceptions
    "ZigZagError",
    "EncodeError",
    "DecodeError",
    "BufferTooSmallError",
    "BufferOverrunError",
    # Version
    "__version__",
]
