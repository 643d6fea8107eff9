"""ZigZag codec for zigzag_codec.

This module provides the width-parameterized ZigZag transform together with
its batch and lazy variants.
"""

from __future__ import annotations

from .bits import mask, signed_max, signed_min, to_signed, to_unsigned, unsigned_max
from .zigzag import I8, I16, I32, I64, I128, SUPPORTED_WIDTHS, ZigZagCodec, codec_for

__all__ = [
    "ZigZagCodec",
    "codec_for",
    "SUPPORTED_WIDTHS",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "mask",
    "signed_min",
    "signed_max",
    "unsigned_max",
    "to_signed",
    "to_unsigned",
]
