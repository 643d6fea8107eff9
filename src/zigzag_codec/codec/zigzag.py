"""ZigZag codec for fixed-width integers.

ZigZag encoding maps signed integers to unsigned integers of the same width so
that values of small magnitude, positive or negative, stay small:

    0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, 2 -> 4, ...

One formula serves every width. A ZigZagCodec instance binds that formula to a
width W and the paired signed/unsigned ranges; the shared instances I8, I16,
I32, I64 and I128 cover every supported width.

Example:
    >>> from zigzag_codec import I32
    >>> I32.encode(-1)
    1
    >>> I32.decode(1)
    -1
    >>> I32.encode(-(2**31))
    4294967295
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict

from . import batch, lazy
from .bits import check_signed, check_unsigned, mask, signed_max, signed_min, to_signed

Width = Literal[8, 16, 32, 64, 128]

SUPPORTED_WIDTHS: tuple[int, ...] = (8, 16, 32, 64, 128)


class ZigZagCodec(BaseModel):
    """ZigZag encoder/decoder bound to one integer width.

    Instances are immutable and compare and hash by width, so they can be
    shared freely (including across threads).

    Attributes:
        bits: Width W of both the signed input and the unsigned output
    """

    model_config = ConfigDict(
        # Immutable, hashable value object
        frozen=True,
        # Forbid fields other than the width
        extra="forbid",
    )

    bits: Width

    @property
    def signed_min(self) -> int:
        """Most negative signed value of this width."""
        return signed_min(self.bits)

    @property
    def signed_max(self) -> int:
        """Largest signed value of this width."""
        return signed_max(self.bits)

    @property
    def unsigned_max(self) -> int:
        """Largest unsigned value of this width."""
        return mask(self.bits)

    @property
    def mask(self) -> int:
        """All-ones bit pattern of this width."""
        return mask(self.bits)

    def encode(self, value: int) -> int:
        """Encode a signed integer to its ZigZag unsigned form.

        ``(value << 1) ^ (value >> (W - 1))`` truncated to W bits. Python's
        ``>>`` on int sign-extends, so the right shift is 0 for non-negative
        values and -1 (all ones) for negative ones, which inverts every bit of
        the left-shifted value. Masking to W bits drops the overflowed top bit
        and reinterprets the pattern as unsigned.

        Args:
            value: Signed integer in ``[signed_min, signed_max]``

        Returns:
            Unsigned integer in ``[0, unsigned_max]``

        Raises:
            TypeError: If value is not an int
            EncodeError: If value doesn't fit in W bits
        """
        check_signed(value, self.bits)
        return ((value << 1) ^ (value >> (self.bits - 1))) & ((1 << self.bits) - 1)

    def decode(self, value: int) -> int:
        """Decode a ZigZag unsigned integer back to its signed value.

        ``(value >> 1) ^ -(value & 1)``. The shifted value always has its top
        bit clear, so it is already a valid signed value of width W, and
        ``-(value & 1)`` is 0 or -1.

        Args:
            value: Unsigned integer in ``[0, unsigned_max]``

        Returns:
            Signed integer in ``[signed_min, signed_max]``

        Raises:
            TypeError: If value is not an int
            DecodeError: If value doesn't fit in W bits
        """
        check_unsigned(value, self.bits)
        return (value >> 1) ^ -(value & 1)

    def decode_masked(self, value: int) -> int:
        """Decode using explicit W-bit reinterpretation at every step.

        Bit-identical to decode(); kept as the spelled-out form of the
        transform, with each intermediate pinned to W bits.
        """
        check_unsigned(value, self.bits)
        shr1 = to_signed(value >> 1, self.bits)
        neg_mask = to_signed(-(value & 1) & self.mask, self.bits)
        return shr1 ^ neg_mask

    # Batch (eager) transforms

    def encode_batch(self, values: Sequence[int], out: MutableSequence[int]) -> None:
        """Encode ``values`` into ``out``; see batch.encode_batch()."""
        batch.encode_batch(self, values, out)

    def decode_batch(self, values: Sequence[int], out: MutableSequence[int]) -> None:
        """Decode ``values`` into ``out``; see batch.decode_batch()."""
        batch.decode_batch(self, values, out)

    def try_encode_batch(self, values: Sequence[int], out: MutableSequence[int]) -> int:
        """Encode ``values`` into ``out``; see batch.try_encode_batch()."""
        return batch.try_encode_batch(self, values, out)

    def try_decode_batch(self, values: Sequence[int], out: MutableSequence[int]) -> int:
        """Decode ``values`` into ``out``; see batch.try_decode_batch()."""
        return batch.try_decode_batch(self, values, out)

    def encode_all(self, values: Iterable[int]) -> list[int]:
        """Encode every value into a new list."""
        return batch.encode_all(self, values)

    def decode_all(self, values: Iterable[int]) -> list[int]:
        """Decode every value into a new list."""
        return batch.decode_all(self, values)

    # Lazy (streaming) transforms

    def encode_lazy(self, source: Iterable[int]) -> Iterator[int]:
        """Lazily encode ``source``; see lazy.encode_lazy()."""
        return lazy.encode_lazy(self, source)

    def decode_lazy(self, source: Iterable[int]) -> Iterator[int]:
        """Lazily decode ``source``; see lazy.decode_lazy()."""
        return lazy.decode_lazy(self, source)


I8 = ZigZagCodec(bits=8)
I16 = ZigZagCodec(bits=16)
I32 = ZigZagCodec(bits=32)
I64 = ZigZagCodec(bits=64)
I128 = ZigZagCodec(bits=128)

_CODECS: dict[int, ZigZagCodec] = {codec.bits: codec for codec in (I8, I16, I32, I64, I128)}


def codec_for(bits: int) -> ZigZagCodec:
    """Return the shared codec for a supported width.

    Args:
        bits: One of 8, 16, 32, 64, 128

    Returns:
        The module-level ZigZagCodec instance for that width

    Raises:
        ValueError: If the width is not supported

    Example:
        >>> codec_for(16) is I16
        True
    """
    try:
        return _CODECS[bits]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unsupported width {bits!r}; expected one of {SUPPORTED_WIDTHS}"
        ) from None
