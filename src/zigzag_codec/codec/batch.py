"""Eager batch transforms into caller-supplied buffers.

Each operation comes in two separately named flavours:

- ``encode_batch``/``decode_batch`` assume the caller already guarantees
  ``len(out) >= len(values)`` and raise BufferOverrunError when that promise
  is broken.
- ``try_encode_batch``/``try_decode_batch`` check capacity as part of their
  contract and raise the recoverable BufferTooSmallError instead.

Both flavours write exactly ``len(values)`` leading slots of ``out``, in input
order, and leave every later slot untouched. Nothing is written if the buffer
is too short or any value is outside the codec's width.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import TYPE_CHECKING, Callable

from ..exceptions import BufferOverrunError, BufferTooSmallError

if TYPE_CHECKING:
    from .zigzag import ZigZagCodec


def _write_into(
    transform: Callable[[int], int], values: Sequence[int], out: MutableSequence[int]
) -> None:
    # Transform everything first so a bad value leaves ``out`` unchanged
    results = [transform(value) for value in values]
    for i, result in enumerate(results):
        out[i] = result


def encode_batch(codec: ZigZagCodec, values: Sequence[int], out: MutableSequence[int]) -> None:
    """Encode ``values`` into the leading slots of ``out``.

    Args:
        codec: Codec fixing the integer width
        values: Signed integers to encode
        out: Output buffer with at least ``len(values)`` slots

    Raises:
        BufferOverrunError: If ``out`` is shorter than ``values``
        EncodeError: If any value doesn't fit the codec's width
    """
    needed, actual = len(values), len(out)
    if actual < needed:
        raise BufferOverrunError(needed, actual)
    _write_into(codec.encode, values, out)


def decode_batch(codec: ZigZagCodec, values: Sequence[int], out: MutableSequence[int]) -> None:
    """Decode ``values`` into the leading slots of ``out``.

    Args:
        codec: Codec fixing the integer width
        values: ZigZag-encoded unsigned integers
        out: Output buffer with at least ``len(values)`` slots

    Raises:
        BufferOverrunError: If ``out`` is shorter than ``values``
        DecodeError: If any value doesn't fit the codec's width
    """
    needed, actual = len(values), len(out)
    if actual < needed:
        raise BufferOverrunError(needed, actual)
    _write_into(codec.decode, values, out)


def try_encode_batch(codec: ZigZagCodec, values: Sequence[int], out: MutableSequence[int]) -> int:
    """Encode ``values`` into ``out`` after checking its capacity.

    Args:
        codec: Codec fixing the integer width
        values: Signed integers to encode
        out: Output buffer

    Returns:
        Number of slots written (``len(values)``)

    Raises:
        BufferTooSmallError: If ``out`` is shorter than ``values``
        EncodeError: If any value doesn't fit the codec's width

    Example:
        >>> out = [0] * 3
        >>> try_encode_batch(I32, [0, -1, 1], out)
        3
        >>> out
        [0, 1, 2]
    """
    needed, actual = len(values), len(out)
    if actual < needed:
        raise BufferTooSmallError(needed, actual)
    _write_into(codec.encode, values, out)
    return needed


def try_decode_batch(codec: ZigZagCodec, values: Sequence[int], out: MutableSequence[int]) -> int:
    """Decode ``values`` into ``out`` after checking its capacity.

    Args:
        codec: Codec fixing the integer width
        values: ZigZag-encoded unsigned integers
        out: Output buffer

    Returns:
        Number of slots written (``len(values)``)

    Raises:
        BufferTooSmallError: If ``out`` is shorter than ``values``
        DecodeError: If any value doesn't fit the codec's width
    """
    needed, actual = len(values), len(out)
    if actual < needed:
        raise BufferTooSmallError(needed, actual)
    _write_into(codec.decode, values, out)
    return needed


def encode_all(codec: ZigZagCodec, values: Iterable[int]) -> list[int]:
    """Encode every value into a newly allocated list."""
    return [codec.encode(value) for value in values]


def decode_all(codec: ZigZagCodec, values: Iterable[int]) -> list[int]:
    """Decode every value into a newly allocated list."""
    return [codec.decode(value) for value in values]
