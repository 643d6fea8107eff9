"""Lazy (pull-based) streaming transforms.

The iterators returned here compute one output per source element, only when
the consumer asks for it, and hold no state besides the source iterator. They
work on infinite sources and compose with filter(), zip(), itertools, etc.

Example:
    ```python
    from itertools import count, islice

    from zigzag_codec import I64

    # 0, -1, -2, ... encoded on demand
    negatives = (-n for n in count())
    list(islice(I64.encode_lazy(negatives), 4))  # [0, 1, 3, 5]
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .zigzag import ZigZagCodec


def encode_lazy(codec: ZigZagCodec, source: Iterable[int]) -> Iterator[int]:
    """Return an iterator encoding each value pulled from ``source``.

    Args:
        codec: Codec fixing the integer width
        source: Signed integers (finite or infinite)

    Returns:
        Iterator of encoded values, in source order

    Note:
        A value outside the codec's width raises EncodeError when that
        element is pulled, not when the iterator is created.
    """
    return map(codec.encode, source)


def decode_lazy(codec: ZigZagCodec, source: Iterable[int]) -> Iterator[int]:
    """Return an iterator decoding each value pulled from ``source``.

    Errors are deferred to the pull, as in encode_lazy().
    """
    return map(codec.decode, source)
