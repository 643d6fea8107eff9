"""Exception hierarchy for zigzag_codec.

Recoverable errors inherit from ZigZagError so callers can catch any
zigzag_codec-specific failure in one place. BufferOverrunError is the one
exception outside that hierarchy: it signals a broken caller contract on the
unchecked batch path and is not meant to be handled.
"""

from __future__ import annotations


class ZigZagError(Exception):
    """Base exception for all recoverable zigzag_codec errors."""

    pass


class EncodeError(ZigZagError, ValueError):
    """Raised when a signed value does not fit the codec's width.

    Examples:
        - 128 passed to the 8-bit codec
        - -(2**63) - 1 passed to the 64-bit codec
    """

    pass


class DecodeError(ZigZagError, ValueError):
    """Raised when an unsigned value does not fit the codec's width.

    Examples:
        - 256 passed to the 8-bit codec
        - A negative value passed to any codec's decode
    """

    pass


class BufferTooSmallError(ZigZagError):
    """Raised by the checked batch operations when the output buffer is too short.

    Attributes:
        needed: Number of input values (slots required)
        actual: Capacity of the supplied output buffer
    """

    def __init__(self, needed: int, actual: int) -> None:
        self.needed = needed
        self.actual = actual
        super().__init__(
            f"Output buffer too small: need {needed} slots, got {actual}"
        )


class BufferOverrunError(IndexError):
    """Raised by the unchecked batch operations when the output buffer is too short.

    The unchecked operations assume the caller has already guaranteed
    ``len(out) >= len(values)``. Breaking that promise is a programming error,
    so this exception deliberately does not derive from ZigZagError. Callers
    that want to recover should use the ``try_*`` variants instead.

    Attributes:
        needed: Number of input values (slots required)
        actual: Capacity of the supplied output buffer
    """

    def __init__(self, needed: int, actual: int) -> None:
        self.needed = needed
        self.actual = actual
        super().__init__(
            f"Output buffer overrun: {needed} values into {actual} slots "
            f"(use the try_* variant for a recoverable check)"
        )
