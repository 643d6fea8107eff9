"""Fixed-width two's complement helpers.

Python integers are unbounded, so the codec pins values to ``bits`` bits
through these helpers. All functions are pure and work on values, not bytes.
"""

from __future__ import annotations

from ..exceptions import DecodeError, EncodeError


def _check_bits(bits: int) -> None:
    if isinstance(bits, bool) or not isinstance(bits, int) or bits < 1:
        raise ValueError(f"bits must be a positive integer, got {bits!r}")


def mask(bits: int) -> int:
    """Return the all-ones bit pattern of the given width.

    Args:
        bits: Bit width (>= 1)

    Returns:
        ``2**bits - 1``

    Raises:
        ValueError: If bits is not a positive integer
    """
    _check_bits(bits)
    return (1 << bits) - 1


def signed_min(bits: int) -> int:
    """Return the most negative value representable in ``bits`` bits."""
    _check_bits(bits)
    return -(1 << (bits - 1))


def signed_max(bits: int) -> int:
    """Return the largest signed value representable in ``bits`` bits."""
    _check_bits(bits)
    return (1 << (bits - 1)) - 1


def unsigned_max(bits: int) -> int:
    """Return the largest unsigned value representable in ``bits`` bits."""
    return mask(bits)


def to_unsigned(value: int, bits: int) -> int:
    """Reinterpret a signed value's bit pattern as unsigned.

    The bit pattern is kept as-is; only its interpretation changes. This is
    the two's complement conversion, not a value-preserving cast.

    Args:
        value: Signed integer in the width's signed range
        bits: Bit width

    Returns:
        Unsigned integer with the same ``bits``-bit pattern

    Raises:
        EncodeError: If value doesn't fit in ``bits`` bits as a signed integer

    Example:
        >>> to_unsigned(-1, 8)
        255
        >>> to_unsigned(-128, 8)
        128
    """
    check_signed(value, bits)
    return value & mask(bits)


def to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned value's bit pattern as signed.

    Args:
        value: Unsigned integer in the width's unsigned range
        bits: Bit width

    Returns:
        Signed integer with the same ``bits``-bit pattern

    Raises:
        DecodeError: If value doesn't fit in ``bits`` bits as an unsigned integer

    Example:
        >>> to_signed(255, 8)
        -1
        >>> to_signed(127, 8)
        127
    """
    check_unsigned(value, bits)
    # Check sign bit (MSB)
    if value & (1 << (bits - 1)):
        return value - (1 << bits)
    return value


def check_signed(value: int, bits: int) -> None:
    """Validate that ``value`` is a signed integer of width ``bits``.

    Raises:
        TypeError: If value is not an int (bool is rejected)
        EncodeError: If value is outside the signed range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")

    lo = signed_min(bits)
    hi = signed_max(bits)
    if value < lo or value > hi:
        raise EncodeError(
            f"Value {value} doesn't fit in {bits} bits (range: {lo} to {hi})"
        )


def check_unsigned(value: int, bits: int) -> None:
    """Validate that ``value`` is an unsigned integer of width ``bits``.

    Raises:
        TypeError: If value is not an int (bool is rejected)
        DecodeError: If value is negative or above the unsigned maximum
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")

    hi = unsigned_max(bits)
    if value < 0 or value > hi:
        raise DecodeError(
            f"Value {value} doesn't fit in {bits} bits unsigned (range: 0 to {hi})"
        )
