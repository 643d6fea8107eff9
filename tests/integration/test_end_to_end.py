"""End-to-end tests for realistic ZigZag workflows."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import pytest

from zigzag_codec import (
    I16,
    I32,
    I64,
    BufferTooSmallError,
    codec_for,
)


def _deltas(values: Iterable[int]) -> Iterator[int]:
    previous = 0
    for value in values:
        yield value - previous
        previous = value


def _undeltas(deltas: Iterable[int]) -> Iterator[int]:
    total = 0
    for delta in deltas:
        total += delta
        yield total


def _varint_length(value: int) -> int:
    """Number of 7-bit groups a LEB128 varint would need for ``value``."""
    return max(1, -(-value.bit_length() // 7))


class TestDeltaPipeline:
    """Test ZigZag as the signed-delta stage before a varint writer."""

    def test_sensor_series_roundtrip(self) -> None:
        """Test a noisy depth series survives delta + zigzag both ways."""
        depth_cm = [1500, 1502, 1499, 1497, 1503, 1510, 1508, 1508, 1495]

        encoded = list(I32.encode_lazy(_deltas(depth_cm)))
        restored = list(_undeltas(I32.decode_lazy(encoded)))

        assert restored == depth_cm

    def test_small_deltas_stay_small(self) -> None:
        """Test negative deltas don't blow up to full-width unsigned values."""
        series = [0, -1, -3, -2, -6, -4, -4]
        encoded = I64.encode_all(_deltas(series))

        assert max(encoded) < 16
        assert all(_varint_length(value) == 1 for value in encoded)

        # Reinterpreting -1 as unsigned would need ten varint bytes
        assert _varint_length((-1) & I64.mask) == 10

    def test_preallocated_buffers(self) -> None:
        """Test reusing one preallocated buffer across chunks."""
        stream = list(range(-20, 20))
        buffer = [0] * 8
        restored: list[int] = []

        for start in range(0, len(stream), 8):
            chunk = stream[start : start + 8]
            written = I16.try_encode_batch(chunk, buffer)
            restored.extend(I16.decode_all(buffer[:written]))

        assert restored == stream

    def test_undersized_buffer_recovery(self) -> None:
        """Test falling back to allocation when the checked batch reports a short buffer."""
        values = [3, -3, 4, -4, 5, -5, 6]
        buffer = [0] * 3

        try:
            I32.try_encode_batch(values, buffer)
        except BufferTooSmallError as e:
            assert (e.needed, e.actual) == (7, 3)
            buffer = [0] * e.needed
            I32.try_encode_batch(values, buffer)

        assert buffer == [6, 5, 8, 7, 10, 9, 12]


@pytest.mark.parametrize("bits", [8, 16, 32, 64, 128])
def test_width_extremes_through_every_path(bits: int) -> None:
    """Test the extremes agree across single, batch and lazy paths."""
    codec = codec_for(bits)
    values = [codec.signed_min, -1, 0, 1, codec.signed_max]
    expected = [codec.unsigned_max, 1, 0, 2, codec.unsigned_max - 1]

    out = [0] * len(values)
    codec.encode_batch(values, out)

    assert out == expected
    assert list(codec.encode_lazy(values)) == expected
    assert codec.decode_all(expected) == values
