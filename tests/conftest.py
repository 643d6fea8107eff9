"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from zigzag_codec import I8, I16, I32, I64, I128, ZigZagCodec


@pytest.fixture(params=[I8, I16, I32, I64, I128], ids=lambda codec: f"i{codec.bits}")
def codec(request: pytest.FixtureRequest) -> ZigZagCodec:
    """Each supported codec in turn."""
    return request.param


@pytest.fixture
def sample_values() -> list[int]:
    """Small signed values that fit every width."""
    return [-100, -10, -1, 0, 1, 10, 100]
