"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from mpcodec import DecodeOptions, EncodeOptions


@pytest.fixture
def bin_options() -> EncodeOptions:
    """Encoder options with separate str/bin tags."""
    return EncodeOptions(tag_binary_distinctly=True)


@pytest.fixture
def strict_options() -> DecodeOptions:
    """Decoder options that reject malformed text."""
    return DecodeOptions(require_utf8=True)


@pytest.fixture
def nested_payload() -> dict:
    """Nested native structure touching every kind."""
    return {
        "id": 42,
        "name": "sensor",
        "depth": -1234.5,
        "tags": ["a", "b", None, True, False],
        "blob": b"\x00\xff\x10",
        "nested": {"level": [1, [2, [3, {"x": -(1 << 63)}]]]},
    }
