"""Unit tests for codec options."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mpcodec import DecodeOptions, EncodeOptions, decode, encode


class TestEncodeOptions:
    """Test encoder configuration."""

    def test_defaults(self) -> None:
        """Test both switches are off by default."""
        options = EncodeOptions()
        assert options.tag_binary_distinctly is False
        assert options.force_binary_tag is False

    def test_unknown_option(self) -> None:
        """Test misspelled options are rejected."""
        with pytest.raises(ValidationError):
            EncodeOptions(use_bin_type=True)

        with pytest.raises(ValidationError):
            encode(1, use_bin_type=True)

    def test_strict_types(self) -> None:
        """Test options are not coerced."""
        with pytest.raises(ValidationError):
            EncodeOptions(tag_binary_distinctly="yes")

    def test_frozen(self) -> None:
        """Test options cannot be mutated."""
        options = EncodeOptions()
        with pytest.raises(ValidationError):
            options.force_binary_tag = True


class TestResolve:
    """Test merging options objects with keyword overrides."""

    def test_none(self) -> None:
        """Test defaults when nothing is given."""
        assert EncodeOptions.resolve() == EncodeOptions()

    def test_object_returned_as_is(self) -> None:
        """Test an options object without overrides is reused."""
        options = DecodeOptions(require_utf8=True)
        assert DecodeOptions.resolve(options) is options

    def test_overrides_apply_on_top(self) -> None:
        """Test keyword overrides win over the base object."""
        base = EncodeOptions(tag_binary_distinctly=True)
        merged = EncodeOptions.resolve(base, force_binary_tag=True)

        assert merged == EncodeOptions(tag_binary_distinctly=True, force_binary_tag=True)
        assert base.force_binary_tag is False

    def test_mapping(self) -> None:
        """Test plain dicts are validated."""
        assert DecodeOptions.resolve({"max_depth": 3}).max_depth == 3

        with pytest.raises(ValidationError):
            DecodeOptions.resolve({"max_depth": 0})

    def test_entry_points_accept_both(self) -> None:
        """Test encode/decode take an object and overrides together."""
        data = encode(b"\xff", EncodeOptions(), tag_binary_distinctly=True)
        assert data == b"\xc4\x01\xff"
        assert decode(data, DecodeOptions(), require_utf8=True).data == b"\xff"


class TestDecodeOptions:
    """Test decoder configuration."""

    def test_defaults(self) -> None:
        """Test defaults."""
        options = DecodeOptions()
        assert options.require_utf8 is False
        assert options.max_depth == 256
        assert options.allow_trailing is False

    def test_max_depth_bounds(self) -> None:
        """Test max_depth must be positive."""
        with pytest.raises(ValidationError):
            DecodeOptions(max_depth=0)
