"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of values
without actually encoding them.
"""

from __future__ import annotations

from typing import Any, Optional

from ..codec import tags
from ..codec.encoder import payload_tiers
from ..codec.widths import int_header, length_header
from ..exceptions import NestingDepthError, UnsupportedTypeError
from ..models.options import EncodeOptions
from ..models.value import Kind, Value


def encoded_size(value: Any, options: Optional[EncodeOptions] = None, **overrides: Any) -> int:
    """Calculate the encoded size of a value in bytes.

    The result always equals ``len(encode(value, options))``: the same width
    selection is applied, and the same errors are raised for values that
    cannot be encoded.

    Args:
        value: Value tree or plain Python object
        options: Encoder configuration
        **overrides: Individual option fields

    Returns:
        Size in bytes

    Raises:
        UnsupportedTypeError: If a value kind has no wire representation
        OutOfRangeError: If an integer or length does not fit any width
        NestingDepthError: If containers nest beyond the recursion limit

    Example:
        >>> encoded_size(127)
        1
        >>> encoded_size(128)
        2
        >>> encoded_size({"a": 1})
        4
    """
    opts = EncodeOptions.resolve(options, **overrides)
    try:
        return _size(Value.from_native(value), opts)
    except RecursionError as e:
        raise NestingDepthError(
            "Value is nested too deeply to size (interpreter recursion limit reached)"
        ) from e


def _header_size(length: int, tiers: tags.LengthTiers) -> int:
    _tag, width = length_header(length, tiers)
    return 1 + width


def _size(value: Value, options: EncodeOptions) -> int:
    kind = value.kind

    if kind is Kind.NIL or kind is Kind.BOOL:
        return 1
    if kind is Kind.INT:
        _tag, width = int_header(value.data)
        return 1 + width
    if kind is Kind.FLOAT:
        return 9
    if kind is Kind.TEXT or kind is Kind.BINARY:
        length = len(value.data)
        return _header_size(length, payload_tiers(value, options)) + length
    if kind is Kind.SEQUENCE:
        return _header_size(len(value.data), tags.ARRAY_TIERS) + sum(
            _size(item, options) for item in value.data
        )
    if kind is Kind.MAPPING:
        return _header_size(len(value.data), tags.MAP_TIERS) + sum(
            _size(key, options) + _size(item, options) for key, item in value.data
        )

    raise UnsupportedTypeError(f"Not able to pack/serialize value kind: {kind!r}")
