"""MessagePack-compatible encoder.

This module provides the encode() function that converts a Value tree (or a
plain Python object, converted once at the boundary) into its minimal-width
wire representation.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..exceptions import NestingDepthError, UnsupportedTypeError
from ..models.options import EncodeOptions
from ..models.value import Kind, Value
from . import tags
from .bytepack import ByteWriter
from .tags import LengthTiers
from .utf8 import is_valid_utf8
from .widths import int_header, length_header

logger = logging.getLogger(__name__)


def encode(value: Any, options: Optional[EncodeOptions] = None, **overrides: Any) -> bytes:
    """Encode a value to bytes.

    Every integer, length and count is written with the narrowest tag family
    that holds it. Floats are always written as float64.

    Args:
        value: Value tree, or a plain Python object accepted by
            ``Value.from_native``
        options: Encoder configuration (defaults to ``EncodeOptions()``)
        **overrides: Individual option fields, applied on top of ``options``

    Returns:
        Encoded bytes

    Raises:
        UnsupportedTypeError: If a value kind has no wire representation
        OutOfRangeError: If an integer or length does not fit any width
        NestingDepthError: If containers nest beyond the recursion limit
        pydantic.ValidationError: If an option is unknown or mistyped

    Examples:
        ```python
        from mpcodec import encode

        encode(None)                      # b'\\xc0'
        encode([1, 2, 3])                 # b'\\x93\\x01\\x02\\x03'
        encode({"a": 1})                  # b'\\x81\\xa1a\\x01'

        # Separate bin tags for non-UTF-8 payloads
        encode(b"\\xff", tag_binary_distinctly=True)   # b'\\xc4\\x01\\xff'
        ```
    """
    opts = EncodeOptions.resolve(options, **overrides)

    writer = ByteWriter()
    try:
        root = Value.from_native(value)
        _encode_value(writer, root, opts)
    except RecursionError as e:
        raise NestingDepthError(
            "Value is nested too deeply to encode (interpreter recursion limit reached)"
        ) from e

    encoded = writer.to_bytes()
    logger.debug("Encoded %s value into %d bytes", root.kind.value, len(encoded))
    return encoded


def packb(obj: Any, **options: Any) -> bytes:
    """Encode a plain Python object; options are given as keywords."""
    return encode(obj, **options)


def payload_tiers(value: Value, options: EncodeOptions) -> LengthTiers:
    """Pick the str or bin tag family for a TEXT or BINARY value.

    Without ``tag_binary_distinctly`` everything is a string. With it, binary
    values always use bin tags, and text uses bin tags when forced or when
    its payload is not valid UTF-8.
    """
    if not options.tag_binary_distinctly:
        return tags.STR_TIERS
    if value.kind is Kind.BINARY:
        return tags.BIN_TIERS
    if options.force_binary_tag or not is_valid_utf8(value.data):
        return tags.BIN_TIERS
    return tags.STR_TIERS


def _write_header(writer: ByteWriter, length: int, tiers: LengthTiers) -> None:
    tag, width = length_header(length, tiers)
    writer.write_uint(tag, 1)
    if width:
        writer.write_uint(length, width)


def _encode_value(writer: ByteWriter, value: Value, options: EncodeOptions) -> None:
    """Encode a single value, recursing into containers.

    Args:
        writer: ByteWriter to append to
        value: Value to encode
        options: Resolved encoder configuration

    Raises:
        EncodeError: If the value is not representable
    """
    kind = value.kind

    # Nil
    if kind is Kind.NIL:
        writer.write_uint(tags.NIL, 1)
        return

    # Boolean
    if kind is Kind.BOOL:
        writer.write_uint(tags.TRUE if value.data else tags.FALSE, 1)
        return

    # Integer
    if kind is Kind.INT:
        number = value.data
        tag, width = int_header(number)
        writer.write_uint(tag, 1)
        if width:
            if number >= 0:
                writer.write_uint(number, width)
            else:
                writer.write_int(number, width)
        return

    # Float (never narrowed to single precision)
    if kind is Kind.FLOAT:
        writer.write_uint(tags.FLOAT64, 1)
        writer.write_float64(value.data)
        return

    # String / binary
    if kind is Kind.TEXT or kind is Kind.BINARY:
        _write_header(writer, len(value.data), payload_tiers(value, options))
        writer.write_bytes(value.data)
        return

    # Array
    if kind is Kind.SEQUENCE:
        _write_header(writer, len(value.data), tags.ARRAY_TIERS)
        for item in value.data:
            _encode_value(writer, item, options)
        return

    # Map
    if kind is Kind.MAPPING:
        _write_header(writer, len(value.data), tags.MAP_TIERS)
        for key, item in value.data:
            _encode_value(writer, key, options)
            _encode_value(writer, item, options)
        return

    raise UnsupportedTypeError(f"Not able to pack/serialize value kind: {kind!r}")
