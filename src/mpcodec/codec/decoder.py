"""MessagePack-compatible decoder.

This module provides the decode() function that converts a complete in-memory
byte buffer back into a Value tree.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from ..exceptions import (
    DepthLimitError,
    ExtraDataError,
    InvalidTextError,
    UnknownTagError,
)
from ..models.options import DecodeOptions
from ..models.value import Value
from . import tags
from .bytepack import ByteReader
from .utf8 import is_valid_utf8

logger = logging.getLogger(__name__)

# tag -> width of the following length field
_STR_LENGTHS = {tags.STR8: 1, tags.STR16: 2, tags.STR32: 4}
_BIN_LENGTHS = {tags.BIN8: 1, tags.BIN16: 2, tags.BIN32: 4}
_ARRAY_LENGTHS = {tags.ARRAY16: 2, tags.ARRAY32: 4}
_MAP_LENGTHS = {tags.MAP16: 2, tags.MAP32: 4}

# tag -> payload width
_UINT_PAYLOADS = dict(tags.UINT_WIDTHS)
_INT_PAYLOADS = dict(tags.INT_WIDTHS)
_FLOAT_PAYLOADS = {tags.FLOAT32: 4, tags.FLOAT64: 8}


def decode(data: bytes, options: Optional[DecodeOptions] = None, **overrides: Any) -> Value:
    """Decode one complete value from ``data``.

    Each call reads with its own cursor starting at offset 0, so concurrent
    or nested calls never interfere with each other.

    Args:
        data: Encoded bytes (any bytes-like object; borrowed, not modified)
        options: Decoder configuration (defaults to ``DecodeOptions()``)
        **overrides: Individual option fields, applied on top of ``options``

    Returns:
        Decoded Value tree

    Raises:
        TruncatedError: If the buffer ends inside a value
        UnknownTagError: If a tag byte is unassigned or an extension type
        InvalidTextError: If ``require_utf8`` is set and a string is malformed
        DepthLimitError: If nesting exceeds ``max_depth`` or the interpreter
            recursion limit
        ExtraDataError: If bytes remain and ``allow_trailing`` is off
        pydantic.ValidationError: If an option is unknown or mistyped

    Examples:
        ```python
        from mpcodec import decode

        decode(bytes.fromhex("d0ff"))           # Value.integer(-1)
        decode(bytes.fromhex("93010203")).to_native()   # [1, 2, 3]

        # Reject malformed text instead of returning raw bytes
        decode(b"\\xa1\\xff", require_utf8=True)  # raises InvalidTextError
        ```
    """
    opts = DecodeOptions.resolve(options, **overrides)
    reader = ByteReader(data)

    value = _decode_top(reader, opts)

    if reader.bytes_remaining() and not opts.allow_trailing:
        raise ExtraDataError(
            f"{reader.bytes_remaining()} unexpected bytes after the value "
            f"at offset {reader.position()}"
        )

    logger.debug("Decoded %s value from %d bytes", value.kind.value, reader.position())
    return value


def iter_decode(
    data: bytes, options: Optional[DecodeOptions] = None, **overrides: Any
) -> Iterator[Value]:
    """Yield every value from a buffer of back-to-back encoded values.

    The buffer must be complete; a value cut off at the end raises
    TruncatedError after the preceding values have been yielded.
    """
    opts = DecodeOptions.resolve(options, **overrides)
    reader = ByteReader(data)

    while reader.bytes_remaining():
        yield _decode_top(reader, opts)


def unpackb(data: bytes, **options: Any) -> Any:
    """Decode to plain Python objects; options are given as keywords."""
    return decode(data, **options).to_native()


def _decode_top(reader: ByteReader, options: DecodeOptions) -> Value:
    start = reader.position()
    try:
        return _decode_value(reader, options, depth=1)
    except RecursionError as e:
        # max_depth set above what the interpreter stack can hold
        raise DepthLimitError(
            f"Nesting in value starting at offset {start} exceeds the interpreter "
            f"recursion limit (max_depth={options.max_depth})"
        ) from e


def _decode_value(reader: ByteReader, options: DecodeOptions, depth: int) -> Value:
    """Decode a single value at the reader's position.

    Args:
        reader: Cursor shared by the whole top-level decode
        options: Resolved decoder configuration
        depth: Nesting level of this value (top level is 1)

    Returns:
        Decoded value

    Raises:
        DecodeError: If data is invalid or truncated
    """
    offset = reader.position()
    tag = reader.read_uint(1)

    # Fixed-size families, classified by mask
    if tag <= tags.POSITIVE_FIXINT_MAX:
        return Value.integer(tag)
    if tag >= tags.NEGATIVE_FIXINT:
        return Value.integer(tag - 0x100)
    if tag & 0xF0 == tags.FIXMAP:
        return _decode_map(reader, options, depth, tag & 0x0F)
    if tag & 0xF0 == tags.FIXARRAY:
        return _decode_array(reader, options, depth, tag & 0x0F)
    if tag & 0xE0 == tags.FIXSTR:
        return _decode_str(reader, options, tag & 0x1F)

    if tag == tags.NIL:
        return Value.nil()
    if tag == tags.FALSE:
        return Value.boolean(False)
    if tag == tags.TRUE:
        return Value.boolean(True)

    # Fixed-width scalars
    if tag in _UINT_PAYLOADS:
        return Value.integer(reader.read_uint(_UINT_PAYLOADS[tag]))
    if tag in _INT_PAYLOADS:
        return Value.integer(reader.read_int(_INT_PAYLOADS[tag]))
    if tag in _FLOAT_PAYLOADS:
        return Value.floating(reader.read_float(_FLOAT_PAYLOADS[tag]))

    # Length-prefixed families
    if tag in _STR_LENGTHS:
        return _decode_str(reader, options, reader.read_uint(_STR_LENGTHS[tag]))
    if tag in _BIN_LENGTHS:
        return Value.binary(reader.read_bytes(reader.read_uint(_BIN_LENGTHS[tag])))
    if tag in _ARRAY_LENGTHS:
        return _decode_array(reader, options, depth, reader.read_uint(_ARRAY_LENGTHS[tag]))
    if tag in _MAP_LENGTHS:
        return _decode_map(reader, options, depth, reader.read_uint(_MAP_LENGTHS[tag]))

    if tag in tags.EXTENSION_TAGS:
        raise UnknownTagError(
            f"Extension type {tags.EXTENSION_TAGS[tag]} (0x{tag:02X}) at offset {offset} "
            f"is not supported"
        )
    raise UnknownTagError(f"Can't unpack data with tag byte 0x{tag:02X} at offset {offset}")


def _decode_str(reader: ByteReader, options: DecodeOptions, length: int) -> Value:
    offset = reader.position()
    payload = reader.read_bytes(length)
    if options.require_utf8 and not is_valid_utf8(payload):
        raise InvalidTextError(
            f"Can't unpack string data at offset {offset} that is not valid UTF-8: "
            f"{payload[:32]!r}"
        )
    return Value.text(payload)


def _enter(depth: int, options: DecodeOptions, reader: ByteReader) -> int:
    if depth > options.max_depth:
        raise DepthLimitError(
            f"Nesting depth {depth} exceeds max_depth={options.max_depth} "
            f"at offset {reader.position()}"
        )
    return depth + 1


def _decode_array(reader: ByteReader, options: DecodeOptions, depth: int, count: int) -> Value:
    child_depth = _enter(depth, options, reader)
    # Elements are read one at a time; a huge declared count on a short
    # buffer fails on truncation instead of preallocating
    items = []
    for _ in range(count):
        items.append(_decode_value(reader, options, child_depth))
    return Value.sequence(items)


def _decode_map(reader: ByteReader, options: DecodeOptions, depth: int, count: int) -> Value:
    child_depth = _enter(depth, options, reader)
    pairs = []
    for _ in range(count):
        key = _decode_value(reader, options, child_depth)
        pairs.append((key, _decode_value(reader, options, child_depth)))
    return Value.mapping(pairs)
