"""mpcodec: MessagePack-compatible binary codec

A Python library for compact binary serialization of null, booleans,
integers, floats, text, binary blobs, arrays and maps using the MessagePack
wire format.

Key Features:
- Minimal-width encoding for every integer, length and count
- Immutable, pydantic-validated Value model with explicit array/map kinds
- Optional str/bin tag distinction driven by a UTF-8 classifier
- Re-entrant decoding with a per-call cursor

Quick Start:
    >>> from mpcodec import Value, decode, encode
    >>>
    >>> data = encode({"a": 1})
    >>> data
    b'\\x81\\xa1a\\x01'
    >>> decode(data).to_native()
    {'a': 1}
    >>> decode(encode(Value.integer(-1))) == Value.integer(-1)
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import decode, encode, is_valid_utf8, iter_decode, packb, tag_name, unpackb
from .exceptions import (
    DecodeError,
    DepthLimitError,
    EncodeError,
    ExtraDataError,
    InvalidTextError,
    MpcodecError,
    NestingDepthError,
    OutOfRangeError,
    TruncatedError,
    UnknownTagError,
    UnsupportedTypeError,
)
from .models import DecodeOptions, EncodeOptions, Kind, Value
from .utils import encoded_size, format_value, to_hex

__all__ = [
    # Core API
    "encode",
    "decode",
    "iter_decode",
    "packb",
    "unpackb",
    # Model
    "Value",
    "Kind",
    "EncodeOptions",
    "DecodeOptions",
    # Exceptions
    "MpcodecError",
    "EncodeError",
    "UnsupportedTypeError",
    "OutOfRangeError",
    "NestingDepthError",
    "DecodeError",
    "TruncatedError",
    "UnknownTagError",
    "InvalidTextError",
    "DepthLimitError",
    "ExtraDataError",
    # Helpers
    "is_valid_utf8",
    "tag_name",
    "encoded_size",
    "format_value",
    "to_hex",
    # Version
    "__version__",
]
