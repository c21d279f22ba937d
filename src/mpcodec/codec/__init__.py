"""MessagePack-compatible binary codec.

This module provides encoding and decoding between Value trees and the
compact tag-prefixed wire format.
"""

from __future__ import annotations

from .decoder import decode, iter_decode, unpackb
from .encoder import encode, packb
from .tags import tag_name
from .utf8 import is_valid_utf8

__all__ = [
    "encode",
    "decode",
    "iter_decode",
    "packb",
    "unpackb",
    "is_valid_utf8",
    "tag_name",
]
