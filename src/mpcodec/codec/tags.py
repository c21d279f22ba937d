"""Wire tag bytes and length tiers.

Each encoded value starts with one tag byte. The "fix" families embed a small
integer, length or count directly in the low bits of the tag; every other
family is followed by a big-endian length field or fixed-width payload.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

# Single-byte families
POSITIVE_FIXINT_MAX = 0x7F
FIXMAP = 0x80
FIXARRAY = 0x90
FIXSTR = 0xA0
NEGATIVE_FIXINT = 0xE0

NIL = 0xC0
NEVER_USED = 0xC1
FALSE = 0xC2
TRUE = 0xC3

BIN8 = 0xC4
BIN16 = 0xC5
BIN32 = 0xC6

FLOAT32 = 0xCA
FLOAT64 = 0xCB

UINT8 = 0xCC
UINT16 = 0xCD
UINT32 = 0xCE
UINT64 = 0xCF

INT8 = 0xD0
INT16 = 0xD1
INT32 = 0xD2
INT64 = 0xD3

STR8 = 0xD9
STR16 = 0xDA
STR32 = 0xDB

ARRAY16 = 0xDC
ARRAY32 = 0xDD

MAP16 = 0xDE
MAP32 = 0xDF

# Recognised by the wire format but rejected by this codec
EXTENSION_TAGS = {
    0xC7: "ext8",
    0xC8: "ext16",
    0xC9: "ext32",
    0xD4: "fixext1",
    0xD5: "fixext2",
    0xD6: "fixext4",
    0xD7: "fixext8",
    0xD8: "fixext16",
}

# (tag, payload width in bytes), narrowest first
UINT_WIDTHS = ((UINT8, 1), (UINT16, 2), (UINT32, 4), (UINT64, 8))
INT_WIDTHS = ((INT8, 1), (INT16, 2), (INT32, 4), (INT64, 8))

UINT64_MAX = (1 << 64) - 1
INT64_MIN = -(1 << 63)
LENGTH_MAX = 0xFFFFFFFF


class LengthTiers(NamedTuple):
    """Tag family for a length-prefixed kind.

    ``fix_tag`` is None for families without a single-byte form (binary), and
    ``tag8`` is None for families without a one-byte length (arrays, maps).
    """

    name: str
    fix_tag: Optional[int]
    fix_limit: int
    tag8: Optional[int]
    tag16: int
    tag32: int


STR_TIERS = LengthTiers("str", FIXSTR, 32, STR8, STR16, STR32)
BIN_TIERS = LengthTiers("bin", None, 0, BIN8, BIN16, BIN32)
ARRAY_TIERS = LengthTiers("array", FIXARRAY, 16, None, ARRAY16, ARRAY32)
MAP_TIERS = LengthTiers("map", FIXMAP, 16, None, MAP16, MAP32)

_NAMES = {
    NIL: "nil",
    NEVER_USED: "never used",
    FALSE: "false",
    TRUE: "true",
    BIN8: "bin8",
    BIN16: "bin16",
    BIN32: "bin32",
    FLOAT32: "float32",
    FLOAT64: "float64",
    UINT8: "uint8",
    UINT16: "uint16",
    UINT32: "uint32",
    UINT64: "uint64",
    INT8: "int8",
    INT16: "int16",
    INT32: "int32",
    INT64: "int64",
    STR8: "str8",
    STR16: "str16",
    STR32: "str32",
    ARRAY16: "array16",
    ARRAY32: "array32",
    MAP16: "map16",
    MAP32: "map32",
    **EXTENSION_TAGS,
}


def tag_name(tag: int) -> str:
    """Return the wire family name for a tag byte.

    Example:
        >>> tag_name(0x93)
        'fixarray'
        >>> tag_name(0xCD)
        'uint16'
    """
    if not 0 <= tag <= 0xFF:
        raise ValueError(f"tag must be a single byte, got {tag}")
    if tag <= POSITIVE_FIXINT_MAX:
        return "positive fixint"
    if tag >= NEGATIVE_FIXINT:
        return "negative fixint"
    if tag & 0xF0 == FIXMAP:
        return "fixmap"
    if tag & 0xF0 == FIXARRAY:
        return "fixarray"
    if tag & 0xE0 == FIXSTR:
        return "fixstr"
    return _NAMES[tag]
