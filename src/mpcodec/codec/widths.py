"""Minimal-width selection for integers and length-prefixed families.

Both the encoder and the size calculator go through these helpers, so the
predicted size and the emitted bytes always agree.
"""

from __future__ import annotations

from typing import Tuple

from ..exceptions import OutOfRangeError
from . import tags
from .tags import LengthTiers


def int_header(value: int) -> Tuple[int, int]:
    """Choose the narrowest integer encoding.

    Args:
        value: Integer to encode

    Returns:
        ``(tag, payload_width)``. For fixints the tag is the whole encoding and
        the payload width is 0.

    Raises:
        OutOfRangeError: If the value is outside int64/uint64

    Example:
        >>> int_header(127)
        (127, 0)
        >>> int_header(128)
        (204, 1)
    """
    if 0 <= value <= tags.POSITIVE_FIXINT_MAX:
        return value, 0
    if -32 <= value < 0:
        return value & 0xFF, 0

    if value >= 0:
        for tag, width in tags.UINT_WIDTHS:
            if value < 1 << (8 * width):
                return tag, width
    else:
        for tag, width in tags.INT_WIDTHS:
            if value >= -(1 << (8 * width - 1)):
                return tag, width

    raise OutOfRangeError(
        f"Integer {value} is outside the representable range "
        f"[{tags.INT64_MIN}, {tags.UINT64_MAX}]"
    )


def length_header(length: int, tiers: LengthTiers) -> Tuple[int, int]:
    """Choose the narrowest header for a length or element count.

    Args:
        length: Byte length (strings, binary) or element count (containers)
        tiers: Tag family to select from

    Returns:
        ``(tag, length_field_width)``. For fix forms the length is already
        folded into the tag and the field width is 0.

    Raises:
        OutOfRangeError: If the length exceeds 2**32 - 1

    Example:
        >>> length_header(3, tags.ARRAY_TIERS)
        (147, 0)
        >>> length_header(16, tags.MAP_TIERS)
        (222, 2)
    """
    if tiers.fix_tag is not None and length < tiers.fix_limit:
        return tiers.fix_tag | length, 0
    if tiers.tag8 is not None and length <= 0xFF:
        return tiers.tag8, 1
    if length <= 0xFFFF:
        return tiers.tag16, 2
    if length <= tags.LENGTH_MAX:
        return tiers.tag32, 4

    raise OutOfRangeError(
        f"{tiers.name} length {length} overflows the (2^32)-1 maximum"
    )
