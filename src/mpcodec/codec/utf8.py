"""Byte-level UTF-8 validity check.

The encoder uses this to decide between string and binary tags, and the
decoder uses it to optionally validate string payloads. It knows nothing about
the wire format.
"""

from __future__ import annotations


def _is_continuation(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


def is_valid_utf8(data: bytes) -> bool:
    """Return True if ``data`` is well-formed UTF-8.

    Rules applied per code point:
        1. 00-7F: single byte
        2. C2-DF: followed by one continuation byte (80-BF)
        3. E0-EF: followed by two continuation bytes; E0 requires the second
           byte >= A0 (overlong) and ED requires it < A0 (UTF-16 surrogates)
        4. F0-F4: followed by three continuation bytes; F0 requires the second
           byte >= A0, so U+10000-U+1FFFF are rejected along with the
           overlong forms; F4 has no upper bound on the second byte
        5. C0, C1, F5-FF and stray continuation bytes never start a code point

    Args:
        data: Bytes to check (any bytes-like object)

    Returns:
        False at the first violation or truncated sequence, True otherwise.
        The empty input is valid.

    Example:
        >>> is_valid_utf8("héllo".encode("utf-8"))
        True
        >>> is_valid_utf8(b"\\xc0\\x80")
        False
    """
    data = bytes(data)
    length = len(data)
    pos = 0

    while pos < length:
        lead = data[pos]

        if lead <= 0x7F:
            pos += 1
            continue

        if 0xC2 <= lead <= 0xDF:
            needed = 1
        elif 0xE0 <= lead <= 0xEF:
            needed = 2
        elif 0xF0 <= lead <= 0xF4:
            needed = 3
        else:
            return False

        # Truncated sequence
        if pos + needed >= length:
            return False

        second = data[pos + 1]
        if lead == 0xE0 and second < 0xA0:
            return False
        if lead == 0xED and second >= 0xA0:
            return False
        if lead == 0xF0 and second < 0xA0:
            return False

        for offset in range(1, needed + 1):
            if not _is_continuation(data[pos + offset]):
                return False

        pos += needed + 1

    return True
