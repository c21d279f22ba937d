"""Exception hierarchy for mpcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from MpcodecError for easy catching of any codec error.
"""

from __future__ import annotations


class MpcodecError(Exception):
    """Base exception for all mpcodec errors."""

    pass


class EncodeError(MpcodecError):
    """Raised when a value cannot be encoded."""

    pass


class UnsupportedTypeError(EncodeError):
    """Raised when a value kind has no wire representation.

    Examples:
        - A native object such as a set or datetime passed to encode()
        - A Value carrying a kind outside the supported enumeration
    """

    pass


class OutOfRangeError(EncodeError):
    """Raised when a value does not fit any wire width.

    Examples:
        - Integer below -2**63 or above 2**64 - 1
        - String, blob or container longer than 2**32 - 1
    """

    pass


class NestingDepthError(EncodeError):
    """Raised when a value is nested deeper than the encoder can recurse.

    Examples:
        - A list wrapped in thousands of lists
        - A self-referencing list or dict
    """

    pass


class DecodeError(MpcodecError):
    """Raised when decoding binary data fails."""

    pass


class TruncatedError(DecodeError):
    """Raised when the buffer ends before a declared field or payload."""

    pass


class UnknownTagError(DecodeError):
    """Raised on a tag byte that matches no supported family.

    Examples:
        - The reserved byte 0xC1
        - Extension tags (ext8/16/32, fixext1/2/4/8/16)
    """

    pass


class InvalidTextError(DecodeError):
    """Raised when UTF-8 enforcement is on and a string payload is malformed."""

    pass


class DepthLimitError(DecodeError):
    """Raised when container nesting exceeds the configured maximum depth."""

    pass


class ExtraDataError(DecodeError):
    """Raised when bytes remain after the top-level value."""

    pass
