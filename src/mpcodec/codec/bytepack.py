"""Byte-level packing and unpacking utilities.

This module provides fixed-width big-endian primitives for the wire format.
All multi-byte fields are network byte order regardless of host endianness.
"""

from __future__ import annotations

import struct

from ..exceptions import TruncatedError

_UINT_FORMATS = {1: ">B", 2: ">H", 4: ">I", 8: ">Q"}
_INT_FORMATS = {1: ">b", 2: ">h", 4: ">i", 8: ">q"}


class ByteWriter:
    """Appends big-endian fields to a growing byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_uint(0xCD, 1)
        >>> writer.write_uint(1000, 2)
        >>> writer.to_bytes()
        b'\\xcd\\x03\\xe8'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_uint(self, value: int, num_bytes: int) -> None:
        """Write an unsigned integer using the specified number of bytes.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bytes: Field width in bytes (1, 2, 4 or 8)

        Raises:
            ValueError: If the width is unsupported or the value doesn't fit
        """
        fmt = _UINT_FORMATS.get(num_bytes)
        if fmt is None:
            raise ValueError(f"num_bytes must be 1, 2, 4 or 8, got {num_bytes}")
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")

        max_value = (1 << (8 * num_bytes)) - 1
        if value > max_value:
            raise ValueError(
                f"Value {value} requires more than {num_bytes} bytes (max: {max_value})"
            )

        self._buffer += struct.pack(fmt, value)

    def write_int(self, value: int, num_bytes: int) -> None:
        """Write a signed integer using two's complement encoding.

        Args:
            value: Signed integer value to write
            num_bytes: Field width in bytes (1, 2, 4 or 8)

        Raises:
            ValueError: If the width is unsupported or the value doesn't fit
        """
        fmt = _INT_FORMATS.get(num_bytes)
        if fmt is None:
            raise ValueError(f"num_bytes must be 1, 2, 4 or 8, got {num_bytes}")

        min_value = -(1 << (8 * num_bytes - 1))
        max_value = (1 << (8 * num_bytes - 1)) - 1
        if value < min_value or value > max_value:
            raise ValueError(
                f"Value {value} doesn't fit in {num_bytes} bytes "
                f"(range: {min_value} to {max_value})"
            )

        self._buffer += struct.pack(fmt, value)

    def write_float64(self, value: float) -> None:
        """Write an IEEE-754 double."""
        self._buffer += struct.pack(">d", value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes.

        Args:
            data: Bytes to write
        """
        self._buffer += data

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Read cursor over an immutable byte buffer.

    One reader is created per top-level decode and handed down through every
    recursive step, so nested containers continue from wherever the previous
    element stopped.

    Example:
        >>> reader = ByteReader(b"\\xcd\\x03\\xe8")
        >>> reader.read_uint(1)
        205
        >>> reader.read_uint(2)
        1000
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader positioned at the start of ``data``.

        Args:
            data: Byte buffer to read (borrowed, never modified)
        """
        self._view = memoryview(data).cast("B")
        self._position = 0

    def _take(self, num_bytes: int) -> memoryview:
        end = self._position + num_bytes
        if end > len(self._view):
            raise TruncatedError(
                f"Truncated data at offset {self._position}: not enough bytes, "
                f"need {num_bytes}, have {len(self._view) - self._position}"
            )
        chunk = self._view[self._position:end]
        self._position = end
        return chunk

    def read_uint(self, num_bytes: int) -> int:
        """Read a big-endian unsigned integer.

        Args:
            num_bytes: Field width in bytes (1, 2, 4 or 8)

        Raises:
            ValueError: If the width is unsupported
            TruncatedError: If not enough bytes are available
        """
        fmt = _UINT_FORMATS.get(num_bytes)
        if fmt is None:
            raise ValueError(f"num_bytes must be 1, 2, 4 or 8, got {num_bytes}")
        return struct.unpack(fmt, self._take(num_bytes))[0]

    def read_int(self, num_bytes: int) -> int:
        """Read a big-endian two's complement integer.

        Args:
            num_bytes: Field width in bytes (1, 2, 4 or 8)

        Raises:
            ValueError: If the width is unsupported
            TruncatedError: If not enough bytes are available
        """
        fmt = _INT_FORMATS.get(num_bytes)
        if fmt is None:
            raise ValueError(f"num_bytes must be 1, 2, 4 or 8, got {num_bytes}")
        return struct.unpack(fmt, self._take(num_bytes))[0]

    def read_float(self, num_bytes: int) -> float:
        """Read an IEEE-754 float of 4 or 8 bytes; singles are widened."""
        if num_bytes == 4:
            return struct.unpack(">f", self._take(4))[0]
        if num_bytes == 8:
            return struct.unpack(">d", self._take(8))[0]
        raise ValueError(f"num_bytes must be 4 or 8, got {num_bytes}")

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes into a new ``bytes`` object.

        Raises:
            TruncatedError: If not enough bytes are available
        """
        return self._take(num_bytes).tobytes()

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._view) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position
