"""Hex and structural dumps for inspecting encoded data."""

from __future__ import annotations

from ..models.value import Kind, Value


def to_hex(data: bytes, sep: str = " ") -> str:
    """Format bytes as lowercase hex pairs.

    Example:
        >>> to_hex(b"\\x93\\x01\\x02\\x03")
        '93 01 02 03'
    """
    return sep.join(f"{byte:02x}" for byte in bytes(data))


def format_value(value: Value, indent: int = 2) -> str:
    """Render a Value tree as an indented, one-node-per-line dump.

    Map values are indented one level below their key.

    Example:
        >>> print(format_value(Value.from_native({"a": [1, True]})))
        map(1)
          text 'a'
            array(2)
              int 1
              bool true
    """
    lines: list[str] = []
    _format(value, 0, indent, lines)
    return "\n".join(lines)


def _format(value: Value, level: int, indent: int, lines: list[str]) -> None:
    pad = " " * (level * indent)
    kind = value.kind

    if kind is Kind.SEQUENCE:
        lines.append(f"{pad}array({len(value.data)})")
        for item in value.data:
            _format(item, level + 1, indent, lines)
    elif kind is Kind.MAPPING:
        lines.append(f"{pad}map({len(value.data)})")
        for key, item in value.data:
            _format(key, level + 1, indent, lines)
            _format(item, level + 2, indent, lines)
    elif kind is Kind.NIL:
        lines.append(f"{pad}nil")
    elif kind is Kind.BOOL:
        lines.append(f"{pad}bool {'true' if value.data else 'false'}")
    elif kind is Kind.TEXT:
        native = value.to_native()
        lines.append(f"{pad}text {native!r}")
    elif kind is Kind.BINARY:
        lines.append(f"{pad}bin({len(value.data)}) {to_hex(value.data)}")
    else:
        lines.append(f"{pad}{kind.value} {value.data!r}")
