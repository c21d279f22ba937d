#!/usr/bin/env python3
"""Basic usage example for mpcodec.

This example demonstrates:
1. Encoding plain Python data
2. Inspecting the bytes and predicting sizes
3. Decoding back to a Value tree and to native objects
4. Separating text from binary payloads
"""

from __future__ import annotations

from mpcodec import Value, decode, encode, encoded_size, format_value, to_hex


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("mpcodec Basic Usage Example")
    print("=" * 60)
    print()

    reading = {
        "sensor": "ctd-7",
        "depth_m": 152.25,
        "samples": [12, 130, -5, 70000],
        "ok": True,
        "calibration": None,
    }

    print("1. Encoding a reading...")
    data = encode(reading)
    print(f"   {len(data)} bytes: {to_hex(data)}")
    print(f"   Predicted size: {encoded_size(reading)} bytes")
    print()

    print("2. Decoding to a Value tree...")
    value = decode(data)
    for line in format_value(value).splitlines():
        print(f"   {line}")
    print()

    print("3. Back to native objects...")
    native = value.to_native()
    print(f"   {native}")
    print(f"   Round-trip equal: {native == reading}")
    print()

    print("4. Text vs binary tags...")
    blob = Value.binary(b"\x89PNG")
    print(f"   str-only:  {to_hex(encode(blob))}")
    print(f"   bin types: {to_hex(encode(blob, tag_binary_distinctly=True))}")
    print()


if __name__ == "__main__":
    main()
