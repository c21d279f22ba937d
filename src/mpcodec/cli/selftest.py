"""Built-in round-trip smoke test."""

from __future__ import annotations

import math
from typing import Any

from ..codec import decode, encode
from ..models.options import DecodeOptions, EncodeOptions
from ..utils.dump import to_hex

# (label, literal) pairs covering every width boundary the encoder switches on
SELFTEST_CASES: list[tuple[str, Any]] = [
    ("zero: 0", 0),
    ("small: 1", 1),
    ("small: 5", 5),
    ("small: -1", -1),
    ("small: -2", -2),
    ("small: 35", 35),
    ("small: -35", -35),
    ("boundary: 127", 127),
    ("boundary: -32", -32),
    ("boundary: -33", -33),
    ("small: 128", 128),
    ("small: -128", -128),
    ("boundary: -129", -129),
    ("boundary: 0xFF", 0xFF),
    ("boundary: 0x7FFF", 0x7FFF),
    ("boundary: -0x8000", -0x8000),
    ("boundary: 0xFFFF", 0xFFFF),
    ("medium: 1000", 1000),
    ("medium: -1000", -1000),
    ("large: 100000", 100000),
    ("large: -100000", -100000),
    ("boundary: 0xFFFFFFFF", 0xFFFFFFFF),
    ("huge: 10000000000", 10000000000),
    ("huge: -10000000000", -10000000000),
    ("gigant: -223372036854775807", -223372036854775807),
    ("gigant: -9223372036854775807", -9223372036854775807),
    ("gigant: -2^63", -(1 << 63)),
    ("gigant: 2^64-1", (1 << 64) - 1),
    ("null", None),
    ("true", True),
    ("false", False),
    ("double: 0.1", 0.1),
    ("double: 1.1", 1.1),
    ("double: 123.456", 123.456),
    ("double: -123456789.123456789", -123456789.123456789),
    ("double: 1e128", 1e128),
    ('empty: ""', ""),
    ('string: "foobar"', "foobar"),
    ('string: "Lorem ipsum dolor sit amet amet."', "Lorem ipsum dolor sit amet amet."),
    ('array("foo", "foo", "foo")', ["foo", "foo", "foo"]),
    ('array("one" => 1, "two" => 2)', {"one": 1, "two": 2}),
    ('array("kek" => "lol", "lol" => "kek")', {"kek": "lol", "lol": "kek"}),
    ('array("" => "empty")', {"": "empty"}),
    ("array()", []),
    ("map16: 16 integer keys", {index: index * index for index in range(16)}),
]


def same(expected: Any, actual: Any) -> bool:
    """Strict equality: types must match too, so 1 never equals True or 1.0."""
    if type(expected) is not type(actual):
        return False
    if isinstance(expected, float) and math.isnan(expected):
        return math.isnan(actual)
    if isinstance(expected, list):
        return len(expected) == len(actual) and all(map(same, expected, actual))
    if isinstance(expected, dict):
        return list(expected) == list(actual) and all(
            same(expected[key], actual[key]) for key in expected
        )
    return bool(expected == actual)


def run_selftest(encode_options: EncodeOptions, decode_options: DecodeOptions) -> int:
    """Round-trip every case, printing one line per case.

    Returns:
        Number of failed cases
    """
    failures = 0

    for label, literal in SELFTEST_CASES:
        encoded = encode(literal, encode_options)
        decoded = decode(encoded, decode_options).to_native()
        passed = same(literal, decoded)
        if not passed:
            failures += 1

        print(f"{label:<45} {to_hex(encoded, sep='')[:40]:<40} {'PASS' if passed else 'FAIL'}")

    print()
    print(f"{len(SELFTEST_CASES) - failures}/{len(SELFTEST_CASES)} cases passed.")
    return failures
