"""Unit tests for the Value model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mpcodec import Kind, UnsupportedTypeError, Value


class TestConstructors:
    """Test the per-kind constructors."""

    def test_scalars(self) -> None:
        """Test kinds and payloads of scalar constructors."""
        assert Value.nil().kind is Kind.NIL
        assert Value.boolean(True).data is True
        assert Value.integer(-5).data == -5
        assert Value.floating(2.5).data == 2.5

    def test_text_from_str_and_bytes(self) -> None:
        """Test text stores UTF-8 bytes either way."""
        assert Value.text("é").data == b"\xc3\xa9"
        assert Value.text(b"\xc3\xa9") == Value.text("é")

    def test_text_with_lone_surrogate(self) -> None:
        """Test str that cannot be encoded as UTF-8."""
        with pytest.raises(UnsupportedTypeError, match="UTF-8"):
            Value.text("\ud800")

    def test_containers(self) -> None:
        """Test sequences and mappings store tuples."""
        seq = Value.sequence([Value.integer(1), Value.nil()])
        assert seq.data == (Value.integer(1), Value.nil())

        mapping = Value.mapping({Value.text("a"): Value.integer(1)})
        assert mapping.data == ((Value.text("a"), Value.integer(1)),)

    def test_immutable(self) -> None:
        """Test values are frozen."""
        value = Value.integer(1)
        with pytest.raises(ValidationError):
            value.data = 2

    def test_hashable(self) -> None:
        """Test values can be used as dict keys."""
        key = Value.from_native(["a", 1])
        lookup = {key: "found"}
        assert lookup[Value.from_native(("a", 1))] == "found"


class TestPayloadValidation:
    """Test payloads must match their kind."""

    @pytest.mark.parametrize(
        "kind, data",
        [
            (Kind.NIL, 0),
            (Kind.BOOL, 1),
            (Kind.INT, True),
            (Kind.INT, 1.0),
            (Kind.FLOAT, 1),
            (Kind.TEXT, "abc"),
            (Kind.BINARY, bytearray(b"abc")),
            (Kind.SEQUENCE, [Value.nil()]),
            (Kind.SEQUENCE, (1, 2)),
            (Kind.MAPPING, ((Value.nil(),),)),
            (Kind.MAPPING, ((1, 2),)),
        ],
    )
    def test_mismatched_payload(self, kind: Kind, data: object) -> None:
        """Test a payload of the wrong type is rejected."""
        with pytest.raises(ValidationError, match="invalid payload"):
            Value(kind=kind, data=data)

    def test_kind_must_be_enum(self) -> None:
        """Test strict kind validation."""
        with pytest.raises(ValidationError):
            Value(kind="int", data=1)


class TestFromNative:
    """Test conversion from plain Python objects."""

    def test_scalars(self) -> None:
        """Test each native scalar maps to one kind."""
        assert Value.from_native(None) == Value.nil()
        assert Value.from_native(False) == Value.boolean(False)
        assert Value.from_native(7) == Value.integer(7)
        assert Value.from_native(7.0) == Value.floating(7.0)
        assert Value.from_native("s") == Value.text("s")
        assert Value.from_native(b"s") == Value.binary(b"s")
        assert Value.from_native(bytearray(b"s")) == Value.binary(b"s")
        assert Value.from_native(memoryview(b"s")) == Value.binary(b"s")

    def test_int_subclass(self) -> None:
        """Test int subclasses other than bool become plain ints."""
        import enum

        class Level(enum.IntEnum):
            HIGH = 3

        value = Value.from_native(Level.HIGH)
        assert value == Value.integer(3)
        assert type(value.data) is int

    def test_containers(self) -> None:
        """Test lists, tuples and dicts."""
        assert Value.from_native([1]).kind is Kind.SEQUENCE
        assert Value.from_native((1,)).kind is Kind.SEQUENCE
        assert Value.from_native({0: 1}).kind is Kind.MAPPING

    def test_value_passthrough(self) -> None:
        """Test Value instances are returned unchanged, even nested."""
        inner = Value.binary(b"x")
        assert Value.from_native(inner) is inner
        assert Value.from_native([inner]).data[0] is inner

    def test_unsupported(self) -> None:
        """Test unsupported objects name their type."""
        with pytest.raises(UnsupportedTypeError, match="frozenset"):
            Value.from_native([1, frozenset()])


class TestFromPairs:
    """Test the explicit array-vs-map heuristic."""

    def test_contiguous_integer_keys_make_sequence(self) -> None:
        """Test keys 0..n-1 in order collapse to an array."""
        value = Value.from_pairs({0: "a", 1: "b", 2: "c"})
        assert value == Value.from_native(["a", "b", "c"])

    def test_string_key_makes_mapping(self) -> None:
        """Test any non-integer key forces a map."""
        value = Value.from_pairs([(0, "a"), ("x", "b")])
        assert value.kind is Kind.MAPPING
        assert len(value.data) == 2

    def test_gaps_keep_mapping(self) -> None:
        """Test non-contiguous or reordered integer keys stay a map."""
        assert Value.from_pairs({0: "a", 2: "b"}).kind is Kind.MAPPING
        assert Value.from_pairs([(1, "a"), (0, "b")]).kind is Kind.MAPPING

    def test_empty_is_sequence(self) -> None:
        """Test an empty collection is an empty array."""
        assert Value.from_pairs({}) == Value.sequence([])


class TestToNative:
    """Test conversion back to plain Python objects."""

    def test_roundtrip(self, nested_payload: dict) -> None:
        """Test from_native/to_native are inverse for supported data."""
        assert Value.from_native(nested_payload).to_native() == nested_payload

    def test_invalid_text_stays_bytes(self) -> None:
        """Test undecodable text is returned raw."""
        assert Value.text(b"\xff\xfe").to_native() == b"\xff\xfe"

    def test_unhashable_keys(self) -> None:
        """Test array and map keys become tuples."""
        value = Value.mapping(
            [
                (Value.from_native([1, [2]]), Value.text("list")),
                (Value.from_native({"k": [3]}), Value.text("map")),
            ]
        )
        assert value.to_native() == {(1, (2,)): "list", (("k", (3,)),): "map"}
