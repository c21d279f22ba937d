"""Tagged value model for the codec.

Every value handed to the encoder, or produced by the decoder, is a ``Value``:
an immutable pair of a ``Kind`` and a payload. Deciding the kind once, at the
boundary, keeps the encoder's dispatch an exhaustive match over a closed set
instead of runtime type inspection deep inside the recursion.
"""

from __future__ import annotations

import enum
from typing import Any, Iterable, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

from ..exceptions import UnsupportedTypeError


class Kind(enum.Enum):
    """Closed set of value kinds the wire format can carry."""

    NIL = "nil"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    TEXT = "text"
    BINARY = "binary"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


class Value(BaseModel):
    """A single encodable value.

    Payload types by kind:
        - NIL: None
        - BOOL: bool
        - INT: int (range is checked at encode time, not here)
        - FLOAT: float
        - TEXT: bytes, UTF-8 when built from ``str``; raw when decoded
          without UTF-8 enforcement
        - BINARY: bytes
        - SEQUENCE: tuple of Value
        - MAPPING: tuple of (Value, Value) pairs in insertion order; duplicate
          keys are allowed

    Use the constructors rather than building instances by hand:

    Example:
        >>> Value.sequence([Value.integer(1), Value.text("a")])
        >>> Value.from_native({"a": [1, 2.5, None]})
    """

    model_config = ConfigDict(
        # Values are shared freely between trees
        frozen=True,
        strict=True,
        arbitrary_types_allowed=True,
    )

    kind: Kind
    data: Any = None

    @model_validator(mode="after")
    def _check_payload(self) -> "Value":
        kind, data = self.kind, self.data

        if kind is Kind.NIL:
            ok = data is None
        elif kind is Kind.BOOL:
            ok = isinstance(data, bool)
        elif kind is Kind.INT:
            ok = isinstance(data, int) and not isinstance(data, bool)
        elif kind is Kind.FLOAT:
            ok = isinstance(data, float)
        elif kind in (Kind.TEXT, Kind.BINARY):
            ok = isinstance(data, bytes)
        elif kind is Kind.SEQUENCE:
            ok = isinstance(data, tuple) and all(isinstance(item, Value) for item in data)
        else:
            ok = isinstance(data, tuple) and all(
                isinstance(pair, tuple)
                and len(pair) == 2
                and isinstance(pair[0], Value)
                and isinstance(pair[1], Value)
                for pair in data
            )

        if not ok:
            raise ValueError(f"invalid payload for {kind.value}: {type(data).__name__}")
        return self

    # Constructors

    @classmethod
    def nil(cls) -> "Value":
        return cls(kind=Kind.NIL, data=None)

    @classmethod
    def boolean(cls, flag: bool) -> "Value":
        return cls(kind=Kind.BOOL, data=flag)

    @classmethod
    def integer(cls, number: int) -> "Value":
        return cls(kind=Kind.INT, data=number)

    @classmethod
    def floating(cls, number: float) -> "Value":
        return cls(kind=Kind.FLOAT, data=number)

    @classmethod
    def text(cls, content: Union[str, bytes]) -> "Value":
        """Build a TEXT value from ``str`` (encoded as UTF-8) or raw bytes.

        Raises:
            UnsupportedTypeError: If ``content`` is a str holding lone surrogates
        """
        if isinstance(content, str):
            try:
                content = content.encode("utf-8")
            except UnicodeEncodeError as err:
                raise UnsupportedTypeError(f"Text is not encodable as UTF-8: {err}") from err
        return cls(kind=Kind.TEXT, data=bytes(content))

    @classmethod
    def binary(cls, content: bytes) -> "Value":
        return cls(kind=Kind.BINARY, data=bytes(content))

    @classmethod
    def sequence(cls, items: Iterable["Value"]) -> "Value":
        return cls(kind=Kind.SEQUENCE, data=tuple(items))

    @classmethod
    def mapping(
        cls, pairs: Union[Mapping["Value", "Value"], Iterable[Tuple["Value", "Value"]]]
    ) -> "Value":
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        return cls(kind=Kind.MAPPING, data=tuple((key, value) for key, value in pairs))

    # Boundary conversion

    @classmethod
    def from_native(cls, obj: Any) -> "Value":
        """Convert a plain Python object into a Value tree.

        ``list``/``tuple`` become SEQUENCE and ``dict`` becomes MAPPING, so
        the container kind is whatever the caller built. Use
        :meth:`from_pairs` when the choice should be inferred from keys.

        Raises:
            UnsupportedTypeError: If ``obj`` (or anything nested in it) has
                no wire representation
        """
        if isinstance(obj, Value):
            return obj
        if obj is None:
            return cls.nil()
        # bool before int: bool is an int subclass
        if isinstance(obj, bool):
            return cls.boolean(obj)
        if isinstance(obj, int):
            return cls.integer(int(obj))
        if isinstance(obj, float):
            return cls.floating(float(obj))
        if isinstance(obj, str):
            return cls.text(obj)
        if isinstance(obj, (bytes, bytearray, memoryview)):
            return cls.binary(bytes(obj))
        if isinstance(obj, (list, tuple)):
            return cls.sequence([cls.from_native(item) for item in obj])
        if isinstance(obj, dict):
            return cls.mapping(
                [(cls.from_native(key), cls.from_native(value)) for key, value in obj.items()]
            )

        raise UnsupportedTypeError(
            f"Not able to pack/serialize input type: {type(obj).__name__}"
        )

    @classmethod
    def from_pairs(cls, pairs: Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]]) -> "Value":
        """Build a SEQUENCE or MAPPING from key/value pairs.

        The result is a SEQUENCE only when every key is an integer and the
        keys are exactly ``0, 1, ..., n-1`` in order; anything else, including
        non-contiguous integer keys, stays a MAPPING so no key is lost. An
        empty input is an empty SEQUENCE.

        Example:
            >>> Value.from_pairs({0: "a", 1: "b"}).kind
            <Kind.SEQUENCE: 'sequence'>
            >>> Value.from_pairs({0: "a", 2: "b"}).kind
            <Kind.MAPPING: 'mapping'>
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        converted = [(cls.from_native(key), cls.from_native(value)) for key, value in pairs]

        positional = all(
            key.kind is Kind.INT and key.data == index
            for index, (key, _value) in enumerate(converted)
        )
        if positional:
            return cls.sequence(value for _key, value in converted)
        return cls.mapping(converted)

    def to_native(self) -> Any:
        """Convert this Value tree back into plain Python objects.

        TEXT becomes ``str`` when its payload decodes as UTF-8 and stays
        ``bytes`` otherwise. Mapping keys that convert to lists are turned into
        tuples so they remain hashable; duplicate keys keep the last value.
        """
        kind = self.kind

        if kind is Kind.TEXT:
            try:
                return self.data.decode("utf-8")
            except UnicodeDecodeError:
                return self.data
        if kind is Kind.SEQUENCE:
            return [item.to_native() for item in self.data]
        if kind is Kind.MAPPING:
            return {_hashable(key.to_native()): value.to_native() for key, value in self.data}

        return self.data


def _hashable(native: Any) -> Any:
    if isinstance(native, list):
        return tuple(_hashable(item) for item in native)
    if isinstance(native, dict):
        return tuple((key, _hashable(value)) for key, value in native.items())
    return native
