"""Encode and decode configuration.

Options are immutable pydantic models. Every public entry point accepts either
an options object, keyword overrides, or both; overrides are validated the
same way as a freshly built object.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

O = TypeVar("O", bound="_CodecOptions")


class _CodecOptions(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        strict=True,
        # Reject misspelled option names
        extra="forbid",
    )

    @classmethod
    def resolve(
        cls: type[O], options: Optional[Union[O, Mapping[str, Any]]] = None, **overrides: Any
    ) -> O:
        """Merge an optional base options object with keyword overrides.

        Raises:
            pydantic.ValidationError: If an option is unknown or has the wrong type
        """
        if options is None:
            return cls(**overrides)
        if isinstance(options, Mapping):
            return cls.model_validate({**options, **overrides})
        if not overrides:
            return options
        return cls.model_validate({**options.model_dump(), **overrides})


class EncodeOptions(_CodecOptions):
    """Encoder configuration.

    Attributes:
        tag_binary_distinctly: Use the bin tag family for binary payloads.
            When off, text and binary both use the str family, which is what
            readers predating the bin types expect.
        force_binary_tag: With ``tag_binary_distinctly`` on, tag text values
            as binary without running the UTF-8 check. Ignored otherwise.

    Example:
        >>> EncodeOptions(tag_binary_distinctly=True)
    """

    tag_binary_distinctly: bool = False
    force_binary_tag: bool = False


class DecodeOptions(_CodecOptions):
    """Decoder configuration.

    Attributes:
        require_utf8: Reject string payloads that are not valid UTF-8. When
            off, string payloads are returned as raw bytes unconditionally.
        max_depth: Deepest container nesting accepted (top level counts as 1).
            The default fits within the interpreter's default recursion limit.
        allow_trailing: Accept bytes left over after the top-level value.
    """

    require_utf8: bool = False
    max_depth: int = Field(default=256, ge=1)
    allow_trailing: bool = False
