"""Value model and codec options for mpcodec.

This module provides the tagged Value type and the pydantic option models.
"""

from __future__ import annotations

from .options import DecodeOptions, EncodeOptions
from .value import Kind, Value

__all__ = [
    "Kind",
    "Value",
    "EncodeOptions",
    "DecodeOptions",
]
