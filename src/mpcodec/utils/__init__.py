"""Utility functions for mpcodec.

This module provides size calculation and dump helpers.
"""

from __future__ import annotations

from .dump import format_value, to_hex
from .sizing import encoded_size

__all__ = [
    "encoded_size",
    "format_value",
    "to_hex",
]
