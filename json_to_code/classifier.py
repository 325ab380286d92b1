"""
Classification of decoded JSON values.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Kind of a decoded JSON value."""

    BOOL = "bool"
    NUMBER = "number"  # Floating point
    DECIMAL = "decimal"  # Arbitrary precision, original digits preserved
    STRING = "string"
    ANY = "any"  # null or anything that cannot be typed
    OBJECT = "object"  # Needs recursion: nested type
    ARRAY = "array"  # Needs recursion: element type

    @property
    def needs_recursion(self) -> bool:
        return self in (ValueKind.OBJECT, ValueKind.ARRAY)


def classify(value: Any, use_decimal: bool = False) -> ValueKind:
    """Return the kind of a decoded JSON value.

    Args:
        value: A value produced by a JSON decoder
        use_decimal: Classify numbers as DECIMAL instead of NUMBER

    Returns:
        The scalar kind, or OBJECT / ARRAY when the caller has to recurse
    """
    # bool is a subclass of int, test it first
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, Decimal):
        return ValueKind.DECIMAL
    if isinstance(value, (int, float)):
        return ValueKind.DECIMAL if use_decimal else ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, list):
        return ValueKind.ARRAY
    return ValueKind.ANY
