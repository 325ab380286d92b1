"""
Type name derivation for the type tree builder.

A renamer turns a raw JSON name (a field key or a file stem) into a type
identifier. The hint tells the renamer what the name is used for, so that
a policy can treat array element names differently from object names.
A renamer must return the same identifier for the same (name, hint) pair
during one generation run: the name is computed once and then referenced
both by the parent field and by the child declaration.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from .utils import title_case


class RenameHint(str, Enum):
    """What a derived name is used for."""

    ROOT = "root"  # Root type name derived from a file name
    OBJECT = "object"  # Nested object: the field key names the type
    ARRAY_ITEM = "array_item"  # Element type of an array field
    FIELD = "field"  # Member identifier (C# properties)


class Renamer(Protocol):
    def __call__(self, raw_name: str, hint: RenameHint) -> str: ...


class TitleRenamer:
    """Default renamer: PascalCase for every hint."""

    def __call__(self, raw_name: str, hint: RenameHint) -> str:
        return title_case(raw_name)


def singularize(word: str) -> str:
    """Naive English singular form of the last word of a name.

    Examples:
        "items" -> "item"
        "categories" -> "category"
        "boxes" -> "box"
        "address" -> "address"
    """
    lower = word.lower()
    if lower.endswith("ies") and len(word) > 3:
        return word[:-3] + ("Y" if word[-3].isupper() else "y")
    if lower.endswith(("ses", "xes", "zes", "ches", "shes")):
        return word[:-2]
    if lower.endswith("s") and not lower.endswith(("ss", "us", "is")) and len(word) > 1:
        return word[:-1]
    return word


class SingularizingRenamer(TitleRenamer):
    """Renamer that names array elements after the singular of the field key.

    A field ``items`` holding objects produces an element type ``Item``.
    """

    def __call__(self, raw_name: str, hint: RenameHint) -> str:
        if hint == RenameHint.ARRAY_ITEM:
            raw_name = singularize(raw_name)
        return super().__call__(raw_name, hint)


def default_renamer(singular_items: bool = False) -> Renamer:
    """Return the built-in renamer, optionally singularizing array element names."""
    if singular_items:
        return SingularizingRenamer()
    return TitleRenamer()
