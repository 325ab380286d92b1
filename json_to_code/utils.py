"""
Utility functions for the JSON to code generator.
"""

import keyword
import re

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")

# Characters splitting a raw JSON name into fragments
_SEPARATOR_PATTERN = re.compile(r"[_\-. ]")

_NON_IDENTIFIER_PATTERN = re.compile(r"[^A-Za-z0-9_]")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return _SEPARATOR_PATTERN.sub(" ", text)


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def normalize_name(name: str) -> str:
    """Strip every character that is not an ASCII letter, a digit or an underscore.

    An underscore is prepended when the result would be empty or start with a digit,
    so the returned value is always a valid identifier.

    Examples:
        "balance" -> "balance"
        "my-api" -> "myapi"
        "2fa" -> "_2fa"
    """
    normalized = _NON_IDENTIFIER_PATTERN.sub("", name)
    if not normalized or normalized[0].isdigit():
        normalized = "_" + normalized
    return normalized


def title_case(name: str) -> str:
    """Convert a raw JSON name to a PascalCase type name.

    The name is split on separators; single-letter fragments are upper-cased,
    longer fragments get their first letter upper-cased and keep the rest.
    Empty fragments (consecutive separators) are dropped.

    Examples:
        "cross_liab" -> "CrossLiab"
        "uTime" -> "UTime"
        "u_time" -> "UTime"
        "first--name" -> "FirstName"
    """
    words = []
    for fragment in _SEPARATOR_PATTERN.split(name):
        fragment = _NON_IDENTIFIER_PATTERN.sub("", fragment)
        if len(fragment) == 1:
            words.append(fragment.upper())
        elif len(fragment) > 1:
            words.append(fragment[0].upper() + fragment[1:])
    return normalize_name("".join(words))


def to_snake_case(text: str) -> str:
    """Convert a raw JSON key to a snake_case Python attribute name.

    Examples:
        "availEq" -> "avail_eq"
        "cross_liab" -> "cross_liab"
        "first 3 rows" -> "first_3_rows"
        "class" -> "class_"
        "3d" -> "field_3_d"
    """
    words = _split_into_words(_normalize_separators(text))
    name = "_".join(word.lower() for word in words)
    if not name:
        return "field"
    if name[0].isdigit():
        name = "field_" + name
    if keyword.iskeyword(name):
        name += "_"
    return name
