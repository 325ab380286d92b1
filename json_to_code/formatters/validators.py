"""
Syntax checks run on the generated code before it is returned.
"""

from __future__ import annotations

import ast
import re

from ..errors import FormatError

_CS_STRING_LITERAL = re.compile(r'"(?:\\.|[^"\\])*"')


def validate_python(content: str) -> None:
    """Check that the content parses as Python.

    Raises:
        FormatError: If the content is not valid Python
    """
    try:
        ast.parse(content)
    except SyntaxError as e:
        raise FormatError(f"Generated Python code is not valid: {e}") from e


def validate_csharp(content: str) -> None:
    """Structural checks of C# code (no full parsing).

    Raises:
        FormatError: If a check fails
    """
    if "namespace " not in content:
        raise FormatError("Generated C# code is missing namespace declaration")

    if "class " not in content:
        raise FormatError("Generated C# code has no type definitions")

    # Check for balanced braces (simple heuristic), ignoring string literals
    code = _CS_STRING_LITERAL.sub('""', content)
    open_braces = code.count("{")
    close_braces = code.count("}")
    if open_braces != close_braces:
        raise FormatError(f"Generated C# code has unbalanced braces: {open_braces} open, {close_braces} close")

    # Check for using statements
    if "using " not in content:
        raise FormatError("Generated C# code is missing using statements")


VALIDATORS = {
    "python": validate_python,
    "cs": validate_csharp,
}


def validate_code(content: str, language: str) -> None:
    """Validate content based on language."""
    VALIDATORS[language](content)
