"""
Post-processing formatters and validators for generated code.
"""

from __future__ import annotations

from ..config import GeneratorOptions
from .base import Formatter, NoopFormatter
from .black_formatter import BlackFormatter
from .ruff_formatter import RuffFormatter
from .validators import validate_code, validate_csharp, validate_python

FORMATTERS: dict[str, type[Formatter]] = {
    "black": BlackFormatter,
    "ruff": RuffFormatter,
    "none": NoopFormatter,
}


def get_formatter(options: GeneratorOptions) -> Formatter:
    """Return the formatter for the options. Only Python output is formatted."""
    if options.language != "python":
        return NoopFormatter()
    return FORMATTERS[options.formatter.name]()


__all__ = [
    "Formatter",
    "BlackFormatter",
    "NoopFormatter",
    "RuffFormatter",
    "FORMATTERS",
    "get_formatter",
    "validate_code",
    "validate_csharp",
    "validate_python",
]
