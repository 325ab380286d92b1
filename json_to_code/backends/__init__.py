"""
Code generation backends rendering a type tree to source code.
"""

from __future__ import annotations

from ..config import GeneratorOptions
from .base import CodeBackend
from .csharp_backend import CSharpBackend
from .python_backend import PythonBackend

BACKENDS: dict[str, type[CodeBackend]] = {
    "python": PythonBackend,
    "cs": CSharpBackend,
}


def get_backend(options: GeneratorOptions) -> CodeBackend:
    """Return the backend for the language of the options."""
    return BACKENDS[options.language](options)


__all__ = [
    "CodeBackend",
    "CSharpBackend",
    "PythonBackend",
    "BACKENDS",
    "get_backend",
]
