"""JSON to Code Generator

A Python package for generating type declarations from a sample JSON
document. Infers a tree of types from the document and renders it as
Python dataclasses or C# classes.
"""

__version__ = "1.0.1"
__author__ = "François Lagunas"

from .config import FormatterConfig, GeneratorOptions
from .driver import BatchResult, convert_dir, convert_file
from .errors import (
    ConfigurationError,
    DecodeError,
    FormatError,
    GenerationIOError,
    JsonToCodeError,
    RenderError,
)
from .generator import CodeGenerator, default_decoder, generate, generate_to
from .naming import RenameHint, Renamer, SingularizingRenamer, TitleRenamer
from .tree import TypeNode, TypeRef, build_tree

__all__ = [
    "CodeGenerator",
    "GeneratorOptions",
    "FormatterConfig",
    "generate",
    "generate_to",
    "default_decoder",
    "convert_file",
    "convert_dir",
    "BatchResult",
    "build_tree",
    "TypeNode",
    "TypeRef",
    "Renamer",
    "RenameHint",
    "TitleRenamer",
    "SingularizingRenamer",
    "JsonToCodeError",
    "ConfigurationError",
    "DecodeError",
    "RenderError",
    "FormatError",
    "GenerationIOError",
]
