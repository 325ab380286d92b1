"""
Configuration for the JSON to code generator.
"""

from __future__ import annotations

import copy
import keyword
import re
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any

from .errors import ConfigurationError
from .naming import Renamer, default_renamer

LANGUAGES = ("python", "cs")

FILE_EXTENSIONS = {"python": ".py", "cs": ".cs"}

FORMATTERS = ("black", "ruff", "none")

_PACKAGE_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*")


@dataclass
class FormatterConfig:
    """Configuration for post-processing formatters."""

    # Formatter used for Python output ("black", "ruff" or "none")
    name: str = "black"

    # Line length for the formatter
    line_length: int = 100

    # Python version target (e.g., "py312", "py313")
    target_version: str = "py312"

    # Whether to use string normalization (convert single quotes to double)
    string_normalization: bool = True

    # Whether to respect magic trailing commas
    magic_trailing_comma: bool = True

    @staticmethod
    def from_dict(d: dict) -> FormatterConfig:
        """Create a formatter configuration from the "formatter" section of a config file."""
        if not isinstance(d, dict):
            raise ConfigurationError(f"Option 'formatter' must be an object, got {type(d).__name__}")
        known = {f.name for f in fields(FormatterConfig)}
        for k in d:
            if k not in known:
                raise ConfigurationError(f"Unknown formatter option: {k!r}")
        return FormatterConfig(**d)


@dataclass
class GeneratorOptions:
    """Options for one generation run."""

    # Module (Python) or namespace (C#) the generated types belong to
    package: str = ""

    # Name of the root type
    type_name: str = ""

    # Target language ("python" or "cs")
    language: str = "python"

    # Keep numbers as arbitrary precision decimals instead of floats
    use_decimal: bool = False

    # Custom decoder: bytes -> decoded document
    decode: Callable[[bytes], Any] | None = None

    # Custom type renamer: (raw name, hint) -> identifier
    rename: Renamer | None = None

    # Name array element types after the singular of the field key
    singularize: bool = False

    # Render fields sorted by JSON key instead of first-seen order
    sort_fields: bool = False

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Use from __future__ import annotations
    use_future_annotations: bool = True

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    @property
    def renamer(self) -> Renamer:
        """The renamer in effect: the custom one if set, the built-in one otherwise."""
        if self.rename is not None:
            return self.rename
        return default_renamer(self.singularize)

    @property
    def file_extension(self) -> str:
        if self.language not in FILE_EXTENSIONS:
            raise ConfigurationError(f"Unknown language: {self.language!r} (expected one of {', '.join(LANGUAGES)})")
        return FILE_EXTENSIONS[self.language]

    def validate(self) -> None:
        """Check that the options are complete.

        Raises:
            ConfigurationError: If package or type name is missing, or a choice is unknown
        """
        if not self.package:
            raise ConfigurationError("Missing package option")
        if not _PACKAGE_PATTERN.fullmatch(self.package):
            raise ConfigurationError(f"Invalid package name: {self.package!r} (expected a dotted identifier)")
        if not self.type_name:
            raise ConfigurationError("Missing type name option")
        if not self.type_name.isidentifier() or not self.type_name.isascii() or keyword.iskeyword(self.type_name):
            raise ConfigurationError(f"Invalid type name: {self.type_name!r}")
        if self.language not in LANGUAGES:
            raise ConfigurationError(f"Unknown language: {self.language!r} (expected one of {', '.join(LANGUAGES)})")
        if self.formatter.name not in FORMATTERS:
            raise ConfigurationError(f"Unknown formatter: {self.formatter.name!r} (expected one of {', '.join(FORMATTERS)})")

    def copy_for_document(self) -> GeneratorOptions:
        """Return an independent copy, so per-document changes never leak to the next document."""
        options = copy.copy(self)
        options.formatter = copy.copy(self.formatter)
        return options

    @staticmethod
    def from_dict(d: dict) -> GeneratorOptions:
        """Create options from a dictionary (e.g. a JSON config file)."""
        options = GeneratorOptions()
        for k, v in d.items():
            if k == "formatter":
                options.formatter = FormatterConfig.from_dict(v)
            elif k in ("decode", "rename"):
                raise ConfigurationError(f"Option {k!r} cannot be set from a config file")
            elif k in {f.name for f in fields(GeneratorOptions)}:
                setattr(options, k, v)
            else:
                raise ConfigurationError(f"Unknown option: {k!r}")
        return options

    def to_dict(self) -> dict:
        """Convert options to a dictionary. Callables are not included."""
        return {
            "package": self.package,
            "type_name": self.type_name,
            "language": self.language,
            "use_decimal": self.use_decimal,
            "singularize": self.singularize,
            "sort_fields": self.sort_fields,
            "add_generation_comment": self.add_generation_comment,
            "use_future_annotations": self.use_future_annotations,
            "formatter": {
                "name": self.formatter.name,
                "line_length": self.formatter.line_length,
                "target_version": self.formatter.target_version,
                "string_normalization": self.formatter.string_normalization,
                "magic_trailing_comma": self.formatter.magic_trailing_comma,
            },
        }
