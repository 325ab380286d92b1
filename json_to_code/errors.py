"""
Exceptions raised while generating code from a JSON sample.
"""

from __future__ import annotations

from pathlib import Path


class JsonToCodeError(Exception):
    """Base class for all json_to_code errors."""

    pass


class ConfigurationError(JsonToCodeError):
    """Raised when required options are missing or invalid.

    Always raised before the input is decoded, so nothing is written.
    """

    pass


class DecodeError(JsonToCodeError):
    """Raised when the decoded document cannot be used as a root type.

    Errors raised by the decoder itself (e.g. ``json.JSONDecodeError``)
    are propagated unchanged and are not wrapped in this class.
    """

    pass


class RenderError(JsonToCodeError):
    """Raised when the type tree cannot be turned into source text.

    This can happen when:
    - A template fails to render
    - Two types in one tree get the same class name
    - Two fields in one class get the same identifier
    - A class name shadows a name imported by the generated header
    """

    pass


class FormatError(JsonToCodeError):
    """Raised when the generated code is rejected by the formatter or validator.

    This points at a naming or rendering defect, not at the user input.
    """

    pass


class GenerationIOError(JsonToCodeError):
    """Raised when reading, writing or creating directories fails in the driver."""

    def __init__(self, path: Path | str, operation: str, cause: OSError):
        self.path = Path(path)
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed for {self.path}: {cause}")
