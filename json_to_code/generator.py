"""
Generation of type declarations from one JSON document.

The generator runs the whole pipeline on an in-memory document:

1. Check the options
2. Decode the document
3. Build the type tree
4. Render it with the backend of the target language
5. Format the code and check its syntax
"""

from __future__ import annotations

import functools
import io
import json
import logging
from collections.abc import Callable
from decimal import Decimal
from typing import IO, Any

from .backends import get_backend
from .cli_utils import reconstruct_command_line
from .config import GeneratorOptions
from .formatters import get_formatter, validate_code
from .tree import TypeNode, build_tree

logger = logging.getLogger(__name__)


def default_decoder(use_decimal: bool = False) -> Callable[[bytes], Any]:
    """Return the JSON decoder for a numeric policy.

    With ``use_decimal`` every number is decoded as a ``Decimal`` holding
    the original digits, otherwise the standard ``json`` decoding is used.
    """
    if use_decimal:
        return functools.partial(json.loads, parse_float=Decimal, parse_int=Decimal)
    return json.loads


class CodeGenerator:
    """Generates type declarations for JSON documents with fixed options."""

    def __init__(self, options: GeneratorOptions):
        self.options = options

    def infer(self, data: bytes | str) -> TypeNode:
        """
        Decode a document and build its type tree.

        Args:
            data: Raw JSON document

        Returns:
            The root node, named after the type name option

        Raises:
            ConfigurationError: If the options are incomplete (checked before decoding)
            DecodeError: If the top-level value is not an object
        """
        options = self.options
        options.validate()

        if isinstance(data, str):
            data = data.encode("utf-8")
        decode = options.decode or default_decoder(options.use_decimal)
        # Decoder errors propagate unchanged
        document = decode(data)

        root = build_tree(document, options.type_name, options.renamer, options.use_decimal)
        logger.debug("Inferred %d types for %s", sum(1 for _ in root.walk()), options.type_name)
        return root

    def generate(self, data: bytes | str) -> str:
        """
        Generate formatted source code for a document.

        Args:
            data: Raw JSON document

        Returns:
            Formatted source code

        Raises:
            ConfigurationError: If the options are incomplete
            DecodeError: If the top-level value is not an object
            RenderError: If the templates fail or identifiers collide
            FormatError: If the generated code is not valid
        """
        root = self.infer(data)
        return self.render(root)

    def render(self, root: TypeNode) -> str:
        """Render, format and validate the code of a type tree."""
        backend = get_backend(self.options)
        code = backend.render(root, self._command_line())

        formatted = get_formatter(self.options).format(code, self.options.formatter)
        validate_code(formatted, self.options.language)
        return formatted

    def _command_line(self) -> str:
        """Command line quoted in the generation comment of the generated file"""
        # Reconstruct command line using CLI utilities
        try:
            from .json_to_code import json_to_code as click_command  # noqa

            return reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            return "json_to_code"


def generate(data: bytes | str, options: GeneratorOptions) -> str:
    """Generate formatted source code for a JSON document."""
    return CodeGenerator(options).generate(data)


def generate_to(data: bytes | str, sink: IO, options: GeneratorOptions) -> None:
    """
    Generate source code for a JSON document and write it to a stream.

    Text streams receive the code as ``str``, any other stream as UTF-8 bytes.
    Nothing is written if generation fails.
    """
    code = generate(data, options)
    if isinstance(sink, io.TextIOBase):
        sink.write(code)
    else:
        sink.write(code.encode("utf-8"))
