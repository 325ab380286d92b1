"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from .. import __version__
from ..classifier import ValueKind
from ..config import GeneratorOptions
from ..errors import RenderError
from ..tree import TypeNode, TypeRef


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from scalar kinds to language types
    TYPE_MAP: dict[ValueKind, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Names the generated header brings into scope; class names must not shadow them
    RESERVED_TYPE_NAMES: frozenset[str] = frozenset()

    def __init__(self, options: GeneratorOptions):
        """
        Initialize the backend.

        Args:
            options: Options of the generation run
        """
        self.options = options
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        # Add custom filters
        self.jinja_env.filters["quote"] = json.dumps

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")
        self.suffix_template = self.jinja_env.get_template(f"suffix.{self.FILE_EXTENSION}.jinja2")

    def render(self, root: TypeNode, command_line: str = "json_to_code") -> str:
        """
        Render the type tree to source code.

        Every child is declared before its parent. Nothing is returned
        if any part fails.

        Args:
            root: Root of the type tree
            command_line: Command line quoted in the generation comment

        Returns:
            Unformatted source code

        Raises:
            RenderError: If a template fails or two identifiers collide
        """
        nodes = list(root.walk())
        self._check_class_names(nodes)
        generation_comment = self._generation_comment(command_line)
        try:
            parts = [self.prefix_template.render(self._prepare_header_context(root, nodes, generation_comment))]
            for index, node in enumerate(nodes):
                class_ctx = self._prepare_class_context(node)
                class_ctx["FIRST"] = index == 0
                parts.append(self.class_template.render(class_ctx))
            parts.append(self.suffix_template.render())
        except jinja2.TemplateError as e:
            raise RenderError(f"Template rendering failed for {root.name}: {e}") from e
        return "".join(parts)

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an inferred type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    def type_identifier(self, name: str) -> str:
        """Spelling of a type name in the generated code. The same for declarations and references."""
        return name

    @abstractmethod
    def field_identifier(self, key: str, node: TypeNode) -> str:
        """
        Derive the member identifier of a JSON key.

        Args:
            key: Original JSON key
            node: The node the field belongs to

        Returns:
            A valid identifier in the target language
        """

    @abstractmethod
    def _prepare_header_context(self, root: TypeNode, nodes: list[TypeNode], generation_comment: str) -> dict[str, Any]:
        """Prepare the template context of the file header."""

    def _check_class_names(self, nodes: list[TypeNode]) -> None:
        seen: set[str] = set()
        for node in nodes:
            name = self.type_identifier(node.name)
            if name in seen:
                raise RenderError(f"Duplicate type name {name!r}: two JSON objects map to the same type name")
            if name in self.RESERVED_TYPE_NAMES:
                raise RenderError(f"Type name {name!r} shadows a name imported by the generated code")
            seen.add(name)

    def _ordered_fields(self, node: TypeNode) -> list[tuple[str, TypeRef]]:
        items = list(node.fields.items())
        if self.options.sort_fields:
            items.sort(key=lambda item: item[0])
        return items

    def _prepare_class_context(self, node: TypeNode) -> dict[str, Any]:
        """
        Prepare the template context for a class.

        Args:
            node: The type node

        Returns:
            Dictionary of template variables
        """
        properties = []
        identifiers: dict[str, str] = {}
        for key, type_ref in self._ordered_fields(node):
            identifier = self.field_identifier(key, node)
            if identifier in identifiers:
                raise RenderError(f"Fields {identifiers[identifier]!r} and {key!r} of {node.name} both map to identifier {identifier!r}")
            identifiers[identifier] = key
            properties.append(self._prepare_field_context(key, identifier, type_ref))

        return {
            "CLASS_NAME": self.type_identifier(node.name),
            "properties": properties,
        }

    def _prepare_field_context(self, key: str, identifier: str, type_ref: TypeRef) -> dict[str, Any]:
        """
        Prepare the template context for a field.

        Args:
            key: Original JSON key
            identifier: Member identifier
            type_ref: Inferred type

        Returns:
            Dictionary of template variables
        """
        return {
            "JSON_NAME": key,
            "NAME": identifier,
            "TYPE": self.translate_type(type_ref),
        }

    def _generation_comment(self, command_line: str) -> str:
        if not self.options.add_generation_comment:
            return ""
        return f"{self._get_comment_prefix()} Generated by json_to_code v{__version__} : {command_line}"

    def _get_comment_prefix(self) -> str:
        """Get the comment prefix for the language."""
        return "#" if self.TEMPLATE_LANG == "python" else "//"

    @staticmethod
    def _uses_kind(nodes: list[TypeNode], kind: ValueKind) -> bool:
        return any(ref.element().kind == kind for node in nodes for ref in node.fields.values())
