"""
C# code generation backend.

Generates Newtonsoft.Json annotated classes inside one namespace.
"""

from __future__ import annotations

from typing import Any

from ..classifier import ValueKind
from ..naming import RenameHint
from ..tree import TypeNode, TypeRef
from .base import CodeBackend


class CSharpBackend(CodeBackend):
    """C# code generation backend."""

    TEMPLATE_LANG = "cs"
    FILE_EXTENSION = "cs"

    TYPE_MAP = {
        ValueKind.BOOL: "bool",
        ValueKind.NUMBER: "double",
        ValueKind.DECIMAL: "decimal",
        ValueKind.STRING: "string",
        ValueKind.ANY: "object",
    }

    RESERVED_TYPE_NAMES = frozenset({"JsonProperty", "JsonPropertyAttribute"})

    # C# reserved keywords that need escaping
    CS_RESERVED_KEYWORDS = {
        "abstract",
        "as",
        "base",
        "bool",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "checked",
        "class",
        "const",
        "continue",
        "decimal",
        "default",
        "delegate",
        "do",
        "double",
        "else",
        "enum",
        "event",
        "explicit",
        "extern",
        "false",
        "finally",
        "fixed",
        "float",
        "for",
        "foreach",
        "goto",
        "if",
        "implicit",
        "in",
        "int",
        "interface",
        "internal",
        "is",
        "lock",
        "long",
        "namespace",
        "new",
        "null",
        "object",
        "operator",
        "out",
        "override",
        "params",
        "private",
        "protected",
        "public",
        "readonly",
        "ref",
        "return",
        "sbyte",
        "sealed",
        "short",
        "sizeof",
        "stackalloc",
        "static",
        "string",
        "struct",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "uint",
        "ulong",
        "unchecked",
        "unsafe",
        "ushort",
        "using",
        "virtual",
        "void",
        "volatile",
        "while",
    }

    REQUIRED_USINGS = ["System", "System.Collections.Generic", "Newtonsoft.Json"]

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate an inferred type to a C# type string."""
        if type_ref.kind == ValueKind.OBJECT:
            return self.type_identifier(type_ref.name)
        if type_ref.kind == ValueKind.ARRAY:
            return f"List<{self.translate_type(type_ref.item)}>"
        return self.TYPE_MAP[type_ref.kind]

    def type_identifier(self, name: str) -> str:
        if name in self.CS_RESERVED_KEYWORDS:
            return "@" + name
        return name

    def namespace(self) -> str:
        """The package as a C# namespace, keyword segments escaped."""
        return ".".join(self.type_identifier(segment) for segment in self.options.package.split("."))

    def field_identifier(self, key: str, node: TypeNode) -> str:
        name = self.options.renamer(key, RenameHint.FIELD)
        # Member names cannot be the same as their enclosing type
        if name == node.name:
            name += "Value"
        if name in self.CS_RESERVED_KEYWORDS:
            name = "@" + name
        return name

    def _prepare_header_context(self, root: TypeNode, nodes: list[TypeNode], generation_comment: str) -> dict[str, Any]:
        return {
            "generation_comment": generation_comment,
            "package": self.namespace(),
            "required_usings": self.REQUIRED_USINGS,
        }
