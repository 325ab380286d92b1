"""
Python code generation backend.

Generates dataclasses decorated with dataclasses_json, one per type node.
"""

from __future__ import annotations

import collections
import keyword
from typing import Any

from ..classifier import ValueKind
from ..tree import TypeNode, TypeRef
from ..utils import to_snake_case
from .base import CodeBackend

# Attribute names that would clash with the generated imports or with
# the methods dataclasses_json adds to every class
_RESERVED_FIELD_NAMES = frozenset(
    {
        "dataclass",
        "dataclass_json",
        "field",
        "config",
        "to_json",
        "from_json",
        "to_dict",
        "from_dict",
        "schema",
        "dataclass_json_config",
    }
)


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    TYPE_MAP = {
        ValueKind.BOOL: "bool",
        ValueKind.NUMBER: "float",
        ValueKind.DECIMAL: "Decimal",
        ValueKind.STRING: "str",
        ValueKind.ANY: "Any",
    }

    RESERVED_TYPE_NAMES = frozenset({"Any", "Decimal", "annotations", "dataclass", "dataclass_json", "field", "config"})

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate an inferred type to a Python type string."""
        if type_ref.kind == ValueKind.OBJECT:
            return self.type_identifier(type_ref.name)
        if type_ref.kind == ValueKind.ARRAY:
            return f"list[{self.translate_type(type_ref.item)}]"
        return self.TYPE_MAP[type_ref.kind]

    def type_identifier(self, name: str) -> str:
        # None, True and False survive title-casing
        if keyword.iskeyword(name):
            return name + "_"
        return name

    def field_identifier(self, key: str, node: TypeNode) -> str:
        name = to_snake_case(key)
        if name in _RESERVED_FIELD_NAMES:
            name += "_"
        return name

    def _prepare_header_context(self, root: TypeNode, nodes: list[TypeNode], generation_comment: str) -> dict[str, Any]:
        python_imports: set[tuple[str, str]] = {
            ("dataclasses", "dataclass"),
            ("dataclasses", "field"),
            ("dataclasses_json", "config"),
            ("dataclasses_json", "dataclass_json"),
        }
        if self.options.use_future_annotations:
            python_imports.add(("__future__", "annotations"))
        if self._uses_kind(nodes, ValueKind.ANY):
            python_imports.add(("typing", "Any"))
        # Declared under the decimal policy even when no field uses it
        if self.options.use_decimal or self._uses_kind(nodes, ValueKind.DECIMAL):
            python_imports.add(("decimal", "Decimal"))

        return {
            "generation_comment": generation_comment,
            "package": self.options.package,
            "required_imports": self._assemble_imports(python_imports),
            "class_names": [self.type_identifier(node.name) for node in nodes],
        }

    def _assemble_imports(self, python_imports: set[tuple[str, str]]) -> list[list[str]]:
        """Group imports: __future__, standard library, then third party."""
        future_groups = collections.defaultdict(set)
        stdlib_groups = collections.defaultdict(set)
        third_party_groups = collections.defaultdict(set)

        for module, name in python_imports:
            if module == "__future__":
                future_groups[module].add(name)
            elif module in ("dataclasses", "decimal", "typing"):
                stdlib_groups[module].add(name)
            else:
                third_party_groups[module].add(name)

        assembled_imports = []
        for groups in (future_groups, stdlib_groups, third_party_groups):
            if not groups:
                continue
            lines = []
            for module in sorted(groups.keys()):
                names = sorted(groups[module])
                lines.append(f"from {module} import {', '.join(names)}")
            assembled_imports.append(lines)
        return assembled_imports
