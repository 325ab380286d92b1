"""
Type tree inferred from a decoded JSON document.

Every JSON object becomes a TypeNode. A node owns the nodes of the objects
nested in it, so the tree can be walked children first to get an order in
which every type is declared before it is used.

Shapes are not deduplicated: two objects with the same structure at two
different places produce two independent nodes. Arrays are typed from their
first element only, and an empty array is typed as a list of ``any``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .classifier import ValueKind, classify
from .errors import DecodeError
from .naming import Renamer, RenameHint


@dataclass(frozen=True)
class TypeRef:
    """Inferred type of a field."""

    kind: ValueKind
    name: str = ""  # Class name, for OBJECT
    item: TypeRef | None = None  # Element type, for ARRAY

    @property
    def descriptor(self) -> str:
        """Language-neutral descriptor, e.g. "string", "Details" or "[]number"."""
        if self.kind == ValueKind.OBJECT:
            return self.name
        if self.kind == ValueKind.ARRAY:
            return "[]" + self.item.descriptor
        return self.kind.value

    def element(self) -> TypeRef:
        """Innermost non-array type."""
        ref = self
        while ref.kind == ValueKind.ARRAY:
            ref = ref.item
        return ref


ANY = TypeRef(ValueKind.ANY)


def array_of(item: TypeRef) -> TypeRef:
    return TypeRef(ValueKind.ARRAY, item=item)


@dataclass
class TypeNode:
    """One inferred composite type."""

    name: str
    fields: dict[str, TypeRef] = field(default_factory=dict)
    children: list[TypeNode] = field(default_factory=list)

    def walk(self) -> Iterator[TypeNode]:
        """Yield every node of the tree, children before their parent."""
        for child in self.children:
            yield from child.walk()
        yield self

    def descriptors(self) -> dict[str, str]:
        return {key: ref.descriptor for key, ref in self.fields.items()}

    def child(self, name: str) -> TypeNode:
        """Return the direct child with the given name."""
        for node in self.children:
            if node.name == name:
                return node
        raise KeyError(name)


class TreeBuilder:
    """Builds the type tree of a decoded JSON object."""

    def __init__(self, rename: Renamer, use_decimal: bool = False):
        self.rename = rename
        self.use_decimal = use_decimal

    def build(self, name: str, obj: dict[str, Any]) -> TypeNode:
        """Build the node named ``name`` for ``obj`` and, recursively, its children."""
        node = TypeNode(name=name)
        for key, value in obj.items():
            node.fields[key] = self._type_of(node, key, value)
        return node

    def _type_of(self, node: TypeNode, key: str, value: Any) -> TypeRef:
        kind = classify(value, self.use_decimal)
        if kind == ValueKind.OBJECT:
            return self._named_type_of(node, self.rename(key, RenameHint.OBJECT), value)
        if kind == ValueKind.ARRAY and value:
            # Only the first element is inspected
            return array_of(self._named_type_of(node, self.rename(key, RenameHint.ARRAY_ITEM), value[0]))
        if kind == ValueKind.ARRAY:
            return array_of(ANY)
        return TypeRef(kind)

    def _named_type_of(self, node: TypeNode, name: str, value: Any) -> TypeRef:
        """Type of a value whose type name, if it needs one, is already derived."""
        kind = classify(value, self.use_decimal)
        if kind == ValueKind.OBJECT:
            child = self.build(name, value)
            node.children.append(child)
            return TypeRef(ValueKind.OBJECT, name=child.name)
        if kind == ValueKind.ARRAY:
            if not value:
                return array_of(ANY)
            return array_of(self._named_type_of(node, name, value[0]))
        return TypeRef(kind)


def build_tree(document: Any, type_name: str, rename: Renamer, use_decimal: bool = False) -> TypeNode:
    """Build the type tree of a decoded document.

    Raises:
        DecodeError: If the top-level value is not a JSON object
    """
    if not isinstance(document, dict):
        raise DecodeError(f"Top-level JSON value must be an object, got {type(document).__name__}")
    return TreeBuilder(rename, use_decimal).build(type_name, document)
