"""
Tests for the Python and C# rendering backends.
"""

from __future__ import annotations

import ast

import pytest

from json_to_code.backends import CSharpBackend, PythonBackend, get_backend
from json_to_code.config import GeneratorOptions
from json_to_code.errors import RenderError
from json_to_code.naming import TitleRenamer
from json_to_code.tree import build_tree

SCENARIO = {"a": True, "b": {"c": 1}, "d": [{"e": "x"}], "f": []}


def _options(**kwargs):
    kwargs.setdefault("package", "api")
    kwargs.setdefault("type_name", "Root")
    kwargs.setdefault("add_generation_comment", False)
    return GeneratorOptions(**kwargs)


def _render(document, **kwargs):
    options = _options(**kwargs)
    root = build_tree(document, options.type_name, options.renamer, options.use_decimal)
    return get_backend(options).render(root)


class TestPythonBackend:
    def test_backend_selection(self):
        assert isinstance(get_backend(_options()), PythonBackend)
        assert isinstance(get_backend(_options(language="cs")), CSharpBackend)

    def test_scenario(self):
        code = _render(SCENARIO)
        assert "class B:\n    c: float = field(metadata=config(field_name=\"c\"))" in code
        assert "class D:\n    e: str = field(metadata=config(field_name=\"e\"))" in code
        assert 'a: bool = field(metadata=config(field_name="a"))' in code
        assert 'b: B = field(metadata=config(field_name="b"))' in code
        assert 'd: list[D] = field(metadata=config(field_name="d"))' in code
        assert 'f: list[Any] = field(metadata=config(field_name="f"))' in code
        ast.parse(code)

    def test_header(self):
        code = _render(SCENARIO)
        assert code.startswith('"""Types of the api package, inferred from a sample JSON document."""\n')
        assert "from __future__ import annotations\n" in code
        assert "from dataclasses import dataclass, field\n" in code
        assert "from typing import Any\n" in code
        assert "from dataclasses_json import config, dataclass_json\n" in code
        assert '__all__ = ["B", "D", "Root"]\n' in code
        assert "Decimal" not in code

    def test_decimal_header(self):
        code = _render(SCENARIO, use_decimal=True)
        assert "from decimal import Decimal\n" in code
        assert 'c: Decimal = field(metadata=config(field_name="c"))' in code

    def test_decimal_header_without_numbers(self):
        code = _render({"name": "x"}, use_decimal=True)
        assert "from decimal import Decimal\n" in code

    def test_any_import_only_when_needed(self):
        code = _render({"name": "x"})
        assert "from typing import Any" not in code

    def test_no_future_annotations(self):
        code = _render(SCENARIO, use_future_annotations=False)
        assert "from __future__" not in code

    def test_children_declared_before_use(self):
        code = _render({"a": {"b": {"c": [{"d": 1}]}}, "e": {"f": True}})
        for name in ["C", "B", "A", "E"]:
            declaration = code.index(f"class {name}:")
            first_use = code.index(f": {name} =") if f": {name} =" in code else code.index(f"list[{name}]")
            assert declaration < first_use

    def test_empty_object(self):
        code = _render({"meta": {}})
        assert "class Meta:\n    pass\n" in code
        ast.parse(code)

    def test_sort_fields(self):
        code = _render({"z": 1, "a": 2}, sort_fields=True)
        assert code.index("a: float") < code.index("z: float")

    def test_document_order(self):
        code = _render({"z": 1, "a": 2})
        assert code.index("z: float") < code.index("a: float")

    def test_keys_are_escaped(self):
        code = _render({'say "hi"\n': "x", "back\\slash": 1})
        assert 'field_name="say \\"hi\\"\\n"' in code
        assert 'field_name="back\\\\slash"' in code
        ast.parse(code)

    def test_reserved_field_names(self):
        code = _render({"field": 1, "config": 2, "to_json": 3, "class": 4})
        assert "field_: float" in code
        assert "config_: float" in code
        assert "to_json_: float" in code
        assert "class_: float" in code
        ast.parse(code)

    def test_generation_comment(self):
        code = _render(SCENARIO, add_generation_comment=True)
        assert code.startswith("# Generated by json_to_code v")


class TestCSharpBackend:
    def test_scenario(self):
        code = _render(SCENARIO, language="cs")
        assert "namespace api\n{\n" in code
        assert '[JsonProperty("a")]\n        public bool A { get; set; }' in code
        assert '[JsonProperty("b")]\n        public B B { get; set; }' in code
        assert '[JsonProperty("d")]\n        public List<D> D { get; set; }' in code
        assert '[JsonProperty("f")]\n        public List<object> F { get; set; }' in code
        assert '[JsonProperty("c")]\n        public double C { get; set; }' in code
        assert '[JsonProperty("e")]\n        public string E { get; set; }' in code

    def test_usings(self):
        code = _render(SCENARIO, language="cs")
        assert code.startswith("using System;\nusing System.Collections.Generic;\nusing Newtonsoft.Json;\n")
        assert code.endswith("}\n")

    def test_decimal(self):
        code = _render(SCENARIO, language="cs", use_decimal=True)
        assert "public decimal C { get; set; }" in code

    def test_property_named_like_class(self):
        code = _render({"root": 1}, language="cs")
        assert "public double RootValue { get; set; }" in code

    def test_keyword_property(self):
        def lower(raw_name, hint):
            return raw_name

        code = _render({"class": 1, "obj": {"x": 1}}, language="cs", rename=lower)
        assert "public double @class { get; set; }" in code

    def test_classes_separated_by_blank_line(self):
        code = _render(SCENARIO, language="cs")
        assert "    }\n\n    public class D\n" in code
        assert "{\n    public class B\n" in code

    def test_generation_comment(self):
        code = _render(SCENARIO, language="cs", add_generation_comment=True)
        assert code.startswith("// Generated by json_to_code v")


class TestCollisions:
    def test_duplicate_type_names(self):
        with pytest.raises(RenderError, match="Duplicate type name 'Info'"):
            _render({"home": {"info": {"a": 1}}, "info": {"b": 2}})

    def test_duplicate_type_names_cs(self):
        with pytest.raises(RenderError):
            _render({"home": {"info": {"a": 1}}, "info": {"b": 2}}, language="cs")

    def test_separator_variants_collide(self):
        with pytest.raises(RenderError):
            _render({"user_info": {"a": 1}, "user-info": {"b": 2}})

    def test_duplicate_field_identifiers(self):
        with pytest.raises(RenderError, match="both map to identifier 'first_name'"):
            _render({"firstName": "a", "first_name": "b"})

    def test_child_named_like_root(self):
        with pytest.raises(RenderError):
            _render({"root": {"a": 1}})

    def test_type_name_shadowing_import(self):
        with pytest.raises(RenderError, match="shadows"):
            _render({"any": {"a": 1}})

    def test_decimal_type_name_allowed_in_cs(self):
        code = _render({"decimal": {"a": 1}}, language="cs")
        assert "public class Decimal" in code

    def test_custom_renamer_can_resolve_collision(self):
        def by_path(raw_name, hint):
            return TitleRenamer()(raw_name, hint) + ("Item" if hint.value == "array_item" else "")

        code = _render({"tag": {"a": 1}, "tags": [{"b": 2}]}, rename=by_path)
        assert "class TagsItem:" in code


class TestKeywordTypeNames:
    @pytest.mark.parametrize("key, name", [("none", "None_"), ("true", "True_"), ("false", "False_")])
    def test_python_keyword_class_escaped(self, key, name):
        code = _render({key: {"a": 1}})
        assert f"class {name}:\n" in code
        assert f"{key}: {name} = field(metadata=config(field_name=\"{key}\"))" in code
        ast.parse(code)

    def test_python_keyword_class_referenced_consistently(self):
        code = _render({"none": {"a": 1}, "flags": [{"x": True}], "true": [{"b": 2}]})
        assert "class None_:\n" in code
        assert "class True_:\n" in code
        assert 'none: None_ = field(metadata=config(field_name="none"))' in code
        assert 'true: list[True_] = field(metadata=config(field_name="true"))' in code
        assert '__all__ = ["None_", "Flags", "True_", "Root"]' in code
        ast.parse(code)

    def test_escaped_name_collision(self):
        with pytest.raises(RenderError, match="Duplicate type name 'None_'"):
            _render({"none": {"a": 1}, "none_": {"b": 2}})

    def test_cs_keyword_class_escaped(self):
        def lower(raw_name, hint):
            return raw_name

        code = _render({"event": {"a": 1}}, language="cs", rename=lower)
        assert "public class @event\n" in code
        assert "public @event @event { get; set; }" in code


class TestNamespace:
    @pytest.mark.parametrize(
        "package, namespace",
        [("class", "@class"), ("base", "@base"), ("Exchange.event.Models", "Exchange.@event.Models"), ("Models", "Models")],
    )
    def test_keyword_segments_escaped(self, package, namespace):
        code = _render({"a": 1}, language="cs", package=package)
        assert f"namespace {namespace}\n{{\n" in code

    def test_python_package_kept(self):
        assert "Types of the class package" in _render({"a": 1}, package="class")
