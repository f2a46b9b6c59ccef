"""Tests for field selection and naming helpers."""

from __future__ import annotations

import pytest

from builder_gen import ClassDescriptor, FieldDescriptor
from builder_gen.core.filters import build_spec, filter_eligible, is_static_declaration
from builder_gen.core.naming import accessor_name, capitalize_first, getter_name


class TestFilterEligible:
    def test_drops_static_fields(self, point_fields):
        assert [f.name for f in filter_eligible(point_fields)] == ["x", "y"]

    def test_preserves_declaration_order(self):
        fields = [
            FieldDescriptor("c", "int"),
            FieldDescriptor("K", "int", is_static=True),
            FieldDescriptor("a", "int"),
            FieldDescriptor("b", "int"),
        ]
        assert [f.name for f in filter_eligible(fields)] == ["c", "a", "b"]

    def test_all_static(self):
        fields = [FieldDescriptor("A", "int", is_static=True)]
        assert filter_eligible(fields) == []

    def test_empty(self):
        assert filter_eligible([]) == []


class TestBuildSpec:
    def test_spec(self, point_descriptor):
        spec = build_spec(point_descriptor)

        assert spec.class_name == "Point"
        assert spec.field_names == ["x", "y"]

    def test_descriptor_not_mutated(self, point_descriptor):
        build_spec(point_descriptor)
        assert [f.name for f in point_descriptor.fields] == ["x", "y", "SCALE"]

    def test_descriptor_fields_are_immutable(self):
        descriptor = ClassDescriptor("Point", [FieldDescriptor("x", "int")])
        assert isinstance(descriptor.fields, tuple)


class TestIsStaticDeclaration:
    @pytest.mark.parametrize(
        "declaration",
        [
            "private static int counter;",
            "public static final String NAME = \"n\";",
            "static int x",
            "@Size(max = 3) private static int limit;",
        ],
    )
    def test_static(self, declaration):
        assert is_static_declaration(declaration)

    @pytest.mark.parametrize(
        "declaration",
        [
            "private int staticCount;",
            'private String mode = "static";',
            "private final int x;",
            "",
        ],
    )
    def test_not_static(self, declaration):
        assert not is_static_declaration(declaration)


class TestNaming:
    def test_capitalize_first(self):
        assert capitalize_first("a") == "A"
        assert capitalize_first("firstName") == "FirstName"
        assert capitalize_first("URL") == "URL"

    def test_capitalize_passthrough(self):
        assert capitalize_first("") == ""
        assert capitalize_first("  ") == "  "

    def test_getter_name(self):
        assert getter_name("a") == "getA"
        assert getter_name("") == "get"

    def test_accessor_name(self):
        assert accessor_name("is", "active") == "isActive"
