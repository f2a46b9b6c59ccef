"""Tests for the in-memory class model and code cleanup."""

from __future__ import annotations

import pytest

from builder_gen import (
    ClassKind,
    CodeFragment,
    FieldDescriptor,
    FragmentKind,
    InMemoryClassModel,
    MemberDescriptor,
    MemberKind,
    MutationError,
)
from builder_gen.core.cleaner import CodeCleaner
from builder_gen.languages.java.class_model import field_declaration
from builder_gen.languages.java.types import signature_to_source


@pytest.fixture
def to_string() -> MemberDescriptor:
    return MemberDescriptor(
        MemberKind.METHOD, "toString", (), 'public String toString() {\n    return "";\n}'
    )


class TestFieldDeclaration:
    def test_modifiers(self):
        assert field_declaration(FieldDescriptor("x", "int")) == "private int x;"
        assert (
            field_declaration(FieldDescriptor("MAX", "long", is_static=True, is_final=True))
            == "private static final long MAX;"
        )

    def test_signature_types(self):
        field = FieldDescriptor("names", "QList<QString;>;")
        assert (
            field_declaration(field, signature_to_source)
            == "private List<String> names;"
        )


class TestInMemoryClassModel:
    def test_create_after_anchor(self, point_model, generator):
        point_model.create_member(generator.gen_static_factory("Point"))
        first = point_model.create_member(generator.gen_getter(FieldDescriptor("x", "int")))
        point_model.create_member(generator.gen_getter(FieldDescriptor("y", "int")), first)

        assert [m.name for m in point_model.members] == ["builder", "getX", "getY"]

    def test_create_before_member(self, point_fields, generator, to_string):
        model = InMemoryClassModel("Point", fields=point_fields, members=[to_string])

        model.create_member(generator.gen_static_factory("Point"), before=to_string)

        assert [m.name for m in model.members] == ["builder", "toString"]

    def test_anchor_wins_over_before(self, point_fields, generator, to_string):
        model = InMemoryClassModel("Point", fields=point_fields, members=[to_string])
        factory = model.create_member(generator.gen_static_factory("Point"))

        model.create_member(
            generator.gen_getter(FieldDescriptor("x", "int")), anchor=factory, before=to_string
        )

        assert [m.name for m in model.members] == ["toString", "builder", "getX"]

    def test_created_member_remembers_fragment(self, point_model, generator):
        member = point_model.create_member(generator.gen_static_factory("Point"))
        assert member.kind == MemberKind.METHOD
        assert member.signature == ("builder", ())

    def test_delete_uses_identity(self, point_fields, to_string):
        twin = MemberDescriptor(to_string.kind, to_string.name, (), to_string.source)
        model = InMemoryClassModel("Point", fields=point_fields, members=[to_string, twin])

        model.delete_member(twin)

        assert model.members[0] is to_string
        assert len(model.members) == 1

    def test_delete_unknown_member(self, point_model, to_string):
        with pytest.raises(MutationError):
            point_model.delete_member(to_string)

    def test_types_are_not_methods(self, point_fields, to_string):
        nested = MemberDescriptor(MemberKind.TYPE, "Builder", (), "public static class Builder {}")
        model = InMemoryClassModel("Point", fields=point_fields, members=[to_string, nested])

        assert model.list_methods() == [to_string]
        assert model.get_type("Builder") is nested
        assert model.get_type("Other") is None

        model.delete_type("Builder")
        assert model.get_type("Builder") is None

    def test_read_source(self, point_model):
        point_model.create_member(
            CodeFragment(
                kind=FragmentKind.FACTORY_METHOD,
                source_text="public static Builder builder() {\n    return new Builder();\n}",
                member_name="builder",
            )
        )

        assert point_model.read_source() == (
            "public class Point {\n"
            "    private int x;\n"
            "    private int y;\n"
            "    private static int SCALE;\n"
            "\n"
            "    public static Builder builder() {\n"
            "        return new Builder();\n"
            "    }\n"
            "}"
        )

    def test_read_source_empty_class(self):
        assert InMemoryClassModel("Empty").read_source() == "public class Empty {\n}"

    def test_from_descriptor(self, point_descriptor, to_string):
        model = InMemoryClassModel.from_descriptor(point_descriptor, [to_string])

        assert model.class_name == "Point"
        assert model.list_fields() == list(point_descriptor.fields)
        assert model.members == [to_string]

    def test_describe(self, point_model):
        descriptor = point_model.describe()

        assert descriptor.name == "Point"
        assert descriptor.kind == ClassKind.CLASS
        assert [f.name for f in descriptor.fields] == ["x", "y", "SCALE"]

    def test_write_source_to_path(self, point_fields, tmp_path):
        path = tmp_path / "Point.java"
        model = InMemoryClassModel("Point", fields=point_fields, path=path)

        model.write_source("class Point {}\n")

        assert path.read_text(encoding="utf-8") == "class Point {}\n"
        assert model.persisted_source == "class Point {}\n"

    def test_read_only(self, point_fields, generator):
        model = InMemoryClassModel("Point", fields=point_fields, read_only=True)

        with pytest.raises(MutationError, match="read-only"):
            model.create_member(generator.gen_static_factory("Point"))
        with pytest.raises(MutationError, match="read-only"):
            model.write_source("")


class TestCodeCleaner:
    def test_removes_constructors_and_builder(self, point_fields, to_string):
        members = [
            MemberDescriptor(MemberKind.CONSTRUCTOR, "Point", (), "public Point() {}"),
            to_string,
            MemberDescriptor(MemberKind.CONSTRUCTOR, "Point", ("int",), "Point(int x) {}"),
            MemberDescriptor(MemberKind.TYPE, "Builder", (), "static class Builder {}"),
        ]
        model = InMemoryClassModel("Point", fields=point_fields, members=members)

        report = CodeCleaner().cleanup(model)

        assert model.members == [to_string]
        assert len(report.removed_constructors) == 2
        assert report.removed_builder_type
        assert report.removed_count == 3

    def test_other_nested_types_kept(self, point_fields):
        helper = MemberDescriptor(MemberKind.TYPE, "Helper", (), "static class Helper {}")
        model = InMemoryClassModel("Point", fields=point_fields, members=[helper])

        report = CodeCleaner().cleanup(model)

        assert model.members == [helper]
        assert report.removed_count == 0

    def test_nothing_to_clean(self, point_model):
        assert CodeCleaner().cleanup(point_model).removed_count == 0

    def test_deletion_refused(self, point_fields):
        constructor = MemberDescriptor(MemberKind.CONSTRUCTOR, "Point", (), "public Point() {}")
        model = InMemoryClassModel(
            "Point", fields=point_fields, members=[constructor], read_only=True
        )

        with pytest.raises(MutationError):
            CodeCleaner().cleanup(model)
