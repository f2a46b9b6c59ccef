"""Tests for Java type rendering and source formatting."""

from __future__ import annotations

import pytest

from builder_gen.languages.java.formatter import format_java_source
from builder_gen.languages.java.types import (
    get_type_renderer,
    render_verbatim,
    signature_to_source,
)


class TestSignatureToSource:
    @pytest.mark.parametrize(
        "signature, expected",
        [
            ("I", "int"),
            ("Z", "boolean"),
            ("[I", "int[]"),
            ("[[D", "double[][]"),
            ("QString;", "String"),
            ("Ljava.lang.String;", "java.lang.String"),
            ("Ljava/util/List;", "java.util.List"),
            ("Ljava.util.List<QString;>;", "java.util.List<String>"),
            ("QMap<QString;+QNumber;>;", "Map<String, ? extends Number>"),
            ("QComparator<-QT;>;", "Comparator<? super T>"),
            ("QList<*>;", "List<?>"),
            ("TT;", "T"),
            ("QMap$Entry<QK;QV;>;", "Map.Entry<K, V>"),
            ("[QList<QString;>;", "List<String>[]"),
        ],
    )
    def test_decodes(self, signature, expected):
        assert signature_to_source(signature) == expected

    @pytest.mark.parametrize("signature", ["", "QString", "X", "QList<QString;", "II"])
    def test_malformed(self, signature):
        with pytest.raises(ValueError):
            signature_to_source(signature)


class TestTypeRenderers:
    def test_verbatim(self):
        assert render_verbatim(" java.util.Map<String, Integer> ") == (
            "java.util.Map<String, Integer>"
        )

    def test_lookup(self):
        assert get_type_renderer("signature") is signature_to_source
        assert get_type_renderer("verbatim") is render_verbatim

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown type rendering"):
            get_type_renderer("fancy")


class TestFormatJavaSource:
    def test_reindents(self):
        source = "class A {\nint x;\nvoid f() {\nreturn;\n}\n}"

        assert format_java_source(source) == (
            "class A {\n    int x;\n    void f() {\n        return;\n    }\n}\n"
        )

    def test_collapses_blank_lines(self):
        source = "class A {\n\n\nint x;\n\n\n\nint y;\n\n}\n\n"
        assert format_java_source(source) == "class A {\n    int x;\n\n    int y;\n}\n"

    def test_ignores_braces_in_literals(self):
        source = 'class A {\nString s = "{";\nchar c = \'}\';\n// }\nint x;\n}'

        assert format_java_source(source) == (
            'class A {\n    String s = "{";\n    char c = \'}\';\n    // }\n    int x;\n}\n'
        )

    def test_single_line_block(self):
        source = "class A {\npublic A() {}\nint x;\n}"
        assert format_java_source(source) == "class A {\n    public A() {}\n    int x;\n}\n"

    def test_tabs_and_crlf(self):
        source = "class A {\r\nint x;\r\n}"
        assert format_java_source(source, indent="\t", line_ending="\r\n") == (
            "class A {\r\n\tint x;\r\n}\r\n"
        )

    def test_idempotent(self):
        source = "class A {\nint x;\nvoid f() {\nreturn;\n}\n}"
        once = format_java_source(source)
        assert format_java_source(once) == once

    def test_ignores_braces_in_block_comments(self):
        source = "class A {\n/* { */\nint x;\n}"
        assert format_java_source(source) == "class A {\n    /* { */\n    int x;\n}\n"

    def test_multi_line_javadoc(self):
        source = "class A {\n/**\n* Opens a {@code {} block.\n*/\nint x;\n}"

        assert format_java_source(source) == (
            "class A {\n"
            "    /**\n"
            "     * Opens a {@code {} block.\n"
            "     */\n"
            "    int x;\n"
            "}\n"
        )

    def test_closer_after_block_comment(self):
        source = "class A {\nint x; /* { */\n/* } */ }"
        assert format_java_source(source) == "class A {\n    int x; /* { */\n/* } */ }\n"

    def test_text_block_kept_as_written(self):
        source = 'class A {\nString s = """\n  {\n    nested\n""";\nint x;\n}'

        assert format_java_source(source) == (
            'class A {\n    String s = """\n  {\n    nested\n""";\n    int x;\n}\n'
        )
