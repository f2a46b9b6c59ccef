"""
Java builder generator module.

Generates the classic immutable Builder pattern for Java classes.
"""

from .generator import JavaBuilderGenerator
from .class_model import InMemoryClassModel, field_declaration
from .formatter import format_java_source
from .types import (
    TypeRenderer,
    get_type_renderer,
    render_verbatim,
    signature_to_source,
)

__all__ = [
    "JavaBuilderGenerator",
    "InMemoryClassModel",
    "field_declaration",
    "format_java_source",
    "TypeRenderer",
    "get_type_renderer",
    "render_verbatim",
    "signature_to_source",
]
