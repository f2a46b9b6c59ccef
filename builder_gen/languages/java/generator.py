"""
Java builder generator implementation.

Generates the classic immutable Builder pattern members from Jinja2 templates.
"""

from typing import Any, Dict, List, Optional, Sequence
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratorError
from ...core.model import (
    BUILDER_CLASS_NAME,
    FACTORY_METHOD_NAME,
    CodeFragment,
    FieldDescriptor,
    FragmentKind,
)
from ...core.naming import getter_name
from ...core.templates import TemplateError
from .types import TypeRenderer, get_type_renderer


class JavaBuilderGenerator(CodeGenerator):
    """Code generator for Java builder-pattern members."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)

        self.builder_name = BUILDER_CLASS_NAME
        self.factory_name = FACTORY_METHOD_NAME
        self.indent = self.config.indent

        try:
            self.type_renderer: TypeRenderer = get_type_renderer(
                self.config.type_rendering
            )
        except ValueError as e:
            raise GeneratorError(str(e)) from e

    def get_template_directory(self) -> Path:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    def render_type(self, field: FieldDescriptor) -> str:
        """Render the source form of a field's type."""
        try:
            return self.type_renderer(field.type_name)
        except ValueError as e:
            raise GeneratorError(f"Cannot render type of field {field.name}: {e}") from e

    def gen_private_constructor(
        self, class_name: str, fields: Sequence[FieldDescriptor]
    ) -> CodeFragment:
        """Generate ``private C(Builder builder)`` assigning every field."""
        source = self._render(
            "private_constructor.java.j2",
            {"class_name": class_name, "fields": self._field_context(fields)},
        )
        return CodeFragment(
            kind=FragmentKind.CONSTRUCTOR,
            source_text=source,
            member_name=class_name,
            parameter_types=(self.builder_name,),
        )

    def gen_getter(self, field: FieldDescriptor) -> CodeFragment:
        """Generate ``public T getName()`` returning the field."""
        name = getter_name(field.name)
        source = self._render(
            "getter.java.j2",
            {"field": self._field_data(field), "getter_name": name},
        )
        return CodeFragment(
            kind=FragmentKind.GETTER,
            source_text=source,
            member_name=name,
        )

    def gen_nested_builder_type(
        self, class_name: str, fields: Sequence[FieldDescriptor]
    ) -> CodeFragment:
        """Generate the static nested ``Builder`` class."""
        source = self._render(
            "builder_type.java.j2",
            {"class_name": class_name, "fields": self._field_context(fields)},
        )
        return CodeFragment(
            kind=FragmentKind.NESTED_BUILDER_TYPE,
            source_text=source,
            member_name=self.builder_name,
        )

    def gen_static_factory(self, class_name: str) -> CodeFragment:
        """Generate ``public static Builder builder()``."""
        source = self._render("factory.java.j2", {"class_name": class_name})
        return CodeFragment(
            kind=FragmentKind.FACTORY_METHOD,
            source_text=source,
            member_name=self.factory_name,
        )

    def _field_data(self, field: FieldDescriptor) -> Dict[str, Any]:
        """Template data for one field."""
        return {"name": field.name, "type": self.render_type(field)}

    def _field_context(self, fields: Sequence[FieldDescriptor]) -> List[Dict[str, Any]]:
        return [self._field_data(field) for field in fields]

    def _render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with the shared naming and indentation context."""
        template_context = {
            "builder_name": self.builder_name,
            "factory_name": self.factory_name,
            "indent": self.indent,
            **context,
        }
        if not self.template_exists(template_name):
            raise GeneratorError(f"{template_name} template not found")
        try:
            return self.render_template(template_name, template_context)
        except TemplateError as e:
            raise GeneratorError(str(e)) from e
