"""
Base generator interface for builder code generation.

Defines the fragment contract every target language implements and the
result container shared by the pure entry point and the orchestrator.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Sequence
from pathlib import Path

from .config import GeneratorConfig
from .model import BuilderSpec, CodeFragment, FieldDescriptor
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for builder generation errors."""

    pass


class CodeGenerator(ABC):
    """
    Abstract base class for builder fragment generators.

    Generators are pure: the same inputs always produce byte-identical
    fragments. The only state is the configuration handed in at construction.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def gen_private_constructor(
        self, class_name: str, fields: Sequence[FieldDescriptor]
    ) -> CodeFragment:
        """Private constructor taking the builder and copying every field."""
        pass

    @abstractmethod
    def gen_getter(self, field: FieldDescriptor) -> CodeFragment:
        """Getter returning one field."""
        pass

    @abstractmethod
    def gen_nested_builder_type(
        self, class_name: str, fields: Sequence[FieldDescriptor]
    ) -> CodeFragment:
        """Nested builder type with storage, setters and ``build()``."""
        pass

    @abstractmethod
    def gen_static_factory(self, class_name: str) -> CodeFragment:
        """Static factory returning a new builder."""
        pass

    def generate_fragments(self, spec: BuilderSpec) -> List[CodeFragment]:
        """
        Generate every fragment for a builder spec, in emission order.

        Order: private constructor, one getter per field (field order),
        nested builder type, static factory.
        """
        fields = spec.eligible_fields

        fragments = [self.gen_private_constructor(spec.class_name, fields)]
        fragments.extend(self.gen_getter(field) for field in fields)
        fragments.append(self.gen_nested_builder_type(spec.class_name, fields))
        fragments.append(self.gen_static_factory(spec.class_name))

        return fragments

    def join_fragments(self, fragments: Sequence[CodeFragment]) -> str:
        """Join fragments into one block of code separated by blank lines."""
        return "\n\n".join(fragment.source_text for fragment in fragments)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        fragments: List[CodeFragment] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code (fragments or the rendered class)
            fragments: Generated fragments in emission order
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.fragments = fragments or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result
