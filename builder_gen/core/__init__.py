"""
Core builder generation components.

Provides the data model, field selection, cleanup, the generator contract
and run orchestration used by every target language.
"""

from .model import (
    BUILDER_CLASS_NAME,
    FACTORY_METHOD_NAME,
    BuilderSpec,
    ClassDescriptor,
    ClassKind,
    CodeFragment,
    FieldDescriptor,
    FragmentKind,
    MemberDescriptor,
    MemberKind,
)
from .filters import build_spec, filter_eligible, is_static_declaration
from .naming import capitalize_first, getter_name
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine
from .generator import CodeGenerator, GeneratorError, GenerationResult
from .class_model import ClassModel, MutationError
from .cleaner import CleanupReport, CodeCleaner
from .orchestrator import (
    BuilderOrchestrator,
    RenderError,
    RunState,
    ValidationError,
    advisory_warnings,
    apply_builder,
    validate_descriptor,
)

__all__ = [
    # Data model
    "BUILDER_CLASS_NAME",
    "FACTORY_METHOD_NAME",
    "BuilderSpec",
    "ClassDescriptor",
    "ClassKind",
    "CodeFragment",
    "FieldDescriptor",
    "FragmentKind",
    "MemberDescriptor",
    "MemberKind",
    # Field selection
    "build_spec",
    "filter_eligible",
    "is_static_declaration",
    # Naming
    "capitalize_first",
    "getter_name",
    # Configuration
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Generation
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    # Host model and cleanup
    "ClassModel",
    "MutationError",
    "CleanupReport",
    "CodeCleaner",
    # Orchestration
    "BuilderOrchestrator",
    "RenderError",
    "RunState",
    "ValidationError",
    "advisory_warnings",
    "apply_builder",
    "validate_descriptor",
]
