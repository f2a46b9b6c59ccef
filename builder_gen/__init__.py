"""
Builder Pattern Code Generation

Generates the classic immutable Builder pattern (private constructor,
getters, nested Builder class and static factory) for a class description.
"""

from functools import partial

from .core.model import (
    ClassDescriptor,
    ClassKind,
    CodeFragment,
    FieldDescriptor,
    FragmentKind,
    MemberDescriptor,
    MemberKind,
)
from .core.config import GeneratorConfig, ConfigError, load_config
from .core.generator import GeneratorError, GenerationResult
from .core.class_model import ClassModel, MutationError
from .core.orchestrator import (
    BuilderOrchestrator,
    RenderError,
    RunState,
    ValidationError,
    advisory_warnings,
    apply_builder,
    validate_descriptor,
)
from .languages.java import (
    InMemoryClassModel,
    JavaBuilderGenerator,
    format_java_source,
)
from .logging_config import get_logger

logger = get_logger(__name__)

# Version info
__version__ = "0.1.0"


def _resolve_config(config) -> GeneratorConfig:
    if isinstance(config, GeneratorConfig):
        return config
    return load_config(custom_config=config)


def generate_builder(descriptor, config=None) -> GenerationResult:
    """
    Generate builder fragments for a class description.

    Pure: no host model is touched.

    Args:
        descriptor: ClassDescriptor of the target class
        config: GeneratorConfig or dict of overrides

    Returns:
        GenerationResult with the fragments in emission order
    """
    try:
        config = _resolve_config(config)
        spec = validate_descriptor(descriptor)
        generator = JavaBuilderGenerator(config)
        fragments = generator.generate_fragments(spec)
    except (GeneratorError, ConfigError) as e:
        logger.error("Builder generation failed: %s", e)
        return GenerationResult.error(str(e), exception=e)

    warnings = advisory_warnings(descriptor) if config.final_advisory else []
    metadata = {
        "language": generator.language_name,
        "class_name": spec.class_name,
        "field_count": len(spec.eligible_fields),
        "fragment_count": len(fragments),
    }
    return GenerationResult(
        generator.join_fragments(fragments), fragments, warnings, metadata
    )


def create_orchestrator(config=None) -> BuilderOrchestrator:
    """
    Create an orchestrator wired with the Java generator and formatter.

    Args:
        config: GeneratorConfig or dict of overrides
    """
    config = _resolve_config(config)
    formatter = partial(
        format_java_source, indent=config.indent, line_ending=config.line_ending
    )
    return BuilderOrchestrator(JavaBuilderGenerator(config), config, formatter=formatter)


def apply_to_model(model, config=None) -> GenerationResult:
    """
    Apply the builder pattern to a live class model.

    Failures are reported through the result instead of raised.

    Args:
        model: ClassModel to transform (None when nothing is selected)
        config: GeneratorConfig or dict of overrides

    Returns:
        GenerationResult whose code is the persisted class source
    """
    try:
        orchestrator = create_orchestrator(config)
    except (GeneratorError, ConfigError) as e:
        return GenerationResult.error(str(e), exception=e)

    return apply_builder(
        model,
        orchestrator.generator,
        orchestrator.config,
        formatter=orchestrator.formatter,
    )


# Export main interfaces
__all__ = [
    "ClassDescriptor",
    "ClassKind",
    "CodeFragment",
    "FieldDescriptor",
    "FragmentKind",
    "MemberDescriptor",
    "MemberKind",
    "GeneratorConfig",
    "ConfigError",
    "load_config",
    "GeneratorError",
    "GenerationResult",
    "ClassModel",
    "MutationError",
    "BuilderOrchestrator",
    "RenderError",
    "RunState",
    "ValidationError",
    "advisory_warnings",
    "apply_builder",
    "validate_descriptor",
    "InMemoryClassModel",
    "JavaBuilderGenerator",
    "format_java_source",
    "generate_builder",
    "create_orchestrator",
    "apply_to_model",
]
