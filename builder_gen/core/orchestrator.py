"""
Builder generation run orchestration.

Sequences one run over a live class: validate, clean, generate, emit in a
fixed order, then hand the rendered class to the formatter and persist it.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, Set, Tuple

from .class_model import ClassModel, MutationError
from .cleaner import CodeCleaner
from .config import GeneratorConfig
from .filters import build_spec
from .generator import CodeGenerator, GenerationResult, GeneratorError
from .model import (
    BuilderSpec,
    ClassDescriptor,
    CodeFragment,
    MemberDescriptor,
    MemberKind,
)
from ..logging_config import get_logger

logger = get_logger(__name__)

Formatter = Callable[[str], str]
Signature = Tuple[str, Tuple[str, ...]]


class ValidationError(GeneratorError):
    """The selection cannot be transformed. Nothing has been modified."""

    pass


class RenderError(GeneratorError):
    """Formatting or persisting the transformed class failed."""

    pass


class RunState(Enum):
    """States of one generation run."""

    IDLE = "idle"
    VALIDATING = "validating"
    CLEANING = "cleaning"
    GENERATING = "generating"
    EMITTING = "emitting"
    DONE = "done"
    FAILED = "failed"


class BuilderOrchestrator:
    """Runs builder generation against a class model."""

    def __init__(
        self,
        generator: CodeGenerator,
        config: Optional[GeneratorConfig] = None,
        cleaner: Optional[CodeCleaner] = None,
        formatter: Optional[Formatter] = None,
    ):
        """
        Args:
            generator: Fragment generator of the target language
            config: Run configuration (defaults to the generator's)
            cleaner: Removes previously generated code
            formatter: Turns the rendered class into its final text
        """
        self.generator = generator
        self.config = config or generator.config
        self.cleaner = cleaner or CodeCleaner()
        self.formatter = formatter
        self.state = RunState.IDLE
        self.history: List[RunState] = [RunState.IDLE]

    def _enter(self, state: RunState):
        logger.debug("Run state: %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def run(self, model: Optional[ClassModel]) -> GenerationResult:
        """
        Apply the builder pattern to a class.

        Args:
            model: Live class, or None when nothing usable is selected

        Returns:
            Result whose ``code`` is the persisted class source

        Raises:
            ValidationError: Nothing was modified
            MutationError: The host failed while modifying the class
            RenderError: The class could not be formatted or saved
        """
        self.state = RunState.IDLE
        self.history = [RunState.IDLE]

        try:
            self._enter(RunState.VALIDATING)
            descriptor, spec, conflicts = self._validate(model)

            self._enter(RunState.CLEANING)
            cleanup = self.cleaner.cleanup(model)
            replaced = self._resolve_conflicts(model, conflicts)

            self._enter(RunState.GENERATING)
            fragments = self.generator.generate_fragments(spec)

            self._enter(RunState.EMITTING)
            emitted, kept = self._emit(model, fragments, conflicts)

            source = self._render(model)
            self._enter(RunState.DONE)
        except Exception as e:
            logger.error("Builder generation failed in %s: %s", self.state.value, e)
            self._enter(RunState.FAILED)
            raise

        warnings = self._collect_warnings(descriptor, kept)
        for warning in warnings:
            logger.warning(warning)

        logger.info(
            "Generated builder for %s: %d member(s) emitted",
            spec.class_name,
            len(emitted),
        )

        metadata = {
            "language": self.generator.language_name,
            "class_name": spec.class_name,
            "field_count": len(spec.eligible_fields),
            "skipped_static_fields": [f.name for f in descriptor.static_fields],
            "removed_constructors": len(cleanup.removed_constructors),
            "removed_builder_type": cleanup.removed_builder_type,
            "replaced_members": [m.name for m in replaced],
            "kept_members": [f.member_name for f in kept],
            "states": [s.value for s in self.history],
        }
        return GenerationResult(source, emitted, warnings, metadata)

    def _validate(
        self, model: Optional[ClassModel]
    ) -> Tuple[ClassDescriptor, BuilderSpec, Dict[Signature, MemberDescriptor]]:
        """Check the class can be transformed; no mutation happens here."""
        descriptor = None
        if model is not None:
            try:
                descriptor = model.describe()
            except GeneratorError:
                raise
            except Exception as e:
                raise MutationError(f"Failed to read the selected class: {str(e)}") from e
        spec = validate_descriptor(descriptor)

        conflicts = self._find_conflicts(model, spec)
        if conflicts and self.config.conflict_policy == "fail":
            names = ", ".join(f"{name}()" for name, _ in conflicts)
            raise ValidationError(
                f"{spec.class_name} already declares generated member(s): {names}"
            )

        return descriptor, spec, conflicts

    def _find_conflicts(
        self, model: ClassModel, spec: BuilderSpec
    ) -> Dict[Signature, MemberDescriptor]:
        """Existing methods whose signature matches a generated method."""
        generated: Set[Signature] = {
            self.generator.gen_getter(f).signature for f in spec.eligible_fields
        }
        generated.add(self.generator.gen_static_factory(spec.class_name).signature)

        try:
            methods = model.list_methods()
        except GeneratorError:
            raise
        except Exception as e:
            raise MutationError(
                f"Failed to list members of {spec.class_name}: {str(e)}"
            ) from e

        conflicts = {}
        for method in methods:
            if method.kind == MemberKind.METHOD and method.signature in generated:
                conflicts.setdefault(method.signature, method)
        return conflicts

    def _resolve_conflicts(
        self, model: ClassModel, conflicts: Dict[Signature, MemberDescriptor]
    ) -> List[MemberDescriptor]:
        """Delete conflicting methods under the ``replace`` policy."""
        if self.config.conflict_policy != "replace":
            return []

        replaced = []
        try:
            for method in model.list_methods():
                if method.kind == MemberKind.METHOD and method.signature in conflicts:
                    model.delete_member(method)
                    replaced.append(method)
        except MutationError:
            raise
        except Exception as e:
            raise MutationError(
                f"Failed to replace existing members of {model.class_name}: {str(e)}"
            ) from e
        return replaced

    def _emit(
        self,
        model: ClassModel,
        fragments: List[CodeFragment],
        conflicts: Dict[Signature, MemberDescriptor],
    ) -> Tuple[List[CodeFragment], List[CodeFragment]]:
        """
        Insert fragments in order, each right after the previous one.

        Under the ``keep`` policy an existing member stands in for its
        fragment and becomes the anchor of the next one. Fragments that come
        before the first kept member are inserted ahead of it, so the
        generated block keeps its order and reruns leave the class unchanged.
        """
        keep = self.config.conflict_policy == "keep"
        kept_slots = [
            conflicts[f.signature] if keep and f.signature in conflicts else None
            for f in fragments
        ]

        emitted, kept = [], []
        anchor = None

        for index, fragment in enumerate(fragments):
            if kept_slots[index] is not None:
                anchor = kept_slots[index]
                kept.append(fragment)
                continue

            before = None
            if anchor is None:
                before = next(
                    (slot for slot in kept_slots[index + 1 :] if slot is not None), None
                )
            try:
                anchor = model.create_member(fragment, anchor=anchor, before=before)
            except MutationError:
                raise
            except Exception as e:
                raise MutationError(
                    f"Failed to insert {fragment.member_name} into "
                    f"{model.class_name}: {str(e)}"
                ) from e
            emitted.append(fragment)

        return emitted, kept

    def _render(self, model: ClassModel) -> str:
        """Format the transformed class and persist it."""
        try:
            source = model.read_source()
            if self.formatter is not None:
                source = self.formatter(source)
            model.write_source(source)
        except RenderError:
            raise
        except Exception as e:
            raise RenderError(
                f"Failed to render {model.class_name}: {str(e)}"
            ) from e
        return source

    def _collect_warnings(
        self, descriptor: ClassDescriptor, kept: List[CodeFragment]
    ) -> List[str]:
        warnings = [
            f"Kept existing {fragment.member_name}() in {descriptor.name}; "
            f"generated version skipped"
            for fragment in kept
        ]
        if self.config.final_advisory:
            warnings.extend(advisory_warnings(descriptor))
        return warnings


def validate_descriptor(descriptor: Optional[ClassDescriptor]) -> BuilderSpec:
    """
    Check that a class can receive a builder and derive its spec.

    Raises:
        ValidationError: Not a class, or no non-static field
    """
    if descriptor is None:
        raise ValidationError("Not a valid class: nothing selected")

    if not descriptor.is_class:
        raise ValidationError(
            f"Not a valid class: {descriptor.name} is declared as "
            f"{descriptor.kind.value}"
        )

    spec = build_spec(descriptor)
    if not spec.eligible_fields:
        raise ValidationError(
            f"No fields found to generate builder for {descriptor.name}"
        )
    return spec


def advisory_warnings(descriptor: ClassDescriptor) -> List[str]:
    """Advice about fields the builder cannot make immutable on its own."""
    warnings = []
    for field in descriptor.fields:
        if field.is_static:
            warnings.append(
                f"Static field {descriptor.name}.{field.name} is not part of the builder"
            )
        elif not field.is_final:
            warnings.append(
                f"Field {descriptor.name}.{field.name} is not final; "
                f"add the final modifier manually to make {descriptor.name} immutable"
            )
    return warnings


def apply_builder(
    model: Optional[ClassModel],
    generator: CodeGenerator,
    config: Optional[GeneratorConfig] = None,
    formatter: Optional[Formatter] = None,
) -> GenerationResult:
    """
    Run builder generation and report failures as a result instead of raising.

    Args:
        model: Live class (or None if nothing usable is selected)
        generator: Fragment generator
        config: Run configuration
        formatter: Final source formatter

    Returns:
        GenerationResult; ``success`` is False with ``error_message`` on failure
    """
    orchestrator = BuilderOrchestrator(generator, config, formatter=formatter)
    try:
        return orchestrator.run(model)
    except ValidationError as e:
        return GenerationResult.error(str(e), exception=e)
    except GeneratorError as e:
        return GenerationResult.error(f"Fatal error: {str(e)}", exception=e)
