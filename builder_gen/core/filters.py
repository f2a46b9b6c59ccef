"""
Field selection for builder generation.

Static fields belong to the class, not to an instance, so they never take
part in the builder.
"""

import re
from typing import Iterable, List

from .model import BuilderSpec, ClassDescriptor, FieldDescriptor
from ..logging_config import get_logger

logger = get_logger(__name__)

_TOKEN_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*|\S")


def filter_eligible(fields: Iterable[FieldDescriptor]) -> List[FieldDescriptor]:
    """
    Select the fields that take part in the builder.

    Args:
        fields: Declared fields in declaration order

    Returns:
        Non-static fields, in the same order (possibly empty)
    """
    return [f for f in fields if not f.is_static]


def is_static_declaration(raw_declaration: str) -> bool:
    """
    Check whether a raw field declaration carries the ``static`` modifier.

    Only the part before an initializer is inspected, and only whole tokens
    count, so ``int staticCount;`` or ``String s = "static";`` are not static.

    Args:
        raw_declaration: Declaration text as written in the source

    Returns:
        True if ``static`` appears as a modifier token
    """
    if not raw_declaration:
        return False

    # Drop annotation arguments such as @Size(max = 3) before cutting the initializer
    head = re.sub(r"\([^)]*\)", " ", raw_declaration)
    head = head.split("=", 1)[0]
    return "static" in _TOKEN_PATTERN.findall(head)


def build_spec(descriptor: ClassDescriptor) -> BuilderSpec:
    """Derive the builder spec of one generation run."""
    eligible = filter_eligible(descriptor.fields)
    skipped = len(descriptor.fields) - len(eligible)
    if skipped:
        logger.debug(
            "Skipping %d static field(s) of %s", skipped, descriptor.name
        )
    return BuilderSpec(class_name=descriptor.name, eligible_fields=eligible)
