"""
Removal of previously generated code.

Constructors and the nested builder type are always regenerated, so they are
removed before new fragments are emitted. This is what makes re-runs after a
field change converge to the same class.
"""

from dataclasses import dataclass, field
from typing import List

from .class_model import ClassModel, MutationError
from .model import BUILDER_CLASS_NAME, MemberDescriptor
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CleanupReport:
    """Members removed by a cleanup pass."""

    removed_constructors: List[MemberDescriptor] = field(default_factory=list)
    removed_builder_type: bool = False

    @property
    def removed_count(self) -> int:
        return len(self.removed_constructors) + int(self.removed_builder_type)


class CodeCleaner:
    """Deletes existing constructors and the nested builder type."""

    def __init__(self, builder_name: str = BUILDER_CLASS_NAME):
        self.builder_name = builder_name

    def cleanup(self, model: ClassModel) -> CleanupReport:
        """
        Remove every constructor and the nested builder type from a class.

        Args:
            model: Live class to clean

        Returns:
            What was removed

        Raises:
            MutationError: If the host fails to delete a member
        """
        report = CleanupReport()

        try:
            for method in model.list_methods():
                if method.is_constructor:
                    model.delete_member(method)
                    report.removed_constructors.append(method)

            if model.get_type(self.builder_name) is not None:
                model.delete_type(self.builder_name)
                report.removed_builder_type = True
        except MutationError:
            raise
        except Exception as e:
            raise MutationError(
                f"Failed to clean up {model.class_name}: {str(e)}"
            ) from e

        logger.debug(
            "Cleaned %s: %d constructor(s) removed, builder type removed=%s",
            model.class_name,
            len(report.removed_constructors),
            report.removed_builder_type,
        )
        return report
