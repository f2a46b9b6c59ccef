"""
Host capability interface for the class being transformed.

A host (editor, compiler front-end, or the bundled in-memory model) exposes
only what builder generation needs: list fields and methods, delete methods
and nested types, create members at an anchor, and read/write the source.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .generator import GeneratorError
from .model import (
    ClassDescriptor,
    ClassKind,
    CodeFragment,
    FieldDescriptor,
    MemberDescriptor,
)


class MutationError(GeneratorError):
    """Raised when the host refuses or fails to delete, create or insert a member."""

    pass


class ClassModel(ABC):
    """Narrow view of a live class that builder generation mutates."""

    @property
    @abstractmethod
    def class_name(self) -> str:
        pass

    @property
    @abstractmethod
    def class_kind(self) -> ClassKind:
        pass

    @abstractmethod
    def list_fields(self) -> List[FieldDescriptor]:
        """Declared fields in declaration order, static ones included."""
        pass

    @abstractmethod
    def list_methods(self) -> List[MemberDescriptor]:
        """Declared constructors and methods in declaration order."""
        pass

    @abstractmethod
    def delete_member(self, member: MemberDescriptor) -> None:
        """Delete a constructor or method previously returned by ``list_methods``."""
        pass

    @abstractmethod
    def get_type(self, name: str) -> Optional[MemberDescriptor]:
        """Nested type declared directly on the class, or None."""
        pass

    @abstractmethod
    def delete_type(self, name: str) -> None:
        """Delete the nested type with this name."""
        pass

    @abstractmethod
    def create_member(
        self,
        fragment: CodeFragment,
        anchor: Optional[MemberDescriptor] = None,
        before: Optional[MemberDescriptor] = None,
    ) -> MemberDescriptor:
        """
        Insert a generated member.

        Args:
            fragment: Generated code of the member
            anchor: Member to insert right after
            before: Member to insert right before, used when no anchor is given;
                with neither, the member is appended at the end

        Returns:
            The created member, usable as the next anchor
        """
        pass

    @abstractmethod
    def read_source(self) -> str:
        """Full source text of the class in its current state."""
        pass

    @abstractmethod
    def write_source(self, source: str) -> None:
        """Replace and persist the full source text."""
        pass

    def describe(self) -> ClassDescriptor:
        """Snapshot of the class as a read-only descriptor."""
        return ClassDescriptor(
            name=self.class_name,
            fields=tuple(self.list_fields()),
            kind=self.class_kind,
        )
