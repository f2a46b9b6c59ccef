"""
In-memory Java class model.

Holds a class's fields and members as plain data, renders them as Java
source and persists written source to an optional file. Used by the command
line and as the reference host in tests.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from ...core.class_model import ClassModel, MutationError
from ...core.model import (
    ClassDescriptor,
    ClassKind,
    CodeFragment,
    FieldDescriptor,
    MemberDescriptor,
    MemberKind,
)
from ...core.templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger
from .types import TypeRenderer, render_verbatim

logger = get_logger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

CLASS_KEYWORDS = {
    ClassKind.CLASS: "class",
    ClassKind.INTERFACE: "interface",
    ClassKind.ENUM: "enum",
    ClassKind.ANNOTATION: "@interface",
    ClassKind.RECORD: "record",
}


def field_declaration(
    field: FieldDescriptor, render_type: TypeRenderer = render_verbatim
) -> str:
    """Render the declaration line of a field."""
    modifiers = ["private"]
    if field.is_static:
        modifiers.append("static")
    if field.is_final:
        modifiers.append("final")
    return f"{' '.join(modifiers)} {render_type(field.type_name)} {field.name};"


class InMemoryClassModel(ClassModel):
    """A Java class kept as fields plus an ordered list of members."""

    def __init__(
        self,
        name: str,
        fields: Iterable[FieldDescriptor] = (),
        members: Iterable[MemberDescriptor] = (),
        kind: ClassKind = ClassKind.CLASS,
        indent: str = "    ",
        read_only: bool = False,
        path: Optional[Path] = None,
        type_renderer: TypeRenderer = render_verbatim,
    ):
        self._name = name
        self._kind = kind
        self._fields: List[FieldDescriptor] = list(fields)
        self._members: List[MemberDescriptor] = list(members)
        self.indent = indent
        self.read_only = read_only
        self.path = Path(path) if path else None
        self.type_renderer = type_renderer
        self.persisted_source: Optional[str] = None
        self._template_engine: TemplateEngine = create_template_engine(TEMPLATE_DIR)

    @classmethod
    def from_descriptor(
        cls, descriptor: ClassDescriptor, members: Iterable[MemberDescriptor] = (), **kwargs
    ) -> "InMemoryClassModel":
        """Create a model from a class descriptor and optional existing members."""
        return cls(
            descriptor.name,
            fields=descriptor.fields,
            members=members,
            kind=descriptor.kind,
            **kwargs,
        )

    @property
    def class_name(self) -> str:
        return self._name

    @property
    def class_kind(self) -> ClassKind:
        return self._kind

    @property
    def members(self) -> List[MemberDescriptor]:
        """All members in class order (copy)."""
        return list(self._members)

    def list_fields(self) -> List[FieldDescriptor]:
        return list(self._fields)

    def list_methods(self) -> List[MemberDescriptor]:
        return [m for m in self._members if m.kind != MemberKind.TYPE]

    def delete_member(self, member: MemberDescriptor) -> None:
        self._check_writable(f"delete {member.name}")
        index = self._index_of(member)
        if index is None:
            raise MutationError(f"Member {member.name} does not exist in {self._name}")
        del self._members[index]

    def get_type(self, name: str) -> Optional[MemberDescriptor]:
        for member in self._members:
            if member.kind == MemberKind.TYPE and member.name == name:
                return member
        return None

    def delete_type(self, name: str) -> None:
        self._check_writable(f"delete type {name}")
        member = self.get_type(name)
        if member is None:
            raise MutationError(f"Type {name} does not exist in {self._name}")
        del self._members[self._index_of(member)]

    def create_member(
        self,
        fragment: CodeFragment,
        anchor: Optional[MemberDescriptor] = None,
        before: Optional[MemberDescriptor] = None,
    ) -> MemberDescriptor:
        self._check_writable(f"create {fragment.member_name}")
        member = MemberDescriptor.from_fragment(fragment)

        if anchor is not None:
            self._members.insert(self._require_index(anchor) + 1, member)
        elif before is not None:
            self._members.insert(self._require_index(before), member)
        else:
            self._members.append(member)

        return member

    def read_source(self) -> str:
        context = {
            "keyword": CLASS_KEYWORDS[self._kind],
            "class_name": self._name,
            "indent": self.indent,
            "fields": [
                {"declaration": field_declaration(f, self.type_renderer)}
                for f in self._fields
            ],
            "members": self._members,
        }
        return self._template_engine.render_template("class.java.j2", context)

    def write_source(self, source: str) -> None:
        self._check_writable("write source")
        self.persisted_source = source

        if self.path is not None:
            try:
                self.path.write_text(source, encoding="utf-8")
            except OSError as e:
                raise MutationError(f"Failed to write {self.path}: {str(e)}") from e
            logger.info("Wrote %s to %s", self._name, self.path)

    def _index_of(self, member: MemberDescriptor) -> Optional[int]:
        # Identity, not equality: two members may have identical text
        for index, candidate in enumerate(self._members):
            if candidate is member:
                return index
        return None

    def _require_index(self, member: MemberDescriptor) -> int:
        index = self._index_of(member)
        if index is None:
            raise MutationError(f"Anchor {member.name} does not exist in {self._name}")
        return index

    def _check_writable(self, action: str) -> None:
        if self.read_only:
            raise MutationError(f"Cannot {action}: {self._name} is read-only")
