"""
Core data model for builder generation.

Describes the class being transformed, the fields that take part in the
builder, and the code fragments produced for it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum


# Name of the generated nested type. Collisions are resolved by deleting the
# existing type, never by renaming.
BUILDER_CLASS_NAME = "Builder"

# Name of the generated static factory method
FACTORY_METHOD_NAME = "builder"


class ClassKind(Enum):
    """Kinds of type declarations a host may hand over."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION = "annotation"
    RECORD = "record"


class FragmentKind(Enum):
    """Kinds of generated members, in emission order."""

    CONSTRUCTOR = "constructor"
    GETTER = "getter"
    NESTED_BUILDER_TYPE = "nested_builder_type"
    FACTORY_METHOD = "factory_method"


class MemberKind(Enum):
    """Kinds of existing members exposed by a class model."""

    CONSTRUCTOR = "constructor"
    METHOD = "method"
    TYPE = "type"


@dataclass(frozen=True)
class FieldDescriptor:
    """A single declared field of the target class."""

    name: str
    type_name: str  # Kept verbatim; rendered by a type renderer
    is_static: bool = False
    is_final: bool = False


@dataclass(frozen=True)
class ClassDescriptor:
    """Read-only description of the class being transformed."""

    name: str
    fields: Tuple[FieldDescriptor, ...] = ()
    kind: ClassKind = ClassKind.CLASS

    def __post_init__(self):
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def is_class(self) -> bool:
        return self.kind == ClassKind.CLASS

    @property
    def static_fields(self) -> List[FieldDescriptor]:
        return [f for f in self.fields if f.is_static]


@dataclass(frozen=True)
class BuilderSpec:
    """Derived input of one generation run."""

    class_name: str
    eligible_fields: Tuple[FieldDescriptor, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "eligible_fields", tuple(self.eligible_fields))

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.eligible_fields]


@dataclass(frozen=True)
class CodeFragment:
    """
    A generated member.

    ``member_name`` and ``parameter_types`` identify the declared member so it
    can be matched against members that already exist on the class.
    """

    kind: FragmentKind
    source_text: str
    member_name: str
    parameter_types: Tuple[str, ...] = ()

    @property
    def signature(self) -> Tuple[str, Tuple[str, ...]]:
        return (self.member_name, tuple(self.parameter_types))

    @property
    def member_kind(self) -> MemberKind:
        """Kind of member this fragment creates on the class."""
        if self.kind == FragmentKind.CONSTRUCTOR:
            return MemberKind.CONSTRUCTOR
        if self.kind == FragmentKind.NESTED_BUILDER_TYPE:
            return MemberKind.TYPE
        return MemberKind.METHOD


@dataclass
class MemberDescriptor:
    """An existing member (constructor, method or nested type) of a class."""

    kind: MemberKind
    name: str
    parameter_types: Tuple[str, ...] = ()
    source: str = ""
    origin: Optional[FragmentKind] = field(default=None, compare=False)

    def __post_init__(self):
        self.parameter_types = tuple(self.parameter_types)

    @property
    def signature(self) -> Tuple[str, Tuple[str, ...]]:
        return (self.name, self.parameter_types)

    @property
    def is_constructor(self) -> bool:
        return self.kind == MemberKind.CONSTRUCTOR

    @classmethod
    def from_fragment(cls, fragment: CodeFragment) -> "MemberDescriptor":
        """Create the member a fragment declares."""
        return cls(
            kind=fragment.member_kind,
            name=fragment.member_name,
            parameter_types=fragment.parameter_types,
            source=fragment.source_text,
            origin=fragment.kind,
        )
