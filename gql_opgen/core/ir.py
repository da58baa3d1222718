"""Intermediate Representation (IR) for GraphQL schemas.

Named types live in an arena (``IRSchema.types``) and reference each other
by name, so cyclic schemas need no special handling here.
"""

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """The closed set of GraphQL type categories."""
    SCALAR = "SCALAR"
    ENUM = "ENUM"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)


class OperationKind(Enum):
    """Root operation types."""
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"

    @property
    def directory(self) -> str:
        """Output sub-directory name, e.g. 'queries'."""
        if self is OperationKind.QUERY:
            return "queries"
        return f"{self.value}s"


BUILTIN_SCALARS = ("String", "Int", "Float", "Boolean", "ID")


@dataclass(frozen=True)
class TypeRef:
    """A reference to a type: either a named type or a List/NonNull wrapper."""
    kind: TypeKind
    name: str | None = None
    of_type: "TypeRef | None" = None


def named(name: str, kind: TypeKind) -> TypeRef:
    return TypeRef(kind=kind, name=name)


def non_null(of_type: TypeRef) -> TypeRef:
    return TypeRef(kind=TypeKind.NON_NULL, of_type=of_type)


def list_of(of_type: TypeRef) -> TypeRef:
    return TypeRef(kind=TypeKind.LIST, of_type=of_type)


@dataclass
class IRArgument:
    """Represents an argument to a field."""
    name: str
    type: TypeRef


@dataclass
class IRField:
    """Represents a field in an object or interface type."""
    name: str
    type: TypeRef
    arguments: list[IRArgument] = field(default_factory=list)


@dataclass
class IRType:
    """A named type definition.

    ``fields`` is used by objects, interfaces and input objects;
    ``possible_types`` holds union member names in declaration order.
    """
    name: str
    kind: TypeKind
    fields: list[IRField] = field(default_factory=list)
    possible_types: list[str] = field(default_factory=list)


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema."""
    types: dict[str, IRType] = field(default_factory=dict)
    query_type: str | None = None
    mutation_type: str | None = None
    subscription_type: str | None = None

    def __post_init__(self):
        for name in BUILTIN_SCALARS:
            self.types.setdefault(name, IRType(name=name, kind=TypeKind.SCALAR))

    def add_type(self, ir_type: IRType) -> IRType:
        self.types[ir_type.name] = ir_type
        return ir_type

    def get_type(self, name: str) -> IRType | None:
        """Look up a named type."""
        return self.types.get(name)

    def root_type(self, kind: OperationKind) -> IRType | None:
        """Return the root object type for an operation kind, if the schema has one."""
        name = {
            OperationKind.QUERY: self.query_type,
            OperationKind.MUTATION: self.mutation_type,
            OperationKind.SUBSCRIPTION: self.subscription_type,
        }[kind]
        if name is None:
            return None
        return self.types.get(name)


@dataclass
class OperationDraft:
    """One operation document, built per root field.

    The selection body holds the inner lines of the root field's selection
    set; an empty body means the field returns a leaf type.
    """
    operation_kind: OperationKind
    operation_name: str
    root_field_name: str
    variable_clause: str = ""
    call_args_clause: str = ""
    selection_body: str = ""

    def file_name(self, extension: str = "graphql") -> str:
        return f"{self.root_field_name}.{extension}"
