"""Type classification over the closed set of GraphQL type kinds."""

from .errors import MalformedTypeError
from .ir import TypeKind, TypeRef

LEAF_KINDS = frozenset({TypeKind.SCALAR, TypeKind.ENUM})
COMPOSITE_KINDS = frozenset({TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.UNION})


def unwrap(type_ref: TypeRef) -> TypeRef:
    """Strip List/NonNull wrappers until a named type remains."""
    while type_ref.kind.is_wrapper:
        if type_ref.of_type is None:
            raise MalformedTypeError(f"{type_ref.kind.value} wrapper without an inner type")
        type_ref = type_ref.of_type
    if not type_ref.name:
        raise MalformedTypeError(f"Named {type_ref.kind.value} type without a name")
    return type_ref


def classify(type_ref: TypeRef) -> TypeKind:
    """Return the category of the named type behind any wrappers."""
    return unwrap(type_ref).kind


def is_leaf(kind: TypeKind) -> bool:
    return kind in LEAF_KINDS


def is_composite(kind: TypeKind) -> bool:
    return kind in COMPOSITE_KINDS


def render_type(type_ref: TypeRef) -> str:
    """Render a type reference in GraphQL syntax, e.g. ``[String!]!``."""
    if type_ref.kind.is_wrapper:
        if type_ref.of_type is None:
            raise MalformedTypeError(f"{type_ref.kind.value} wrapper without an inner type")
        inner = render_type(type_ref.of_type)
        if type_ref.kind is TypeKind.NON_NULL:
            return f"{inner}!"
        return f"[{inner}]"
    if not type_ref.name:
        raise MalformedTypeError(f"Named {type_ref.kind.value} type without a name")
    return type_ref.name
