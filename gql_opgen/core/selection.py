"""Selection-set synthesis.

Expands the return type of a root field into the list of sub-fields an
operation selects. Recursion is bounded by depth rather than by a visited
set: the same type may legitimately be selected again along another path
(``User.friends: [User!]!``), it just stops expanding past ``max_depth``.
"""

from .classifier import classify, is_composite, is_leaf, unwrap
from .errors import MalformedTypeError
from .ir import IRSchema, IRType, TypeKind, TypeRef

INDENT = "  "
# The root field sits at one indent, so its selections start at two.
ROOT_LEVEL = 2


class SelectionSynthesizer:
    """Builds selection sets by full recursive expansion up to ``max_depth``.

    Inline fragments of a union are the exception: composite fields of a
    member are expanded one level only.
    """

    def __init__(self, schema: IRSchema, max_depth: int = 3):
        self.schema = schema
        self.max_depth = max_depth

    def synthesize(self, type_ref: TypeRef, depth: int = 0, level: int = ROOT_LEVEL) -> str:
        """Return the inner lines of the selection set for ``type_ref``.

        Args:
            type_ref: The (possibly wrapped) type to select from
            depth: Current recursion depth; 0 is the root field's return type
            level: Indentation level of the returned lines

        Returns:
            Newline-joined selection lines, or an empty string for leaf
            types and for types with nothing selectable within the depth limit
        """
        return "\n".join(self._select(type_ref, depth, level, self.max_depth))

    def _select(self, type_ref: TypeRef, depth: int, level: int, ceiling: int) -> list[str]:
        if depth > ceiling:
            return []

        base = unwrap(type_ref)
        if not is_composite(base.kind):
            # Scalars and enums never take a sub-selection
            return []
        type_def = self._lookup(base.name)

        if base.kind is TypeKind.OBJECT:
            return self._select_fields(type_def, depth, level, ceiling)
        if base.kind is TypeKind.INTERFACE:
            lines = self._select_fields(type_def, depth, level, ceiling)
            if not lines:
                return []
            return [f"{INDENT * level}__typename"] + lines
        return self._select_union(type_def, depth, level, ceiling)

    def _select_fields(self, type_def: IRType, depth: int, level: int, ceiling: int) -> list[str]:
        indent = INDENT * level
        lines = []

        for ir_field in type_def.fields:
            if is_leaf(classify(ir_field.type)):
                lines.append(f"{indent}{ir_field.name}")
                continue

            nested = self._select(ir_field.type, depth + 1, level + 1, ceiling)
            # A composite field without sub-fields is not valid GraphQL, drop it
            if nested:
                lines.append(f"{indent}{ir_field.name} {{")
                lines.extend(nested)
                lines.append(f"{indent}}}")

        return lines

    def _select_union(self, type_def: IRType, depth: int, level: int, ceiling: int) -> list[str]:
        indent = INDENT * level
        fragment_ceiling = min(ceiling, depth + 1)
        fragments = []

        for member_name in type_def.possible_types:
            member = self._lookup(member_name)
            body = self._select_fields(member, depth, level + 1, fragment_ceiling)
            # `... on Member {}` is not valid GraphQL, so an empty member gets no fragment
            if not body:
                continue
            fragments.append(f"{indent}... on {member_name} {{")
            fragments.extend(body)
            fragments.append(f"{indent}}}")

        if not fragments:
            return []
        return [f"{indent}__typename"] + fragments

    def _lookup(self, name: str) -> IRType:
        type_def = self.schema.get_type(name)
        if type_def is None:
            raise MalformedTypeError(f"Type {name!r} is not defined in the schema")
        return type_def
