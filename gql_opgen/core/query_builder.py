"""Query builder for GraphQL operations.

Assembles one operation document per root field from the argument clauses
and the synthesized selection set, using a Jinja2 template.

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .arguments import call_clause, variable_clause
from .errors import UnknownOperationKindError
from .ir import IRField, IRSchema, OperationDraft, OperationKind
from .selection import SelectionSynthesizer

OPERATION_TEMPLATE = "operation.graphql.j2"


def operation_name(field_name: str) -> str:
    """Upper-case the first character of a field name: getUser -> GetUser."""
    return field_name[:1].upper() + field_name[1:]


def to_operation_kind(kind: OperationKind | str) -> OperationKind:
    """Coerce a kind name to OperationKind, rejecting anything else."""
    if isinstance(kind, OperationKind):
        return kind
    try:
        return OperationKind(kind)
    except ValueError:
        raise UnknownOperationKindError(
            f"Unknown operation kind {kind!r}, expected query, mutation or subscription"
        ) from None


def build_environment(template_dir: str | Path | None = None) -> Environment:
    """Create the Jinja2 environment; templates in template_dir take precedence."""
    loaders = []
    if template_dir:
        template_path = Path(template_dir)
        if template_path.is_dir():
            loaders.append(FileSystemLoader(str(template_path)))
    loaders.append(PackageLoader("gql_opgen", "templates"))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(),
    )


@lru_cache(maxsize=None)
def _default_environment() -> Environment:
    return build_environment()


def assemble(
    kind: OperationKind | str,
    field_name: str,
    variables: str,
    call_args: str,
    selection_body: str,
    env: Environment | None = None,
) -> str:
    """Render an operation document.

    Empty ``variables`` or ``call_args`` drop their parentheses entirely, and
    an empty ``selection_body`` leaves the root field without braces.

    Raises:
        UnknownOperationKindError: kind is not query, mutation or subscription
    """
    op_kind = to_operation_kind(kind)
    template = (env or _default_environment()).get_template(OPERATION_TEMPLATE)
    return template.render(
        kind=op_kind.value,
        operation_name=operation_name(field_name),
        root_field_name=field_name,
        variable_clause=variables,
        call_args_clause=call_args,
        selection_body=selection_body,
    )


class QueryBuilder:
    """Builds operation drafts and documents for root fields."""

    def __init__(
        self,
        schema: IRSchema,
        max_depth: int = 3,
        template_dir: str | Path | None = None,
    ):
        self.schema = schema
        self.synthesizer = SelectionSynthesizer(schema, max_depth=max_depth)
        self.env = build_environment(template_dir) if template_dir else _default_environment()

    def build(self, kind: OperationKind | str, root_field: IRField) -> OperationDraft:
        """Build the draft for one root field."""
        op_kind = to_operation_kind(kind)
        return OperationDraft(
            operation_kind=op_kind,
            operation_name=operation_name(root_field.name),
            root_field_name=root_field.name,
            variable_clause=variable_clause(root_field.arguments),
            call_args_clause=call_clause(root_field.arguments),
            selection_body=self.synthesizer.synthesize(root_field.type),
        )

    def render(self, draft: OperationDraft) -> str:
        """Render a draft into the operation document text."""
        return assemble(
            draft.operation_kind,
            draft.root_field_name,
            draft.variable_clause,
            draft.call_args_clause,
            draft.selection_body,
            env=self.env,
        )

    def build_document(self, kind: OperationKind | str, root_field: IRField) -> str:
        return self.render(self.build(kind, root_field))
