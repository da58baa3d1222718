"""Tests for variable and call-site argument clauses."""

from gql_opgen.core.arguments import call_clause, variable_clause
from gql_opgen.core.ir import IRArgument, TypeKind, list_of, named, non_null


def _args():
    return [
        IRArgument(name="id", type=non_null(named("ID", TypeKind.SCALAR))),
        IRArgument(name="tags", type=list_of(non_null(named("String", TypeKind.SCALAR)))),
        IRArgument(name="input", type=non_null(named("UserInput", TypeKind.INPUT_OBJECT))),
    ]


def test_variable_clause_preserves_type_syntax_and_order():
    assert variable_clause(_args()) == "$id: ID!, $tags: [String!], $input: UserInput!"


def test_call_clause_mirrors_variables():
    assert call_clause(_args()) == "id: $id, tags: $tags, input: $input"


def test_no_arguments_give_empty_clauses():
    assert variable_clause([]) == ""
    assert call_clause([]) == ""


def test_single_optional_argument():
    args = [IRArgument(name="id", type=named("ID", TypeKind.SCALAR))]
    assert variable_clause(args) == "$id: ID"
    assert call_clause(args) == "id: $id"
