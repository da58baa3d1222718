"""Tests for operation assembly."""

import pytest

from gql_opgen.core.errors import UnknownOperationKindError
from gql_opgen.core.ir import OperationKind
from gql_opgen.core.query_builder import QueryBuilder, assemble, operation_name


class TestOperationName:
    """Tests for operation_name()."""

    def test_capitalizes_first_character(self):
        assert operation_name("getUser") == "GetUser"

    def test_rest_is_unchanged(self):
        assert operation_name("get_user_by_id") == "Get_user_by_id"
        assert operation_name("URLs") == "URLs"

    def test_empty(self):
        assert operation_name("") == ""


class TestAssemble:
    """Tests for assemble()."""

    def test_full_operation(self):
        result = assemble("query", "getUser", "$id: ID!", "id: $id", "    id\n    name")
        assert result == "query GetUser($id: ID!) {\n  getUser(id: $id) {\n    id\n    name\n  }\n}"

    def test_no_arguments_no_parentheses(self):
        result = assemble("query", "me", "", "", "    id")
        assert result == "query Me {\n  me {\n    id\n  }\n}"
        assert "(" not in result

    def test_leaf_field_has_no_selection_braces(self):
        result = assemble("mutation", "deleteUser", "$id: ID!", "id: $id", "")
        assert result == "mutation DeleteUser($id: ID!) {\n  deleteUser(id: $id)\n}"

    def test_accepts_operation_kind_enum(self):
        result = assemble(OperationKind.SUBSCRIPTION, "ping", "", "", "")
        assert result == "subscription Ping {\n  ping\n}"

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(UnknownOperationKindError):
            assemble("fragment", "user", "", "", "")

    def test_unknown_kind_is_a_value_error(self):
        with pytest.raises(ValueError):
            assemble("Query", "user", "", "", "")


class TestQueryBuilder:
    """Tests for QueryBuilder."""

    def test_get_user_document(self, parse_sdl):
        ir = parse_sdl(
            """
            type Query { getUser(id: ID!): User }
            type User { id: ID! name: String! }
            """
        )
        root_field = ir.get_type("Query").fields[0]
        document = QueryBuilder(ir).build_document("query", root_field)
        assert document == "query GetUser($id: ID!) {\n  getUser(id: $id) {\n    id\n    name\n  }\n}"

    def test_draft_values(self, user_schema):
        root_field = user_schema.get_type("Query").fields[1]
        draft = QueryBuilder(user_schema).build(OperationKind.QUERY, root_field)
        assert draft.operation_kind is OperationKind.QUERY
        assert draft.operation_name == "GetUser"
        assert draft.root_field_name == "getUser"
        assert draft.variable_clause == "$id: ID!"
        assert draft.call_args_clause == "id: $id"
        assert draft.selection_body.startswith("    id\n    name\n    friends {")
        assert draft.file_name() == "getUser.graphql"
        assert draft.file_name("gql") == "getUser.gql"

    def test_max_depth_is_applied(self, user_schema):
        root_field = user_schema.get_type("Query").fields[0]
        draft = QueryBuilder(user_schema, max_depth=0).build("query", root_field)
        assert draft.selection_body == "    id\n    name"

    def test_build_is_deterministic(self, user_schema):
        root_field = user_schema.get_type("Query").fields[0]
        first = QueryBuilder(user_schema).build_document("query", root_field)
        second = QueryBuilder(user_schema).build_document("query", root_field)
        assert first == second

    def test_unknown_kind_is_rejected(self, user_schema):
        root_field = user_schema.get_type("Query").fields[0]
        with pytest.raises(UnknownOperationKindError):
            QueryBuilder(user_schema).build("fetch", root_field)

    def test_custom_template_directory(self, user_schema, tmp_path):
        (tmp_path / "operation.graphql.j2").write_text(
            "# {{ operation_name }}\n{{ kind }} {{ operation_name }} { {{ root_field_name }} }\n"
        )
        root_field = user_schema.get_type("Query").fields[0]
        document = QueryBuilder(user_schema, template_dir=tmp_path).build_document("query", root_field)
        assert document == "# Me\nquery Me { me }"

    def test_missing_template_directory_falls_back_to_default(self, user_schema, tmp_path):
        root_field = user_schema.get_type("Query").fields[0]
        builder = QueryBuilder(user_schema, max_depth=0, template_dir=tmp_path / "missing")
        assert builder.build_document("query", root_field) == "query Me {\n  me {\n    id\n    name\n  }\n}"
