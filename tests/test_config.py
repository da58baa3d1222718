"""Tests for generator options."""

import pytest
from pydantic import ValidationError

from gql_opgen.core.config import GeneratorOptions
from gql_opgen.core.ir import OperationKind


def test_defaults():
    options = GeneratorOptions()
    assert options.generate_queries
    assert options.generate_mutations
    assert not options.generate_subscriptions
    assert options.max_recursion_depth == 3
    assert options.extension == "graphql"
    assert options.enabled_kinds() == [OperationKind.QUERY, OperationKind.MUTATION]


def test_enabled_kinds_keep_fixed_order():
    options = GeneratorOptions(generate_queries=False, generate_subscriptions=True)
    assert options.enabled_kinds() == [OperationKind.MUTATION, OperationKind.SUBSCRIPTION]


def test_negative_depth_is_rejected():
    with pytest.raises(ValidationError):
        GeneratorOptions(max_recursion_depth=-1)


def test_empty_extension_is_rejected():
    with pytest.raises(ValidationError):
        GeneratorOptions(extension="")


def test_operation_kind_directories():
    assert OperationKind.QUERY.directory == "queries"
    assert OperationKind.MUTATION.directory == "mutations"
    assert OperationKind.SUBSCRIPTION.directory == "subscriptions"
