"""Variable declarations and call-site arguments for root fields."""

from collections.abc import Sequence

from .classifier import render_type
from .ir import IRArgument


def variable_clause(args: Sequence[IRArgument]) -> str:
    """Build the variable declaration part: ``$id: ID!, $input: UserInput!``.

    Returns an empty string when there are no arguments; the caller then
    omits the parentheses.
    """
    return ", ".join(f"${arg.name}: {render_type(arg.type)}" for arg in args)


def call_clause(args: Sequence[IRArgument]) -> str:
    """Build the field argument part: ``id: $id, input: $input``."""
    return ", ".join(f"{arg.name}: ${arg.name}" for arg in args)
