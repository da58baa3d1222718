"""Core modules for GraphQL operation generation."""

from .arguments import call_clause, variable_clause
from .classifier import classify, is_composite, is_leaf, render_type, unwrap
from .config import GeneratorOptions
from .directives import (
    APPSYNC_DIRECTIVES,
    APPSYNC_SCALARS,
    declare_missing_scalars,
    strip_directives,
)
from .errors import (
    GenerationError,
    MalformedTypeError,
    OutputDirectoryError,
    SchemaParseError,
    UnknownOperationKindError,
)
from .generator import GenerationReport, OperationGenerator, generate_operations
from .hooks import AddHeaderHook, HookRunner, PostGenerateHook
from .ir import (
    IRArgument,
    IRField,
    IRSchema,
    IRType,
    OperationDraft,
    OperationKind,
    TypeKind,
    TypeRef,
    list_of,
    named,
    non_null,
)
from .parser import SchemaParser
from .query_builder import QueryBuilder, assemble, operation_name
from .selection import SelectionSynthesizer

__all__ = [
    # IR types
    "IRArgument",
    "IRField",
    "IRSchema",
    "IRType",
    "OperationDraft",
    "OperationKind",
    "TypeKind",
    "TypeRef",
    "list_of",
    "named",
    "non_null",
    # Classifier
    "classify",
    "is_composite",
    "is_leaf",
    "render_type",
    "unwrap",
    # Synthesis and assembly
    "SelectionSynthesizer",
    "call_clause",
    "variable_clause",
    "QueryBuilder",
    "assemble",
    "operation_name",
    # Parsing
    "SchemaParser",
    "APPSYNC_DIRECTIVES",
    "APPSYNC_SCALARS",
    "declare_missing_scalars",
    "strip_directives",
    # Generation
    "GeneratorOptions",
    "GenerationReport",
    "OperationGenerator",
    "generate_operations",
    "AddHeaderHook",
    "HookRunner",
    "PostGenerateHook",
    # Errors
    "GenerationError",
    "MalformedTypeError",
    "OutputDirectoryError",
    "SchemaParseError",
    "UnknownOperationKindError",
]
