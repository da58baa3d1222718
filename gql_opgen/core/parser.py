"""GraphQL schema parser using graphql-core.

Builds a schema from an SDL document and converts it into an IRSchema.
"""

import logging
from pathlib import Path

from graphql import (
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLError,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
    build_schema,
)

from .directives import declare_missing_scalars, strip_directives
from .errors import SchemaParseError
from .ir import (
    IRArgument,
    IRField,
    IRSchema,
    IRType,
    TypeKind,
    TypeRef,
    list_of,
    named,
    non_null,
)

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses a GraphQL SDL file into IR."""

    def __init__(self, schema_path: str | Path | None = None, strip_directives: bool = True):
        """Initialize a parser, optionally with a path to a schema file.

        Args:
            schema_path: Path to the SDL document read by parse_all()
            strip_directives: Remove AppSync directives and declare AppSync
                scalars before building the schema
        """
        self.schema_path = Path(schema_path) if schema_path is not None else None
        self.strip_directives = strip_directives

    def parse_all(self) -> IRSchema:
        """Read the schema file and return the complete IR."""
        if self.schema_path is None:
            raise SchemaParseError("No schema file given")
        try:
            content = self.schema_path.read_text(encoding="utf-8")
        except OSError as e:
            raise SchemaParseError(f"Cannot read schema file {self.schema_path}: {e}") from e
        logger.debug("Read schema file: %s", self.schema_path)
        return self.parse_sdl(content)

    def parse_sdl(self, sdl: str) -> IRSchema:
        """Build and convert an in-memory SDL document."""
        if self.strip_directives:
            sdl = declare_missing_scalars(strip_directives(sdl))

        try:
            schema = build_schema(sdl)
        # graphql-core reports invalid SDL as TypeError, syntax errors as GraphQLError
        except (GraphQLError, TypeError) as e:
            raise SchemaParseError(f"Invalid GraphQL schema: {e}") from e

        ir = self._convert_schema(schema)
        logger.debug(
            "Parsed GraphQL schema: %d types, query=%s, mutation=%s, subscription=%s",
            len(ir.types),
            ir.query_type,
            ir.mutation_type,
            ir.subscription_type,
        )
        return ir

    def _convert_schema(self, schema: GraphQLSchema) -> IRSchema:
        ir = IRSchema(
            query_type=schema.query_type.name if schema.query_type else None,
            mutation_type=schema.mutation_type.name if schema.mutation_type else None,
            subscription_type=schema.subscription_type.name if schema.subscription_type else None,
        )
        for name, gql_type in schema.type_map.items():
            if name.startswith("__"):
                continue
            ir.add_type(self._convert_named_type(gql_type))
        return ir

    def _convert_named_type(self, gql_type: GraphQLNamedType) -> IRType:
        kind = self._get_kind(gql_type)
        ir_type = IRType(name=gql_type.name, kind=kind)

        if isinstance(gql_type, (GraphQLObjectType, GraphQLInterfaceType)):
            ir_type.fields = [
                IRField(
                    name=field_name,
                    type=self._get_type_ref(gql_field.type),
                    arguments=[
                        self._convert_argument(arg_name, arg)
                        for arg_name, arg in gql_field.args.items()
                    ],
                )
                for field_name, gql_field in gql_type.fields.items()
            ]
        elif isinstance(gql_type, GraphQLInputObjectType):
            ir_type.fields = [
                IRField(
                    name=field_name,
                    type=self._get_type_ref(input_field.type),
                )
                for field_name, input_field in gql_type.fields.items()
            ]
        elif isinstance(gql_type, GraphQLUnionType):
            ir_type.possible_types = [member.name for member in gql_type.types]

        return ir_type

    def _convert_argument(self, name: str, arg: GraphQLArgument) -> IRArgument:
        return IRArgument(
            name=name,
            type=self._get_type_ref(arg.type),
        )

    @classmethod
    def _get_type_ref(cls, gql_type) -> TypeRef:
        """Mirror a graphql-core type, wrappers included, as a TypeRef."""
        if isinstance(gql_type, GraphQLNonNull):
            return non_null(cls._get_type_ref(gql_type.of_type))
        if isinstance(gql_type, GraphQLList):
            return list_of(cls._get_type_ref(gql_type.of_type))
        return named(gql_type.name, cls._get_kind(gql_type))

    @staticmethod
    def _get_kind(gql_type: GraphQLNamedType) -> TypeKind:
        if isinstance(gql_type, GraphQLScalarType):
            return TypeKind.SCALAR
        if isinstance(gql_type, GraphQLEnumType):
            return TypeKind.ENUM
        if isinstance(gql_type, GraphQLObjectType):
            return TypeKind.OBJECT
        if isinstance(gql_type, GraphQLInterfaceType):
            return TypeKind.INTERFACE
        if isinstance(gql_type, GraphQLUnionType):
            return TypeKind.UNION
        if isinstance(gql_type, GraphQLInputObjectType):
            return TypeKind.INPUT_OBJECT
        raise TypeError(f"Unsupported GraphQL type {gql_type!r}")
