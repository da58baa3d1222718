"""Exceptions raised while generating operations."""


class GenerationError(Exception):
    """Base class for all gql-opgen errors."""


class SchemaParseError(GenerationError):
    """The schema document could not be read or built."""


class MalformedTypeError(GenerationError):
    """A type reference does not describe a valid GraphQL type."""


class UnknownOperationKindError(GenerationError, ValueError):
    """An operation kind other than query, mutation or subscription was requested."""


class OutputDirectoryError(GenerationError):
    """The output directory for an operation kind could not be created."""
