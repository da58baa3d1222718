"""Generate GraphQL operation documents from an SDL schema."""

__version__ = "0.1.0"
