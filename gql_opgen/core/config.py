"""Generation options."""

from pydantic import BaseModel, Field

from .ir import OperationKind


class GeneratorOptions(BaseModel):
    """Which operations to generate and how."""

    generate_queries: bool = True
    generate_mutations: bool = True
    generate_subscriptions: bool = False
    max_recursion_depth: int = Field(default=3, ge=0)
    extension: str = Field(default="graphql", min_length=1)
    strip_directives: bool = True
    template_dir: str | None = None

    def enabled_kinds(self) -> list[OperationKind]:
        """Requested operation kinds, always in query, mutation, subscription order."""
        flags = [
            (OperationKind.QUERY, self.generate_queries),
            (OperationKind.MUTATION, self.generate_mutations),
            (OperationKind.SUBSCRIPTION, self.generate_subscriptions),
        ]
        return [kind for kind, enabled in flags if enabled]
