"""Post-generation hooks.

Hooks receive each generated operation document before it is written and
may transform it.

Example usage:
    from gql_opgen.core.hooks import HookRunner, AddHeaderHook

    hooks = HookRunner()
    hooks.add_post_hook(AddHeaderHook("# Generated by gql-opgen, do not edit"))
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Example:
        class Uppercase(PostGenerateHook):
            def post_generate(self, filename: str, content: str) -> str:
                return content.upper()
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called for each operation file before it is written.

        Args:
            filename: The name of the generated file (e.g., "getUser.graphql")
            content: The operation document

        Returns:
            The (possibly transformed) document to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a comment header to generated files.

    Plain text lines are turned into GraphQL comments.

    Example:
        hook = AddHeaderHook("Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = "\n".join(
            line if line.startswith("#") else f"# {line}".rstrip()
            for line in header.rstrip("\n").splitlines()
        )

    def post_generate(self, _filename: str, content: str) -> str:
        """Add the header to the beginning of the document."""
        return f"{self.header}\n\n{content}"


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.post_hooks: list[PostGenerateHook] = []

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
