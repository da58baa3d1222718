"""Command-line interface for gql-opgen."""

from pathlib import Path

import click

from . import __version__
from .core.config import GeneratorOptions
from .core.directives import strip_directives as strip_sdl_directives
from .core.errors import GenerationError
from .core.generator import generate_operations
from .core.hooks import AddHeaderHook, HookRunner
from .log import configure_logging


def fail(message: str, silent: bool = False):
    """Abort with exit status 1; the message is dropped when silent."""
    if silent:
        raise click.exceptions.Exit(1)
    raise click.ClickException(message)


@click.group()
@click.version_option(version=__version__, prog_name="gql-opgen")
def main():
    """Generate GraphQL operations from a local SDL schema.

    One query, mutation or subscription document is written per root field.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to GraphQL schema file (SDL format).",
)
@click.option(
    "--out",
    "-o",
    default="generated-gql",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Output directory for generated files.",
)
@click.option("--queries/--no-queries", default=True, show_default=True, help="Generate Query operations.")
@click.option("--mutations/--no-mutations", default=True, show_default=True, help="Generate Mutation operations.")
@click.option(
    "--subscriptions/--no-subscriptions",
    default=False,
    show_default=True,
    help="Generate Subscription operations.",
)
@click.option(
    "--max-depth",
    default=3,
    show_default=True,
    type=click.IntRange(min=0),
    help="Maximum nesting depth of generated selection sets.",
)
@click.option(
    "--strip-directives/--keep-directives",
    default=True,
    show_default=True,
    help="Remove AWS AppSync directives before parsing the schema.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with an operation.graphql.j2 template overriding the built-in one.",
)
@click.option("--header", help="Comment header added to every generated file.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output.")
@click.option("--silent", is_flag=True, help="Suppress logs.")
def generate(
    schema: str,
    out: str,
    queries: bool,
    mutations: bool,
    subscriptions: bool,
    max_depth: int,
    strip_directives: bool,
    template_dir: str | None,
    header: str | None,
    verbose: bool,
    silent: bool,
):
    """Generate operation documents from a GraphQL schema.

    Examples:

        gql-opgen generate --schema ./schema.graphql --out ./generated-gql

        gql-opgen generate -s ./schema.graphql --subscriptions --max-depth 2
    """
    logger = configure_logging(verbose=verbose, silent=silent)
    output_path = Path(out).resolve()

    options = GeneratorOptions(
        generate_queries=queries,
        generate_mutations=mutations,
        generate_subscriptions=subscriptions,
        max_recursion_depth=max_depth,
        strip_directives=strip_directives,
        template_dir=template_dir,
    )
    hooks = HookRunner()
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    logger.info("Using schema from %s", schema)
    logger.info("Output directory: %s", output_path)
    if strip_directives:
        logger.info("AWS AppSync directives will be stripped before parsing")

    try:
        report = generate_operations(schema, output_path, options, hooks)
    except GenerationError as e:
        fail(str(e), silent)

    if not silent:
        click.echo(f"Done! Generated {len(report.written)} operation files in {output_path}")
        if verbose:
            for path in report.written:
                click.echo(f"  {path.relative_to(output_path)}")

    if report.failed:
        fail(
            f"{len(report.failed)} operation(s) could not be written: {', '.join(report.failed)}",
            silent,
        )


@main.command(name="strip-directives")
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to GraphQL schema file (SDL format).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file (default: stdout).",
)
def strip_directives_command(schema: str, output: str | None):
    """Remove AWS AppSync directives from a schema file.

    Examples:

        gql-opgen strip-directives -s ./appsync.graphql -o ./schema.graphql
    """
    try:
        content = Path(schema).read_text(encoding="utf-8")
        stripped = strip_sdl_directives(content)
        if output:
            Path(output).write_text(stripped, encoding="utf-8")
        else:
            click.echo(stripped, nl=False)
    except OSError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
