"""Operation generator.

Walks the Query, Mutation and Subscription root types and writes one
operation document per root field:

    <output_dir>/queries/<fieldName>.graphql
    <output_dir>/mutations/<fieldName>.graphql
    <output_dir>/subscriptions/<fieldName>.graphql
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import GeneratorOptions
from .errors import OutputDirectoryError
from .hooks import HookRunner
from .ir import IRSchema, OperationKind
from .parser import SchemaParser
from .query_builder import QueryBuilder

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Files written and root fields that could not be written."""
    written: list[Path] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


class OperationGenerator:
    """Generates operation files from an IRSchema."""

    def __init__(
        self,
        ir: IRSchema,
        output_dir: str | Path,
        options: GeneratorOptions | None = None,
        hooks: HookRunner | None = None,
    ):
        """Initialize the generator.

        Args:
            ir: The intermediate representation of the GraphQL schema
            output_dir: Directory where the operation sub-directories are created
            options: Generation options; defaults apply when omitted
            hooks: Post-generation hooks run on every document
        """
        self.ir = ir
        self.output_dir = Path(output_dir)
        self.options = options or GeneratorOptions()
        self.hooks = hooks or HookRunner()
        self.builder = QueryBuilder(
            ir,
            max_depth=self.options.max_recursion_depth,
            template_dir=self.options.template_dir,
        )

    def generate(self) -> GenerationReport:
        """Generate all requested operation kinds."""
        report = GenerationReport()
        for kind in self.options.enabled_kinds():
            self._generate_kind(kind, report)
        return report

    def _generate_kind(self, kind: OperationKind, report: GenerationReport):
        root = self.ir.root_type(kind)
        if root is None:
            logger.debug("No %s type found in schema", kind.value.capitalize())
            return

        type_dir = self.output_dir / kind.directory
        try:
            type_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryError(f"Failed to create directory {type_dir}: {e}") from e
        logger.debug("Created directory: %s", type_dir)

        for root_field in root.fields:
            draft = self.builder.build(kind, root_field)
            file_name = draft.file_name(self.options.extension)
            content = self.hooks.run_post_hooks(file_name, self.builder.render(draft))
            file_path = type_dir / file_name
            try:
                file_path.write_text(content, encoding="utf-8")
            except OSError as e:
                logger.error("Failed to write file %s: %s", file_path, e)
                report.failed.append(f"{kind.value}:{root_field.name}")
                continue

            logger.debug("Generated %s: %s", kind.value, root_field.name)
            report.written.append(file_path)


def generate_operations(
    schema_path: str | Path,
    output_dir: str | Path,
    options: GeneratorOptions | None = None,
    hooks: HookRunner | None = None,
) -> GenerationReport:
    """Parse a schema file and generate its operations."""
    options = options or GeneratorOptions()
    ir = SchemaParser(schema_path, strip_directives=options.strip_directives).parse_all()
    return OperationGenerator(ir, output_dir, options, hooks).generate()
