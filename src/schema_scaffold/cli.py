"""
Command-line interface for schema_scaffold.

Provides init, detect and make commands for scaffolding migrations and models
from a declarative schema.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from schema_scaffold import __version__
from schema_scaffold.config import DEFAULT_SCHEMA_PATH, ScaffoldConfig
from schema_scaffold.discovery import (
    ClickDecisionSource,
    DecisionSource,
    DefaultDecisionSource,
    InferencePipeline,
    ScriptedDecisionSource,
)
from schema_scaffold.exceptions import ScaffoldError
from schema_scaffold.metadata import load_schema, write_example_schema
from schema_scaffold.models import RelationshipSet

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def load_answers(path: Path) -> ScriptedDecisionSource:
    """Load scripted answers (a YAML list, or a mapping of prompt -> answer)."""
    with open(path, "r") as f:
        answers = yaml.safe_load(f) or []
    if not isinstance(answers, (list, dict)):
        raise click.BadParameter("Answers file must contain a list or a mapping", param_hint="--answers")
    return ScriptedDecisionSource(answers)


def collect_user_options(config: ScaffoldConfig) -> None:
    """Ask which artifacts to create and where models live."""
    config.create_migrations = click.confirm("Create migrations?", default=config.create_migrations)
    config.create_models = click.confirm("Create models?", default=config.create_models)
    if config.create_models:
        namespace = click.prompt("Model namespace", default=config.model_namespace)
        config.model_namespace = namespace.replace("/", "\\")


def print_relationships(relationships: RelationshipSet, title: str) -> None:
    """Print a relationship set as a rich table."""
    if not len(relationships):
        console.print("\n[yellow]No relationships detected.[/yellow]")
        console.print("Foreign keys must be integer columns named <singular>_id.")
        return

    rel_table = Table(title=title)
    rel_table.add_column("Table", style="cyan")
    rel_table.add_column("Type", style="green")
    rel_table.add_column("On", style="yellow")
    rel_table.add_column("Foreign", style="magenta")
    rel_table.add_column("Inverse", style="blue")

    for table_name, rel in relationships.pairs():
        rel_table.add_row(
            table_name,
            rel.kind.value,
            rel.on,
            rel.foreign_column or "-",
            rel.pending_inverse_kind.value if rel.pending_inverse_kind else "-",
        )

    console.print(rel_table)


@click.group()
@click.version_option(version=__version__, prog_name="scaffold")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def cli(verbose: bool) -> None:
    """
    Schema Scaffold - Migrations and models from a declarative schema

    Infers foreign keys, one-to-one, one-to-many and many-to-many
    relationships from column and table names.
    """
    setup_logging(verbose)


@cli.command()
@click.option(
    "--schema",
    type=click.Path(path_type=Path),
    default=DEFAULT_SCHEMA_PATH,
    help="Where to write the example schema",
)
def init(schema: Path) -> None:
    """
    Write an example schema to get started.

    Example:

        scaffold init --schema app/scaffold.yaml
    """
    if schema.exists():
        if not click.confirm(f"Schema {schema} already exists. Overwrite?", default=False):
            console.print("[yellow]Left existing schema untouched.[/yellow]")
            return

    write_example_schema(schema)
    console.print(f"[green]Example schema written to: {schema}[/green]")


@cli.command()
@click.option(
    "--schema",
    type=click.Path(exists=True, path_type=Path),
    default=DEFAULT_SCHEMA_PATH,
    help="Schema YAML file",
)
@click.option(
    "--inverse/--no-inverse",
    default=True,
    help="Also show synthesized inverse relationships (default answers assumed)",
)
def detect(schema: Path, inverse: bool) -> None:
    """
    Show the relationships detected in a schema without writing anything.

    Examples:

        scaffold detect --schema app/scaffold.yaml

        scaffold detect --schema app/scaffold.yaml --no-inverse
    """
    console.print("[bold blue]Schema Scaffold - Relationship Detection[/bold blue]")
    console.print(f"Schema: {schema}")

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Detecting relationships...", total=None)

            tables = load_schema(schema)
            pipeline = InferencePipeline(tables, DefaultDecisionSource())
            relationships = pipeline.detect()
            if inverse:
                relationships = pipeline.synthesize(relationships)
            pivots = [name for name in tables if pipeline.is_pivot_table(name)]

            progress.update(task, completed=True)
    except ScaffoldError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    tables_table = Table(title="Tables")
    tables_table.add_column("Table", style="cyan")
    tables_table.add_column("Singular", style="green")
    tables_table.add_column("Columns", style="yellow", justify="right")
    tables_table.add_column("Pivot", style="magenta")

    for table_name, table in tables.items():
        tables_table.add_row(
            table_name,
            table.singular,
            str(len(table.columns)),
            "yes" if table_name in pivots else "-",
        )

    console.print(tables_table)
    print_relationships(relationships, "Detected Relationships")


@cli.command()
@click.option(
    "--schema",
    type=click.Path(path_type=Path),
    default=None,
    help="Schema YAML file (default: app/scaffold.yaml)",
)
@click.option(
    "--base_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root artifacts are written under",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="YAML file with scaffold configuration",
)
@click.option(
    "--yes",
    is_flag=True,
    help="Accept every default answer without prompting",
)
@click.option(
    "--answers",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="YAML file with scripted answers (list, or mapping of prompt -> answer)",
)
@click.option("--no_migrations", is_flag=True, help="Do not create migrations")
@click.option("--no_models", is_flag=True, help="Do not create models")
@click.option(
    "--model_namespace",
    type=str,
    default=None,
    help="Namespace for generated models (default: App)",
)
@click.option(
    "--prompt_options",
    is_flag=True,
    help="Ask which artifacts to create and the model namespace",
)
@click.option(
    "--dry_run",
    is_flag=True,
    help="Render artifacts and show relationships without writing files",
)
def make(
    schema: Optional[Path],
    base_path: Optional[Path],
    config_file: Optional[Path],
    yes: bool,
    answers: Optional[Path],
    no_migrations: bool,
    no_models: bool,
    model_namespace: Optional[str],
    prompt_options: bool,
    dry_run: bool,
) -> None:
    """
    Generate migrations and models from a schema.

    Examples:

        # Interactive: confirm each relationship type
        scaffold make --schema app/scaffold.yaml

        # Unattended: accept all defaults
        scaffold make --schema app/scaffold.yaml --yes

        # Scripted answers for reproducible runs
        scaffold make --schema app/scaffold.yaml --answers answers.yaml
    """
    from schema_scaffold.scaffolder import Scaffolder

    config = ScaffoldConfig.load(config_file) if config_file else ScaffoldConfig()
    if schema is not None:
        config.schema_path = schema
    if base_path is not None:
        config.base_path = base_path
    if no_migrations:
        config.create_migrations = False
    if no_models:
        config.create_models = False
    if model_namespace:
        config.model_namespace = model_namespace.replace("/", "\\")

    console.print("[bold blue]Schema Scaffold[/bold blue]")
    console.print(f"Schema: {config.schema_path}")

    if not config.schema_path.exists():
        console.print(f"[red]Error: This command expects the file {config.schema_path} to exist but it is missing[/red]")
        write_example_schema(config.schema_path)
        console.print("I've added a sample schema there to get you started.")
        sys.exit(1)

    if prompt_options:
        collect_user_options(config)

    decision_source: DecisionSource
    if answers:
        decision_source = load_answers(answers)
    elif yes:
        decision_source = DefaultDecisionSource()
    else:
        decision_source = ClickDecisionSource()

    try:
        result = Scaffolder(config, decision_source).run(write=not dry_run)
    except ScaffoldError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    print_relationships(result.relationships, "Relationships")

    summary_table = Table(title="Scaffold Summary")
    summary_table.add_column("Artifact", style="cyan")
    summary_table.add_column("Rendered", style="green", justify="right")
    summary_table.add_column("Written", style="yellow", justify="right")

    summary_table.add_row("Migrations", str(len(result.migrations)), str(len(result.written.get("migration", []))))
    summary_table.add_row("Models", str(len(result.models)), str(len(result.written.get("model", []))))
    console.print(summary_table)

    if dry_run:
        console.print("\n[yellow]Dry run: no files written.[/yellow]")
    else:
        console.print("\n[green]Scaffold complete![/green]")


if __name__ == "__main__":
    cli()
