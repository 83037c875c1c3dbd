"""Command-line interface for infragraph."""

import sys

import click

from .config.logging import configure_logging
from .config.settings import InfragraphSettings
from .graph.hierarchy import valid_drop_targets
from .output.formatter import format_node_line, format_validation_result
from .schema.errors import SchemaLoadError, SchemaValidationError
from .schema.loader import parse_graph
from .schema.models import InfrastructureData, ResourceType
from .store import GraphStore
from .validators.errors import GraphIntegrityError
from .validators.runner import validate_graph_file


def _load_graph(graph_file: str) -> InfrastructureData:
    """Load a graph file, exiting with code 2 on file or schema errors."""
    try:
        return parse_graph(graph_file)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        _echo_schema_errors(e)
        sys.exit(2)


def _echo_schema_errors(e: SchemaValidationError) -> None:
    click.echo(f"Schema validation error: {e}", err=True)
    for err in e.errors:
        click.echo(f"  - {err['loc']}: {err['msg']}", err=True)


@click.group()
@click.version_option()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Emit debug logs to stderr.",
)
@click.option(
    "--log-json",
    is_flag=True,
    help="Structured JSON log output to stderr.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, log_json: bool):
    """infragraph: compose and check infrastructure resource graphs."""
    settings = InfragraphSettings.from_cli(verbose=verbose, log_json=log_json)
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    ctx.obj = settings


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(graph_file: str, output_format: str, strict: bool):
    """Check a graph file against the containment and dependency rules.

    GRAPH_FILE is the path to an exported JSON graph.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or schema error
    """
    try:
        result = validate_graph_file(graph_file)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        _echo_schema_errors(e)
        sys.exit(2)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.argument(
    "resource_type",
    type=click.Choice([t.value for t in ResourceType]),
)
def targets(graph_file: str, resource_type: str):
    """List where a resource type may be dropped in a graph.

    Prints one node id per line, plus "root" if the type may sit at
    root level.
    """
    data = _load_graph(graph_file)
    for target in valid_drop_targets(resource_type, data.nodes):
        click.echo(target)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.argument("query")
@click.pass_obj
def search(settings: InfragraphSettings, graph_file: str, query: str):
    """Find nodes whose id, type or name contains QUERY.

    Exit codes:
      0 - At least one match
      1 - No matches
      2 - File, schema or integrity error
    """
    data = _load_graph(graph_file)
    store = GraphStore(validate_on_import=settings.validate_on_import)
    try:
        store.import_graph(data)
    except GraphIntegrityError as e:
        click.echo(f"Integrity error: {e}", err=True)
        for issue in e.result.errors:
            click.echo(f"  - {issue}", err=True)
        sys.exit(2)

    matches = store.search(query)
    for node_id in matches:
        click.echo(format_node_line(store.get_node(node_id)))

    sys.exit(0 if matches else 1)


if __name__ == "__main__":
    main()
