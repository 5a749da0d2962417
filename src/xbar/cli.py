"""CLI for xbar."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from xbar import __version__
from xbar.layout import blocks, columns, connections, rows
from xbar.layout.topology import check_count
from xbar.model import InvalidArgument
from xbar.render import render_svg
from xbar.themes import THEMES
from xbar.validate import Severity, validate_plan

log = logging.getLogger(__name__)


def _terminal_count(ctx: click.Context, param: click.Parameter, value: int) -> int:
    try:
        return check_count(value)
    except InvalidArgument as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e


count_option = click.option(
    "-n", "--num-terms", "count", type=int, required=True, callback=_terminal_count,
    help="Number of terminals",
)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """xbar: Locality preserving one-sided crossbar switch wiring."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@count_option
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path),
              required=True, help="Output SVG file path")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="classic",
              help="Visual theme (default: classic)")
@click.option("--separators/--no-separators", default=True,
              help="Draw dashed lines between blocks (default: on)")
def render(count: int, output: Path, theme: str, separators: bool) -> None:
    """Render a crossbar switch with N terminals to SVG."""
    svg = render_svg(count, THEMES[theme], separators=separators)
    if not svg.endswith("\n"):
        svg += "\n"
    output.write_text(svg)
    log.debug("Wrote %d bytes to %s", len(svg), output)
    click.echo(f"Crossbar switch with {count} terminals was printed "
               f"to the SVG file {output}.")


@cli.command()
@count_option
def info(count: int) -> None:
    """Show the structure of a crossbar with N terminals."""
    click.echo(f"Terminals: {count}")
    click.echo(f"Rows: {rows(count)}")
    click.echo(f"Blocks: {blocks(count)}")
    click.echo(f"Columns: {columns(count)}")
    click.echo(f"Connections: {len(connections(count))}")


@cli.command(name="list")
@count_option
@click.option("--format", "fmt", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def list_connections(count: int, fmt: str) -> None:
    """List every connection of a crossbar with N terminals."""
    plan = connections(count)
    if fmt == "json":
        click.echo(json.dumps([conn.to_dict() for conn in plan], indent=2))
        return

    for conn in plan:
        a, b = conn.terminals
        click.echo(
            f"{a:>3} - {b:<3} column {conn.column}: "
            f"block {conn.start.block_index} row {conn.start.row_index} -> "
            f"block {conn.end.block_index} row {conn.end.row_index}"
        )


@cli.command()
@count_option
def validate(count: int) -> None:
    """Check the generated plan for a crossbar with N terminals."""
    violations = validate_plan(count)
    errors = [v for v in violations if v.severity is Severity.ERROR]
    warnings = [v for v in violations if v.severity is Severity.WARNING]

    for v in warnings:
        click.echo(f"Warning [{v.check}]: {v.message}", err=True)

    if errors:
        click.echo("Validation errors:", err=True)
        for v in errors:
            click.echo(f"  - [{v.check}] {v.message}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(connections(count))} connections, "
               f"{columns(count)} columns, "
               f"{blocks(count)} blocks")
