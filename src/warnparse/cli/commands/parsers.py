from __future__ import annotations

import click
from rich.table import Table

from warnparse.cli.console import console
from warnparse.cli.output import OutputFormat, format_json
from warnparse.parsers import available_parsers, get_parser


@click.command("parsers")
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format.",
)
def parsers(fmt: str) -> None:
    """List the available parser IDs.

    Examples:
        warnparse parsers
        warnparse parsers --format json
    """
    entries = [
        {"id": parser_id, "parser": type(get_parser(parser_id)).__name__}
        for parser_id in available_parsers()
    ]

    if fmt == OutputFormat.JSON.value:
        click.echo(format_json(entries))
        return

    table = Table(title="Available parsers")
    table.add_column("ID")
    table.add_column("Parser")
    for entry in entries:
        table.add_row(entry["id"], entry["parser"])
    console.print(table)
