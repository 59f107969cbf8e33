from __future__ import annotations

import re
from pathlib import Path

import click
from rich.markup import escape

from warnparse.cli.console import console
from warnparse.cli.context import CLIContext, ExitCode
from warnparse.cli.output import (
    OutputFormat,
    format_error,
    format_json,
    format_summary,
    issues_table,
)
from warnparse.exceptions import ParserNotFoundError, ParsingError
from warnparse.logging import bind_context, clear_context, get_logger
from warnparse.parsers import ParseStatus, get_parser
from warnparse.parsers.base import LineTransformer
from warnparse.parsers.transformers import compose, strip_prefix


@click.command()
@click.argument(
    "report",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-p",
    "--parser",
    "parser_id",
    default=None,
    help="Parser ID (see 'warnparse parsers'). Defaults to parsing.default_parser.",
)
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help="Output format. Defaults to output.format from the config.",
)
@click.option(
    "--strip-prefix",
    "prefix",
    default=None,
    help="Regular expression removed from the start of every line before parsing.",
)
@click.pass_context
def parse(
    ctx: click.Context,
    report: Path,
    parser_id: str | None,
    fmt: str | None,
    prefix: str | None,
) -> None:
    """Parse a tool report and print the issues found.

    REPORT is a file with compiler or linter output, or '-' for stdin.

    Examples:
        warnparse parse build.log --parser gcc
        make 2>&1 | warnparse parse - -p gcc --format json
        warnparse parse ci.log -p javac --strip-prefix '\\[javac\\]\\s*'
    """
    logger = get_logger(__name__)
    cli_ctx: CLIContext = ctx.obj["cli_ctx"]
    config = cli_ctx.config

    parser_id = parser_id or config.parsing.default_parser
    if parser_id is None:
        click.echo(
            format_error(
                "No parser selected",
                suggestion="Pass --parser or set parsing.default_parser",
            ),
            err=True,
        )
        raise SystemExit(ExitCode.FAILURE)

    transformers: list[LineTransformer] = []
    configured = config.parsing.build_transformer()
    if configured is not None:
        transformers.append(configured)
    if prefix is not None:
        try:
            transformers.append(strip_prefix(prefix))
        except re.error as e:
            raise click.BadParameter(
                f"not a valid regular expression: {e}", param_hint="--strip-prefix"
            ) from e
    try:
        if transformers:
            parser = get_parser(parser_id, transformer=compose(*transformers))
        else:
            parser = get_parser(parser_id)
    except ParserNotFoundError as e:
        click.echo(
            format_error(
                e.message,
                details=[f"Available: {', '.join(e.available)}"],
                suggestion="Run 'warnparse parsers' to list parser IDs",
            ),
            err=True,
        )
        raise SystemExit(ExitCode.FAILURE) from e

    output_format = OutputFormat(fmt or config.output.format)
    bind_context(report=str(report), parser_id=parser.id)
    try:
        with click.open_file(
            str(report), encoding=config.parsing.encoding, errors="replace"
        ) as stream:
            outcome = parser.try_parse(stream)
    except KeyboardInterrupt as e:
        logger.info("parse_interrupted")
        raise SystemExit(ExitCode.INTERRUPTED) from e
    finally:
        clear_context()

    if outcome.status is ParseStatus.CANCELED:
        raise SystemExit(ExitCode.INTERRUPTED)
    if outcome.status is ParseStatus.FAILED:
        error = outcome.error
        details = None
        if isinstance(error, ParsingError) and error.line_number:
            details = [f"Line: {error.line_number}"]
        click.echo(format_error(f"{parser} failed: {error}", details=details), err=True)
        raise SystemExit(ExitCode.FAILURE)

    issues = outcome.issues
    if output_format is OutputFormat.JSON:
        click.echo(format_json(issues.to_dicts()))
    else:
        if not issues.is_empty():
            console.print(issues_table(issues, title=escape(str(report))))
        if not cli_ctx.quiet:
            console.print(format_summary(issues), highlight=False)
