"""The `suggest` command: print fix suggestions found in compiler output."""

from __future__ import annotations

from typing import TextIO

import click

from rustfix.cli._output import format_suggestions
from rustfix.config import OUTPUT_FORMATS, ConfigError, load_config
from rustfix.diagnostics.load import DiagnosticFormatError, decode_stream
from rustfix.runlog import cleanup_old_logs, log_run
from rustfix.suggestions.collect import collect_all
from rustfix.suggestions.snippet import EmptySpanError


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default from config, else text).",
)
@click.option(
    "--only",
    multiple=True,
    help="Only diagnostics with this code (repeatable), e.g. unused_imports.",
)
@click.option("--log/--no-log", "log", default=None, help="Append this run to the run log.")
def suggest(
    source: TextIO,
    output_format: str | None,
    only: tuple[str, ...],
    log: bool | None,
) -> None:
    """Read rustc/cargo JSON diagnostics from SOURCE (default stdin) and print suggestions."""
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    output_format = output_format or config.output_format
    codes = list(dict.fromkeys([*config.only, *only]))

    try:
        batch = decode_stream(source.read())
        suggestions = collect_all(batch.diagnostics, codes or None)
    except DiagnosticFormatError as e:
        raise click.ClickException(f"malformed diagnostics: {e}") from e
    except EmptySpanError as e:
        raise click.ClickException(f"malformed span: {e}") from e

    output = format_suggestions(suggestions, output_format=output_format)
    if output:
        click.echo(output)

    should_log = config.log if log is None else log
    if should_log:
        log_run(
            source=getattr(source, "name", "<stdin>"),
            diagnostics=len(batch.diagnostics),
            suggestions=suggestions,
            skipped=batch.skipped,
            only=codes,
        )
        cleanup_old_logs(retention_days=config.retention_days)
