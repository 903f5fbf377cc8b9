"""CLI command implementations"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docview.config import Settings, load_config
from docview.core.dates import format_relative_date, parse_timestamp
from docview.core.errors import FormatError
from docview.core.export import render_document
from docview.core.parse import parse_document, parse_file
from docview.core.pipeline import run_export, run_validate
from docview.core.sample import SAMPLE_DOCUMENT_JSON
from docview.logging import configure_logging


FormatOption = Annotated[Optional[str], typer.Option("--format", "-f", help="Output format: text, md or html")]
NowOption = Annotated[Optional[str], typer.Option("--now", help="Reference date (YYYY-MM-DD); defaults to the current time")]
ParserOption = Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and configure logging with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _now(value: Optional[str]) -> Optional[datetime]:
    """Parse the --now option; None means the current time."""
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except FormatError as e:
        _fail(str(e))


def show_cmd(
    path: Annotated[Optional[str], typer.Argument(help="JSON document; defaults to the configured source or the built-in sample")] = None,
    fmt: FormatOption = None,
    now: NowOption = None,
    parser: ParserOption = None,
    ):
    """Print a document: title, last-modified label, and its blocks."""
    settings = _settings(overrides={"source": path, "output_format": fmt, "parser_config": parser})
    reference = _now(now)

    try:
        if settings.source:
            doc = parse_file(Path(settings.source))
        else:
            doc = parse_document(SAMPLE_DOCUMENT_JSON)
    except FormatError as e:
        _fail("Unexpected JSON format", e)
    except OSError as e:
        _fail(f"Cannot read {settings.source}", e)

    typer.echo(render_document(doc, settings.output_format, reference, settings.parser_config), nl=False)


def validate_cmd(
    path: Annotated[str, typer.Argument(help="JSON file or directory to validate")],
    ):
    """Check every JSON document under path against the document schema."""
    _settings()
    results = run_validate(path)
    if not results:
        typer.echo(f"No .json documents found under {path}.")
        raise typer.Exit(1)

    invalid = 0
    for src, error in results:
        if error is None:
            typer.echo(f"  ok: {src}")
        else:
            invalid += 1
            typer.echo(f"  invalid: {src} ({error})")
    typer.echo(f"Validated {len(results)} document(s) - {len(results) - invalid} ok, {invalid} invalid")
    if invalid:
        raise typer.Exit(1)


def export_cmd(
    path: Annotated[str, typer.Argument(help="JSON file or directory to export")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: FormatOption = None,
    now: NowOption = None,
    parser: ParserOption = None,
    ):
    """Render every JSON document under path into the output directory."""
    settings = _settings(overrides={"output_dir": out, "output_format": fmt, "parser_config": parser})
    reference = _now(now)
    output_dir = Path(settings.output_dir)

    try:
        results = run_export(path, output_dir, settings.output_format, reference, settings.parser_config)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No .json documents found under {path}.")
        raise typer.Exit(1)

    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Exported {len(results)} document(s) to {output_dir}/")


def date_cmd(
    modified: Annotated[str, typer.Argument(help="Date or timestamp to describe (YYYY-MM-DD)")],
    now: NowOption = None,
    ):
    """Print the relative-date label for a date."""
    _settings()
    try:
        when = parse_timestamp(modified)
    except FormatError as e:
        _fail(str(e))
    typer.echo(format_relative_date(when, _now(now)))
