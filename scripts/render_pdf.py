#!/usr/bin/env python3
"""
Resume PDF Rendering CLI

Renders exported resume records to PDF and inspects rendered PDFs.

Commands:
    render  - Render a resume record file (YAML or JSON) to PDF
    inspect - Show page count and extracted text of a rendered PDF

Examples:\n

    render_pdf.py render exports/jane.json                       # Layout from template

    render_pdf.py render exports/jane.yaml --layout two_column   # Force sidebar layout

    render_pdf.py render exports/jane.json -o jane.pdf           # Explicit output path

    render_pdf.py inspect jane.pdf --column-split 0.39           # Two-column text
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumely.contexts.records import load_resume_record
from resumely.contexts.rendering import (
    RenderError,
    attachment_filename,
    generate_pdf,
)
from resumely.contexts.rendering.logger import setup_rendering_logger
from resumely.utils.pdf_processing import PDFDocument
from resumely.utils.timestamp import now, today

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))


app = typer.Typer(
    help="Render resume records to PDF and inspect rendered PDFs",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    record_path: Annotated[
        Path,
        typer.Argument(help="Resume record file (.yaml, .yml, or .json)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output PDF path (default: RESULTS_PATH/YYYY-MM-DD/<resume name>.pdf)",
        ),
    ] = None,
    layout: Annotated[
        Optional[str],
        typer.Option(
            "--layout",
            "-l",
            help="Layout name: single_column or two_column (default: from template)",
        ),
    ] = None,
    no_placeholders: Annotated[
        bool,
        typer.Option(
            "--no-placeholders",
            help="Leave absent fields empty instead of drawing placeholder content",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print extracted text of the rendered PDF"),
    ] = False,
):
    """
    Render a resume record to a one-page PDF.

    Examples:\n

        $ render_pdf.py render exports/jane.json

        $ render_pdf.py render exports/jane.json --layout two_column --no-placeholders
    """
    log_dir = LOGS_PATH / f"render_{now()}"
    setup_rendering_logger(log_dir, record_path=record_path, layout=layout)

    typer.secho(f"\nRendering: {record_path}", fg=typer.colors.BLUE, bold=True)

    try:
        record = load_resume_record(record_path)
    except (FileNotFoundError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        # Without --no-placeholders, RESUMELY_PLACEHOLDERS decides
        options = {"placeholders": None} if no_placeholders else {}
        pdf_bytes = generate_pdf(record, layout=layout, **options)
    except RenderError as e:
        typer.secho("✗ Rendering failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {e}", fg=typer.colors.RED, err=True)
        typer.echo(f"  Log: {log_dir / 'render.log'}\n")
        raise typer.Exit(code=1)

    if output is None:
        output = RESULTS_PATH / today() / attachment_filename(record.display_name)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(pdf_bytes)

    typer.secho("✓ Rendering succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Size: {len(pdf_bytes)} bytes")
    typer.echo(f"  PDF: {output}")
    typer.echo(f"  Log: {log_dir / 'render.log'}")

    if verbose:
        typer.echo("")
        for line in PDFDocument(pdf_bytes).get_lines(page=1):
            typer.echo(f"  {line}")
    typer.echo("")


@app.command("inspect")
def inspect_command(
    pdf_path: Annotated[Path, typer.Argument(help="Rendered PDF file")],
    column_split: Annotated[
        Optional[List[float]],
        typer.Option(
            "--column-split",
            "-c",
            help="Column boundary as a fraction of page width (repeatable)",
        ),
    ] = None,
):
    """
    Print page count and text lines of a rendered PDF, column by column.
    """
    try:
        pdf = PDFDocument(pdf_path, column_splits=column_split)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\n{pdf_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  Pages: {pdf.page_count}")

    for page in range(1, pdf.page_count + 1):
        for column in range(pdf.num_columns):
            typer.secho(f"\n  Page {page}, column {column + 1}", bold=True)
            for line in pdf.get_lines(page=page, column=column):
                typer.echo(f"    {line}")
    typer.echo("")


if __name__ == "__main__":
    app()
