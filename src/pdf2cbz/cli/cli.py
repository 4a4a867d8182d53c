#!/usr/bin/env python3
"""
pdf2cbz.cli.cli

Typer-based CLI converting PDF documents into CBZ comic archives.

Examples
--------
Convert one file, a directory, or every match of a glob pattern:

    pdf2cbz mycomic.pdf
    pdf2cbz /path/to/pdfs/
    pdf2cbz "comics/*.pdf"

Settings can come from the environment:

    PDF2CBZ_DPI=300 PDF2CBZ_FORCE=true pdf2cbz mycomic.pdf
"""

from __future__ import annotations

import logging
import os

import typer

from pdf2cbz import __version__
from pdf2cbz.application.resolver import InputKind, ResolvedInput, resolve
from pdf2cbz.application.results import BatchReport, ConversionResult, ConversionStatus
from pdf2cbz.errors import Pdf2CbzError
from pdf2cbz.schemas import DEFAULT_DPI

app = typer.Typer(
    name="pdf2cbz",
    help="Convert PDF files to CBZ (Comic Book Archive) format.",
    add_completion=False,
)

DPI_ENV = "PDF2CBZ_DPI"
FORCE_ENV = "PDF2CBZ_FORCE"
FORCE_HINT = f"  Use {FORCE_ENV}=true to overwrite existing files"

USAGE = f"""PDF to CBZ Converter
====================

Usage: pdf2cbz [OPTIONS] [FILE|DIRECTORY|GLOB]

This tool converts PDF files to CBZ (Comic Book Archive) format.

Arguments:
  FILE       Convert a single PDF file to CBZ
  DIRECTORY  Convert all PDF files in the specified directory
  GLOB       Convert all PDF files matching the glob pattern (e.g., "*.pdf" or "books/*.pdf")

Environment Variables:
  {DPI_ENV}    Image quality in DPI (default: {DEFAULT_DPI})
                 Common values: 72 (low), 150 (medium), 300 (high), 600 (very high)
  {FORCE_ENV}  Overwrite existing CBZ files (default: false)
                 Set to "true" or "1" to enable

Examples:
  pdf2cbz mycomic.pdf              # Convert single file
  pdf2cbz /path/to/pdfs/           # Convert all PDFs in directory
  pdf2cbz "*.pdf"                  # Convert all PDFs in current directory
  pdf2cbz "comics/*.pdf"           # Convert all PDFs matching pattern

  {DPI_ENV}=300 pdf2cbz mycomic.pdf        # Convert with high quality
  {FORCE_ENV}=true pdf2cbz mycomic.pdf     # Force overwrite existing CBZ

Output:
  CBZ files are created in the same directory as the source PDF files.
  The output filename will be the same as the input PDF but with .cbz extension.

Requirements:
  - poppler-utils (pdftoppm, used through pdf2image)
"""


def _configure_logging(verbose: bool) -> None:
    """Route library logs to stderr; only unexpected errors unless verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _settings_from_env(dpi: int | None, force: bool | None) -> tuple[int | str, bool | str]:
    """Prefer command-line flags, falling back to raw environment strings.

    The strings go through ``ConversionSettings``: unknown force values read
    as false and a malformed DPI surfaces as a conversion settings error.
    """
    if dpi is None:
        dpi_setting: int | str = os.environ.get(DPI_ENV, "").strip() or DEFAULT_DPI
    else:
        dpi_setting = dpi
    force_setting: bool | str = force if force is not None else os.environ.get(FORCE_ENV, "")
    return dpi_setting, force_setting


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pdf2cbz {__version__}")
        raise typer.Exit()


def _print_result(result: ConversionResult) -> None:
    """Print one colored status line per conversion outcome."""
    if result.status is ConversionStatus.CONVERTED:
        typer.secho(f"Converted: {result.source_path}", fg=typer.colors.GREEN)
        typer.secho(
            f"  ✓ Created: {result.output_path} ({result.page_count} pages)",
            fg=typer.colors.GREEN,
        )
    elif result.error_kind == "AlreadyConverted":
        typer.secho(
            f"Skipping: {result.source_path} (CBZ already exists: {result.output_path})",
            fg=typer.colors.YELLOW,
        )
        typer.secho(FORCE_HINT, fg=typer.colors.YELLOW)
    elif result.status is ConversionStatus.SKIPPED:
        typer.secho(f"Warning: {result.error_detail}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"Error: {result.error_detail}", fg=typer.colors.RED, err=True)


def _print_header(resolved: ResolvedInput, dpi: int) -> None:
    if resolved.kind is InputKind.DIRECTORY:
        typer.secho(
            f"Converting all PDFs in directory: {resolved.argument} (DPI: {dpi})",
            fg=typer.colors.GREEN,
        )
    elif resolved.kind is InputKind.GLOB:
        typer.secho(
            f"Converting {len(resolved.candidates)} file(s) matching pattern: "
            f"{resolved.argument} (DPI: {dpi})",
            fg=typer.colors.GREEN,
        )


def _print_empty(resolved: ResolvedInput) -> None:
    if resolved.kind is InputKind.DIRECTORY:
        typer.secho(f"No PDF files found in directory: {resolved.argument}", fg=typer.colors.YELLOW)
    else:
        typer.secho(f"No files matching pattern: {resolved.argument}", fg=typer.colors.YELLOW)


def _print_tally(report: BatchReport) -> None:
    typer.echo("")
    typer.secho(
        f"Conversion complete: {report.succeeded}/{report.attempted} files converted successfully",
        fg=typer.colors.GREEN,
    )
    if report.skipped or report.failed:
        typer.echo(f"  skipped: {report.skipped}, failed: {report.failed}")


def exit_code_for(resolved: ResolvedInput, report: BatchReport) -> int:
    """Single files fail the process on error; batches always exit zero."""
    if resolved.kind is InputKind.SINGLE_FILE:
        return 1 if report.failed else 0
    return 0


@app.command()
def convert_cmd(
    input_path: str | None = typer.Argument(
        None,
        metavar="[FILE|DIRECTORY|GLOB]",
        help="PDF file, directory of PDFs, or quoted glob pattern.",
        show_default=False,
    ),
    dpi: int | None = typer.Option(
        None,
        "--dpi",
        min=1,
        show_default=False,
        help=f"Image quality in DPI [env: {DPI_ENV}; default: {DEFAULT_DPI}].",
    ),
    force: bool | None = typer.Option(
        None,
        "--force/--no-force",
        show_default=False,
        help=f"Overwrite existing CBZ files [env: {FORCE_ENV}].",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Convert PDF files to CBZ archives next to the source files.

    Parameters
    ----------
    input_path : str | None
        File, directory or glob pattern; usage is printed when omitted.
    dpi : int | None
        Raster resolution; ``PDF2CBZ_DPI`` or 150 when omitted.
    force : bool | None
        Overwrite existing CBZ files; ``PDF2CBZ_FORCE`` when omitted.
    """
    del version
    dpi_setting, force_setting = _settings_from_env(dpi, force)
    if input_path is None:
        typer.echo(USAGE)
        typer.echo(f"Current DPI setting: {dpi_setting}")
        raise typer.Exit(code=0)

    _configure_logging(verbose)

    from pdf2cbz.application.use_cases import build_conversion_options, run_batch

    try:
        options = build_conversion_options(dpi=dpi_setting, force=force_setting)
        resolved = resolve(input_path)
    except Pdf2CbzError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=exc.exit_code)

    if not resolved.candidates:
        _print_empty(resolved)
        raise typer.Exit(code=0)

    _print_header(resolved, options.dpi)
    report = run_batch(resolved.candidates, options, on_result=_print_result)
    if resolved.kind is not InputKind.SINGLE_FILE:
        _print_tally(report)
    raise typer.Exit(code=exit_code_for(resolved, report))


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
