"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pdf2cbz.application.options import ConversionRequest
from pdf2cbz.application.ports import Archiver, Rasterizer
from pdf2cbz.application.results import BatchReport
from pdf2cbz.application.use_cases import build_conversion_options
from pdf2cbz.application.use_cases import convert_input
from pdf2cbz.application.use_cases import convert_pdf
from pdf2cbz.errors import NotAPdfError


def convert_pdf_to_cbz(
    pdf_path: Path,
    dpi: int = 150,
    force: bool = False,
    rasterizer: Optional[Rasterizer] = None,
    archiver: Optional[Archiver] = None,
) -> Path:
    """Convert one PDF and return the CBZ path.

    A CBZ that already exists is returned as is. Non-PDF input raises
    ``NotAPdfError``; failures raise the matching ``ConversionError``.
    """
    options = build_conversion_options(dpi=dpi, force=force)
    result = convert_pdf(
        ConversionRequest.from_options(Path(pdf_path), options),
        rasterizer=rasterizer,
        archiver=archiver,
    )
    result.raise_for_status()
    if result.error_kind == "NotAPdf":
        raise NotAPdfError(result.error_detail or f"Not a PDF file: {pdf_path}")
    return result.output_path


def convert_path_to_cbz(
    argument: str,
    dpi: int = 150,
    force: bool = False,
    rasterizer: Optional[Rasterizer] = None,
    archiver: Optional[Archiver] = None,
) -> BatchReport:
    """Convert a file, directory or glob pattern and return the batch report."""
    options = build_conversion_options(dpi=dpi, force=force)
    _, report = convert_input(
        str(argument),
        options,
        rasterizer=rasterizer,
        archiver=archiver,
    )
    return report
