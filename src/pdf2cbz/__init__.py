"""Top-level API for PDF to CBZ conversion."""

from __future__ import annotations

from pathlib import Path

from pdf2cbz.application.results import BatchReport

__version__ = "0.1.0"


def convert_pdf_to_cbz(pdf_path: Path, dpi: int = 150, force: bool = False) -> Path:
    """Convert a PDF into a sibling CBZ archive.

    Parameters
    ----------
    pdf_path : Path
        Source PDF document.
    dpi : int, default=150
        Raster resolution of the page images.
    force : bool, default=False
        Overwrite an existing CBZ instead of skipping.

    Returns
    -------
    Path
        Path of the CBZ archive.
    """
    from .api import convert_pdf_to_cbz as _impl

    return _impl(pdf_path=pdf_path, dpi=dpi, force=force)


def convert_path_to_cbz(argument: str, dpi: int = 150, force: bool = False) -> BatchReport:
    """Convert every PDF named by a file, directory or glob argument.

    Parameters
    ----------
    argument : str
        Path to a PDF, a directory of PDFs, or a glob pattern.
    dpi : int, default=150
        Raster resolution of the page images.
    force : bool, default=False
        Overwrite existing CBZ files instead of skipping.

    Returns
    -------
    BatchReport
        Per-file results in processing order.
    """
    from .api import convert_path_to_cbz as _impl

    return _impl(argument=argument, dpi=dpi, force=force)


__all__ = ["__version__", "convert_pdf_to_cbz", "convert_path_to_cbz"]
