"""PDF rasterizers implementing the ``Rasterizer`` port."""

from __future__ import annotations

import logging
from pathlib import Path

from pdf2cbz.errors import DependencyError, NoPagesError, RasterizeError

logger = logging.getLogger(__name__)

PAGE_PREFIX = "page-"
PAGE_SUFFIX = ".jpg"
MIN_PAGE_DIGITS = 4
_RAW_PREFIX = "raw"


def page_filename(index: int, total: int) -> str:
    """Return the zero-padded name of page ``index`` (1-based) out of ``total``.

    Padding is wide enough for ``total`` so names sort lexicographically in
    page order.
    """
    width = max(MIN_PAGE_DIGITS, len(str(total)))
    return f"{PAGE_PREFIX}{index:0{width}d}{PAGE_SUFFIX}"


def normalize_page_files(raw_paths: list[Path], output_dir: Path) -> list[Path]:
    """Rename rendered files to ``page-0001.jpg``… in the order given."""
    total = len(raw_paths)
    pages: list[Path] = []
    for index, raw in enumerate(raw_paths, start=1):
        target = output_dir / page_filename(index, total)
        raw.rename(target)
        pages.append(target)
    return pages


class Pdf2ImageRasterizer:
    """Render pages to JPEG files with ``pdf2image`` (poppler ``pdftoppm``)."""

    def __init__(self, *, poppler_path: Path | None = None, use_pdftocairo: bool = False) -> None:
        self.poppler_path = poppler_path
        self.use_pdftocairo = use_pdftocairo

    def render(self, pdf_path: Path, dpi: int, output_dir: Path) -> list[Path]:
        """Render every page of ``pdf_path`` at ``dpi`` into ``output_dir``.

        Parameters
        ----------
        pdf_path : Path
            Source PDF document.
        dpi : int
            Raster resolution.
        output_dir : Path
            Existing, empty directory that receives the page images.

        Returns
        -------
        list[Path]
            Page images in reading order.

        Raises
        ------
        DependencyError
            If pdf2image or poppler is not installed.
        NoPagesError
            If rendering succeeded but produced no images.
        RasterizeError
            If poppler rejects the document.
        """
        try:
            from pdf2image import convert_from_path
            from pdf2image.exceptions import PDFInfoNotInstalledError
        except Exception as exc:
            raise DependencyError("pdf2image is required to rasterize PDF pages.") from exc

        logger.debug("rendering %s at %d DPI into %s", pdf_path, dpi, output_dir)
        try:
            rendered = convert_from_path(
                str(pdf_path),
                dpi=dpi,
                output_folder=str(output_dir),
                fmt="jpeg",
                output_file=_RAW_PREFIX,
                paths_only=True,
                thread_count=1,
                poppler_path=str(self.poppler_path) if self.poppler_path else None,
                use_pdftocairo=self.use_pdftocairo,
            )
        except PDFInfoNotInstalledError as exc:
            raise DependencyError(
                "poppler-utils (pdftoppm/pdfinfo) is required to rasterize PDF pages."
            ) from exc
        except Exception as exc:
            raise RasterizeError(f"Failed to extract pages from {pdf_path}: {exc}") from exc

        raw_paths = [Path(item) for item in rendered]
        if not raw_paths:
            raise NoPagesError(f"No pages extracted from {pdf_path}")
        return normalize_page_files(raw_paths, output_dir)
