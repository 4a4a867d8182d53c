"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pdf2cbz.application.options import ConversionOptions, ConversionRequest
from pdf2cbz.application.ports import Archiver, Rasterizer
from pdf2cbz.application.results import BatchReport, ConversionResult, ConversionStatus
from pdf2cbz.types import ResultCallback


def build_conversion_options(*, dpi: int = 150, force: bool | str = False) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from pdf2cbz.application.use_cases import build_conversion_options as _impl

    return _impl(dpi=dpi, force=force)


def convert_pdf(
    request: ConversionRequest,
    *,
    rasterizer: Rasterizer | None = None,
    archiver: Archiver | None = None,
) -> ConversionResult:
    """Convert one PDF via lazy use-case import."""
    from pdf2cbz.application.use_cases import convert_pdf as _impl

    return _impl(request, rasterizer=rasterizer, archiver=archiver)


def run_batch(
    candidates: Iterable[Path],
    options: ConversionOptions,
    *,
    rasterizer: Rasterizer | None = None,
    archiver: Archiver | None = None,
    on_result: ResultCallback | None = None,
) -> BatchReport:
    """Convert a resolved candidate list via lazy use-case import."""
    from pdf2cbz.application.use_cases import run_batch as _impl

    return _impl(
        candidates,
        options,
        rasterizer=rasterizer,
        archiver=archiver,
        on_result=on_result,
    )


__all__ = [
    "BatchReport",
    "ConversionOptions",
    "ConversionRequest",
    "ConversionResult",
    "ConversionStatus",
    "build_conversion_options",
    "convert_pdf",
    "run_batch",
]
