"""Application use-cases orchestrating PDF to CBZ conversion."""

from __future__ import annotations

import errno
import logging
import os
import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from pdf2cbz.adapters.archivers import ZipArchiver
from pdf2cbz.adapters.rasterizers import Pdf2ImageRasterizer
from pdf2cbz.application.options import ConversionOptions, ConversionRequest
from pdf2cbz.application.ports import Archiver, Rasterizer
from pdf2cbz.application.resolver import ResolvedInput, is_pdf, resolve
from pdf2cbz.application.results import (
    BatchReport,
    ConversionResult,
    ConversionStatus,
    error_kind_of,
)
from pdf2cbz.application.workspace import ScratchWorkspace
from pdf2cbz.errors import (
    ArchiveError,
    ConversionError,
    InputNotFoundError,
    NoPagesError,
    PublishError,
    RasterizeError,
)
from pdf2cbz.schemas import DEFAULT_DPI, ConversionSettings
from pdf2cbz.types import ErrorKind, ResultCallback

logger = logging.getLogger(__name__)

CBZ_SUFFIX = ".cbz"


def cbz_path_for(source_path: Path) -> Path:
    """Return the sibling ``.cbz`` path of ``source_path``."""
    return source_path.with_suffix(CBZ_SUFFIX)


def build_conversion_options(
    *, dpi: int | str = DEFAULT_DPI, force: bool | str = False
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    try:
        settings = ConversionSettings(dpi=dpi, force=force)
    except ValidationError as exc:
        raise ConversionError(f"Invalid conversion settings: {exc}") from exc
    return ConversionOptions(dpi=settings.dpi, force=settings.force)


def _skipped(
    request: ConversionRequest, output_path: Path, kind: ErrorKind, detail: str
) -> ConversionResult:
    return ConversionResult(
        source_path=request.source_path,
        output_path=output_path,
        status=ConversionStatus.SKIPPED,
        error_detail=detail,
        error_kind=kind,
    )


def _failed(request: ConversionRequest, output_path: Path, exc: BaseException) -> ConversionResult:
    return ConversionResult(
        source_path=request.source_path,
        output_path=output_path,
        status=ConversionStatus.FAILED,
        error_detail=str(exc),
        error_kind=error_kind_of(exc),
    )


def _render_pages(
    rasterizer: Rasterizer, request: ConversionRequest, workspace: ScratchWorkspace
) -> list[Path]:
    source = request.source_path
    try:
        pages = rasterizer.render(source, request.dpi, workspace.pages_dir)
    except RasterizeError:
        raise
    except Exception as exc:
        raise RasterizeError(f"Failed to extract pages from {source}: {exc}") from exc
    if not pages:
        raise NoPagesError(f"No pages extracted from {source}")
    return list(pages)


def _pack_pages(archiver: Archiver, pages: list[Path], destination: Path) -> Path:
    try:
        archive = archiver.pack(pages, destination)
    except ArchiveError:
        raise
    except Exception as exc:
        raise ArchiveError(f"Failed to create CBZ archive: {exc}") from exc
    if not archive.is_file():
        raise ArchiveError(f"Failed to create CBZ archive: {archive} was not written")
    return archive


def publish_archive(archive: Path, output_path: Path) -> Path:
    """Move ``archive`` to ``output_path`` without exposing a partial file.

    A rename is used when both paths share a filesystem. Across devices the
    archive is copied to a hidden sibling of ``output_path`` first and then
    renamed into place.

    Raises
    ------
    PublishError
        If the archive cannot be placed at ``output_path``.
    """
    try:
        os.replace(archive, output_path)
        return output_path
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise PublishError(f"Failed to move CBZ archive to {output_path}: {exc}") from exc

    staging: Path | None = None
    try:
        fd, staging_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".part", dir=output_path.parent
        )
        os.close(fd)
        staging = Path(staging_name)
        shutil.copyfile(archive, staging)
        os.replace(staging, output_path)
    except OSError as exc:
        if staging is not None:
            staging.unlink(missing_ok=True)
        raise PublishError(f"Failed to move CBZ archive to {output_path}: {exc}") from exc
    return output_path


def convert_pdf(
    request: ConversionRequest,
    *,
    rasterizer: Rasterizer | None = None,
    archiver: Archiver | None = None,
) -> ConversionResult:
    """Use-case: convert one PDF into a sibling CBZ archive.

    Every failure is returned as a ``FAILED`` result; nothing is raised for
    per-file problems.
    """
    source = request.source_path
    output_path = cbz_path_for(source)

    if not source.is_file():
        logger.warning("file not found: %s", source)
        return _failed(request, output_path, InputNotFoundError(f"File not found: {source}"))
    if not is_pdf(source):
        logger.warning("skipping non-PDF file: %s", source)
        return _skipped(request, output_path, "NotAPdf", f"Skipping non-PDF file: {source}")
    if output_path.exists() and not request.force:
        logger.info("skipping %s, CBZ already exists: %s", source, output_path)
        return _skipped(
            request, output_path, "AlreadyConverted", f"CBZ already exists: {output_path}"
        )

    rasterizer = rasterizer or Pdf2ImageRasterizer()
    archiver = archiver or ZipArchiver()

    logger.info("converting %s (DPI: %d)", source, request.dpi)
    try:
        with ScratchWorkspace() as workspace:
            pages = _render_pages(rasterizer, request, workspace)
            logger.debug("extracted %d page(s) from %s", len(pages), source)
            archive = _pack_pages(archiver, pages, workspace.path / output_path.name)
            publish_archive(archive, output_path)
    except ConversionError as exc:
        logger.warning("%s", exc)
        return _failed(request, output_path, exc)
    except Exception as exc:
        logger.exception("unexpected error while converting %s", source)
        return _failed(request, output_path, ConversionError(f"{type(exc).__name__}: {exc}"))

    logger.info("created %s", output_path)
    return ConversionResult(
        source_path=source,
        output_path=output_path,
        status=ConversionStatus.CONVERTED,
        page_count=len(pages),
    )


def run_batch(
    candidates: Iterable[Path],
    options: ConversionOptions,
    *,
    rasterizer: Rasterizer | None = None,
    archiver: Archiver | None = None,
    on_result: ResultCallback | None = None,
) -> BatchReport:
    """Use-case: convert candidates one at a time, in order.

    A failing candidate never stops the ones after it.
    """
    rasterizer = rasterizer or Pdf2ImageRasterizer()
    archiver = archiver or ZipArchiver()

    results: list[ConversionResult] = []
    for candidate in candidates:
        request = ConversionRequest.from_options(candidate, options)
        result = convert_pdf(request, rasterizer=rasterizer, archiver=archiver)
        results.append(result)
        if on_result is not None:
            on_result(result)

    report = BatchReport(results=tuple(results))
    if report.is_empty:
        logger.info("no input files found")
    else:
        logger.info(
            "conversion complete: %d/%d converted, %d skipped, %d failed",
            report.succeeded,
            report.attempted,
            report.skipped,
            report.failed,
        )
    return report


def convert_input(
    argument: str,
    options: ConversionOptions,
    *,
    rasterizer: Rasterizer | None = None,
    archiver: Archiver | None = None,
    on_result: ResultCallback | None = None,
) -> tuple[ResolvedInput, BatchReport]:
    """Use-case: resolve a file, directory or glob argument and convert it."""
    resolved = resolve(argument)
    report = run_batch(
        resolved.candidates,
        options,
        rasterizer=rasterizer,
        archiver=archiver,
        on_result=on_result,
    )
    return resolved, report
