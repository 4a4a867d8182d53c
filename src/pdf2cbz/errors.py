"""Exception taxonomy for PDF to CBZ conversion."""

from __future__ import annotations


class Pdf2CbzError(Exception):
    """Base error for the package."""

    exit_code = 1


class ConversionError(Pdf2CbzError):
    """A single PDF could not be converted."""


class InputNotFoundError(ConversionError):
    """Source PDF or input directory does not exist."""


class NotAPdfError(ConversionError):
    """Source file does not carry a ``.pdf`` suffix."""


class AlreadyConvertedError(ConversionError):
    """Target CBZ already exists and overwriting is disabled."""


class RasterizeError(ConversionError):
    """Rasterizer failed to render the PDF pages."""


class NoPagesError(RasterizeError):
    """Rasterizer finished but produced no page images."""


class ArchiveError(ConversionError):
    """Archiver failed to write the CBZ container."""


class PublishError(ConversionError):
    """Finished archive could not be moved next to the source PDF."""


class DependencyError(Pdf2CbzError):
    """Optional rendering backend is not installed."""
