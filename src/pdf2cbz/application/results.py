"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pdf2cbz.errors import (
    AlreadyConvertedError,
    ArchiveError,
    ConversionError,
    InputNotFoundError,
    NoPagesError,
    NotAPdfError,
    PublishError,
    RasterizeError,
)
from pdf2cbz.types import ErrorKind

# Subclasses precede their bases; error_kind_of returns the first match.
ERROR_CLASSES: dict[str, type[ConversionError]] = {
    "InputNotFound": InputNotFoundError,
    "NotAPdf": NotAPdfError,
    "AlreadyConverted": AlreadyConvertedError,
    "NoPages": NoPagesError,
    "RasterizeError": RasterizeError,
    "ArchiveError": ArchiveError,
    "PublishError": PublishError,
    "ConversionError": ConversionError,
}


def error_kind_of(exc: BaseException) -> ErrorKind:
    """Map an exception onto its taxonomy label."""
    for kind, error_cls in ERROR_CLASSES.items():
        if kind != "ConversionError" and isinstance(exc, error_cls):
            return kind  # type: ignore[return-value]
    return "ConversionError"


class ConversionStatus(str, Enum):
    """Outcome of one conversion request."""

    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    source_path: Path
    output_path: Path
    status: ConversionStatus
    error_detail: str | None = None
    error_kind: ErrorKind | None = None
    page_count: int = 0

    @property
    def ok(self) -> bool:
        """Whether the request did not fail (converted or skipped)."""
        return self.status is not ConversionStatus.FAILED

    def raise_for_status(self) -> None:
        """Raise the error matching ``error_kind`` if the conversion failed."""
        if self.ok:
            return
        error_cls = ERROR_CLASSES.get(self.error_kind or "ConversionError", ConversionError)
        raise error_cls(self.error_detail or f"Conversion failed: {self.source_path}")


@dataclass(frozen=True)
class BatchReport:
    """Aggregated outcome of a batch, in processing order."""

    results: tuple[ConversionResult, ...] = ()

    @property
    def attempted(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return self._count(ConversionStatus.CONVERTED)

    @property
    def skipped(self) -> int:
        return self._count(ConversionStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(ConversionStatus.FAILED)

    @property
    def is_empty(self) -> bool:
        return not self.results

    def _count(self, status: ConversionStatus) -> int:
        return sum(1 for result in self.results if result.status is status)
