"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pdf2cbz.schemas import DEFAULT_DPI


@dataclass(frozen=True)
class ConversionOptions:
    """Batch-wide options threaded into every conversion request."""

    dpi: int = DEFAULT_DPI
    force: bool = False


@dataclass(frozen=True)
class ConversionRequest:
    """One PDF to convert.

    Parameters
    ----------
    source_path : Path
        PDF to convert; existence and suffix are checked by the engine.
    dpi : int, default=150
        Raster resolution, must be positive.
    force : bool, default=False
        Overwrite an existing CBZ instead of skipping.
    """

    source_path: Path
    dpi: int = DEFAULT_DPI
    force: bool = False

    def __post_init__(self) -> None:
        if self.dpi <= 0:
            raise ValueError("dpi must be a positive integer")

    @classmethod
    def from_options(cls, source_path: Path, options: ConversionOptions) -> ConversionRequest:
        return cls(source_path=Path(source_path), dpi=options.dpi, force=options.force)
