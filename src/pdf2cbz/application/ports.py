"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class Rasterizer(Protocol):
    """Render every page of a PDF into image files."""

    def render(self, pdf_path: Path, dpi: int, output_dir: Path) -> list[Path]:
        """Return page images in reading order; raise ``RasterizeError`` on failure."""


class Archiver(Protocol):
    """Pack image files into a single archive."""

    def pack(self, image_paths: Sequence[Path], destination: Path) -> Path:
        """Write the archive and return its path; raise ``ArchiveError`` on failure."""
