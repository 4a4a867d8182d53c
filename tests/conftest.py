"""Shared pytest configuration, marker assignment and fake adapters."""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

import pytest

from pdf2cbz.adapters.rasterizers import page_filename
from pdf2cbz.errors import RasterizeError


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeRasterizer:
    """Write ``pages`` small files per PDF; content records name, page and dpi."""

    def __init__(
        self,
        pages: int = 3,
        fail_for: Sequence[str] = (),
        empty_for: Sequence[str] = (),
    ) -> None:
        self.pages = pages
        self.fail_for = set(fail_for)
        self.empty_for = set(empty_for)
        self.calls: list[tuple[Path, int, Path]] = []

    def render(self, pdf_path: Path, dpi: int, output_dir: Path) -> list[Path]:
        self.calls.append((pdf_path, dpi, output_dir))
        if pdf_path.name in self.fail_for:
            raise RasterizeError(f"Failed to extract pages from {pdf_path}")
        if pdf_path.name in self.empty_for:
            return []
        written: list[Path] = []
        for index in range(1, self.pages + 1):
            page = output_dir / page_filename(index, self.pages)
            page.write_bytes(f"{pdf_path.name}:{index}:{dpi}".encode())
            written.append(page)
        return written


@pytest.fixture
def scratch_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect temporary directories so leftovers can be inspected."""
    root = tmp_path / "scratch"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def library(tmp_path: Path) -> Path:
    """Directory holding source PDFs, separate from the scratch root."""
    root = tmp_path / "library"
    root.mkdir()
    return root


@pytest.fixture
def fake_rasterizer() -> FakeRasterizer:
    return FakeRasterizer()


@pytest.fixture
def make_rasterizer() -> type[FakeRasterizer]:
    return FakeRasterizer
