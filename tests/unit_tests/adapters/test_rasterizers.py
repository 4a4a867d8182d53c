"""Unit tests for the pdf2image rasterizer adapter."""

from __future__ import annotations

import sys
from pathlib import Path

import pdf2image
import pytest
from pdf2image.exceptions import PDFInfoNotInstalledError, PDFPageCountError

from pdf2cbz.adapters.rasterizers import (
    Pdf2ImageRasterizer,
    normalize_page_files,
    page_filename,
)
from pdf2cbz.errors import DependencyError, NoPagesError, RasterizeError


@pytest.mark.parametrize(
    ("index", "total", "expected"),
    [
        (1, 3, "page-0001.jpg"),
        (12, 12, "page-0012.jpg"),
        (7, 12345, "page-00007.jpg"),
        (12345, 12345, "page-12345.jpg"),
    ],
)
def test_page_filename_padding(index: int, total: int, expected: str) -> None:
    assert page_filename(index, total) == expected


def test_page_names_sort_in_page_order() -> None:
    names = [page_filename(index, 120) for index in range(1, 121)]
    assert sorted(names) == names


def test_normalize_page_files_keeps_given_order(tmp_path: Path) -> None:
    raw = []
    for label in ("c", "a", "b"):
        path = tmp_path / f"raw-{label}.jpg"
        path.write_text(label)
        raw.append(path)

    pages = normalize_page_files(raw, tmp_path)

    assert [path.name for path in pages] == ["page-0001.jpg", "page-0002.jpg", "page-0003.jpg"]
    assert [path.read_text() for path in pages] == ["c", "a", "b"]


def test_render_forwards_arguments_and_renames(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Ensure pdf2image is asked for JPEG files in the workspace at the given DPI."""
    called: dict[str, object] = {}

    def fake_convert(pdf_path: str, **kwargs: object) -> list[str]:
        called["pdf_path"] = pdf_path
        called.update(kwargs)
        folder = Path(str(kwargs["output_folder"]))
        paths = []
        for page in (1, 2):
            path = folder / f"raw0001-{page}.jpg"
            path.write_bytes(b"jpeg")
            paths.append(str(path))
        return paths

    monkeypatch.setattr(pdf2image, "convert_from_path", fake_convert)
    pdf = tmp_path / "doc.pdf"
    pdf.write_bytes(b"%PDF")
    out_dir = tmp_path / "pages"
    out_dir.mkdir()

    pages = Pdf2ImageRasterizer().render(pdf, 200, out_dir)

    assert called["pdf_path"] == str(pdf)
    assert called["dpi"] == 200
    assert called["fmt"] == "jpeg"
    assert called["paths_only"] is True
    assert called["output_folder"] == str(out_dir)
    assert [path.name for path in pages] == ["page-0001.jpg", "page-0002.jpg"]
    assert sorted(path.name for path in out_dir.iterdir()) == ["page-0001.jpg", "page-0002.jpg"]


def test_render_wraps_backend_failures(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fake_convert(pdf_path: str, **kwargs: object) -> list[str]:
        raise PDFPageCountError("Unable to get page count.")

    monkeypatch.setattr(pdf2image, "convert_from_path", fake_convert)

    with pytest.raises(RasterizeError, match="Failed to extract pages"):
        Pdf2ImageRasterizer().render(tmp_path / "bad.pdf", 150, tmp_path)


def test_render_reports_zero_pages(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(pdf2image, "convert_from_path", lambda *_args, **_kwargs: [])

    with pytest.raises(NoPagesError, match="No pages extracted"):
        Pdf2ImageRasterizer().render(tmp_path / "empty.pdf", 150, tmp_path)


def test_render_reports_missing_poppler(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def fake_convert(pdf_path: str, **kwargs: object) -> list[str]:
        raise PDFInfoNotInstalledError("Unable to get page count. Is poppler installed?")

    monkeypatch.setattr(pdf2image, "convert_from_path", fake_convert)

    with pytest.raises(DependencyError, match="poppler"):
        Pdf2ImageRasterizer().render(tmp_path / "doc.pdf", 150, tmp_path)


def test_render_reports_missing_pdf2image(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setitem(sys.modules, "pdf2image", None)

    with pytest.raises(DependencyError, match="pdf2image"):
        Pdf2ImageRasterizer().render(tmp_path / "doc.pdf", 150, tmp_path)
