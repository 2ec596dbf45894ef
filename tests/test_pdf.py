"""Testy scalania, renderowania i składania PDF (PyMuPDF, dokumenty w tmp_path)."""

from __future__ import annotations

import fitz
import pytest

from conftest import page_texts
from data_model import PageDescriptor, Piece
from layout import PlanPageOutOfRange, arrange
from pdf.materialize import build_document, export_pdf
from pdf.merge import check_pdf_paths, count_pages, merge_pdfs
from pdf.render import render_page, render_pages


# ---------------------------------------------------------------------------
# merge
# ---------------------------------------------------------------------------

def test_merge_keeps_file_order(pdf_factory) -> None:
    a = pdf_factory("a.pdf", 2, label="A")
    b = pdf_factory("b.pdf", 3, label="B")
    doc = merge_pdfs([b, a])
    try:
        assert page_texts(doc) == ["B1", "B2", "B3", "A1", "A2"]
    finally:
        doc.close()
    assert count_pages([a, b]) == 5


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        check_pdf_paths([tmp_path / "brak.pdf"])


def test_non_pdf_file(tmp_path) -> None:
    path = tmp_path / "nuty.txt"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        merge_pdfs([path])


def test_no_files() -> None:
    with pytest.raises(ValueError):
        check_pdf_paths([])


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

def test_render_pages_to_jpeg(pdf_factory) -> None:
    with fitz.open(str(pdf_factory("a.pdf", 2))) as doc:
        images = render_pages(doc)
        assert len(images) == 2
        assert all(img.startswith(b"\xff\xd8") for img in images)

        small = fitz.Pixmap(render_page(doc[0], scale=0.5))
        assert (small.width, small.height) == (100, 150)


def test_render_rejects_bad_scale(pdf_factory) -> None:
    with fitz.open(str(pdf_factory("a.pdf", 1))) as doc:
        with pytest.raises(ValueError):
            render_page(doc[0], scale=0)


# ---------------------------------------------------------------------------
# materialize
# ---------------------------------------------------------------------------

def test_build_document_follows_plan(pdf_factory) -> None:
    src_path = pdf_factory("src.pdf", 6, width=210, height=297)
    plan = arrange(6, [Piece("A", 1, 2), Piece("B", 4, 5)])

    with fitz.open(str(src_path)) as src:
        out = build_document(src, plan)
        try:
            assert page_texts(out) == ["", "P1", "P2", "P3", "", "P4", "P5", "P6"]
            blank = out[0].rect
            assert (blank.width, blank.height) == (210, 297)
        finally:
            out.close()


def test_separator_uses_first_page_size(pdf_factory) -> None:
    first = pdf_factory("first.pdf", 1, width=300, height=400)
    rest = pdf_factory("rest.pdf", 2, width=100, height=100)
    src = merge_pdfs([first, rest])
    try:
        out = build_document(src, [PageDescriptor.original(2), PageDescriptor.separator(before=3)])
        assert (out[1].rect.width, out[1].rect.height) == (300, 400)
        out.close()
    finally:
        src.close()


def test_plan_page_out_of_range(pdf_factory) -> None:
    with fitz.open(str(pdf_factory("src.pdf", 2))) as src:
        with pytest.raises(PlanPageOutOfRange):
            build_document(src, [PageDescriptor.original(3)])


def test_export_writes_file(pdf_factory, tmp_path) -> None:
    out_path = tmp_path / "wynik.pdf"
    with fitz.open(str(pdf_factory("src.pdf", 4))) as src:
        written = export_pdf(src, arrange(4, [Piece("A", 1, 2)]), out_path)

    assert written == 5
    with fitz.open(str(out_path)) as out:
        assert page_texts(out) == ["", "P1", "P2", "P3", "P4"]


def test_export_refuses_empty_plan(pdf_factory, tmp_path) -> None:
    with fitz.open(str(pdf_factory("src.pdf", 1))) as src:
        with pytest.raises(ValueError):
            export_pdf(src, [], tmp_path / "pusty.pdf")
