"""Wspólne fikstury: małe dokumenty PDF tworzone w pamięci przez PyMuPDF."""

from __future__ import annotations

from pathlib import Path

import fitz
import pytest


def write_pdf(path: Path, pages: int, label: str = "P", width: float = 200, height: float = 300) -> Path:
    doc = fitz.open()
    for i in range(pages):
        page = doc.new_page(width=width, height=height)
        page.insert_text((20, 40), f"{label}{i + 1}")
    doc.save(str(path))
    doc.close()
    return path


def page_texts(doc: fitz.Document) -> list[str]:
    return [page.get_text().strip() for page in doc]


@pytest.fixture
def pdf_factory(tmp_path: Path):
    def _make(name: str, pages: int, label: str = "P", width: float = 200, height: float = 300) -> Path:
        return write_pdf(tmp_path / name, pages, label, width, height)
    return _make
