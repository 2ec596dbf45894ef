"""
pdf/materialize.py — budowa końcowego PDF z planu układu.

Dla każdej pozycji planu:
  ORIGINAL  → kopia strony źródłowej (insert_pdf)
  SEPARATOR → pusta strona o wymiarach pierwszej strony źródła

Publiczne API:
  build_document(source, plan)           -> fitz.Document
  export_pdf(source, plan, out_path)     -> int
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import fitz  # PyMuPDF

from data_model.pages import PageDescriptor
from layout.types import PlanPageOutOfRange


def _check_plan(source: fitz.Document, plan: Sequence[PageDescriptor]) -> None:
    total = source.page_count
    for desc in plan:
        if desc.source_page is not None and desc.source_page > total:
            raise PlanPageOutOfRange(desc.source_page, total)
    if total == 0 and any(desc.is_separator for desc in plan):
        raise ValueError("Nie można wstawić pustej strony: dokument źródłowy nie ma stron.")


def build_document(source: fitz.Document, plan: Sequence[PageDescriptor]) -> fitz.Document:
    """
    Składa nowy dokument według planu.

    Raises:
        PlanPageOutOfRange: plan wskazuje stronę spoza dokumentu źródłowego.
    """
    _check_plan(source, plan)

    out = fitz.open()
    if not plan:
        return out

    size = source[0].rect if source.page_count else None
    for desc in plan:
        if desc.is_separator:
            out.new_page(width=size.width, height=size.height)
        else:
            index = desc.source_page - 1
            out.insert_pdf(source, from_page=index, to_page=index)
    return out


def export_pdf(source: fitz.Document, plan: Sequence[PageDescriptor], out_path: str | Path) -> int:
    """Zapisuje dokument z planu do out_path; zwraca liczbę zapisanych stron."""
    out = build_document(source, plan)
    try:
        written = out.page_count
        if written == 0:
            raise ValueError("Plan jest pusty — PDF bez stron nie zostanie zapisany.")
        out.save(str(out_path), garbage=3, deflate=True)
    finally:
        out.close()
    return written
