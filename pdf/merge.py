"""
pdf/merge.py — scalanie plików PDF w jeden dokument źródłowy.

Numeracja stron scalonego dokumentu (1-based) jest tą, do której odnoszą
się utwory z klasyfikatora i plan układu.

Publiczne API:
  check_pdf_paths(paths)  -> list[Path]
  merge_pdfs(paths)       -> fitz.Document
  count_pages(paths)      -> int
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import fitz  # PyMuPDF


def check_pdf_paths(paths: Sequence[str | Path]) -> list[Path]:
    """
    Zwraca ścieżki jako Path po sprawdzeniu istnienia i rozszerzenia.

    Raises:
        ValueError:        pusta lista lub plik bez rozszerzenia .pdf.
        FileNotFoundError: plik nie istnieje.
    """
    if not paths:
        raise ValueError("Nie podano żadnego pliku PDF.")
    checked: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise FileNotFoundError(f"Plik nie istnieje: {path}")
        if path.suffix.lower() != ".pdf":
            raise ValueError(f"Oczekiwano pliku .pdf, otrzymano: {path.name}")
        checked.append(path)
    return checked


def merge_pdfs(paths: Sequence[str | Path]) -> fitz.Document:
    """
    Skleja strony wszystkich plików w podanej kolejności.

    Zwraca nowy dokument w pamięci; wywołujący odpowiada za close().
    """
    merged = fitz.open()
    try:
        for path in check_pdf_paths(paths):
            src = fitz.open(str(path))
            try:
                merged.insert_pdf(src)
            finally:
                src.close()
    except Exception:
        merged.close()
        raise
    return merged


def count_pages(paths: Sequence[str | Path]) -> int:
    total = 0
    for path in check_pdf_paths(paths):
        with fitz.open(str(path)) as doc:
            total += doc.page_count
    return total
