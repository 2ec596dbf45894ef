"""
pdf/render.py — renderowanie stron do JPEG (wejście klasyfikatora).
"""

from __future__ import annotations

import fitz  # PyMuPDF

# Skala 1.0 = 72 DPI; wystarcza modelowi do odczytania tytułów i kresek taktowych.
DEFAULT_SCALE = 1.0


def render_page(page: fitz.Page, scale: float = DEFAULT_SCALE) -> bytes:
    if scale <= 0:
        raise ValueError(f"Skala renderowania musi być dodatnia, otrzymano: {scale}")
    pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)
    return pix.tobytes("jpeg")


def render_pages(doc: fitz.Document, scale: float = DEFAULT_SCALE) -> list[bytes]:
    """Zwraca obrazy JPEG wszystkich stron; indeks listy + 1 = numer strony."""
    return [render_page(page, scale) for page in doc]
