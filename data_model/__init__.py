"""
data_model — struktury danych układu stron.

Użycie:
  from data_model import Piece, PageDescriptor, PageKind, ...

Moduły:
  pages  — PageKind, PageDescriptor, LayoutPlan
  pieces — Piece, PieceIndex

Mapowanie na format klasyfikatora (JSON):
  title     → Piece.title
  startPage → Piece.start_page
  endPage   → Piece.end_page
"""

from .pages import (
    PageKind,
    PageDescriptor,
    LayoutPlan,
)
from .pieces import (
    Piece,
    PieceIndex,
)

__all__ = [
    # pages
    "PageKind",
    "PageDescriptor",
    "LayoutPlan",
    # pieces
    "Piece",
    "PieceIndex",
]
