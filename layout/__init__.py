"""
layout — planowanie układu stron śpiewnika.

Interfejs publiczny:
    build_piece_index      — indeks utworów dwustronicowych
    plan_layout            — plan stron z separatorami
    arrange                — walidacja + indeks + plan w jednym kroku
    find_misplaced_pieces  — kontrola (np. ręcznie poprawionego) planu
    validate_pieces, find_piece_problems — walidacja wyniku klasyfikatora
    make_spreads, Spread   — podział na rozkładówki
    LayoutError, InvalidPieceRange, OverlappingPieces, PlanPageOutOfRange, ErrorCode

Typowe użycie:
    from layout import arrange, make_spreads

    plan = arrange(doc.page_count, pieces)
    for spread in make_spreads(plan):
        print(spread.left, spread.right)
"""

from .types import (
    ErrorCode,
    LayoutError,
    InvalidPieceRange,
    OverlappingPieces,
    PlanPageOutOfRange,
)
from .piece_index import build_piece_index
from .validation import find_piece_problems, validate_pieces
from .planner import arrange, find_misplaced_pieces, is_left_page, plan_layout
from .spreads import Spread, make_spreads, spread_label

__all__ = [
    "ErrorCode",
    "LayoutError",
    "InvalidPieceRange",
    "OverlappingPieces",
    "PlanPageOutOfRange",
    "build_piece_index",
    "find_piece_problems",
    "validate_pieces",
    "arrange",
    "find_misplaced_pieces",
    "is_left_page",
    "plan_layout",
    "Spread",
    "make_spreads",
    "spread_label",
]
