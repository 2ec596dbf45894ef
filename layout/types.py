"""
layout/types.py — kody i klasy błędów układu stron.

LayoutError — wspólna baza (ValueError) z kodem ErrorCode.
  InvalidPieceRange  — zakres utworu poza [1, total_pages] lub start > end
  OverlappingPieces  — dwa utwory zajmują wspólne strony
  PlanPageOutOfRange — plan wskazuje stronę, której nie ma w dokumencie
"""

from __future__ import annotations

from enum import StrEnum

from data_model.pieces import Piece


class ErrorCode(StrEnum):
    """Stałe kody błędów układu."""

    INVALID_PIECE_RANGE      = "E_INVALID_PIECE_RANGE"
    OVERLAPPING_PIECES       = "E_OVERLAPPING_PIECES"
    PLAN_PAGE_OUT_OF_RANGE   = "E_PLAN_PAGE_OUT_OF_RANGE"


class LayoutError(ValueError):
    code: ErrorCode

    def __str__(self) -> str:
        return f"[{self.code}] {super().__str__()}"


class InvalidPieceRange(LayoutError):
    code = ErrorCode.INVALID_PIECE_RANGE

    def __init__(self, piece: Piece, total_pages: int, reason: str) -> None:
        self.piece = piece
        self.total_pages = total_pages
        super().__init__(
            f"Utwór '{piece.title}' (s. {piece.start_page}–{piece.end_page}) "
            f"{reason} (dokument ma {total_pages} stron)."
        )


class OverlappingPieces(LayoutError):
    code = ErrorCode.OVERLAPPING_PIECES

    def __init__(self, first: Piece, second: Piece) -> None:
        self.first = first
        self.second = second
        super().__init__(
            f"Utwory '{first.title}' (s. {first.start_page}–{first.end_page}) i "
            f"'{second.title}' (s. {second.start_page}–{second.end_page}) "
            "zajmują wspólne strony."
        )


class PlanPageOutOfRange(LayoutError):
    code = ErrorCode.PLAN_PAGE_OUT_OF_RANGE

    def __init__(self, page: int, total_pages: int) -> None:
        self.page = page
        self.total_pages = total_pages
        super().__init__(
            f"Plan wskazuje stronę {page}, a dokument źródłowy ma {total_pages} stron."
        )
