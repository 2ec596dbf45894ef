"""
layout/validation.py — sprawdzanie listy utworów przed planowaniem.

Wynik klasyfikatora jest danymi zewnętrznymi: zakresy mogą wychodzić poza
dokument albo się nakładać. Planowanie na takich danych zgubiłoby lub
powieliło strony, więc błędy zgłaszamy przed pierwszym krokiem planu.

Publiczne API:
  find_piece_problems(pieces, total_pages) -> list[LayoutError]
  validate_pieces(pieces, total_pages)     -> None  (rzuca pierwszy błąd)
"""

from __future__ import annotations

from collections.abc import Sequence

from data_model.pieces import Piece
from .types import InvalidPieceRange, LayoutError, OverlappingPieces


def _range_problem(piece: Piece, total_pages: int) -> InvalidPieceRange | None:
    if piece.start_page < 1:
        return InvalidPieceRange(piece, total_pages, "zaczyna się przed stroną 1")
    if piece.start_page > piece.end_page:
        return InvalidPieceRange(piece, total_pages, "kończy się przed początkiem")
    if piece.end_page > total_pages:
        return InvalidPieceRange(piece, total_pages, "wychodzi poza koniec dokumentu")
    return None


def find_piece_problems(pieces: Sequence[Piece], total_pages: int) -> list[LayoutError]:
    """
    Zbiera wszystkie problemy z listą utworów.

    Kolejność: najpierw błędy zakresu (w kolejności wejścia), potem
    nakładania się — każda para raz, utwory w kolejności strony początkowej.
    Utwory z błędnym zakresem nie biorą udziału w sprawdzaniu nakładania.
    """
    problems: list[LayoutError] = []
    valid: list[Piece] = []

    for piece in pieces:
        problem = _range_problem(piece, total_pages)
        if problem is None:
            valid.append(piece)
        else:
            problems.append(problem)

    ordered = sorted(valid, key=lambda p: (p.start_page, p.end_page))
    for i, first in enumerate(ordered):
        for second in ordered[i + 1:]:
            if second.start_page > first.end_page:
                break
            problems.append(OverlappingPieces(first, second))

    return problems


def validate_pieces(pieces: Sequence[Piece], total_pages: int) -> None:
    """Rzuca pierwszy znaleziony LayoutError; nic nie robi dla poprawnych danych."""
    problems = find_piece_problems(pieces, total_pages)
    if problems:
        raise problems[0]
