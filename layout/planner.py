"""
layout/planner.py — planowanie układu stron z separatorami.

Zasada: utwór dwustronicowy musi zaczynać się na lewej stronie rozkładówki.
W książce lewe strony mają parzyste numery (2, 4, …), czyli nieparzyste
indeksy 0-based w planie (1, 3, …). Jeśli w chwili dokładania utworu plan
ma parzystą długość, następna strona byłaby prawą — wstawiamy wtedy jeden
pusty separator.

Architektura:
  pieces → validate_pieces() → build_piece_index() → plan_layout() → LayoutPlan

Publiczne API:
  plan_layout(total_pages, piece_index) -> LayoutPlan
  arrange(total_pages, pieces)          -> LayoutPlan
  find_misplaced_pieces(plan, index)    -> list[Piece]
  is_left_page(position)                -> bool
"""

from __future__ import annotations

from collections.abc import Sequence

from data_model.pages import LayoutPlan, PageDescriptor
from data_model.pieces import Piece, PieceIndex
from .piece_index import build_piece_index
from .types import InvalidPieceRange, OverlappingPieces
from .validation import validate_pieces


def is_left_page(position: int) -> bool:
    """True gdy pozycja 0-based w planie wypada na lewej stronie rozkładówki."""
    return position % 2 == 1


# ---------------------------------------------------------------------------
# Walidacja wejścia planera
# ---------------------------------------------------------------------------

def _check_total_pages(total_pages: int) -> None:
    if isinstance(total_pages, bool) or not isinstance(total_pages, int) or total_pages < 0:
        raise ValueError(f"Liczba stron musi być nieujemną liczbą całkowitą, otrzymano: {total_pages!r}")


def _check_index(total_pages: int, piece_index: PieceIndex) -> None:
    for start, piece in piece_index.items():
        if start != piece.start_page or not piece.is_two_page:
            raise InvalidPieceRange(piece, total_pages, f"nie pasuje do klucza indeksu {start}")
        if piece.start_page < 1 or piece.end_page > total_pages:
            raise InvalidPieceRange(piece, total_pages, "wychodzi poza dokument")

    for start in sorted(piece_index):
        follower = piece_index.get(start + 1)
        if follower is not None:
            raise OverlappingPieces(piece_index[start], follower)


# ---------------------------------------------------------------------------
# Planer
# ---------------------------------------------------------------------------

def plan_layout(total_pages: int, piece_index: PieceIndex) -> LayoutPlan:
    """
    Buduje plan stron 1..total_pages z separatorami przed utworami dwustronicowymi.

    Args:
        total_pages: Liczba stron scalonego dokumentu (0 → pusty plan).
        piece_index: Wynik build_piece_index().

    Returns:
        Lista PageDescriptor w kolejności druku.

    Raises:
        ValueError:         total_pages nie jest nieujemną liczbą całkowitą.
        InvalidPieceRange:  wpis indeksu wychodzi poza dokument.
        OverlappingPieces:  dwa wpisy indeksu mają wspólną stronę.
    """
    _check_total_pages(total_pages)
    _check_index(total_pages, piece_index)

    output: LayoutPlan = []
    consumed: set[int] = set()

    for page in range(1, total_pages + 1):
        if page in consumed:
            continue

        if page in piece_index:
            if len(output) % 2 == 0:
                output.append(PageDescriptor.separator(before=page))
            output.append(PageDescriptor.original(page))
            output.append(PageDescriptor.original(page + 1))
            consumed.update((page, page + 1))
        else:
            output.append(PageDescriptor.original(page))
            consumed.add(page)

    return output


def arrange(total_pages: int, pieces: Sequence[Piece]) -> LayoutPlan:
    """Waliduje pełną listę utworów, buduje indeks i zwraca plan."""
    validate_pieces(pieces, total_pages)
    return plan_layout(total_pages, build_piece_index(pieces))


# ---------------------------------------------------------------------------
# Kontrola planu (np. po ręcznej edycji pliku planu)
# ---------------------------------------------------------------------------

def find_misplaced_pieces(plan: Sequence[PageDescriptor], piece_index: PieceIndex) -> list[Piece]:
    """
    Zwraca utwory dwustronicowe, które w planie nie zaczynają się na lewej
    stronie, mają rozdzielone strony albo których brakuje.
    """
    positions: dict[int, int] = {}
    for position, desc in enumerate(plan):
        if desc.source_page is not None:
            positions.setdefault(desc.source_page, position)

    misplaced: list[Piece] = []
    for start in sorted(piece_index):
        piece = piece_index[start]
        first = positions.get(piece.start_page)
        second = positions.get(piece.end_page)
        if first is None or second is None or second != first + 1 or not is_left_page(first):
            misplaced.append(piece)
    return misplaced
