"""Testy planera układu: scenariusze, własności i walidacja wejścia."""

from __future__ import annotations

import itertools

import pytest

from data_model import PageDescriptor, PageKind, Piece
from layout import (
    ErrorCode,
    InvalidPieceRange,
    OverlappingPieces,
    arrange,
    build_piece_index,
    find_misplaced_pieces,
    is_left_page,
    plan_layout,
)


def O(n: int) -> PageDescriptor:
    return PageDescriptor.original(n)


def S(before: int) -> PageDescriptor:
    return PageDescriptor.separator(before=before)


def two(start: int, title: str = "") -> Piece:
    return Piece(title=title or f"Utwór {start}", start_page=start, end_page=start + 1)


def sources(plan: list[PageDescriptor]) -> list[int]:
    return [d.source_page for d in plan if d.source_page is not None]


# ---------------------------------------------------------------------------
# Scenariusze
# ---------------------------------------------------------------------------

def test_no_two_page_pieces_keeps_source_order() -> None:
    assert plan_layout(5, {}) == [O(1), O(2), O(3), O(4), O(5)]


def test_piece_at_start_gets_separator() -> None:
    plan = plan_layout(4, build_piece_index([two(1)]))
    assert plan == [S(1), O(1), O(2), O(3), O(4)]


def test_piece_already_on_left_page_needs_no_separator() -> None:
    plan = plan_layout(4, build_piece_index([two(2)]))
    assert plan == [O(1), O(2), O(3), O(4)]


def test_two_pieces_each_get_their_own_separator() -> None:
    plan = plan_layout(6, build_piece_index([two(1), two(4)]))
    assert plan == [S(1), O(1), O(2), O(3), S(4), O(4), O(5), O(6)]
    assert len(plan) == 8


def test_consecutive_pieces_share_parity() -> None:
    # [Sep, 1, 2] → długość 3, utwór 3-4 od razu na lewej stronie
    plan = plan_layout(4, build_piece_index([two(1), two(3)]))
    assert plan == [S(1), O(1), O(2), O(3), O(4)]


def test_zero_pages_gives_empty_plan() -> None:
    assert plan_layout(0, {}) == []
    assert arrange(0, []) == []


def test_single_and_long_pieces_pass_through() -> None:
    pieces = [
        Piece("Jednostronicowy", 1, 1),
        Piece("Trzystronicowy", 2, 4),
        Piece("Czterostronicowy", 5, 8),
    ]
    plan = arrange(8, pieces)
    assert plan == [O(n) for n in range(1, 9)]


def test_separator_ids_name_the_piece_start() -> None:
    plan = plan_layout(6, build_piece_index([two(1), two(4)]))
    assert [d.id for d in plan if d.is_separator] == ["sep-before-1", "sep-before-4"]
    assert plan[1].id == "page-1"


def test_plan_is_deterministic() -> None:
    index = build_piece_index([two(3), two(7), two(10)])
    assert plan_layout(12, index) == plan_layout(12, index)


# ---------------------------------------------------------------------------
# Własności na wszystkich układach utworów dwustronicowych (do 9 stron)
# ---------------------------------------------------------------------------

def _disjoint_piece_sets(total_pages: int):
    starts = range(1, total_pages)
    for mask in itertools.product((False, True), repeat=len(starts)):
        chosen = [s for s, on in zip(starts, mask) if on]
        if any(b - a < 2 for a, b in zip(chosen, chosen[1:])):
            continue
        yield [two(s) for s in chosen]


@pytest.mark.parametrize("total_pages", range(0, 10))
def test_layout_properties(total_pages: int) -> None:
    for pieces in _disjoint_piece_sets(total_pages):
        index = build_piece_index(pieces)
        plan = plan_layout(total_pages, index)

        # kompletność i kolejność
        assert sources(plan) == list(range(1, total_pages + 1))

        positions = {d.source_page: i for i, d in enumerate(plan) if not d.is_separator}
        for piece in pieces:
            first = positions[piece.start_page]
            assert is_left_page(first)
            assert positions[piece.end_page] == first + 1

        # separator tylko tam, gdzie utwór trafiłby na prawą stronę
        separators = [i for i, d in enumerate(plan) if d.is_separator]
        assert len(separators) <= len(pieces)
        for i in separators:
            assert i % 2 == 0
            assert plan[i + 1].source_page in index

        assert find_misplaced_pieces(plan, index) == []


# ---------------------------------------------------------------------------
# Walidacja wejścia planera
# ---------------------------------------------------------------------------

def test_piece_starting_on_last_page_is_rejected() -> None:
    with pytest.raises(InvalidPieceRange) as exc_info:
        plan_layout(4, build_piece_index([two(4)]))
    assert exc_info.value.code is ErrorCode.INVALID_PIECE_RANGE


def test_piece_before_first_page_is_rejected() -> None:
    with pytest.raises(InvalidPieceRange):
        plan_layout(4, {0: two(0)})


def test_index_key_must_match_start_page() -> None:
    with pytest.raises(InvalidPieceRange):
        plan_layout(6, {2: two(3)})


def test_overlapping_index_entries_are_rejected() -> None:
    with pytest.raises(OverlappingPieces):
        plan_layout(6, {2: two(2), 3: two(3)})


@pytest.mark.parametrize("total_pages", [-1, 2.0, "3", True])
def test_total_pages_must_be_non_negative_int(total_pages) -> None:
    with pytest.raises(ValueError):
        plan_layout(total_pages, {})


def test_arrange_validates_all_pieces() -> None:
    pieces = [two(1), Piece("Długi", 2, 5)]
    with pytest.raises(OverlappingPieces):
        arrange(6, pieces)


def test_arrange_rejects_long_piece_out_of_range() -> None:
    with pytest.raises(InvalidPieceRange):
        arrange(4, [Piece("Za długi", 3, 6)])


# ---------------------------------------------------------------------------
# Kontrola planu po ręcznej edycji
# ---------------------------------------------------------------------------

def test_misplaced_piece_after_removing_separator() -> None:
    index = build_piece_index([two(1)])
    edited = [O(1), O(2), O(3)]
    assert find_misplaced_pieces(edited, index) == [two(1)]


def test_split_piece_is_reported() -> None:
    index = build_piece_index([two(2)])
    edited = [O(1), O(2), S(3), O(3)]
    assert find_misplaced_pieces(edited, index) == [two(2)]


def test_missing_piece_is_reported() -> None:
    index = build_piece_index([two(2)])
    assert find_misplaced_pieces([O(1), O(2)], index) == [two(2)]


def test_separator_kind_is_tagged() -> None:
    plan = plan_layout(2, build_piece_index([two(1)]))
    assert [d.kind for d in plan] == [PageKind.SEPARATOR, PageKind.ORIGINAL, PageKind.ORIGINAL]
