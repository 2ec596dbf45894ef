from __future__ import annotations

import dataclasses

import pytest

from data_model import PageDescriptor, PageKind, Piece


def test_original_descriptor() -> None:
    desc = PageDescriptor.original(7)
    assert desc.kind is PageKind.ORIGINAL
    assert desc.source_page == 7
    assert desc.id == "page-7"
    assert not desc.is_separator


def test_separator_descriptor() -> None:
    desc = PageDescriptor.separator(before=3)
    assert desc.kind is PageKind.SEPARATOR
    assert desc.source_page is None
    assert desc.id == "sep-before-3"
    assert desc.is_separator


def test_separator_cannot_carry_page() -> None:
    with pytest.raises(ValueError):
        PageDescriptor(PageKind.SEPARATOR, 2, "sep")


@pytest.mark.parametrize("page", [None, 0, -1, True, 1.0])
def test_original_needs_positive_int(page) -> None:
    with pytest.raises(ValueError):
        PageDescriptor(PageKind.ORIGINAL, page, "page")


def test_descriptor_is_immutable() -> None:
    desc = PageDescriptor.original(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        desc.source_page = 2  # type: ignore[misc]


def test_piece_span() -> None:
    assert Piece("A", 3, 3).span == 0
    assert Piece("B", 3, 4).is_two_page
    assert not Piece("C", 3, 5).is_two_page
    assert list(Piece("C", 3, 5).pages) == [3, 4, 5]


def test_piece_str() -> None:
    assert str(Piece("Gaude Mater", 4, 5)) == "Gaude Mater (s. 4–5)"
    assert str(Piece("Bogurodzica", 1, 1)) == "Bogurodzica (s. 1)"
