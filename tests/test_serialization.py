"""Testy plików *.pieces.json i *.plan.json."""

from __future__ import annotations

import json

import pytest

from data_model import PageDescriptor, Piece
from layout import arrange
from layout.serialization import (
    page_from_dict,
    piece_from_dict,
    plan_from_dict,
    read_pieces,
    read_plan,
    write_pieces,
    write_plan,
)


def test_pieces_file_uses_classifier_keys(tmp_path) -> None:
    path = tmp_path / "a.pieces.json"
    write_pieces([Piece("Ave Maria", 2, 3)], path)
    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"title": "Ave Maria", "startPage": 2, "endPage": 3}
    ]
    assert read_pieces(path) == [Piece("Ave Maria", 2, 3)]


def test_plan_file_layout(tmp_path) -> None:
    pieces = [Piece("Ave Maria", 1, 2)]
    plan = arrange(3, pieces)
    path = tmp_path / "a.plan.json"
    write_plan(path, 3, pieces, plan)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["total_pages"] == 3
    assert data["pages"][0] == {"type": "separator", "id": "sep-before-1"}
    assert data["pages"][1] == {"type": "original", "originalPageNum": 1, "id": "page-1"}

    assert read_plan(path) == (3, pieces, plan)


def test_hand_edited_page_without_id() -> None:
    assert page_from_dict({"type": "original", "originalPageNum": 4}) == PageDescriptor.original(4)
    assert page_from_dict({"type": "separator"}).is_separator


@pytest.mark.parametrize(
    "item",
    [
        {"type": "blank"},
        {"type": "separator", "originalPageNum": 2},
        {"type": "original"},
        {"type": "original", "originalPageNum": "3"},
        {"type": "original", "originalPageNum": 0},
        ["original", 1],
    ],
)
def test_invalid_pages_are_rejected(item) -> None:
    with pytest.raises(ValueError):
        page_from_dict(item)


@pytest.mark.parametrize(
    "item",
    [
        {"startPage": 1, "endPage": 2},
        {"title": 5, "startPage": 1, "endPage": 2},
        {"title": "A", "startPage": 1.5, "endPage": 2},
        {"title": "A", "startPage": 1},
        "A",
    ],
)
def test_invalid_pieces_are_rejected(item) -> None:
    with pytest.raises(ValueError):
        piece_from_dict(item)


def test_plan_requires_object_with_pages() -> None:
    with pytest.raises(ValueError):
        plan_from_dict([])
    with pytest.raises(ValueError):
        plan_from_dict({"total_pages": 2, "pieces": []})
