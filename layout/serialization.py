"""
layout/serialization.py — zapis i odczyt plików utworów i planu (JSON).

*.pieces.json — lista {"title", "startPage", "endPage"} (format klasyfikatora)
*.plan.json   — {
                  "total_pages": N,
                  "pieces": [... jak wyżej ...],
                  "pages": [{"type": "original", "originalPageNum": 1, "id": "page-1"},
                            {"type": "separator", "id": "sep-before-3"}, ...]
                }

Plik planu można poprawić ręcznie przed eksportem (przesunąć, dodać lub
usunąć separatory).
"""

from __future__ import annotations

import json
import pathlib
from collections.abc import Sequence
from typing import Any

from data_model.pages import LayoutPlan, PageDescriptor, PageKind
from data_model.pieces import Piece


# ---------------------------------------------------------------------------
# Utwory
# ---------------------------------------------------------------------------

def _require_int(item: dict, key: str) -> int:
    value = item.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Pole '{key}' musi być liczbą całkowitą, otrzymano: {value!r}")
    return value


def piece_from_dict(item: Any) -> Piece:
    if not isinstance(item, dict):
        raise ValueError(f"Oczekiwano obiektu utworu, otrzymano: {item!r}")
    title = item.get("title")
    if not isinstance(title, str):
        raise ValueError(f"Pole 'title' musi być tekstem, otrzymano: {title!r}")
    return Piece(
        title=title.strip(),
        start_page=_require_int(item, "startPage"),
        end_page=_require_int(item, "endPage"),
    )


def piece_to_dict(piece: Piece) -> dict:
    return {"title": piece.title, "startPage": piece.start_page, "endPage": piece.end_page}


def pieces_from_json(data: Any) -> list[Piece]:
    if not isinstance(data, list):
        raise ValueError("Oczekiwano tablicy JSON z utworami.")
    return [piece_from_dict(item) for item in data]


def write_pieces(pieces: Sequence[Piece], path: pathlib.Path) -> None:
    data = [piece_to_dict(p) for p in pieces]
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def read_pieces(path: pathlib.Path) -> list[Piece]:
    return pieces_from_json(json.loads(path.read_text(encoding="utf-8")))


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

def page_to_dict(desc: PageDescriptor) -> dict:
    if desc.is_separator:
        return {"type": str(desc.kind), "id": desc.id}
    return {"type": str(desc.kind), "originalPageNum": desc.source_page, "id": desc.id}


def page_from_dict(item: Any) -> PageDescriptor:
    if not isinstance(item, dict):
        raise ValueError(f"Oczekiwano obiektu strony, otrzymano: {item!r}")
    raw_type = item.get("type")
    try:
        kind = PageKind(raw_type)
    except ValueError:
        raise ValueError(f"Nieznany typ strony: {raw_type!r}") from None

    page = item.get("originalPageNum")
    if kind is PageKind.SEPARATOR:
        if page is not None:
            raise ValueError(f"Separator nie może mieć numeru strony: {item!r}")
        return PageDescriptor(kind, None, str(item.get("id") or "separator"))

    page = _require_int(item, "originalPageNum")
    return PageDescriptor(kind, page, str(item.get("id") or f"page-{page}"))


def plan_to_dict(total_pages: int, pieces: Sequence[Piece], plan: Sequence[PageDescriptor]) -> dict:
    return {
        "total_pages": total_pages,
        "pieces": [piece_to_dict(p) for p in pieces],
        "pages": [page_to_dict(d) for d in plan],
    }


def plan_from_dict(data: Any) -> tuple[int, list[Piece], LayoutPlan]:
    """Zwraca (total_pages, pieces, plan)."""
    if not isinstance(data, dict):
        raise ValueError("Oczekiwano obiektu JSON planu.")
    total_pages = _require_int(data, "total_pages")
    pieces = pieces_from_json(data.get("pieces", []))
    pages = data.get("pages")
    if not isinstance(pages, list):
        raise ValueError("Pole 'pages' musi być tablicą.")
    return total_pages, pieces, [page_from_dict(item) for item in pages]


def write_plan(
    path: pathlib.Path,
    total_pages: int,
    pieces: Sequence[Piece],
    plan: Sequence[PageDescriptor],
) -> None:
    data = plan_to_dict(total_pages, pieces, plan)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


def read_plan(path: pathlib.Path) -> tuple[int, list[Piece], LayoutPlan]:
    return plan_from_dict(json.loads(path.read_text(encoding="utf-8")))
