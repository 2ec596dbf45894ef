"""
llm_query/pieces.py — rozpoznawanie utworów przez model i parsowanie odpowiedzi.

Publiczne API:
  parse_pieces(raw)                           -> list[Piece]
  detect_pieces(images, model, api_key)       -> list[Piece]
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from data_model.pieces import Piece
from layout.serialization import pieces_from_json
from .gemini import call_gemini
from .prompt import build_prompt


def _strip_fence(raw: str) -> str:
    """Odrzuca otoczkę ```json ... ``` jeśli model ją dodał."""
    text = raw.strip()
    if text.startswith("```json"):
        text = text[len("```json"):]
    elif text.startswith("```"):
        text = text[len("```"):]
    if text.endswith("```"):
        text = text[: -len("```")]
    return text.strip()


def parse_pieces(raw: str) -> list[Piece]:
    """
    Parsuje odpowiedź modelu do listy Piece.

    Raises:
        ValueError: odpowiedź nie jest tablicą JSON poprawnych obiektów utworów.
    """
    try:
        data = json.loads(_strip_fence(raw))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Odpowiedź modelu nie jest poprawnym JSON: {exc}") from exc
    return pieces_from_json(data)


def detect_pieces(
    images: Sequence[bytes],
    model: str | None = None,
    api_key: str | None = None,
) -> list[Piece]:
    """Wysyła obrazy stron do klasyfikatora i zwraca wykryte utwory."""
    if not images:
        return []
    raw = call_gemini(build_prompt(len(images)), images, model=model, api_key=api_key)
    return parse_pieces(raw)
