"""
layout/spreads.py — podział planu na rozkładówki do przeglądu.

Pierwsza strona książki jest prawą stroną, więc pierwsza rozkładówka ma
puste lewe pole; dalej strony łączą się w pary (lewa, prawa). Nieparzysty
ogon dopełniamy pustym prawym polem.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from data_model.pages import PageDescriptor


@dataclass(frozen=True, slots=True)
class Spread:
    left: PageDescriptor | None
    right: PageDescriptor | None


def make_spreads(plan: Sequence[PageDescriptor]) -> list[Spread]:
    slots: list[PageDescriptor | None] = [None, *plan]
    if len(slots) % 2:
        slots.append(None)
    return [Spread(left=slots[i], right=slots[i + 1]) for i in range(0, len(slots), 2)]


def spread_label(index: int, total: int) -> str:
    """Etykieta rozkładówki; index 0-based."""
    return f"Rozkładówka {index + 1} z {total}"
