"""
data_model/pieces.py — utwory wykryte w scalonym dokumencie.

Piece odpowiada jednemu utworowi muzycznemu: ciągły zakres stron
[start_page, end_page] (1-based, włącznie). Klasyfikator zwraca je jako
{"title", "startPage", "endPage"}; poprawność zakresu sprawdza
layout.validation, nie konstruktor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Piece:
    title: str        # tytuł z pierwszej strony utworu (bez znaczenia dla układu)
    start_page: int   # 1-based
    end_page: int     # 1-based, włącznie

    @property
    def span(self) -> int:
        """Różnica end_page - start_page (0 = utwór jednostronicowy)."""
        return self.end_page - self.start_page

    @property
    def is_two_page(self) -> bool:
        return self.span == 1

    @property
    def pages(self) -> range:
        return range(self.start_page, self.end_page + 1)

    def __str__(self) -> str:
        if self.start_page == self.end_page:
            return f"{self.title} (s. {self.start_page})"
        return f"{self.title} (s. {self.start_page}–{self.end_page})"


# Indeks utworów dwustronicowych: strona początkowa -> utwór.
PieceIndex: TypeAlias = dict[int, Piece]
