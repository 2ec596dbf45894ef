"""
data_model/pages.py — deskryptory stron układu wynikowego.

PageDescriptor to pojedyncza pozycja w planie układu: albo kopia strony
ze scalonego dokumentu źródłowego (ORIGINAL), albo pusta strona
wstawiona tylko po to, by przesunąć parzystość kolejnych stron (SEPARATOR).

Identyfikatory (pole `id`):
  page-<n>        strona źródłowa n (1-based)
  sep-before-<n>  separator przed utworem zaczynającym się na stronie n
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class PageKind(StrEnum):
    """Rodzaj pozycji w planie."""
    ORIGINAL  = "original"
    SEPARATOR = "separator"


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """
    Jedna strona planu układu.

    - kind:        ORIGINAL | SEPARATOR
    - source_page: numer strony źródłowej (1-based); tylko dla ORIGINAL
    - id:          stabilny identyfikator (nie wpływa na układ)
    """
    kind: PageKind
    source_page: int | None
    id: str

    def __post_init__(self) -> None:
        if self.kind is PageKind.SEPARATOR:
            if self.source_page is not None:
                raise ValueError(f"Separator nie może wskazywać strony źródłowej: {self.id}")
            return
        page = self.source_page
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValueError(f"Nieprawidłowy numer strony źródłowej: {page!r}")

    @classmethod
    def original(cls, page: int) -> PageDescriptor:
        return cls(PageKind.ORIGINAL, page, f"page-{page}")

    @classmethod
    def separator(cls, before: int) -> PageDescriptor:
        return cls(PageKind.SEPARATOR, None, f"sep-before-{before}")

    @property
    def is_separator(self) -> bool:
        return self.kind is PageKind.SEPARATOR

    def __str__(self) -> str:
        return "—" if self.is_separator else str(self.source_page)


# Plan układu: sekwencja stron w kolejności druku.
LayoutPlan: TypeAlias = list[PageDescriptor]
