"""
layout/piece_index.py — indeks utworów dwustronicowych.

Tylko utwory o span == 1 wymagają specjalnego ułożenia (start na lewej
stronie); pozostałe przechodzą przez plan jako zwykłe strony.
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model.pieces import Piece, PieceIndex


def build_piece_index(pieces: Iterable[Piece]) -> PieceIndex:
    """
    Buduje słownik: strona początkowa -> utwór dwustronicowy.

    Kolejność wejścia dowolna. Przy dwóch utworach z tą samą stroną
    początkową wygrywa ostatni; wykrywanie takich konfliktów należy do
    layout.validation.
    """
    return {piece.start_page: piece for piece in pieces if piece.is_two_page}
