"""
llm_query/prompt.py — prompt i schemat odpowiedzi klasyfikatora utworów.

Model dostaje prompt + obrazy kolejnych stron scalonego dokumentu i zwraca
tablicę {"title", "startPage", "endPage"} (numery stron 1-based).

Publiczne API:
  PROMPT           — treść instrukcji dla modelu
  RESPONSE_SCHEMA  — schemat JSON odpowiedzi (google.genai.types.Schema)
  build_prompt(page_count) -> str
"""

from __future__ import annotations

from google.genai import types

PROMPT = """Jesteś ekspertem od muzyki chóralnej i czytania nut. Otrzymujesz obrazy kolejnych stron śpiewnika. Rozpoznaj każdy utwór i podaj jego tytuł, numer strony początkowej i numer strony końcowej.

Zasady:
1. Strony numerujemy od 1 w kolejności przesłanych obrazów (pierwszy obraz = strona 1, drugi = strona 2 itd.).
2. Tytuł utworu jest zwykle wydrukowany dużą czcionką u góry pierwszej strony utworu.
3. Utwór może mieć jedną lub więcej stron. Ustal dokładnie, gdzie się kończy — koniec oznacza zwykle podwójna kreska taktowa albo oznaczenie "Fine".
4. Zakresy stron różnych utworów nie mogą się nakładać.
5. Zwróć wyłącznie tablicę obiektów JSON zgodną z podanym schematem, bez komentarzy i bez formatowania markdown."""

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "title": types.Schema(
                type=types.Type.STRING,
                description="Tytuł utworu.",
            ),
            "startPage": types.Schema(
                type=types.Type.INTEGER,
                description="Numer strony, na której utwór się zaczyna (od 1).",
            ),
            "endPage": types.Schema(
                type=types.Type.INTEGER,
                description="Numer strony, na której utwór się kończy (od 1).",
            ),
        },
        required=["title", "startPage", "endPage"],
    ),
)


def build_prompt(page_count: int) -> str:
    """Dokleja do PROMPT liczbę stron, żeby model nie wychodził poza zakres."""
    return f"{PROMPT}\n\nDokument ma {page_count} stron (obrazów)."
