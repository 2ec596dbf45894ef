"""Ścieżki wejściowe i wyjściowe komend cantus."""

from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF
from rich.console import Console

from pdf.merge import check_pdf_paths, merge_pdfs

console = Console()

DEFAULT_OUTPUT_NAME = "Uklad-Cantusow"


def load_pdf_paths(raw_paths: list[str]) -> list[Path]:
    """Sprawdza pliki wejściowe; przy błędzie wypisuje komunikat i kończy z kodem 1."""
    try:
        return check_pdf_paths(raw_paths)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def open_merged(paths: list[Path]) -> fitz.Document:
    """Scala pliki PDF; przy błędzie odczytu wypisuje komunikat i kończy z kodem 1."""
    console.print(f"Łączenie [bold]{len(paths)}[/bold] plików PDF …")
    try:
        return merge_pdfs(paths)
    except Exception as e:
        console.print(f"[red]Błąd odczytu PDF:[/red] {e}")
        raise SystemExit(1)


def sidecar_path(first_pdf: Path, suffix: str) -> Path:
    """np. spiewnik.pdf + '.plan.json' -> spiewnik.plan.json"""
    return first_pdf.with_name(first_pdf.stem + suffix)


def output_pdf_path(name: str | None) -> Path:
    """Nazwa pliku wynikowego; domyślnie Uklad-Cantusow.pdf, '.pdf' dopisywane gdy brak."""
    filename = (name or "").strip() or DEFAULT_OUTPUT_NAME
    if not filename.lower().endswith(".pdf"):
        filename += ".pdf"
    return Path(filename)
