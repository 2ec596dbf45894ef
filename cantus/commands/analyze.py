"""Komenda: cantus analyze — rozpoznaje utwory w plikach PDF (Gemini)."""

from __future__ import annotations

import argparse
from pathlib import Path

import fitz  # PyMuPDF
from rich.console import Console

from cantus._display import show_pieces, show_problems
from cantus._files import load_pdf_paths, open_merged, sidecar_path
from data_model.pieces import Piece
from layout.serialization import write_pieces
from layout.validation import find_piece_problems
from llm_query import default_model, detect_pieces
from pdf.render import DEFAULT_SCALE, render_pages

console = Console()


def classify(doc: fitz.Document, model: str | None, scale: float = DEFAULT_SCALE) -> list[Piece]:
    """Renderuje strony dokumentu i wysyła je do klasyfikatora; przy błędzie kończy z kodem 1."""
    console.print(f"Renderowanie [bold]{doc.page_count}[/bold] stron (skala {scale}) …")
    try:
        images = render_pages(doc, scale)
    except ValueError as e:
        console.print(f"[red]Błąd renderowania:[/red] {e}")
        raise SystemExit(1)

    console.print(f"Rozpoznawanie utworów (Gemini, [cyan]{model or default_model()}[/cyan]) …")
    try:
        pieces = detect_pieces(images, model=model)
    except ValueError as e:
        console.print(f"[red]Błąd analizy AI:[/red] {e}")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Błąd Gemini API:[/red] {e}")
        raise SystemExit(1)

    console.print(f"Wykryto [bold]{len(pieces)}[/bold] utworów.")
    return pieces


def run(args: argparse.Namespace) -> None:
    paths = load_pdf_paths(args.pdf_files)

    doc = open_merged(paths)
    try:
        total_pages = doc.page_count
        pieces = classify(doc, args.model, args.scale)
    finally:
        doc.close()

    out_path = Path(args.out) if args.out else sidecar_path(paths[0], ".pieces.json")
    write_pieces(pieces, out_path)
    console.print(f"[green]JSON:[/green] {out_path}  ({len(pieces)} utworów)")

    problems = find_piece_problems(pieces, total_pages)
    if problems:
        console.print("[yellow]Wynik klasyfikatora wymaga poprawek przed planowaniem:[/yellow]")
        show_problems(problems, style="yellow")

    if args.show:
        show_pieces(pieces)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "analyze",
        help="Rozpoznaje utwory w plikach PDF i zapisuje je do JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Łączy pliki PDF w podanej kolejności, renderuje strony i wysyła je do
Gemini. Wynik (tytuł, strona początkowa, strona końcowa) trafia do pliku
*.pieces.json, który można poprawić ręcznie przed `cantus plan`.

Przykłady:
  cantus analyze czesc1.pdf czesc2.pdf --show
  cantus analyze spiewnik.pdf --out utwory.json --model gemini-2.5-pro
        """,
    )
    p.add_argument(
        "pdf_files",
        nargs="+",
        metavar="PLIK.pdf",
        help="Pliki PDF w kolejności scalania.",
    )
    p.add_argument(
        "--out",
        metavar="PLIK.json",
        default=None,
        help="Plik wynikowy (domyślnie: <pierwszy plik>.pieces.json).",
    )
    p.add_argument(
        "--model",
        metavar="MODEL",
        default=None,
        help="Model Gemini (domyślnie: GEMINI_MODEL lub gemini-2.5-flash).",
    )
    p.add_argument(
        "--scale",
        type=float,
        default=DEFAULT_SCALE,
        help=f"Skala renderowania stron (domyślnie: {DEFAULT_SCALE}).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę utworów.",
    )
    p.set_defaults(func=run)
