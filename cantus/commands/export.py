"""Komenda: cantus export — zapisuje końcowy PDF według planu."""

from __future__ import annotations

import argparse
from pathlib import Path

import fitz  # PyMuPDF
from rich.console import Console

from cantus._files import load_pdf_paths, open_merged, output_pdf_path
from cantus.commands.preview import load_plan, warn_misplaced
from data_model.pages import LayoutPlan
from layout.types import LayoutError
from pdf.materialize import export_pdf

console = Console()


def write_output(doc: fitz.Document, plan: LayoutPlan, out_path: Path) -> None:
    """Zapisuje PDF; przy błędzie wypisuje komunikat i kończy z kodem 1."""
    console.print(f"Zapisywanie [bold]{out_path}[/bold] …")
    try:
        written = export_pdf(doc, plan, out_path)
    except (LayoutError, ValueError) as e:
        console.print(f"[red]Błąd planu:[/red] {e}")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Nie udało się wygenerować pliku PDF:[/red] {e}")
        raise SystemExit(1)
    console.print(f"[green]PDF:[/green] {out_path}  ({written} stron)")


def run(args: argparse.Namespace) -> None:
    paths = load_pdf_paths(args.pdf_files)
    total_pages, pieces, plan = load_plan(Path(args.plan))

    doc = open_merged(paths)
    try:
        if doc.page_count != total_pages:
            console.print(
                f"[red]Plan dotyczy {total_pages} stron, a scalone pliki mają "
                f"{doc.page_count}.[/red] Sprawdź listę i kolejność plików."
            )
            raise SystemExit(1)
        warn_misplaced(plan, pieces)
        write_output(doc, plan, output_pdf_path(args.output))
    finally:
        doc.close()


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "export",
        help="Zapisuje końcowy PDF według planu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Scala pliki PDF (w tej samej kolejności co przy `cantus plan`) i składa
dokument według planu: strony źródłowe są kopiowane, a w miejscu
separatorów wstawiane są puste strony o wymiarach pierwszej strony.

Przykłady:
  cantus export czesc1.pdf czesc2.pdf --plan czesc1.plan.json
  cantus export spiewnik.pdf --plan uklad.plan.json -o Spiewnik-2024
        """,
    )
    p.add_argument(
        "pdf_files",
        nargs="+",
        metavar="PLIK.pdf",
        help="Pliki PDF w kolejności scalania.",
    )
    p.add_argument(
        "--plan",
        metavar="PLAN.json",
        required=True,
        help="Plik planu (wynik `cantus plan`, ewentualnie poprawiony ręcznie).",
    )
    p.add_argument(
        "-o", "--output",
        metavar="NAZWA",
        default=None,
        help="Nazwa pliku wynikowego (domyślnie: Uklad-Cantusow.pdf).",
    )
    p.set_defaults(func=run)
