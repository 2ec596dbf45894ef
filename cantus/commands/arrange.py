"""Komenda: cantus arrange — pełny przebieg: scalanie, analiza, plan, eksport."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from cantus._display import show_pieces, show_spreads
from cantus._files import load_pdf_paths, open_merged, output_pdf_path
from cantus.commands.analyze import classify
from cantus.commands.export import write_output
from cantus.commands.plan import build_plan, load_pieces
from layout import build_piece_index, make_spreads
from layout.serialization import write_plan
from pdf.render import DEFAULT_SCALE

console = Console()


def run(args: argparse.Namespace) -> None:
    paths = load_pdf_paths(args.pdf_files)

    doc = open_merged(paths)
    try:
        total_pages = doc.page_count
        if args.pieces:
            pieces = load_pieces(Path(args.pieces))
        else:
            pieces = classify(doc, args.model, args.scale)

        if args.show:
            show_pieces(pieces)

        console.print("Układanie stron …")
        plan = build_plan(total_pages, pieces)

        if args.plan_out:
            write_plan(Path(args.plan_out), total_pages, pieces, plan)
            console.print(f"[green]JSON:[/green] {args.plan_out}")

        if args.show:
            show_spreads(make_spreads(plan), build_piece_index(pieces))

        write_output(doc, plan, output_pdf_path(args.output))
    finally:
        doc.close()


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "arrange",
        help="Scala pliki, rozpoznaje utwory, układa strony i zapisuje PDF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wykonuje analyze + plan + export w jednym kroku. Z --pieces pomija
rozpoznawanie przez Gemini i używa gotowej listy utworów.

Przykłady:
  cantus arrange czesc1.pdf czesc2.pdf
  cantus arrange spiewnik.pdf --pieces utwory.json -o Spiewnik --show
  cantus arrange spiewnik.pdf --plan-out uklad.plan.json
        """,
    )
    p.add_argument(
        "pdf_files",
        nargs="+",
        metavar="PLIK.pdf",
        help="Pliki PDF w kolejności scalania.",
    )
    p.add_argument(
        "--pieces",
        metavar="PLIK.json",
        default=None,
        help="Gotowa lista utworów (pomija Gemini).",
    )
    p.add_argument(
        "--plan-out",
        metavar="PLAN.json",
        default=None,
        help="Zapisz też plan do pliku JSON.",
    )
    p.add_argument(
        "-o", "--output",
        metavar="NAZWA",
        default=None,
        help="Nazwa pliku wynikowego (domyślnie: Uklad-Cantusow.pdf).",
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
        help="Wyświetl utwory i rozkładówki.",
    )
    p.set_defaults(func=run)
