"""Komenda: cantus plan — układa strony na podstawie listy utworów."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console

from cantus._display import show_plan, show_problems
from cantus._files import load_pdf_paths, sidecar_path
from data_model.pages import LayoutPlan
from data_model.pieces import Piece
from layout import arrange, build_piece_index, find_piece_problems
from layout.serialization import read_pieces, write_plan
from pdf.merge import count_pages

console = Console()


def load_pieces(path: Path) -> list[Piece]:
    """Wczytuje *.pieces.json; przy błędzie wypisuje komunikat i kończy z kodem 1."""
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    try:
        return read_pieces(path)
    except json.JSONDecodeError as e:
        console.print(f"[red]Niepoprawny JSON w {path}:[/red] {e}")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]Niepoprawna lista utworów w {path}:[/red] {e}")
        raise SystemExit(1)


def build_plan(total_pages: int, pieces: list[Piece]) -> LayoutPlan:
    """Waliduje utwory i planuje układ; przy błędach danych kończy z kodem 1."""
    problems = find_piece_problems(pieces, total_pages)
    if problems:
        console.print(f"[red]Lista utworów zawiera błędy ({len(problems)}):[/red]")
        show_problems(problems)
        raise SystemExit(1)

    plan = arrange(total_pages, pieces)
    separators = sum(1 for d in plan if d.is_separator)
    two_page = sum(1 for p in pieces if p.is_two_page)
    console.print(
        f"Plan: [bold]{len(plan)}[/bold] stron "
        f"({total_pages} źródłowych + {separators} pustych, "
        f"{two_page} utworów dwustronicowych)."
    )
    return plan


def run(args: argparse.Namespace) -> None:
    paths = load_pdf_paths(args.pdf_files)
    try:
        total_pages = count_pages(paths)
    except Exception as e:
        console.print(f"[red]Błąd odczytu PDF:[/red] {e}")
        raise SystemExit(1)

    pieces = load_pieces(Path(args.pieces))
    plan = build_plan(total_pages, pieces)

    out_path = Path(args.out) if args.out else sidecar_path(paths[0], ".plan.json")
    write_plan(out_path, total_pages, pieces, plan)
    console.print(f"[green]JSON:[/green] {out_path}")

    if args.show:
        show_plan(plan, build_piece_index(pieces))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "plan",
        help="Układa strony tak, by utwory dwustronicowe zaczynały się na lewej stronie.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje listę utworów (*.pieces.json) i liczbę stron scalonych plików PDF,
a następnie wyznacza plan: przed każdym utworem dwustronicowym, który
wypadłby na prawej stronie, wstawiana jest jedna pusta strona.

Przykłady:
  cantus plan czesc1.pdf czesc2.pdf --pieces czesc1.pieces.json --show
  cantus plan spiewnik.pdf --pieces utwory.json --out uklad.plan.json
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
        required=True,
        help="Lista utworów (wynik `cantus analyze`).",
    )
    p.add_argument(
        "--out",
        metavar="PLIK.json",
        default=None,
        help="Plik planu (domyślnie: <pierwszy plik>.plan.json).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl plan strona po stronie.",
    )
    p.set_defaults(func=run)
