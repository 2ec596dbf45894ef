"""Komenda: cantus preview — przegląd planu rozkładówka po rozkładówce."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from cantus._display import show_spreads
from data_model.pages import LayoutPlan
from data_model.pieces import Piece
from layout import build_piece_index, find_misplaced_pieces, make_spreads
from layout.serialization import read_plan

console = Console()


def load_plan(path: Path) -> tuple[int, list[Piece], LayoutPlan]:
    """Wczytuje *.plan.json; przy błędzie wypisuje komunikat i kończy z kodem 1."""
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    try:
        return read_plan(path)
    except json.JSONDecodeError as e:
        console.print(f"[red]Niepoprawny JSON w {path}:[/red] {e}")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]Niepoprawny plan w {path}:[/red] {e}")
        raise SystemExit(1)


def warn_misplaced(plan: LayoutPlan, pieces: list[Piece]) -> None:
    for piece in find_misplaced_pieces(plan, build_piece_index(pieces)):
        console.print(f"[yellow]\\[warn][/yellow] Utwór nie zaczyna się na lewej stronie: {escape(str(piece))}")


def run(args: argparse.Namespace) -> None:
    _total_pages, pieces, plan = load_plan(Path(args.plan))
    spreads = make_spreads(plan)

    only: int | None = None
    if args.spread is not None:
        if not 1 <= args.spread <= len(spreads):
            console.print(f"[red]Plan ma {len(spreads)} rozkładówek, wybrano {args.spread}.[/red]")
            raise SystemExit(1)
        only = args.spread - 1

    warn_misplaced(plan, pieces)
    show_spreads(spreads, build_piece_index(pieces), only=only)
    console.print(f"  [dim]{len(plan)} stron, {len(spreads)} rozkładówek[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "preview",
        help="Pokazuje plan jako rozkładówki (lewa | prawa).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla plan tak, jak będzie wyglądał po otwarciu książki. Pierwsza
rozkładówka ma pustą lewą stronę (okładka).

Przykłady:
  cantus preview spiewnik.plan.json
  cantus preview spiewnik.plan.json --spread 3
        """,
    )
    p.add_argument(
        "plan",
        metavar="PLAN.json",
        help="Plik planu (wynik `cantus plan`).",
    )
    p.add_argument(
        "--spread",
        type=int,
        metavar="N",
        default=None,
        help="Pokaż tylko rozkładówkę N (od 1).",
    )
    p.set_defaults(func=run)
