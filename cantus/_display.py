"""Wspólne tabele rich dla komend cantus."""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from data_model.pages import PageDescriptor
from data_model.pieces import Piece, PieceIndex
from layout.planner import is_left_page
from layout.spreads import Spread, spread_label
from layout.types import LayoutError

console = Console()


def _pages_label(piece: Piece) -> str:
    if piece.start_page == piece.end_page:
        return str(piece.start_page)
    return f"{piece.start_page}–{piece.end_page}"


def show_pieces(pieces: Sequence[Piece]) -> None:
    if not pieces:
        console.print("[yellow]Nie wykryto żadnych utworów.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("STRONY", justify="center", no_wrap=True)
    table.add_column("STRON",  justify="right", no_wrap=True, style="dim")
    table.add_column("TYTUŁ",  no_wrap=False, max_width=60)
    table.add_column("UKŁAD",  no_wrap=True, style="cyan")

    for piece in sorted(pieces, key=lambda p: p.start_page):
        table.add_row(
            _pages_label(piece),
            str(piece.span + 1),
            escape(piece.title),
            "od lewej strony" if piece.is_two_page else "",
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(pieces)} utworów[/dim]\n")


def show_problems(problems: Sequence[LayoutError], style: str = "red") -> None:
    for problem in problems:
        console.print(f"[{style}]•[/{style}] {escape(str(problem))}")


def show_plan(plan: Sequence[PageDescriptor], piece_index: PieceIndex) -> None:
    table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white", expand=False)
    table.add_column("POZ.",   justify="right", no_wrap=True, style="dim")
    table.add_column("STRONA", justify="center", no_wrap=True)
    table.add_column("ŹRÓDŁO", justify="right", no_wrap=True, style="bold cyan")
    table.add_column("UTWÓR",  no_wrap=False, max_width=60)

    for position, desc in enumerate(plan):
        piece = piece_index.get(desc.source_page) if desc.source_page else None
        table.add_row(
            str(position + 1),
            "L" if is_left_page(position) else "P",
            "[dim]pusta[/dim]" if desc.is_separator else str(desc.source_page),
            escape(piece.title) if piece else "",
        )

    console.print()
    console.print(table)


def _slot(desc: PageDescriptor | None) -> str:
    if desc is None:
        return ""
    if desc.is_separator:
        return "[dim]Pusta strona[/dim]"
    return str(desc.source_page)


def show_spreads(spreads: Sequence[Spread], piece_index: PieceIndex, only: int | None = None) -> None:
    """Tabela rozkładówek; only = indeks 0-based jednej rozkładówki."""
    table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white", expand=False)
    table.add_column("ROZKŁADÓWKA", no_wrap=True, style="dim")
    table.add_column("LEWA",  justify="center", no_wrap=True, style="bold cyan")
    table.add_column("PRAWA", justify="center", no_wrap=True, style="bold cyan")
    table.add_column("UTWÓR", no_wrap=False, max_width=60)

    indices = range(len(spreads)) if only is None else [only]
    for i in indices:
        spread = spreads[i]
        left = spread.left
        piece = piece_index.get(left.source_page) if left and left.source_page else None
        table.add_row(
            spread_label(i, len(spreads)),
            _slot(spread.left),
            _slot(spread.right),
            escape(piece.title) if piece else "",
        )

    console.print()
    console.print(table)
