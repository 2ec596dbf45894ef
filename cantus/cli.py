"""
cantus — układanie stron śpiewnika (Cantus) do druku dwustronnego.

Użycie:
  cantus <komenda> [opcje]

Komendy:
  analyze   Rozpoznaje utwory w plikach PDF (Gemini) i zapisuje je do JSON.
  plan      Układa strony: utwory dwustronicowe zaczynają się na lewej stronie.
  preview   Pokazuje plan rozkładówka po rozkładówce.
  export    Zapisuje końcowy PDF według planu.
  arrange   Wszystko naraz: scalanie, analiza, plan, eksport.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from cantus.commands import analyze as cmd_analyze
from cantus.commands import plan as cmd_plan
from cantus.commands import preview as cmd_preview
from cantus.commands import export as cmd_export
from cantus.commands import arrange as cmd_arrange

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cantus",
        description="Układanie stron dla Cantusów — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"cantus {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_analyze.add_parser(subparsers)
    cmd_plan.add_parser(subparsers)
    cmd_preview.add_parser(subparsers)
    cmd_export.add_parser(subparsers)
    cmd_arrange.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
