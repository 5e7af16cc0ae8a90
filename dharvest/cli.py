"""
dharvest — narzędzie CLI dla docharvest.

Użycie:
  dharvest <komenda> [opcje]

Komendy:
  parse    Wykonuje jedną akcję (parseClass, parseFunction, ...) na pliku HTML.
  serve    Obsługuje żądania JSON (po jednym w linii) ze stdin dla jednej strony.
  actions  Listuje obsługiwane akcje.
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

from dharvest.commands import actions as cmd_actions
from dharvest.commands import parse as cmd_parse
from dharvest.commands import serve as cmd_serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dharvest",
        description="docharvest — ekstrakcja rekordów ze stron dokumentacji API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="dharvest 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_serve.add_parser(subparsers)
    cmd_actions.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
