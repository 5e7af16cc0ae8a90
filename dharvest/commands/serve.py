"""
Komenda: dharvest serve — pętla żądanie/odpowiedź dla jednej strony.

Protokół (JSON Lines):
  stdin:  {"action": "parseClass"}
  stdout: {"data": {...}}

Każde żądanie jest obsługiwane do końca przed odczytem następnego.
Niepoprawny JSON lub błąd ekstrakcji → {"data": null, "error": "..."}.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from rich.console import Console

from dharvest.commands.parse import _load_page
from dispatch import handle_request
from html_parser import DocPage

console = Console(stderr=True)


def _respond(line: str, page: DocPage) -> dict[str, Any]:
    try:
        request = json.loads(line)
    except json.JSONDecodeError as e:
        console.print(f"[red]Niepoprawne żądanie JSON:[/red] {e}")
        return {"data": None, "error": f"invalid request: {e}"}

    if not isinstance(request, dict):
        console.print("[red]Żądanie musi być obiektem JSON.[/red]")
        return {"data": None, "error": "invalid request: expected a JSON object"}

    try:
        return handle_request(request, page)
    except Exception as e:
        console.print(f"[red]Błąd akcji {request.get('action')!r}:[/red] {e}")
        return {"data": None, "error": str(e)}


def serve(page: DocPage, stdin: TextIO, stdout: TextIO) -> int:
    """Obsługuje żądania do końca wejścia; zwraca liczbę obsłużonych żądań."""
    handled = 0
    for line in stdin:
        if not line.strip():
            continue
        response = _respond(line, page)
        stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
        stdout.flush()
        handled += 1
    return handled


def run(args: argparse.Namespace) -> None:
    page = _load_page(Path(args.html_file))
    console.print(f"Strona [bold]{args.html_file}[/bold] wczytana, czekam na żądania …")
    handled = serve(page, sys.stdin, sys.stdout)
    console.print(f"[dim]Obsłużono {handled} żądań.[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "serve",
        help="Obsługuje żądania JSON ze stdin (po jednym w linii).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje stronę raz i odpowiada na żądania {"action": ...} czytane ze stdin.
Każda odpowiedź {"data": ...} to jedna linia JSON na stdout.

Przykłady:
  echo '{"action": "parseClass"}' | dharvest serve ItemStack.html
  dharvest serve World.html < requests.jsonl > responses.jsonl
        """,
    )
    p.add_argument(
        "html_file",
        metavar="PLIK.html",
        help="Ścieżka do zapisanej strony HTML.",
    )
    p.set_defaults(func=run)
