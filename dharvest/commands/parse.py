"""Komenda: dharvest parse — jedna akcja ekstrakcji na zapisanej stronie HTML."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table
from rich import box

from dispatch import Action, handle_request
from html_parser import DocPage, parse_html_file

# stdout zostaje dla JSON; komunikaty idą na stderr
console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Wczytanie strony
# ---------------------------------------------------------------------------

def _load_page(path: Path) -> DocPage:
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    try:
        return parse_html_file(path)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu pliku:[/red] {e}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _records_table(title: str, records: list[dict[str, Any]]) -> Table:
    table = Table(
        title=title,
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("NAZWA", no_wrap=True, style="bold cyan")
    table.add_column("OPIS",  no_wrap=False, max_width=70)
    table.add_column("PARAM", justify="right", no_wrap=True)

    for rec in records:
        name = rec.get("name") or rec.get("codeName") or ""
        text = rec.get("description") or rec.get("code") or ""
        params = rec.get("parameters")
        table.add_row(
            name,
            text.replace("\n", " ")[:200],
            str(len(params)) if params is not None else "-",
        )
    return table


def _show(data: Any) -> None:
    if not data:
        console.print("[yellow]Brak danych.[/yellow]")
        return

    console.print()
    if isinstance(data, dict):
        console.print(f"[bold]{data['name']}[/bold]")
        console.print(f"  {data['description']}")
        for key, value in data.items():
            if isinstance(value, list) and value:
                console.print(_records_table(key, value))
    else:
        console.print(_records_table(f"{len(data)} rekordów", data))


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    page = _load_page(Path(args.html_file))

    try:
        response = handle_request({"action": args.action}, page)
    except LookupError as e:
        console.print(f"[red]Niezgodny układ strony:[/red] {e}")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Błąd ekstrakcji:[/red] {e}")
        raise SystemExit(1)

    text = json.dumps(response, ensure_ascii=False, indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.write_text(text, encoding="utf-8")
        console.print(f"[green]JSON:[/green] {out_path}")
    else:
        print(text)

    if args.show:
        _show(response["data"])


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Wykonuje jedną akcję ekstrakcji na pliku HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje zapisaną stronę dokumentacji i wypisuje odpowiedź {"data": ...} jako JSON.

Przykłady:
  dharvest parse parseClass ItemStack.html --show
  dharvest parse parseFunction Entity.html --out entity.methods.json
  dharvest parse parseExample World.html
        """,
    )
    p.add_argument(
        "action",
        metavar="AKCJA",
        choices=[a.value for a in Action],
        help="Akcja: " + ", ".join(a.value for a in Action) + ".",
    )
    p.add_argument(
        "html_file",
        metavar="PLIK.html",
        help="Ścieżka do zapisanej strony HTML.",
    )
    p.add_argument(
        "--out",
        metavar="PLIK.json",
        default=None,
        help="Zapisz JSON do pliku zamiast na stdout.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę rekordów w terminalu (stderr).",
    )
    p.set_defaults(func=run)
