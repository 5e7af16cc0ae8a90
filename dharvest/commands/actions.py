"""Komenda: dharvest actions — lista obsługiwanych akcji."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from dispatch import Action, HANDLERS

console = Console()

_RESULT_SHAPE: dict[Action, str] = {
    Action.PARSE_ENUM:       "EnumDoc",
    Action.PARSE_CLASS:      "ClassDoc",
    Action.PARSE_INTERFACE:  "InterfaceDoc",
    Action.PARSE_OBJECTS:    "list[DocObject]",
    Action.PARSE_CONSTANTS:  "list[Constant]",
    Action.PARSE_PROPERTIES: "list[Property]",
    Action.PARSE_FUNCTIONS:  "list[Function]",
    Action.PARSE_EXAMPLES:   "list[Example]",
}


def run(args: argparse.Namespace) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("AKCJA",   style="bold cyan", no_wrap=True)
    table.add_column("WYNIK",   no_wrap=True)
    table.add_column("HANDLER", style="dim", no_wrap=True)

    for action in Action:
        handler = HANDLERS[action]
        table.add_row(action.value, _RESULT_SHAPE[action], getattr(handler, "__name__", "-"))

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "actions",
        help="Listuje obsługiwane akcje.",
    )
    p.set_defaults(func=run)
