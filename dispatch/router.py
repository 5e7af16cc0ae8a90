"""
dispatch/router.py — mapowanie akcji żądania na ekstraktor.

Żądanie:   {"action": "<ActionName>"}
Odpowiedź: {"data": <rekord | lista rekordów | None>}

Nieznana lub brakująca akcja daje {"data": None}. Błędy ekstrakcji
(np. MissingElementError) nie są tu łapane — zamienia je na odpowiedź
warstwa wywołująca (komenda CLI).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Callable, Mapping

from data_model import Payload, to_payload
from html_parser import (
    DocPage,
    Node,
    find_sections,
    parse_class,
    parse_constants,
    parse_enum,
    parse_examples,
    parse_functions,
    parse_interface,
    parse_objects,
    parse_properties,
)


class Action(StrEnum):
    PARSE_ENUM      = "parseEnum"
    PARSE_CLASS     = "parseClass"
    PARSE_INTERFACE = "parseInterface"
    PARSE_OBJECTS   = "parseObject"
    PARSE_CONSTANTS = "parseConstant"
    PARSE_PROPERTIES = "parseProperty"
    PARSE_FUNCTIONS = "parseFunction"
    PARSE_EXAMPLES  = "parseExample"


def _first_section(title: str, parse: Callable[[Node], list[Any]]) -> Callable[[DocPage], list[Any]]:
    """Handler parsujący pierwszą sekcję h2 o tytule zawierającym `title` (brak → [])."""
    def _handler(page: DocPage) -> list[Any]:
        sections = find_sections(page, title)
        return parse(sections[0]) if sections else []
    _handler.__name__ = parse.__name__
    return _handler


HANDLERS: dict[Action, Callable[[DocPage], Any]] = {
    Action.PARSE_ENUM:       parse_enum,
    Action.PARSE_CLASS:      parse_class,
    Action.PARSE_INTERFACE:  parse_interface,
    Action.PARSE_OBJECTS:    parse_objects,
    Action.PARSE_CONSTANTS:  _first_section("Constants", parse_constants),
    Action.PARSE_PROPERTIES: _first_section("Properties", parse_properties),
    Action.PARSE_FUNCTIONS:  _first_section("Methods", parse_functions),
    Action.PARSE_EXAMPLES:   parse_examples,
}


def resolve_action(name: object) -> Action | None:
    """Zwraca Action dla nazwy akcji albo None, gdy nazwa jest nieznana."""
    try:
        return Action(name)
    except ValueError:
        return None


def dispatch(action: object, page: DocPage) -> Payload:
    """Wykonuje akcję na stronie i zwraca dane w kształcie JSON (None dla nieznanej)."""
    resolved = resolve_action(action)
    if resolved is None:
        return None
    return to_payload(HANDLERS[resolved](page))


def handle_request(request: Mapping[str, Any], page: DocPage) -> dict[str, Payload]:
    """Obsługuje pojedyncze żądanie {"action": ...} i zwraca {"data": ...}."""
    return {"data": dispatch(request.get("action"), page)}
