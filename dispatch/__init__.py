"""
dispatch — obsługa żądań {"action": ...} dla wczytanej strony.

Typowe użycie:
    from dispatch import handle_request
    from html_parser import parse_html_file

    page = parse_html_file("ItemStack.html")
    response = handle_request({"action": "parseClass"}, page)
"""

from .router import Action, HANDLERS, dispatch, handle_request, resolve_action

__all__ = [
    "Action",
    "HANDLERS",
    "dispatch",
    "handle_request",
    "resolve_action",
]
