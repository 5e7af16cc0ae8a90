"""html_parser/errors.py — błędy parsera strony dokumentacji."""

from __future__ import annotations


class MissingElementError(LookupError):
    """Brak wymaganego elementu strony (korzeń treści, tytuł h1, akapit wiodący)."""

    def __init__(self, selector: str, scope: str = "dokumencie") -> None:
        super().__init__(f"Nie znaleziono elementu '{selector}' w {scope}.")
        self.selector = selector
        self.scope = scope
