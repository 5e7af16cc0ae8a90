"""html_parser/parser.py — wczytanie strony dokumentacji HTML do DocPage."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup, Tag

from html_parser.errors import MissingElementError
from html_parser.nodes import Node, Severity
from html_parser.settings import Settings, load_settings

# Tagi zawierające szum (nie treść)
_NOISE_TAGS = {"script", "style", "noscript"}


class DocPage:
    """
    Migawka strony tylko do odczytu.

    Wszystkie zapytania są zawężone do korzenia treści (settings.content_selector,
    domyślnie div.content). Brak korzenia, tytułu h1 lub akapitu wiodącego
    zgłaszany jest jako MissingElementError.
    """

    def __init__(self, soup: BeautifulSoup, settings: Settings | None = None) -> None:
        self.soup = soup
        self.settings = settings or load_settings()

    @property
    def content(self) -> Node:
        selector = self.settings.content_selector
        found = self.soup.select_one(selector)
        if not isinstance(found, Tag):
            raise MissingElementError(selector)
        return Node.of(found)

    def title(self) -> str:
        h1 = self.content.select_one("h1")
        if h1 is None:
            raise MissingElementError("h1", self.settings.content_selector)
        return h1.text

    def lead_paragraph(self) -> Node:
        p = self.content.select_one("p")
        if p is None:
            raise MissingElementError("p", self.settings.content_selector)
        return p

    def headings(self, level: int) -> list[Node]:
        return self.content.headings(level)

    def callouts(self, severity: Severity) -> list[Node]:
        return self.content.select(f"div.alert.{severity.value}")


def parse_html(markup: str, settings: Settings | None = None) -> DocPage:
    """Parsuje tekst HTML i zwraca DocPage (bez skryptów i stylów)."""
    settings = settings or load_settings()
    soup = BeautifulSoup(markup, settings.html_parser)

    for tag in soup.find_all(_NOISE_TAGS):
        tag.decompose()

    return DocPage(soup, settings)


def parse_html_file(path: str | Path, settings: Settings | None = None) -> DocPage:
    """Wczytuje lokalny plik HTML (zapisaną stronę dokumentacji)."""
    settings = settings or load_settings()
    markup = Path(path).read_text(encoding=settings.encoding)
    return parse_html(markup, settings)
