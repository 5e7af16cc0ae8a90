"""
html_parser/settings.py — konfiguracja parsera przez zmienne środowiskowe.

Zmienne środowiskowe (opcjonalnie z pliku .env w katalogu głównym projektu):
  DHARVEST_HTML_PARSER       builder BeautifulSoup (domyślnie: html.parser)
  DHARVEST_CONTENT_SELECTOR  selektor CSS korzenia treści (domyślnie: div.content)
  DHARVEST_ENCODING          kodowanie plików HTML (domyślnie: utf-8)
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")

DEFAULT_HTML_PARSER      = "html.parser"
DEFAULT_CONTENT_SELECTOR = "div.content"
DEFAULT_ENCODING         = "utf-8"


@dataclass(frozen=True, slots=True)
class Settings:
    html_parser:      str = DEFAULT_HTML_PARSER
    content_selector: str = DEFAULT_CONTENT_SELECTOR
    encoding:         str = DEFAULT_ENCODING


def load_settings() -> Settings:
    """Czyta ustawienia ze środowiska; puste wartości → domyślne."""
    return Settings(
        html_parser      = os.getenv("DHARVEST_HTML_PARSER")      or DEFAULT_HTML_PARSER,
        content_selector = os.getenv("DHARVEST_CONTENT_SELECTOR") or DEFAULT_CONTENT_SELECTOR,
        encoding         = os.getenv("DHARVEST_ENCODING")         or DEFAULT_ENCODING,
    )
