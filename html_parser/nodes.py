"""
html_parser/nodes.py — klasyfikacja elementów strony do zamkniętego zbioru rodzajów.

Strona dokumentacji to płaska sekwencja rodzeństwa wewnątrz div.content:

  <div class="heading-wrapper" data-heading-level="h2"><h2>Methods</h2></div>
  <p>...</p>
  <ul><li>...</li></ul>
  <div class="alert is-warning">...</div>
  <pre>...</pre>
  <div data-moniker="minecraft-bedrock-experimental"> ... </div>

Node opakowuje Tag z BeautifulSoup i jest budowany raz (Node.of), więc
ekstraktory pracują na NodeKind zamiast rozrzuconych dopasowań selektorów.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from bs4 import Tag

# ---------------------------------------------------------------------------
# Rodzaje węzłów
# ---------------------------------------------------------------------------

class NodeKind(StrEnum):
    HEADING      = "heading"
    PARAGRAPH    = "paragraph"
    LIST         = "list"
    CALLOUT      = "callout"
    CODE_BLOCK   = "code_block"
    EXPERIMENTAL = "experimental"
    OTHER        = "other"


class Severity(StrEnum):
    """Klasa CSS alertu (div.alert.is-*)."""
    DANGER  = "is-danger"
    WARNING = "is-warning"
    PRIMARY = "is-primary"
    INFO    = "is-info"
    SUCCESS = "is-success"


_HEADING_WRAPPER_CLASS = "heading-wrapper"
_HEADING_LEVEL_RE      = re.compile(r"^h([1-6])$")
_EXPERIMENTAL_RE       = re.compile(r"experimental", re.IGNORECASE)

# Klasy ukrywające element (odpowiednik offsetWidth == 0 w przeglądarce)
_HIDDEN_CLASSES  = {"hidden", "is-hidden"}
_DISPLAY_NONE_RE = re.compile(r"display\s*:\s*none", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, eq=False)
class Node:
    """
    Sklasyfikowany element strony.

    - tag:      element BeautifulSoup
    - kind:     rodzaj węzła (NodeKind)
    - level:    poziom nagłówka 1..6 (tylko HEADING, w pozostałych 0)
    - severity: rodzaj alertu (tylko CALLOUT)
    """
    tag: Tag
    kind: NodeKind
    level: int = 0
    severity: Severity | None = None

    @classmethod
    def of(cls, tag: Tag) -> Node:
        return _classify(tag)

    # -- tekst -------------------------------------------------------------

    @property
    def text(self) -> str:
        """Pełny tekst elementu (odpowiednik textContent)."""
        return self.tag.get_text()

    @property
    def title(self) -> str:
        """Tekst wewnętrznego <hN> nagłówka; dla innych węzłów pusty napis."""
        if self.kind is not NodeKind.HEADING:
            return ""
        inner = self.tag.find(f"h{self.level}")
        return inner.get_text() if isinstance(inner, Tag) else ""

    # -- predykaty ---------------------------------------------------------

    def is_heading(self, level: int | None = None) -> bool:
        return self.kind is NodeKind.HEADING and (level is None or self.level == level)

    def is_callout(self, *severities: Severity) -> bool:
        return self.kind is NodeKind.CALLOUT and (not severities or self.severity in severities)

    @property
    def is_rendered(self) -> bool:
        """
        Czy element byłby wyrenderowany z niezerowym rozmiarem.

        Statyczny HTML nie ma layoutu, więc sprawdzamy sygnały display:none
        na elemencie i przodkach: atrybut hidden, styl inline, klasy ukrywające.
        """
        el: Tag | None = self.tag
        while isinstance(el, Tag):
            if el.has_attr("hidden"):
                return False
            if _DISPLAY_NONE_RE.search(el.get("style") or ""):
                return False
            if _HIDDEN_CLASSES.intersection(el.get("class") or []):
                return False
            el = el.parent
        return True

    # -- nawigacja ---------------------------------------------------------

    def next(self) -> Node | None:
        """Następny element-rodzeństwo (węzły tekstowe są pomijane)."""
        sib = self.tag.next_sibling
        while sib is not None and not isinstance(sib, Tag):
            sib = sib.next_sibling
        return Node.of(sib) if sib is not None else None

    def previous(self) -> Node | None:
        sib = self.tag.previous_sibling
        while sib is not None and not isinstance(sib, Tag):
            sib = sib.previous_sibling
        return Node.of(sib) if sib is not None else None

    def select(self, selector: str) -> list[Node]:
        return [Node.of(t) for t in self.tag.select(selector)]

    def select_one(self, selector: str) -> Node | None:
        found = self.tag.select_one(selector)
        return Node.of(found) if found is not None else None

    def headings(self, level: int) -> list[Node]:
        """Wszystkie nagłówki danego poziomu w obrębie elementu (porządek dokumentu)."""
        return self.select(heading_selector(level))


def heading_selector(level: int) -> str:
    return f'div.{_HEADING_WRAPPER_CLASS}[data-heading-level="h{level}"]'


# ---------------------------------------------------------------------------
# Klasyfikacja
# ---------------------------------------------------------------------------

def _classify(tag: Tag) -> Node:
    name = tag.name
    if name == "p":
        return Node(tag, NodeKind.PARAGRAPH)
    if name == "ul":
        return Node(tag, NodeKind.LIST)
    if name == "pre":
        return Node(tag, NodeKind.CODE_BLOCK)
    if name != "div":
        return Node(tag, NodeKind.OTHER)

    classes = tag.get("class") or []
    if _HEADING_WRAPPER_CLASS in classes:
        m = _HEADING_LEVEL_RE.match(tag.get("data-heading-level") or "")
        if m:
            return Node(tag, NodeKind.HEADING, level=int(m.group(1)))
    if "alert" in classes:
        for severity in Severity:
            if severity.value in classes:
                return Node(tag, NodeKind.CALLOUT, severity=severity)
    if _EXPERIMENTAL_RE.search(tag.get("data-moniker") or ""):
        return Node(tag, NodeKind.EXPERIMENTAL)
    return Node(tag, NodeKind.OTHER)
