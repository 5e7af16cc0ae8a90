"""
html_parser/segmenter.py — odtwarzanie hierarchii sekcji z płaskiego rodzeństwa.

Strona nie zagnieżdża sekcji w kontenerach: granice wyznaczają wyłącznie
nagłówki kolejnych poziomów. Sekcja poziomu N to rodzeństwo od nagłówka N
do następnego nagłówka poziomu <= N.

Ten sam prymityw obsługuje wszystkie głębokości:
  h2 → sekcje (Properties, Methods, Constants, ...)
  h3 → wpisy w sekcji (jedna właściwość / metoda / stała)
  h4 → bloki wpisu (Parameters, Returns, Examples)
  h5 → pojedyncze przykłady wewnątrz bloku Examples
"""

from __future__ import annotations

from typing import Callable, TypeAlias

from html_parser.nodes import Node

Boundary: TypeAlias = Callable[[Node], bool]


def iterate_until(start: Node, is_boundary: Boundary) -> list[Node]:
    """
    Zwraca rodzeństwo następujące po `start` aż do pierwszego węzła granicznego.

    Ani `start`, ani węzeł graniczny nie trafiają do wyniku. Jeśli pierwszy
    następnik jest granicą (albo go nie ma) — wynik jest pusty.
    """
    nodes: list[Node] = []
    node = start.next()
    while node is not None and not is_boundary(node):
        nodes.append(node)
        node = node.next()
    return nodes


def heading_boundary(level: int) -> Boundary:
    """Granica sekcji poziomu `level`: nagłówek tego samego lub wyższego rzędu."""
    def _is_boundary(node: Node) -> bool:
        return node.is_heading() and node.level <= level
    return _is_boundary
