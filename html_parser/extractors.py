"""
html_parser/extractors.py — interpretacja segmentów sekcji jako rekordów.

Każdy ekstraktor dostaje nagłówek otwierający (h2) lub całą stronę i schodzi
w dół przez iterate_until na kolejnych poziomach nagłówków:

  h2 (sekcja) → h3 (wpis) → węzły treści wpisu
  h4 "Examples" → h5 (przykład) → pierwszy <pre>

Węzły niepasujące do żadnej roli są po prostu pomijane.
"""

from __future__ import annotations

from data_model import Constant, DocObject, Example, ExampleKey, Function, Parameter, Property
from html_parser.nodes import Node, NodeKind, Severity
from html_parser.parser import DocPage
from html_parser.segmenter import heading_boundary, iterate_until
from html_parser.text import clean_text_content

_SECTION = 2
_ENTRY = 3
_BLOCK = 4
_EXAMPLE = 5

# Alerty wliczane do opisu metody
_FUNCTION_ALERTS = (Severity.DANGER, Severity.PRIMARY, Severity.WARNING)


# ---------------------------------------------------------------------------
# Sekcje
# ---------------------------------------------------------------------------

def find_sections(page: DocPage, title: str) -> list[Node]:
    """Nagłówki h2, których tytuł zawiera `title`."""
    return [h for h in page.headings(_SECTION) if title in h.title]


def _entries(section: Node) -> list[tuple[Node, list[Node]]]:
    """Pary (nagłówek h3, ciało wpisu) w obrębie sekcji h2."""
    return [
        (node, iterate_until(node, heading_boundary(_ENTRY)))
        for node in iterate_until(section, heading_boundary(_SECTION))
        if node.is_heading(_ENTRY)
    ]


def _paragraph_texts(body: list[Node]) -> list[str]:
    return [n.text for n in body if n.kind is NodeKind.PARAGRAPH and n.text]


# ---------------------------------------------------------------------------
# Właściwości / stałe / obiekty
# ---------------------------------------------------------------------------

def parse_properties(section: Node) -> list[Property]:
    properties: list[Property] = []
    for heading, body in _entries(section):
        description = [
            n.text for n in body
            if (n.kind is NodeKind.PARAGRAPH and n.text) or n.is_callout(Severity.WARNING)
        ]
        properties.append(Property(
            name=heading.title,
            description=clean_text_content("\n".join(description)),
        ))
    return properties


def parse_constants(section: Node) -> list[Constant]:
    return [
        Constant(name=heading.title, description="\n".join(_paragraph_texts(body)))
        for heading, body in _entries(section)
    ]


def parse_objects(page: DocPage) -> list[DocObject]:
    """Wpisy ze wszystkich sekcji h2, których tytuł zawiera "Objects"."""
    return [
        DocObject(name=heading.title, description="\n".join(_paragraph_texts(body)))
        for section in find_sections(page, "Objects")
        for heading, body in _entries(section)
    ]


def parse_extends(section: Node) -> list[str]:
    """Nazwy klas z list w sekcji "Extends" / "Classes that extend ..."."""
    return [
        li.text
        for node in iterate_until(section, heading_boundary(_SECTION))
        if node.kind is NodeKind.LIST
        for li in node.select("li")
    ]


# ---------------------------------------------------------------------------
# Metody
# ---------------------------------------------------------------------------

def parse_functions(section: Node) -> list[Function]:
    """
    Metody z sekcji "Methods".

    Wpis stabilny to nagłówek h3 bezpośrednio w sekcji; wpis eksperymentalny
    to h3 zagnieżdżony w bloku data-moniker="...-experimental".
    """
    functions: list[Function] = []
    for node in iterate_until(section, heading_boundary(_SECTION)):
        if node.is_heading(_ENTRY):
            functions.append(_build_function(node))
        elif node.kind is NodeKind.EXPERIMENTAL:
            nested = next(iter(node.headings(_ENTRY)), None)
            if nested is not None:
                functions.append(_build_function(nested))
    return functions


def _build_function(heading: Node) -> Function:
    description: list[str] = []
    parameters: list[Parameter] = []

    # Jeden przebieg, dwa niezależne akumulatory
    for node in iterate_until(heading, heading_boundary(_ENTRY)):
        _collect_description(node, description)
        _collect_parameters(node, parameters)

    return Function(
        name=heading.title.strip(),
        description=clean_text_content("\n".join(description)),
        parameters=parameters,
    )


def _collect_description(node: Node, description: list[str]) -> None:
    if node.kind is NodeKind.PARAGRAPH and node.text:
        description.append(node.text)
    elif node.kind is NodeKind.LIST and _previous_is(node, NodeKind.PARAGRAPH):
        # Lista po akapicie to wyliczenie w prozie
        description.extend(li.text for li in node.select("li"))

    if node.is_heading(_BLOCK) and "Returns" in node.title:
        description.append(node.text)

    if node.is_callout(*_FUNCTION_ALERTS):
        description.append(node.text)


def _collect_parameters(node: Node, parameters: list[Parameter]) -> None:
    if node.kind is not NodeKind.LIST:
        return
    prev = node.previous()
    if prev is None or not prev.is_heading(_BLOCK) or "Parameters" not in prev.text:
        return

    for li in node.select("li"):
        paragraphs = li.select("p")
        if len(paragraphs) > 1:
            parameters.append(Parameter(name=paragraphs[0].text, description=paragraphs[1].text))
        else:
            # Nietypowy znacznik: cały tekst elementu jako nazwa
            parameters.append(Parameter(name=li.text, description=""))


def _previous_is(node: Node, kind: NodeKind) -> bool:
    prev = node.previous()
    return prev is not None and prev.kind is kind


# ---------------------------------------------------------------------------
# Przykłady
# ---------------------------------------------------------------------------

def parse_examples(page: DocPage) -> list[Example]:
    """
    Przykłady kodu z bloków h4 "Examples" całej strony.

    Nazwa przykładu to tekst h5, kod to najbliższy następny <pre> (inne
    rodzeństwo jest pomijane). Powtórzenia (codeName, code) są odrzucane.
    """
    examples: list[Example] = []
    seen: set[ExampleKey] = set()

    for block in page.headings(_BLOCK):
        if "Examples" not in block.title:
            continue
        for node in iterate_until(block, heading_boundary(_BLOCK)):
            if not node.is_heading(_EXAMPLE):
                continue
            code_name = node.title
            code_node = _next_code_block(node)
            if not code_name or code_node is None:
                continue
            key = (code_name, clean_text_content(code_node.text))
            if key not in seen:
                seen.add(key)
                examples.append(Example(code_name=key[0], code=key[1]))

    return examples


def _next_code_block(node: Node) -> Node | None:
    sib = node.next()
    while sib is not None and sib.kind is not NodeKind.CODE_BLOCK:
        sib = sib.next()
    return sib
