"""
html_parser/assemblers.py — składanie pełnych rekordów stron (enum / klasa / interfejs).

Publiczne API:
  parse_enum(page)              -> EnumDoc
  parse_interface(page)         -> InterfaceDoc
  parse_class(page)             -> ClassDoc
  parse_class_description(page) -> str
"""

from __future__ import annotations

from rich.console import Console

from data_model import ClassDoc, EnumDoc, InterfaceDoc
from html_parser.extractors import (
    find_sections,
    parse_constants,
    parse_examples,
    parse_extends,
    parse_functions,
    parse_properties,
)
from html_parser.nodes import NodeKind, Severity
from html_parser.parser import DocPage

_err_console = Console(stderr=True)


def parse_enum(page: DocPage) -> EnumDoc:
    data = EnumDoc(
        name=page.title(),
        description=page.lead_paragraph().text.strip(),
    )
    for section in find_sections(page, "Constants"):
        data.constants = parse_constants(section)
    return data


def parse_interface(page: DocPage) -> InterfaceDoc:
    data = InterfaceDoc(
        name=page.title(),
        description=page.lead_paragraph().text.strip(),
        examples=parse_examples(page),
    )
    for section in find_sections(page, "Properties"):
        data.properties = parse_properties(section)
    return data


def parse_class(page: DocPage) -> ClassDoc:
    """
    Składa rekord klasy: opis, właściwości, metody, stałe i przykłady.

    Sekcja "Extends" / "Classes that extend <Nazwa>" dopisuje do opisu zdanie
    " Extends: A, B.". Każdy błąd jest logowany na stderr i rzucany dalej —
    częściowy wynik nie jest zwracany.
    """
    try:
        data = ClassDoc(
            name=page.title(),
            description=parse_class_description(page),
            examples=parse_examples(page),
        )

        for section in page.headings(2):
            title = section.title
            if "Extends" in title or f"Classes that extend {data.name}" in title:
                data.description += f" Extends: {', '.join(parse_extends(section))}."
            elif title.strip() == "Properties":
                data.properties = parse_properties(section)
            elif title.strip() == "Methods":
                data.methods = parse_functions(section)
            elif title.strip() == "Constants":
                data.constants = parse_constants(section)

        return data
    except Exception as e:
        _err_console.print(f"[red]Błąd podczas parsowania klasy:[/red] {e!r}")
        raise


def parse_class_description(page: DocPage) -> str:
    """
    Opis klasy.

    Jeśli pierwszy widoczny alert is-danger ma bezpośrednio po sobie akapit,
    opis = tekst alertu + tekst akapitu. W przeciwnym razie — akapit wiodący
    (bez przycinania białych znaków).
    """
    caution = next((c for c in page.callouts(Severity.DANGER) if c.is_rendered), None)
    if caution is not None:
        following = caution.next()
        if following is not None and following.kind is NodeKind.PARAGRAPH:
            return caution.text.strip() + following.text
    return page.lead_paragraph().text
