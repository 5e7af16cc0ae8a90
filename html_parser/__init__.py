"""
html_parser — parsowanie stron dokumentacji API do rekordów data_model.

Publiczne API:
  parse_html(markup, settings)       -> DocPage
  parse_html_file(path, settings)    -> DocPage
  parse_enum / parse_class / parse_interface(page)
  parse_properties / parse_functions / parse_constants(section)
  parse_objects / parse_examples(page)
  find_sections(page, title)         -> list[Node]
  iterate_until(start, is_boundary)  -> list[Node]
"""

from .settings import Settings, load_settings
from .errors import MissingElementError
from .nodes import Node, NodeKind, Severity
from .text import clean_text_content
from .segmenter import iterate_until, heading_boundary
from .parser import DocPage, parse_html, parse_html_file
from .extractors import (
    find_sections,
    parse_properties,
    parse_functions,
    parse_constants,
    parse_objects,
    parse_extends,
    parse_examples,
)
from .assemblers import (
    parse_enum,
    parse_interface,
    parse_class,
    parse_class_description,
)

__all__ = [
    "Settings",
    "load_settings",
    "MissingElementError",
    "Node",
    "NodeKind",
    "Severity",
    "clean_text_content",
    "iterate_until",
    "heading_boundary",
    "DocPage",
    "parse_html",
    "parse_html_file",
    "find_sections",
    "parse_properties",
    "parse_functions",
    "parse_constants",
    "parse_objects",
    "parse_extends",
    "parse_examples",
    "parse_enum",
    "parse_interface",
    "parse_class",
    "parse_class_description",
]
