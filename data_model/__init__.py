"""
data_model — struktury danych docharvest.

Użycie:
  from data_model import ClassDoc, Function, Parameter, to_payload, ...

Moduły:
  members   — Property, Parameter, Function, Constant, DocObject, Example
  documents — EnumDoc, InterfaceDoc, ClassDoc
  serialize — to_payload (rekordy → dict/list w formacie odpowiedzi)

Mapowanie na format odpowiedzi { data: ... }:
  parseEnum      → EnumDoc
  parseClass     → ClassDoc
  parseInterface → InterfaceDoc
  parseObject    → list[DocObject]
  parseConstant  → list[Constant]
  parseProperty  → list[Property]
  parseFunction  → list[Function]
  parseExample   → list[Example]   (code_name → "codeName")
"""

from .members import (
    Property,
    Parameter,
    Function,
    Constant,
    DocObject,
    Example,
    ExampleKey,
)
from .documents import (
    EnumDoc,
    InterfaceDoc,
    ClassDoc,
    DocRecord,
)
from .serialize import Payload, to_payload

__all__ = [
    # members
    "Property",
    "Parameter",
    "Function",
    "Constant",
    "DocObject",
    "Example",
    "ExampleKey",
    # documents
    "EnumDoc",
    "InterfaceDoc",
    "ClassDoc",
    "DocRecord",
    # serialize
    "Payload",
    "to_payload",
]
