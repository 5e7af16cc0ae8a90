"""
data_model/members.py — rekordy składowych dokumentowanego typu.

Każdy rekord odpowiada jednemu wpisowi (nagłówek h3 / h5) w sekcji strony
dokumentacji. Kolejność w listach = kolejność w dokumencie.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(slots=True)
class Property:
    name: str
    description: str     # akapity + ostrzeżenia (alert is-warning), znormalizowane


@dataclass(slots=True)
class Parameter:
    """
    Parametr metody z listy pod nagłówkiem "Parameters".

    - name:        pierwszy <p> elementu listy (albo cały tekst <li>)
    - description: drugi <p>; pusty napis gdy go brak (nigdy None)
    """
    name: str
    description: str = ""


@dataclass(slots=True)
class Function:
    name: str
    description: str
    parameters: list[Parameter] = field(default_factory=list)


@dataclass(slots=True)
class Constant:
    name: str
    description: str     # tylko akapity, łączone "\n"


@dataclass(slots=True)
class DocObject:
    """Wpis z sekcji "Objects" — ten sam kształt co Constant."""
    name: str
    description: str


@dataclass(slots=True)
class Example:
    """Przykład kodu: nazwa z nagłówka h5 + treść pierwszego <pre> po nim."""
    code_name: str       # w JSON: "codeName"
    code: str


# Klucz deduplikacji przykładów: (codeName, code)
ExampleKey: TypeAlias = tuple[str, str]
