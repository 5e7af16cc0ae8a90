"""
data_model/documents.py — rekordy całych stron dokumentacji (enum / klasa / interfejs).

Pole `name` to tytuł strony (h1), `description` to akapit wiodący
(dla klasy: opcjonalnie poprzedzony treścią widocznego alertu is-danger).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from .members import Constant, Example, Function, Property


@dataclass(slots=True)
class EnumDoc:
    name: str
    description: str
    constants: list[Constant] = field(default_factory=list)


@dataclass(slots=True)
class InterfaceDoc:
    name: str
    description: str
    properties: list[Property] = field(default_factory=list)
    examples: list[Example] = field(default_factory=list)


@dataclass(slots=True)
class ClassDoc:
    name: str
    description: str
    properties: list[Property] = field(default_factory=list)
    methods: list[Function] = field(default_factory=list)
    constants: list[Constant] = field(default_factory=list)
    examples: list[Example] = field(default_factory=list)


DocRecord: TypeAlias = EnumDoc | InterfaceDoc | ClassDoc
