"""
data_model/serialize.py — konwersja rekordów do kształtu JSON odpowiedzi.

Nazwy pól Pythona (snake_case) są mapowane na klucze formatu wyjściowego
tam, gdzie się różnią (code_name → codeName).
"""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from typing import Any, TypeAlias

Payload: TypeAlias = dict[str, Any] | list[Any] | None

_JSON_KEYS: dict[str, str] = {
    "code_name": "codeName",
}


def to_payload(value: Any) -> Any:
    """Zamienia rekord / listę rekordów na słowniki i listy gotowe do json.dumps."""
    if is_dataclass(value) and not isinstance(value, type):
        return _rename_keys(asdict(value))
    if isinstance(value, (list, tuple)):
        return [to_payload(v) for v in value]
    return value


def _rename_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {_JSON_KEYS.get(k, k): _rename_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_rename_keys(v) for v in value]
    return value
