"""Conversión de valores textuales a los tipos de la configuración.

Política:
- Un valor mal formado NO es un error: se registra un warning y el campo
  conserva su valor previo/por defecto (`IGNORED`).
- Ninguna función de este módulo lanza excepciones por el contenido del valor.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from enum import Enum

logger = logging.getLogger(__name__)


class _Ignored:
    """Centinela: el valor no se pudo convertir y no debe aplicarse."""

    def __repr__(self) -> str:
        return "IGNORED"

    def __bool__(self) -> bool:
        return False


IGNORED = _Ignored()

_INT_RE = re.compile(r"[+-]?[0-9]+")


def split_list(value: str) -> list[str]:
    """Separa por comas, recorta y descarta piezas vacías (mantiene el orden)."""

    return [piece.strip() for piece in value.split(",") if piece.strip()]


def coerce_string(value: str) -> str:
    return value


def coerce_int(value: str) -> int | _Ignored:
    # Solo dígitos ASCII en base 10 (sin "1_000", sin dígitos unicode).
    if _INT_RE.fullmatch(value) is None:
        return IGNORED
    return int(value)


def coerce_bool(value: str) -> bool | _Ignored:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return IGNORED


def coerce_enum(value: str, enum_type: type[Enum]) -> Enum | _Ignored:
    """Coincidencia exacta del *nombre* del símbolo, sin distinguir mayúsculas."""

    folded = value.casefold()
    for member in enum_type:
        if member.name.casefold() == folded:
            return member
    return IGNORED


def coerce_string_set(value: str, base: Iterable[str] = ()) -> set[str]:
    """Unión de las entradas explícitas con el conjunto base siempre habilitado."""

    return set(split_list(value)) | set(base)


def log_ignored(key: str, value: str, expected: str) -> None:
    logger.warning("Ignoring value %r for %s: expected %s", value, key, expected)

