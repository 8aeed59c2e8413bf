"""Parser de ficheros de propiedades `clave = valor`.

Deliberadamente orientado a líneas (no es una gramática completa):
- Sin escapes, comillas, comentarios ni valores multilínea.
- Una línea sin `=` se salta; nunca es fatal para el resto del fichero.
"""

from __future__ import annotations

import io
import logging
from typing import IO, Union

from core.domain.models import RawEntry

logger = logging.getLogger(__name__)

PropertySource = Union[str, bytes, IO[str], IO[bytes]]


def _read_text(source: PropertySource) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8", errors="replace")

    data = source.read()
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return data


def parse_properties(source: PropertySource) -> list[RawEntry]:
    """Convierte texto/stream en una secuencia ordenada de `RawEntry`.

    - Separa por el primer `=`; claves y valores se recortan.
    - Se conservan duplicados y su orden: quién gana lo decide el binder.
    """

    entries: list[RawEntry] = []
    for lineno, raw_line in enumerate(io.StringIO(_read_text(source)), start=1):
        line = raw_line.strip()
        if not line:
            continue
        if "=" not in line:
            logger.debug("Skipping line %d without '=' separator", lineno)
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            logger.debug("Skipping line %d with empty key", lineno)
            continue
        entries.append(RawEntry(key=key, value=value.strip()))
    return entries
