"""Errores del dominio.

Regla:
- Los errores de *valor* (texto mal formado) nunca llegan aquí: se ignoran.
- Los errores de *estructura* (faltan claves obligatorias, ninguna fuente de
  credenciales construible) abortan el bind y se propagan al llamador.
"""

from __future__ import annotations

from collections.abc import Sequence


class ConfigurationError(Exception):
    """Base de todos los errores fatales del binder."""


class MissingRequiredFieldError(ConfigurationError):
    def __init__(self, field_name: str) -> None:
        super().__init__(f"Missing required configuration field: {field_name}")
        self.field_name = field_name


class CredentialsResolutionError(ConfigurationError):
    """Ningún candidato de la lista pudo construirse."""

    def __init__(self, field_name: str, candidates: Sequence[str]) -> None:
        listed = ", ".join(candidates) if candidates else "<empty>"
        super().__init__(f"No credentials provider could be constructed for {field_name}: {listed}")
        self.field_name = field_name
        self.candidates = tuple(candidates)


class CredentialsUnavailableError(Exception):
    """Un proveedor ya construido no pudo entregar credenciales.

    Solo se lanza al *usar* el proveedor, nunca durante el bind.
    """
