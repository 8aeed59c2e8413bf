"""Contrato de proveedores de credenciales.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite registrar proveedores propios (plugins) sin acoplarlos al Core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import AWSCredentials


@runtime_checkable
class CredentialsProvider(Protocol):
    """Contrato mínimo para una fuente de credenciales.

    Reglas de diseño:
    - Construir un proveedor debe ser barato y sin I/O.
    - `get_credentials` puede hacer I/O (disco, red) y es el único punto donde
      se detecta un proveedor que no funciona.
    """

    def get_credentials(self) -> AWSCredentials:
        """Devuelve credenciales o lanza `CredentialsUnavailableError`."""

        ...

    def refresh(self) -> None:
        """Descarta cualquier caché para forzar una nueva lectura."""

        ...
