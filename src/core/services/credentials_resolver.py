"""Resolución de la fuente de credenciales del worker.

Cómo funciona:
- El valor de la clave es una lista ordenada de identificadores separados por
  comas. Se intenta construir cada uno (factory sin argumentos) en orden.
- Gana el primero que se construye. NO se llama a `get_credentials` aquí: un
  proveedor que falla al usarse solo se detecta en el primer uso.

Por qué un registro explícito:
- Evita cargar clases arbitrarias por nombre. Los plugins se registran antes
  del bind con `CredentialsProviderRegistry.register`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from core.domain.errors import CredentialsResolutionError
from core.interfaces.credentials import CredentialsProvider
from core.services.coercion import split_list

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], CredentialsProvider]


class CredentialsProviderRegistry:
    """Mapa identificador -> factory sin argumentos."""

    def __init__(self, factories: dict[str, ProviderFactory] | None = None) -> None:
        self._factories: dict[str, ProviderFactory] = dict(factories or {})

    def register(self, identifier: str, factory: ProviderFactory) -> None:
        name = identifier.strip()
        if not name:
            raise ValueError("identifier must be a non-empty string")
        self._factories[name] = factory

    def unregister(self, identifier: str) -> None:
        self._factories.pop(identifier.strip(), None)

    def identifiers(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self._find(identifier) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers())

    def _find(self, identifier: str) -> ProviderFactory | None:
        factory = self._factories.get(identifier)
        if factory is None and "." in identifier:
            # Nombres completamente cualificados (p.ej. com.amazonaws.auth.X).
            factory = self._factories.get(identifier.rsplit(".", 1)[1])
        return factory

    def create(self, identifier: str) -> CredentialsProvider:
        """Construye el proveedor o lanza `LookupError` si no está registrado.

        Cualquier excepción de la factory se propaga tal cual.
        """

        factory = self._find(identifier)
        if factory is None:
            raise LookupError(f"Unknown credentials provider: {identifier}")
        return factory()


def default_registry() -> CredentialsProviderRegistry:
    """Registro nuevo con los proveedores incluidos en el paquete."""

    # Import diferido: adapters depende de core, no al revés.
    from adapters.credentials import BUILTIN_PROVIDERS  # noqa: PLC0415

    return CredentialsProviderRegistry(dict(BUILTIN_PROVIDERS))


def resolve_credentials_provider(
    value: str,
    registry: CredentialsProviderRegistry,
    *,
    field_name: str = "AWSCredentialsProvider",
) -> CredentialsProvider:
    """Devuelve el primer candidato de `value` que se pueda construir."""

    candidates = split_list(value)
    for candidate in candidates:
        try:
            provider = registry.create(candidate)
        except Exception as exc:
            logger.debug("Credentials provider %s could not be constructed: %s", candidate, exc)
            continue
        logger.info("Using credentials provider %s for %s", candidate, field_name)
        return provider

    raise CredentialsResolutionError(field_name, candidates)
