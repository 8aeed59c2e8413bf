"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para las llamadas de los proveedores.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_metadata_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` para el servicio de metadata de instancia.

    Por qué un builder:
    - Timeouts cortos: fuera de EC2 el endpoint no responde y no queremos
      bloquear el arranque del worker más de lo necesario.
    - Sin proxies del entorno: la IP de metadata es link-local.
    """

    settings = settings or AppSettings()
    return httpx.Client(
        base_url=settings.metadata_base_url,
        timeout=httpx.Timeout(settings.metadata_timeout_seconds),
        headers={"User-Agent": "kcl-bootstrap/0.1"},
        trust_env=False,
        transport=transport,
    )
