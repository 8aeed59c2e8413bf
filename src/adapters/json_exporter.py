"""Exportación JSON de la configuración ya resuelta.

Por qué JSON:
- Permite auditar qué valores terminó usando el worker (defaults incluidos).
- Los proveedores de credenciales se exportan por nombre de clase; nunca se
  piden ni se vuelcan las credenciales.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import WorkerConfiguration


def provider_name(provider: object) -> str | None:
    if provider is None:
        return None
    return provider.__class__.__name__


def configuration_payload(config: WorkerConfiguration) -> dict[str, Any]:
    payload = config.model_dump(mode="json")
    payload["metrics_enabled_dimensions"] = sorted(config.metrics_enabled_dimensions)
    payload["kinesis_credentials_provider"] = provider_name(config.kinesis_credentials_provider)
    payload["dynamodb_credentials_provider"] = provider_name(config.dynamodb_credentials_provider)
    payload["cloudwatch_credentials_provider"] = provider_name(config.cloudwatch_credentials_provider)
    return payload


def export_configuration_json(*, config: WorkerConfiguration, output_path: Path) -> Path:
    """Exporta la configuración a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(configuration_payload(config), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
