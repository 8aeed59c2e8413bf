"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `validate_assignment` garantiza que el binder no deje un campo con un tipo
  distinto al declarado.

Nota:
- `WorkerConfiguration` es un contenedor pasivo: describe *qué* necesita el
  worker, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, SecretStr
from pydantic.config import ConfigDict

from core.domain.enums import InitialPositionInStream, MetricsLevel

METRICS_ALWAYS_ENABLED_DIMENSIONS: frozenset[str] = frozenset({"Operation"})
DEFAULT_METRICS_ENABLED_DIMENSIONS: frozenset[str] = METRICS_ALWAYS_ENABLED_DIMENSIONS | {"ShardId"}

DEFAULT_USER_AGENT = "kcl-bootstrap/0.1"


@dataclass(frozen=True)
class RawEntry:
    """Una línea `clave = valor` ya recortada."""

    key: str
    value: str


class AWSCredentials(BaseModel):
    """Credenciales entregadas por un proveedor.

    `secret_access_key` y `session_token` son `SecretStr` para que nunca
    acaben en logs ni en exportaciones por accidente.
    """

    model_config = ConfigDict(frozen=True)

    access_key_id: str = Field(..., min_length=1, description="Access key id.")
    secret_access_key: SecretStr = Field(..., description="Secret access key.")
    session_token: SecretStr | None = Field(
        default=None,
        description="Token de sesión (solo credenciales temporales).",
    )


class WorkerConfiguration(BaseModel):
    """Configuración completa del worker de streaming.

    Por qué existe:
    - Es el contrato entre el binder y el worker: el worker la consume tal cual.
    - Los defaults de aquí son el estado base cuando una clave no aparece en el
      fichero de propiedades.
    """

    model_config = ConfigDict(validate_assignment=True)

    application_name: str | None = Field(
        default=None,
        description="Nombre de la aplicación (tabla de leases). Obligatorio.",
    )
    stream_name: str | None = Field(
        default=None,
        description="Stream a consumir. Obligatorio.",
    )
    worker_identifier: str | None = Field(
        default=None,
        description="Identificador de esta instancia; se genera si falta.",
    )

    kinesis_endpoint: str | None = Field(default=None, description="Endpoint alternativo de Kinesis.")
    dynamodb_endpoint: str | None = Field(default=None, description="Endpoint alternativo de DynamoDB.")
    region_name: str | None = Field(default=None, description="Región AWS.")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)

    initial_position_in_stream: InitialPositionInStream = Field(
        default=InitialPositionInStream.LATEST,
        description="Posición inicial cuando un shard no tiene checkpoint.",
    )

    failover_time_millis: int = Field(default=10_000, description="Tiempo tras el cual un lease se considera perdido.")
    shard_sync_interval_millis: int = Field(default=60_000)
    max_records: int = Field(default=10_000, description="Máximo de registros por GetRecords.")
    idle_time_between_reads_millis: int = Field(default=1_000)
    parent_shard_poll_interval_millis: int = Field(default=10_000)
    task_backoff_time_millis: int = Field(default=500)
    max_leases_for_worker: int = Field(default=2_147_483_647)
    max_leases_to_steal_at_one_time: int = Field(default=1)
    initial_lease_table_read_capacity: int = Field(default=10)
    initial_lease_table_write_capacity: int = Field(default=10)

    call_process_records_even_for_empty_record_list: bool = Field(default=False)
    cleanup_leases_upon_shard_completion: bool = Field(default=True)
    validate_sequence_number_before_checkpointing: bool = Field(default=True)
    skip_shard_sync_at_worker_initialization_if_leases_exist: bool = Field(default=False)

    metrics_buffer_time_millis: int = Field(default=10_000)
    metrics_max_queue_size: int = Field(default=10_000)
    metrics_level: MetricsLevel = Field(default=MetricsLevel.DETAILED)
    metrics_enabled_dimensions: set[str] = Field(
        default_factory=lambda: set(DEFAULT_METRICS_ENABLED_DIMENSIONS),
        description="Dimensiones de métricas habilitadas (siempre incluye las base).",
    )

    # Proveedores de credenciales (cualquier objeto que cumpla el Protocol).
    kinesis_credentials_provider: Any = Field(default=None, exclude=True)
    dynamodb_credentials_provider: Any = Field(default=None, exclude=True)
    cloudwatch_credentials_provider: Any = Field(default=None, exclude=True)
