"""Registro estático de campos reconocidos.

Por qué una tabla fija:
- Las claves del fichero se resuelven por búsqueda en tabla (sin introspección
  del modelo en runtime).
- Una clave desconocida simplemente no está en la tabla y se ignora.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError

from core.domain.enums import InitialPositionInStream, MetricsLevel
from core.domain.models import METRICS_ALWAYS_ENABLED_DIMENSIONS, WorkerConfiguration
from core.services import coercion


class FieldKind(str, Enum):
    STRING = "string"
    INT = "int"
    BOOLEAN = "boolean"
    ENUM = "enum"
    STRING_SET = "string_set"


@dataclass(frozen=True)
class FieldDescriptor:
    """Describe un campo: nombre canónico, tipo y atributo destino."""

    name: str
    kind: FieldKind
    attribute: str
    required: bool = False
    enum_type: type[Enum] | None = None
    base_set: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.kind is FieldKind.ENUM and self.enum_type is None:
            raise ValueError(f"ENUM field {self.name} needs an enum_type")

    def coerce(self, value: str) -> Any:
        if self.kind is FieldKind.STRING:
            return coercion.coerce_string(value)
        if self.kind is FieldKind.INT:
            return coercion.coerce_int(value)
        if self.kind is FieldKind.BOOLEAN:
            return coercion.coerce_bool(value)
        if self.kind is FieldKind.ENUM:
            return coercion.coerce_enum(value, self.enum_type)
        return coercion.coerce_string_set(value, self.base_set)

    def apply(self, config: WorkerConfiguration, value: str) -> bool:
        """Convierte `value` y lo asigna. Devuelve False si se ignoró."""

        coerced = self.coerce(value)
        if coerced is coercion.IGNORED:
            expected = self.enum_type.__name__ if self.enum_type else self.kind.value
            coercion.log_ignored(self.name, value, expected)
            return False
        try:
            setattr(config, self.attribute, coerced)
        except ValidationError:
            # El modelo rechaza el valor (p.ej. userAgent vacío): se ignora igual.
            coercion.log_ignored(self.name, value, f"a valid {self.attribute}")
            return False
        return True


def _string(name: str, attribute: str, *, required: bool = False) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.STRING, attribute=attribute, required=required)


def _int(name: str, attribute: str) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.INT, attribute=attribute)


def _bool(name: str, attribute: str) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.BOOLEAN, attribute=attribute)


def _enum(name: str, attribute: str, enum_type: type[Enum]) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=FieldKind.ENUM, attribute=attribute, enum_type=enum_type)


_DESCRIPTORS: tuple[FieldDescriptor, ...] = (
    _string("streamName", "stream_name", required=True),
    _string("applicationName", "application_name", required=True),
    _string("workerId", "worker_identifier"),
    _string("kinesisEndpoint", "kinesis_endpoint"),
    _string("dynamoDBEndpoint", "dynamodb_endpoint"),
    _string("regionName", "region_name"),
    _string("userAgent", "user_agent"),
    _enum("initialPositionInStream", "initial_position_in_stream", InitialPositionInStream),
    _int("failoverTimeMillis", "failover_time_millis"),
    _int("shardSyncIntervalMillis", "shard_sync_interval_millis"),
    _int("maxRecords", "max_records"),
    _int("idleTimeBetweenReadsInMillis", "idle_time_between_reads_millis"),
    _int("parentShardPollIntervalMillis", "parent_shard_poll_interval_millis"),
    _int("taskBackoffTimeMillis", "task_backoff_time_millis"),
    _int("maxLeasesForWorker", "max_leases_for_worker"),
    _int("maxLeasesToStealAtOneTime", "max_leases_to_steal_at_one_time"),
    _int("initialLeaseTableReadCapacity", "initial_lease_table_read_capacity"),
    _int("initialLeaseTableWriteCapacity", "initial_lease_table_write_capacity"),
    _bool("callProcessRecordsEvenForEmptyRecordList", "call_process_records_even_for_empty_record_list"),
    _bool("cleanupLeasesUponShardCompletion", "cleanup_leases_upon_shard_completion"),
    _bool("validateSequenceNumberBeforeCheckpointing", "validate_sequence_number_before_checkpointing"),
    _bool(
        "skipShardSyncAtWorkerInitializationIfLeasesExist",
        "skip_shard_sync_at_worker_initialization_if_leases_exist",
    ),
    _int("metricsBufferTimeMillis", "metrics_buffer_time_millis"),
    _int("metricsMaxQueueSize", "metrics_max_queue_size"),
    _enum("metricsLevel", "metrics_level", MetricsLevel),
    FieldDescriptor(
        name="metricsEnabledDimensions",
        kind=FieldKind.STRING_SET,
        attribute="metrics_enabled_dimensions",
        base_set=METRICS_ALWAYS_ENABLED_DIMENSIONS,
    ),
)

# Claves en minúsculas: el match es case-insensitive.
FIELD_REGISTRY: dict[str, FieldDescriptor] = {d.name.lower(): d for d in _DESCRIPTORS}


def lookup(key: str) -> FieldDescriptor | None:
    return FIELD_REGISTRY.get(key.lower())


def required_fields() -> list[FieldDescriptor]:
    return [d for d in _DESCRIPTORS if d.required]
