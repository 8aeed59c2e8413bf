"""Binder: fichero de propiedades -> `WorkerConfiguration`.

Flujo:
1. `parse_properties` produce las entradas en orden.
2. Cada clave reconocida (case-insensitive) se convierte y se aplica; la
   última aparición gana. Las claves desconocidas se ignoran.
3. Se resuelven los proveedores de credenciales.
4. Se validan los campos obligatorios y se genera el `workerId` si falta.

Errores de valor -> se ignoran (warning). Errores de estructura -> excepción.
"""

from __future__ import annotations

import logging
import socket
import uuid
from collections.abc import Callable

from core.domain.errors import MissingRequiredFieldError
from core.domain.models import WorkerConfiguration
from core.services import field_registry
from core.services.credentials_resolver import (
    CredentialsProviderRegistry,
    default_registry,
    resolve_credentials_provider,
)
from core.services.property_parser import PropertySource, parse_properties

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER_KEY = "AWSCredentialsProvider"
DYNAMODB_CREDENTIALS_PROVIDER_KEY = "AWSCredentialsProviderDynamoDB"
CLOUDWATCH_CREDENTIALS_PROVIDER_KEY = "AWSCredentialsProviderCloudWatch"

_CREDENTIALS_KEYS: dict[str, str] = {
    key.lower(): key
    for key in (
        CREDENTIALS_PROVIDER_KEY,
        DYNAMODB_CREDENTIALS_PROVIDER_KEY,
        CLOUDWATCH_CREDENTIALS_PROVIDER_KEY,
    )
}


def default_worker_id() -> str:
    """`<host>:<uuid4>`: único por proceso y por llamada."""

    return f"{socket.gethostname()}:{uuid.uuid4()}"


class WorkerConfigurator:
    """Construye configuraciones de worker a partir de ficheros de propiedades.

    El configurador no guarda estado entre llamadas: cada `get_configuration`
    parte de un `WorkerConfiguration` nuevo.
    """

    def __init__(
        self,
        registry: CredentialsProviderRegistry | None = None,
        worker_id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._worker_id_factory = worker_id_factory or default_worker_id

    @property
    def registry(self) -> CredentialsProviderRegistry:
        return self._registry

    def get_configuration(self, source: PropertySource) -> WorkerConfiguration:
        config = WorkerConfiguration()
        credentials_values: dict[str, str] = {}

        for entry in parse_properties(source):
            credentials_key = _CREDENTIALS_KEYS.get(entry.key.lower())
            if credentials_key is not None:
                credentials_values[credentials_key] = entry.value
                continue

            descriptor = field_registry.lookup(entry.key)
            if descriptor is None:
                logger.debug("Ignoring unrecognized key %s", entry.key)
                continue
            descriptor.apply(config, entry.value)

        self._bind_credentials(config, credentials_values)
        self._validate(config)
        return config

    def _bind_credentials(self, config: WorkerConfiguration, values: dict[str, str]) -> None:
        kinesis_value = values.get(CREDENTIALS_PROVIDER_KEY)
        if kinesis_value is None:
            raise MissingRequiredFieldError(CREDENTIALS_PROVIDER_KEY)

        kinesis = resolve_credentials_provider(kinesis_value, self._registry)
        config.kinesis_credentials_provider = kinesis

        # DynamoDB y CloudWatch son opcionales: heredan el de Kinesis.
        dynamodb_value = values.get(DYNAMODB_CREDENTIALS_PROVIDER_KEY)
        config.dynamodb_credentials_provider = (
            resolve_credentials_provider(
                dynamodb_value,
                self._registry,
                field_name=DYNAMODB_CREDENTIALS_PROVIDER_KEY,
            )
            if dynamodb_value is not None
            else kinesis
        )
        cloudwatch_value = values.get(CLOUDWATCH_CREDENTIALS_PROVIDER_KEY)
        config.cloudwatch_credentials_provider = (
            resolve_credentials_provider(
                cloudwatch_value,
                self._registry,
                field_name=CLOUDWATCH_CREDENTIALS_PROVIDER_KEY,
            )
            if cloudwatch_value is not None
            else kinesis
        )

    def _validate(self, config: WorkerConfiguration) -> None:
        for descriptor in field_registry.required_fields():
            if not getattr(config, descriptor.attribute):
                raise MissingRequiredFieldError(descriptor.name)

        if not config.worker_identifier:
            config.worker_identifier = self._worker_id_factory()
            logger.info("No workerId configured, generated %s", config.worker_identifier)
