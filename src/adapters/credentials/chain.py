"""Proveedor: cadena por defecto (entorno -> fichero de perfil -> instancia).

El primer proveedor que entrega credenciales se recuerda hasta `refresh()`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from adapters.credentials.environment import EnvironmentVariableCredentialsProvider
from adapters.credentials.instance_metadata import InstanceProfileCredentialsProvider
from adapters.credentials.profile import ProfileCredentialsProvider
from core.config import AppSettings
from core.domain.errors import CredentialsUnavailableError
from core.domain.models import AWSCredentials
from core.interfaces.credentials import CredentialsProvider

logger = logging.getLogger(__name__)


class CredentialsProviderChain(CredentialsProvider):
    def __init__(self, providers: Sequence[CredentialsProvider]) -> None:
        self._providers = list(providers)
        self._last_used: CredentialsProvider | None = None

    def get_credentials(self) -> AWSCredentials:
        if self._last_used is not None:
            return self._last_used.get_credentials()

        errors: list[str] = []
        for provider in self._providers:
            try:
                credentials = provider.get_credentials()
            except CredentialsUnavailableError as exc:
                logger.debug("%s: %s", provider.__class__.__name__, exc)
                errors.append(f"{provider.__class__.__name__}: {exc}")
                continue
            self._last_used = provider
            return credentials

        raise CredentialsUnavailableError(
            "Unable to load AWS credentials from any provider in the chain: " + "; ".join(errors)
        )

    def refresh(self) -> None:
        self._last_used = None
        for provider in self._providers:
            provider.refresh()


class DefaultAWSCredentialsProviderChain(CredentialsProviderChain):
    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__(
            [
                EnvironmentVariableCredentialsProvider(),
                ProfileCredentialsProvider(settings),
                InstanceProfileCredentialsProvider(settings),
            ]
        )
