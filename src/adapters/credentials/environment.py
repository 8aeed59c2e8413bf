"""Proveedor: variables de entorno.

Lee en cada llamada (sin caché), igual que el SDK:
- AWS_ACCESS_KEY_ID (o AWS_ACCESS_KEY)
- AWS_SECRET_ACCESS_KEY (o AWS_SECRET_KEY)
- AWS_SESSION_TOKEN (opcional)
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from core.domain.errors import CredentialsUnavailableError
from core.domain.models import AWSCredentials
from core.interfaces.credentials import CredentialsProvider


def _first(environ: Mapping[str, str], *names: str) -> str | None:
    for name in names:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return None


class EnvironmentVariableCredentialsProvider(CredentialsProvider):
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get_credentials(self) -> AWSCredentials:
        environ = self._environ if self._environ is not None else os.environ
        access_key = _first(environ, "AWS_ACCESS_KEY_ID", "AWS_ACCESS_KEY")
        secret_key = _first(environ, "AWS_SECRET_ACCESS_KEY", "AWS_SECRET_KEY")
        if not access_key or not secret_key:
            raise CredentialsUnavailableError(
                "Unable to load AWS credentials from environment variables "
                "(AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY)"
            )
        return AWSCredentials(
            access_key_id=access_key,
            secret_access_key=secret_key,
            session_token=_first(environ, "AWS_SESSION_TOKEN"),
        )

    def refresh(self) -> None:
        return None
