"""Proveedor con credenciales fijas (uso programático y tests).

No está en el registro por defecto: necesita argumentos para construirse.
"""

from __future__ import annotations

from core.domain.models import AWSCredentials
from core.interfaces.credentials import CredentialsProvider


class StaticCredentialsProvider(CredentialsProvider):
    def __init__(self, credentials: AWSCredentials) -> None:
        self._credentials = credentials

    def get_credentials(self) -> AWSCredentials:
        return self._credentials

    def refresh(self) -> None:
        return None
