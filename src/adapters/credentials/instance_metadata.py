"""Proveedor: credenciales del rol de la instancia (EC2 instance metadata).

Solo hace red en `get_credentials`:
1. PUT /latest/api/token (IMDSv2). Si el endpoint no lo soporta, seguimos sin token.
2. GET /latest/meta-data/iam/security-credentials/ -> nombre del rol.
3. GET /latest/meta-data/iam/security-credentials/<rol> -> JSON con las claves.

Las credenciales se cachean hasta 5 minutos antes de su expiración.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import httpx
from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from adapters.http_client import build_metadata_client
from core.config import AppSettings
from core.domain.errors import CredentialsUnavailableError
from core.domain.models import AWSCredentials
from core.interfaces.credentials import CredentialsProvider

_TOKEN_PATH = "/latest/api/token"
_ROLE_PATH = "/latest/meta-data/iam/security-credentials/"
_TOKEN_TTL_SECONDS = "21600"
_REFRESH_MARGIN = timedelta(minutes=5)


class InstanceRoleCredentials(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    access_key_id: str = Field(..., alias="AccessKeyId", min_length=1)
    secret_access_key: str = Field(..., alias="SecretAccessKey", min_length=1)
    token: str | None = Field(default=None, alias="Token")
    expiration: datetime | None = Field(default=None, alias="Expiration")


class InstanceProfileCredentialsProvider(CredentialsProvider):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        # Se resuelve en el primer uso: construir no lee .env ni el entorno.
        self._settings = settings
        self._transport = transport
        self._cached: AWSCredentials | None = None
        self._expires_at: datetime | None = None

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            try:
                self._settings = AppSettings()
            except ValidationError as exc:
                raise CredentialsUnavailableError(f"Invalid kcl-bootstrap settings: {exc}") from exc
        return self._settings

    def get_credentials(self) -> AWSCredentials:
        if self._cached is not None and not self._is_stale():
            return self._cached

        try:
            role = self._fetch()
        except httpx.HTTPError as exc:
            raise CredentialsUnavailableError(f"Unable to reach instance metadata service: {exc}") from exc
        except ValueError as exc:
            raise CredentialsUnavailableError(f"Unexpected instance metadata payload: {exc}") from exc

        self._cached = AWSCredentials(
            access_key_id=role.access_key_id,
            secret_access_key=role.secret_access_key,
            session_token=role.token,
        )
        self._expires_at = role.expiration
        return self._cached

    def refresh(self) -> None:
        self._cached = None
        self._expires_at = None

    def _is_stale(self) -> bool:
        if self._expires_at is None:
            return False
        expires_at = self._expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return datetime.now(timezone.utc) >= expires_at - _REFRESH_MARGIN

    def _fetch(self) -> InstanceRoleCredentials:
        with build_metadata_client(self.settings, transport=self._transport) as client:
            headers: dict[str, str] = {}
            token_resp = client.put(
                _TOKEN_PATH,
                headers={"X-aws-ec2-metadata-token-ttl-seconds": _TOKEN_TTL_SECONDS},
            )
            if token_resp.status_code == 200 and token_resp.text.strip():
                headers["X-aws-ec2-metadata-token"] = token_resp.text.strip()

            roles_resp = client.get(_ROLE_PATH, headers=headers)
            roles_resp.raise_for_status()
            roles = [line.strip() for line in roles_resp.text.splitlines() if line.strip()]
            if not roles:
                raise CredentialsUnavailableError("No IAM role attached to this instance")

            creds_resp = client.get(f"{_ROLE_PATH}{roles[0]}", headers=headers)
            creds_resp.raise_for_status()
            return InstanceRoleCredentials.model_validate(creds_resp.json())
