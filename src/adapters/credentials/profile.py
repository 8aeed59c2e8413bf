"""Proveedor: fichero de credenciales compartido (`~/.aws/credentials`).

Formato INI:

    [default]
    aws_access_key_id = ...
    aws_secret_access_key = ...
    aws_session_token = ...   (opcional)

El fichero se lee en el primer uso y se cachea hasta `refresh()`.
"""

from __future__ import annotations

import configparser
import os
from pathlib import Path

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.errors import CredentialsUnavailableError
from core.domain.models import AWSCredentials
from core.interfaces.credentials import CredentialsProvider


class ProfileCredentialsProvider(CredentialsProvider):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        profile: str | None = None,
        path: Path | None = None,
    ) -> None:
        # Se resuelve en el primer uso: construir no lee .env ni el entorno.
        self._settings = settings
        self._profile = profile
        self._path = path
        self._cached: AWSCredentials | None = None

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            try:
                self._settings = AppSettings()
            except ValidationError as exc:
                raise CredentialsUnavailableError(f"Invalid kcl-bootstrap settings: {exc}") from exc
        return self._settings

    @property
    def profile_name(self) -> str:
        return (
            self._profile
            or self.settings.aws_profile
            or os.environ.get("AWS_PROFILE")
            or "default"
        )

    @property
    def credentials_path(self) -> Path:
        if self._path is not None:
            return self._path
        if self.settings.aws_credentials_file is not None:
            return self.settings.aws_credentials_file
        override = (os.environ.get("AWS_SHARED_CREDENTIALS_FILE") or "").strip()
        if override:
            return Path(override).expanduser()
        return Path.home() / ".aws" / "credentials"

    def get_credentials(self) -> AWSCredentials:
        if self._cached is None:
            self._cached = self._load()
        return self._cached

    def refresh(self) -> None:
        self._cached = None

    def _load(self) -> AWSCredentials:
        path = self.credentials_path
        profile = self.profile_name

        parser = configparser.ConfigParser(interpolation=None)
        try:
            with path.open(encoding="utf-8") as fh:
                parser.read_file(fh)
        except OSError as exc:
            raise CredentialsUnavailableError(f"Unable to read credentials file {path}: {exc}") from exc
        except configparser.Error as exc:
            raise CredentialsUnavailableError(f"Malformed credentials file {path}: {exc}") from exc

        if not parser.has_section(profile):
            raise CredentialsUnavailableError(f"Profile {profile!r} not found in {path}")

        section = parser[profile]
        access_key = (section.get("aws_access_key_id") or "").strip()
        secret_key = (section.get("aws_secret_access_key") or "").strip()
        if not access_key or not secret_key:
            raise CredentialsUnavailableError(f"Profile {profile!r} in {path} has no access keys")

        token = (section.get("aws_session_token") or "").strip()
        return AWSCredentials(
            access_key_id=access_key,
            secret_access_key=secret_key,
            session_token=token or None,
        )
