"""Configuración de la propia herramienta (no del worker).

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (proveedores de credenciales, CLI) lean config de
  forma consistente.

Ojo: esto NO es la configuración del worker. Esa se construye a partir del
fichero de propiedades en `core.services.configurator`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "kcl-bootstrap"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "kcl-bootstrap"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "kcl-bootstrap"
    return Path.home() / ".config" / "kcl-bootstrap"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la herramienta.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="KCL_BOOTSTRAP_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING...).",
    )
    properties_path: Path | None = Field(
        default=None,
        description="Fichero de propiedades por defecto si la CLI no recibe uno.",
    )

    aws_credentials_file: Path | None = Field(
        default=None,
        description="Ruta al fichero INI de credenciales (por defecto ~/.aws/credentials).",
    )
    aws_profile: str | None = Field(
        default=None,
        description="Perfil del fichero de credenciales (por defecto AWS_PROFILE o 'default').",
    )

    metadata_base_url: str = Field(
        default="http://169.254.169.254",
        min_length=8,
        description="Base URL del servicio de metadata de instancia (EC2).",
    )
    metadata_timeout_seconds: float = Field(
        default=1.0,
        gt=0,
        description="Timeout por request al servicio de metadata (segundos).",
    )
