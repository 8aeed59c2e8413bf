"""Helpers compartidos por los comandos de la CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings


def configure_logging(level: str, console: Console | None = None) -> None:
    """Instala un `RichHandler` en el logger raíz (stderr por defecto)."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


def resolve_properties_path(path: Path | None, settings: AppSettings) -> Path:
    resolved = path or settings.properties_path
    if resolved is None:
        raise typer.BadParameter("no properties file given and KCL_BOOTSTRAP_PROPERTIES_PATH is not set")
    return resolved
