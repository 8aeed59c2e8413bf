"""Carga de ficheros de propiedades desde disco."""

from __future__ import annotations

from pathlib import Path

from core.domain.models import WorkerConfiguration
from core.services.configurator import WorkerConfigurator


def load_configuration(path: Path, configurator: WorkerConfigurator | None = None) -> WorkerConfiguration:
    configurator = configurator or WorkerConfigurator()
    raw = path.read_text(encoding="utf-8")
    return configurator.get_configuration(raw)
