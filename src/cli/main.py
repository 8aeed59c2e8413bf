"""CLI principal (Typer).

Comandos:
- `show`: hace el bind del fichero y muestra la configuración resultante.
- `providers`: lista los identificadores de proveedores registrados.
- `doctor check`: además del bind, pide credenciales a los proveedores.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_configuration_json
from adapters.properties_file import load_configuration
from cli import doctor
from cli.common import configure_logging, resolve_properties_path
from cli.ui_components import build_configuration_table, build_providers_table, print_banner
from core.config import AppSettings
from core.domain.errors import ConfigurationError
from core.services.credentials_resolver import default_registry

app = typer.Typer(no_args_is_help=True, help="Bind worker properties files into typed configuration.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override KCL_BOOTSTRAP_LOG_LEVEL."),
) -> None:
    settings = AppSettings()
    configure_logging(log_level or settings.log_level)


@app.command()
def show(
    path: Optional[Path] = typer.Argument(None, help="Properties file (defaults to KCL_BOOTSTRAP_PROPERTIES_PATH)."),
    json_out: Optional[Path] = typer.Option(None, "--json", help="Also write the bound configuration as JSON."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the banner."),
) -> None:
    """Bind a properties file and print the resulting worker configuration."""

    settings = AppSettings()
    properties_path = resolve_properties_path(path, settings)

    try:
        config = load_configuration(properties_path)
    except ConfigurationError as exc:
        _console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        _console.print(f"[red]Cannot read {properties_path}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if banner:
        print_banner(_console)
    _console.print(build_configuration_table(config))

    if json_out is not None:
        written = export_configuration_json(config=config, output_path=json_out)
        _console.print(f"[green]Saved JSON to:[/green] {written}")


@app.command()
def providers() -> None:
    """List the credentials provider identifiers accepted in AWSCredentialsProvider."""

    _console.print(build_providers_table(default_registry().identifiers()))


def run() -> None:
    app()
