"""Doctor command: checks that the bound credentials actually work.

Binding only proves that a provider could be *constructed*. This command goes
one step further and asks each resolved provider for credentials, which is
where a misconfigured environment shows up.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from adapters.properties_file import load_configuration
from cli.common import resolve_properties_path
from core.config import AppSettings
from core.domain.errors import ConfigurationError
from core.interfaces.credentials import CredentialsProvider

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and credentials checks.")

_console = Console()


def _check_provider(provider: CredentialsProvider) -> tuple[bool, str]:
    try:
        credentials = provider.get_credentials()
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__
    # Nunca mostramos el secreto; solo un sufijo del access key.
    access_key = getattr(credentials, "access_key_id", None)
    if isinstance(access_key, str) and access_key:
        return True, f"access key ...{access_key[-4:]}"
    return True, "OK"


@app.command()
def check(
    path: Optional[Path] = typer.Argument(None, help="Properties file (defaults to KCL_BOOTSTRAP_PROPERTIES_PATH)."),
) -> None:
    """Bind the properties file and request credentials from every provider."""

    settings = AppSettings()
    properties_path = resolve_properties_path(path, settings)

    table = Table(title="KCL-Bootstrap Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        config = load_configuration(properties_path)
    except (ConfigurationError, OSError) as exc:
        table.add_row("Bind", "FAIL", str(exc))
        _console.print(table)
        raise typer.Exit(code=1) from exc

    table.add_row("Bind", "OK", f"{config.application_name} / {config.stream_name}")
    table.add_row("Worker id", "OK", str(config.worker_identifier))

    all_ok = True
    checked: dict[int, tuple[bool, str]] = {}
    for label, provider in (
        ("Kinesis credentials", config.kinesis_credentials_provider),
        ("DynamoDB credentials", config.dynamodb_credentials_provider),
        ("CloudWatch credentials", config.cloudwatch_credentials_provider),
    ):
        # El mismo proveedor compartido solo se consulta una vez.
        if id(provider) not in checked:
            checked[id(provider)] = _check_provider(provider)
        ok, detail = checked[id(provider)]
        all_ok = all_ok and ok
        table.add_row(label, "OK" if ok else "FAIL", f"{provider.__class__.__name__}: {detail}")

    _console.print(table)

    if not all_ok:
        _console.print(
            "\n[yellow]Note:[/yellow] binding succeeded, but the worker will fail when it first requests credentials."
        )
        raise typer.Exit(code=1)
