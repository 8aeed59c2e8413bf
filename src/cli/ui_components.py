"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.json_exporter import configuration_payload
from core.domain.models import WorkerConfiguration


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("KCL-BOOTSTRAP", style="bold cyan")
    subtitle = Text("Properties • Typed worker config • Credentials", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_configuration_table(config: WorkerConfiguration) -> Table:
    """Tabla Rich con todos los valores finales (defaults incluidos)."""

    table = Table(title="Worker Configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in sorted(configuration_payload(config).items()):
        if value is None:
            table.add_row(key, Text("-", style="dim"))
            continue
        shown = ", ".join(str(v) for v in value) if isinstance(value, list) else str(value)
        # Text evita que valores con corchetes se interpreten como markup.
        table.add_row(key, Text(shown))
    return table


def build_providers_table(identifiers: list[str]) -> Table:
    table = Table(title="Credentials Providers")
    table.add_column("Identifier", style="cyan", no_wrap=True)
    for identifier in identifiers:
        table.add_row(identifier)
    return table
