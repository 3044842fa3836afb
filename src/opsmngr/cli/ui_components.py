"""Rich building blocks for the CLI."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from opsmngr import __version__
from opsmngr.core.config import ClientSettings


def mask_secret(value: str | None, *, visible: int = 4) -> str:
    """`abcd1234-...` -> `****-1234`; empty values render as `-`."""

    if not value:
        return "-"
    if len(value) <= visible:
        return "*" * len(value)
    return "****" + value[-visible:]


def print_banner(console: Console) -> None:
    title = Text("opsmngr", style="bold cyan")
    subtitle = Text(f"Ops Manager API client {__version__}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_settings_table(settings: ClientSettings) -> Table:
    """Effective settings, with the private key masked."""

    table = Table(title="Effective settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("base_url", settings.base_url)
    table.add_row("user_agent", settings.user_agent)
    table.add_row("http_timeout_seconds", f"{settings.http_timeout_seconds:g}")
    table.add_row("public_key", settings.public_key or "-")
    table.add_row("private_key", mask_secret(settings.private_key))
    table.add_row("skip_verify", str(settings.skip_verify))
    table.add_row("ca_cert_path", str(settings.ca_cert_path) if settings.ca_cert_path else "-")
    return table


def build_checks_table() -> Table:
    table = Table(title="opsmngr doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
