"""`opsmngr` command: configuration and connectivity diagnostics."""

from __future__ import annotations

import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from opsmngr.cli.ui_components import build_checks_table, build_settings_table, print_banner
from opsmngr.client import Client
from opsmngr.core.config import CLOUD_URL, ClientSettings, write_user_env_vars
from opsmngr.core.domain.agents import SoftwareVersions
from opsmngr.core.errors import OpsManagerError

app = typer.Typer(no_args_is_help=True, help="Ops Manager API client: configuration and diagnostics.")

_console = Console()


async def check_connectivity(settings: ClientSettings) -> tuple[bool, str, SoftwareVersions | None]:
    """Call `softwareComponents/versions` once and summarise the outcome."""

    try:
        async with Client(settings=settings) as client:
            versions, response = await client.agents.global_versions()
    except OpsManagerError as exc:
        return False, str(exc), None
    return True, f"HTTP {response.status_code}", versions


@app.callback()
def _root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every HTTP exchange."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def doctor() -> None:
    """Show the effective settings and check that the API answers."""

    try:
        settings = ClientSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red]\n{exc}")
        raise typer.Exit(code=2) from exc

    print_banner(_console)
    _console.print(build_settings_table(settings))

    table = build_checks_table()
    if settings.has_credentials:
        table.add_row("API key", "OK", "Digest authentication enabled")
    else:
        table.add_row("API key", "MISSING", "Run `opsmngr configure` to store a key pair")
    if settings.skip_verify:
        table.add_row("TLS", "WARN", "Certificate verification disabled")

    ok, detail, versions = asyncio.run(check_connectivity(settings))
    table.add_row("API connectivity", "OK" if ok else "FAIL", detail)
    if versions is not None and versions.automation_version:
        table.add_row("Automation agent", "OK", versions.automation_version)

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Store the base URL and API key pair in the per-user config .env."""

    base_url = typer.prompt("Ops Manager base URL", default=CLOUD_URL, show_default=True).strip()
    public_key = typer.prompt("Public API key").strip()
    private_key = typer.prompt("Private API key", hide_input=True).strip()

    if not base_url or not public_key or not private_key:
        raise typer.BadParameter("base URL and both API key halves are required")

    env_path = write_user_env_vars(
        {
            "OPSMNGR_BASE_URL": base_url,
            "OPSMNGR_PUBLIC_KEY": public_key,
            "OPSMNGR_PRIVATE_KEY": private_key,
        }
    )
    _console.print(f"[green]Saved configuration to:[/green] {env_path}")


def run() -> None:
    app()
