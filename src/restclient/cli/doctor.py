"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from restclient.cli.ui_components import build_settings_table
from restclient.core.config import AppSettings, get_user_env_file
from restclient.core.domain.models import RestRequest
from restclient.core.errors import DecodeError, RestClientError
from restclient.core.services.client import Client

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(client: Client, url: str) -> tuple[bool, str]:
    try:
        response = client.execute(RestRequest(url=url, label="doctor"))
    except DecodeError as exc:
        # Reachable, the body just isn't JSON.
        return True, f"HTTP {exc.status} (non-JSON body)"
    except RestClientError as exc:
        return False, str(exc)
    return True, f"HTTP {response.status}"


@app.command()
def run(
    url: str = typer.Option("https://example.com", "--url", help="URL used for the connectivity check."),
) -> None:
    """Run baseline diagnostics and show the effective configuration."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    _console.print(build_settings_table(settings))

    table = Table(title="restclient doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Connectivity (best-effort)
    with Client(settings=settings) as client:
        ok_http, detail_http = _check_http(client, url)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
