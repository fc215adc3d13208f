"""CLI de restclient (Typer).

Por qué una CLI:
- Permite probar un endpoint a mano con la misma semántica que la librería
  (params solo en GET, JSON por defecto, fallback genérico).
- La CLI es una capa externa; el Core no la conoce.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from restclient.cli import doctor
from restclient.cli.ui_components import build_response_panel
from restclient.core.config import AppSettings
from restclient.core.domain.models import BasicAuth, Method, RestRequest
from restclient.core.errors import RestClientError
from restclient.core.services.client import Client

app = typer.Typer(no_args_is_help=True, help="Minimal REST client for JSON APIs.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _make_client(settings: AppSettings) -> Client:
    return Client(settings=settings)


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _parse_pairs(values: list[str] | None, option: str) -> dict[str, str] | None:
    if not values:
        return None
    pairs: dict[str, str] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint=option)
        pairs[key.strip()] = value
    return pairs


def _parse_data(data: str | None) -> Any:
    if data is None:
        return None
    try:
        return json.loads(data)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"invalid JSON: {exc}", param_hint="--data") from exc


def _parse_user(user: str | None) -> BasicAuth | None:
    if user is None:
        return None
    username, _, password = user.partition(":")
    return BasicAuth(username=username, password=password)


@app.command()
def call(
    url: str = typer.Argument(..., help="Absolute URL to call."),
    method: Method = typer.Option(Method.GET, "--method", "-X", case_sensitive=False, help="HTTP method."),
    param: list[str] | None = typer.Option(None, "--param", "-p", help="Query parameter KEY=VALUE (GET only)."),
    header: list[str] | None = typer.Option(None, "--header", "-H", help="Header KEY=VALUE."),
    data: str | None = typer.Option(None, "--data", "-d", help="JSON payload sent as body."),
    user: str | None = typer.Option(None, "--user", "-u", help="Basic auth as USER:PASSWORD."),
    label: str | None = typer.Option(None, "--label", help="Label included in failure logs."),
) -> None:
    """Execute a single request and print the decoded response."""

    settings = _load_settings()
    logging.basicConfig(level=settings.log_level)

    request = RestRequest(
        url=url,
        method=method,
        params=_parse_pairs(param, "--param"),
        headers=_parse_pairs(header, "--header"),
        data=_parse_data(data),
        userinfo=_parse_user(user),
        label=label,
    )

    with _make_client(settings) as client:
        try:
            response = client.execute(request)
        except RestClientError as exc:
            _console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(code=1) from exc

    _console.print(build_response_panel(response))
    if not response.ok:
        raise typer.Exit(code=1)


def run() -> None:
    app()
