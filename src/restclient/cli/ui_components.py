"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from rich.console import Group
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from restclient.core.config import AppSettings
from restclient.core.domain.models import GenericBody, RestResponse, TypedBody


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    return value


def build_response_panel(response: RestResponse) -> Panel:
    """Panel con status, timestamp y body decodificado de un `RestResponse`."""

    style = "green" if response.ok else "red"
    header = Text()
    header.append(f"{response.request.method.value} {response.request.url}\n", style="bold")
    header.append(f"Status: {response.status}\n", style=style)
    header.append(f"Timestamp: {response.timestamp.isoformat()}", style="dim")

    body = response.result if response.ok else response.error
    match body:
        case TypedBody(value=value) | GenericBody(value=value):
            kind = Text(f"\n[{body.kind}]", style="dim")
            content = Group(header, kind, JSON.from_data(_jsonable(value), default=str))
        case _:
            content = Group(header, Text("\n" + (response.raw_text or "(empty body)")))

    title = Text("Response", style=f"bold {style}")
    return Panel(content, title=title, border_style=style)


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="restclient settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("http_timeout_seconds", str(settings.http_timeout_seconds))
    table.add_row("user_agent", settings.user_agent)
    table.add_row("follow_redirects", str(settings.follow_redirects))
    table.add_row("log_level", settings.log_level)
    return table
