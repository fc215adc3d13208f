"""Request Builder: `RestRequest` -> `TransportMessage`.

Responsabilidades:
- Validar la URL y componer la query (solo en GET).
- Codificar el payload como JSON y poner los headers por defecto.
- Adjuntar HTTP Basic si hay credenciales.

No hace I/O de red: el mensaje resultante lo envía un `Transport`.
"""

from __future__ import annotations

import base64
import logging
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

from restclient.adapters.json_codec import encode_json
from restclient.core.domain.models import BasicAuth, Method, RestRequest, TransportMessage
from restclient.core.errors import EncodeError, UrlParseError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


# Caracteres que no pueden aparecer en un host sin escapar.
_INVALID_HOST_CHARS = frozenset('<>"{}|\\^` ')


def parse_url(url: str) -> SplitResult:
    """Parsea `url` exigiendo esquema, host y un puerto válido.

    `urlsplit` descarta tabs y saltos de línea en silencio, así que cualquier
    espacio o carácter de control se rechaza antes de parsear.
    """

    if any(ch.isspace() or not ch.isprintable() for ch in url):
        raise UrlParseError(url, "whitespace or control character in url")

    try:
        parts = urlsplit(url)
        # `.port` valida que sea numérico y esté en rango.
        parts.port
    except ValueError as exc:
        raise UrlParseError(url, str(exc)) from exc

    if not parts.scheme:
        raise UrlParseError(url, "missing scheme")
    if not parts.hostname:
        raise UrlParseError(url, "missing host")
    if _INVALID_HOST_CHARS.intersection(parts.hostname):
        raise UrlParseError(url, f"invalid character in host {parts.hostname!r}")

    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise UrlParseError(url, str(exc)) from exc
    return parts


def merge_query(query: str, params: dict[str, str | int | float | bool]) -> str:
    """Mezcla `params` sobre `query`; las claves del caller reemplazan las previas.

    La salida está ordenada por clave, así que no depende del orden de entrada.
    """

    values: dict[str, list[str]] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        values.setdefault(key, []).append(value)
    for key, value in params.items():
        values[key] = [_query_value(value)]
    return urlencode(sorted(values.items()), doseq=True)


def _query_value(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _find_header(headers: dict[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key in headers:
        if key.lower() == lowered:
            return key
    return None


def _set_header(headers: dict[str, str], name: str, value: str) -> None:
    existing = _find_header(headers, name)
    if existing is not None:
        del headers[existing]
    headers[name] = value


def _check_header(name: str, value: str) -> None:
    # Los headers viajan como ASCII; CR/LF permitirían inyectar otros headers.
    if not (name.isascii() and value.isascii()):
        raise EncodeError(f"header {name!r} must be ASCII")
    if any(ch in "\r\n" for ch in name + value) or not name.strip():
        raise EncodeError(f"invalid header {name!r}")


def basic_auth_header(userinfo: BasicAuth) -> str:
    token = f"{userinfo.username}:{userinfo.password}".encode("utf-8")
    return "Basic " + base64.b64encode(token).decode("ascii")


def build(request: RestRequest) -> TransportMessage:
    """Construye el mensaje de transporte para `request`.

    Errores:
    - `UrlParseError` si la URL no es válida.
    - `EncodeError` si `request.data` no es serializable a JSON o si un
      header no es ASCII.
    """

    parts = parse_url(request.url)

    # `params` solo aplica a GET; en el resto se ignora.
    if request.method is Method.GET and request.params is not None:
        parts = parts._replace(query=merge_query(parts.query, request.params))
    url = urlunsplit(parts)

    headers: dict[str, str] = {}
    body: bytes | None = None
    if request.data is not None:
        body = encode_json(request.data)
        headers["Content-Type"] = JSON_MEDIA_TYPE

    for name, value in (request.headers or {}).items():
        _check_header(name, value)
        _set_header(headers, name, value)

    if _find_header(headers, "Accept") is None:
        headers["Accept"] = JSON_MEDIA_TYPE

    if request.userinfo is not None:
        _set_header(headers, "Authorization", basic_auth_header(request.userinfo))

    logger.debug("built %s %s (body=%s bytes)", request.method.value, url, len(body) if body else 0)
    return TransportMessage(method=request.method, url=url, headers=headers, body=body)
