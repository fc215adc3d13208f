"""Errores del pipeline request/response.

Por qué una jerarquía propia:
- Los errores estructurales (URL, encode, transporte) abortan la llamada.
- `DecodeError` solo aparece cuando incluso el decode genérico falla.
- Los callers pueden capturar `RestClientError` sin conocer httpx ni pydantic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from restclient.core.domain.models import RestResponse


class RestClientError(Exception):
    """Base de todos los errores del cliente."""


class UrlParseError(RestClientError, ValueError):
    """La URL destino no es válida (sin esquema/host, puerto inválido, etc.)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"invalid url {url!r}: {reason}")
        self.url = url
        self.reason = reason


class EncodeError(RestClientError, TypeError):
    """El payload no se pudo serializar a JSON."""


class UnsupportedShapeError(RestClientError, TypeError):
    """pydantic no sabe construir un schema para la forma de destino.

    El resolver la trata como un decode tipado fallido y cae al genérico.
    """


class TransportError(RestClientError):
    """Fallo de red (DNS, conexión, TLS, timeout)."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class DecodeError(RestClientError, ValueError):
    """El cuerpo de la respuesta no es JSON, ni siquiera en modo genérico."""

    def __init__(self, message: str, *, status: int, raw_text: str) -> None:
        super().__init__(message)
        self.status = status
        self.raw_text = raw_text
        self.response: RestResponse | None = None
