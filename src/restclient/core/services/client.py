"""Client: coordina builder -> transporte -> resolver.

Por qué un coordinador explícito:
- Cada llamada es una pasada lineal y síncrona, con un único intento de red.
- El `Client` solo guarda configuración inmutable (transporte y
  `default_error`); la seguridad entre threads depende del transporte.
- El cliente por defecto del paquete se crea de forma perezosa y protegida
  por un lock, en lugar de ser un global implícito.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any

from restclient.adapters.http_client import HttpxTransport
from restclient.core.config import AppSettings
from restclient.core.domain.models import RestRequest, RestResponse
from restclient.core.errors import DecodeError, RestClientError, TransportError
from restclient.core.interfaces.transport import Transport
from restclient.core.services.diagnostics import log_failure
from restclient.core.services.request_builder import build
from restclient.core.services.response_resolver import resolve

logger = logging.getLogger(__name__)

# Frames desde `_execute` hasta el código del usuario
# (`_execute` -> `Client.execute`/`execute` -> caller).
_CALLER_STACKLEVEL = 3


class Client:
    """Cliente REST reutilizable.

    `default_error` es la forma usada para respuestas no 2xx cuando el
    request no declara `error`.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        default_error: Any = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._transport = transport if transport is not None else HttpxTransport(settings=settings)
        self._default_error = default_error

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def default_error(self) -> Any:
        return self._default_error

    def execute(self, request: RestRequest) -> RestResponse:
        """Ejecuta `request` y devuelve la respuesta decodificada.

        Errores:
        - `UrlParseError` / `EncodeError`: el request no se pudo construir.
        - `TransportError`: fallo de red; no se lee ningún body.
        - `DecodeError`: el body no es JSON; `exc.response` trae status y texto.
        """

        return self._execute(request, stacklevel=_CALLER_STACKLEVEL)

    def _execute(self, request: RestRequest, *, stacklevel: int) -> RestResponse:
        if request.error is None and self._default_error is not None:
            request = request.model_copy(update={"error": self._default_error})

        try:
            message = build(request)
        except RestClientError as exc:
            log_failure(logger, logging.ERROR, exc, label=request.label, stacklevel=stacklevel)
            raise

        timestamp = datetime.now(timezone.utc)
        try:
            reply = self._transport.send(message)
        except TransportError as exc:
            log_failure(
                logger,
                logging.ERROR,
                exc,
                status=exc.status,
                label=request.label,
                stacklevel=stacklevel,
            )
            raise

        response = RestResponse(
            status=reply.status,
            timestamp=timestamp,
            raw_text=reply.content.decode("utf-8", errors="replace"),
            headers=reply.headers,
            request=request,
        )
        try:
            result, error = resolve(
                reply.content,
                reply.status,
                request.result,
                request.error,
                label=request.label,
                stacklevel=stacklevel,
            )
        except DecodeError as exc:
            exc.response = response
            raise

        response.result = result
        response.error = error
        return response

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_default_client: Client | None = None
_default_lock = threading.Lock()


def get_default_client() -> Client:
    """Devuelve el cliente compartido del proceso, creándolo una sola vez."""

    global _default_client
    if _default_client is None:
        with _default_lock:
            if _default_client is None:
                _default_client = Client()
    return _default_client


def set_default_client(client: Client | None) -> None:
    """Reemplaza (o resetea con `None`) el cliente compartido."""

    global _default_client
    with _default_lock:
        _default_client = client


def execute(request: RestRequest) -> RestResponse:
    """Ejecuta `request` con el cliente compartido (ver `get_default_client`)."""

    return get_default_client()._execute(request, stacklevel=_CALLER_STACKLEVEL)


do = execute
