"""Transporte HTTP sobre httpx.

Por qué un wrapper:
- Estandariza timeouts, redirects y User-Agent desde `AppSettings`.
- Traduce excepciones de httpx a `TransportError` para que el Core no
  dependa de httpx.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from restclient.core.config import AppSettings
from restclient.core.domain.models import TransportMessage, TransportReply
from restclient.core.errors import TransportError

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los requests se comporten igual.
    - `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Implementación de `Transport` con un único intento por mensaje."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._client = client if client is not None else build_client(settings)

    def send(self, message: TransportMessage) -> TransportReply:
        try:
            request = self._client.build_request(
                message.method.value,
                message.url,
                headers=message.headers,
                content=message.body,
            )
            response = self._client.send(request)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{message.method.value} {message.url} failed: {exc}") from exc

        logger.debug("%s %s -> %s", message.method.value, message.url, response.status_code)
        return TransportReply(
            status=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self._client.close()
