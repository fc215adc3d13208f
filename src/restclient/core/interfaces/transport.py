"""Contrato del transporte HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir httpx por un fake en tests sin tocar el Core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from restclient.core.domain.models import TransportMessage, TransportReply


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo para enviar un mensaje.

    Reglas de diseño:
    - `send` es síncrono y hace un único intento.
    - Fallos de red se reportan como `restclient.core.errors.TransportError`.
    - Timeouts, TLS, redirects y pooling son responsabilidad del transporte.
    """

    def send(self, message: TransportMessage) -> TransportReply:
        """Envía `message` y devuelve status + bytes."""

        ...
