"""Response Resolver: status + bytes -> cuerpo decodificado.

Política de decode:
- Cuerpo vacío: no se decodifica nada.
- 2xx va al slot `result`; cualquier otro status al slot `error`.
- Se intenta la forma declarada (`TypedBody`). Si no encaja, se loguea y se
  decodifica como JSON genérico (`GenericBody`): el caller recibe *algo*
  estructurado aunque pierda el tipo.
- Solo si el JSON genérico también falla se lanza `DecodeError`.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from restclient.adapters.json_codec import decode_generic, decode_shape
from restclient.core.domain.models import GenericBody, TypedBody
from restclient.core.errors import DecodeError, UnsupportedShapeError
from restclient.core.services.diagnostics import log_failure

logger = logging.getLogger(__name__)

DecodedPair = tuple[TypedBody | GenericBody | None, TypedBody | GenericBody | None]


def is_success(status: int) -> bool:
    return 200 <= status < 300


def resolve(
    raw: bytes,
    status: int,
    result_shape: Any = None,
    error_shape: Any = None,
    *,
    label: str | None = None,
    stacklevel: int = 1,
) -> DecodedPair:
    """Decodifica `raw` en el slot que corresponde a `status`.

    `stacklevel` sigue la convención de `logging`: 1 apunta a quien llama a
    `resolve`; valores mayores suben en la pila para reportar el caller real.
    """

    if not raw:
        return None, None

    if is_success(status):
        return _decode(raw, result_shape, status=status, label=label, stacklevel=stacklevel), None
    return None, _decode(raw, error_shape, status=status, label=label, stacklevel=stacklevel)


def _decode(
    raw: bytes,
    shape: Any,
    *,
    status: int,
    label: str | None,
    stacklevel: int,
) -> TypedBody | GenericBody:
    raw_text = raw.decode("utf-8", errors="replace")

    if shape is not None:
        try:
            return TypedBody(value=decode_shape(raw, shape))
        except (ValidationError, UnsupportedShapeError) as exc:
            log_failure(
                logger,
                logging.WARNING,
                exc,
                status=status,
                raw_text=raw_text,
                label=label,
                stacklevel=stacklevel + 2,
            )

    try:
        return GenericBody(value=decode_generic(raw))
    except ValueError as exc:
        log_failure(
            logger,
            logging.ERROR,
            exc,
            status=status,
            raw_text=raw_text,
            label=label,
            stacklevel=stacklevel + 2,
        )
        raise DecodeError(
            f"response body is not valid JSON: {exc}",
            status=status,
            raw_text=raw_text,
        ) from exc
