"""Diagnóstico de fallos de un request.

El archivo/línea del caller lo añade `logging` (vía `stacklevel`); aquí solo
se emite el registro con status, label y cuerpo crudo como argumentos.
"""

from __future__ import annotations

import logging

FAILURE_FORMAT = (
    "Error executing REST request:\n"
    "    --> Label: %s\n"
    "    --> Got status %s\n"
    "    --> Raw text of server response: %s\n"
    "    --> %s"
)


def log_failure(
    logger: logging.Logger,
    level: int,
    error: BaseException,
    *,
    status: int | None = None,
    raw_text: str = "",
    label: str | None = None,
    stacklevel: int = 1,
) -> None:
    """Registra un fallo; `stacklevel=1` apunta a quien llama a esta función."""

    logger.log(
        level,
        FAILURE_FORMAT,
        label or "-",
        status if status is not None else "n/a",
        raw_text,
        error,
        stacklevel=stacklevel + 1,
    )
