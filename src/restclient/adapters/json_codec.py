"""Codec JSON del cliente.

Por qué separado del Core:
- Encode con `json` (formato compacto, estable) y decode tipado con
  `pydantic.TypeAdapter`, que acepta cualquier forma: modelos, `list[...]`,
  `dict[...]`, escalares.
- El resolver decide la política de fallback; aquí solo hay conversiones.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic.errors import PydanticUserError

from restclient.core.errors import EncodeError, UnsupportedShapeError


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_json(value: Any) -> bytes:
    """Serializa `value` a JSON compacto UTF-8.

    Modelos pydantic (también anidados) se vuelcan en modo JSON. NaN/Infinity
    no son JSON válido y se rechazan, igual que surrogates sueltos que no
    tienen representación UTF-8.
    """

    try:
        text = json.dumps(
            value,
            default=_default,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
        return text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        # UnicodeEncodeError es un ValueError.
        raise EncodeError(f"payload is not JSON serializable: {exc}") from exc


def decode_shape(raw: bytes, shape: Any) -> Any:
    """Valida `raw` contra `shape`.

    Propaga `ValidationError` si el JSON no encaja; si pydantic no sabe
    construir un schema para `shape` lanza `UnsupportedShapeError`.
    """

    try:
        adapter = TypeAdapter(shape)
        return adapter.validate_json(raw)
    except PydanticUserError as exc:
        raise UnsupportedShapeError(f"cannot decode into {shape!r}: {exc}") from exc


def decode_generic(raw: bytes) -> Any:
    """Decodifica a árbol JSON sin tipo (dict/list/escalares)."""

    return json.loads(raw)
