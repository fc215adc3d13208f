"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los descriptores son datos puros: describen *qué* se pide y *qué* se
  recibió, nunca *cómo* se envía.

Nota:
- `result`/`error` en `RestRequest` son *formas* de destino (una clase
  pydantic, `list[Item]`, `dict[str, int]`...), no instancias a mutar.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Method(str, Enum):
    """Verbos HTTP soportados."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class BasicAuth(BaseModel):
    """Credenciales HTTP Basic opcionales de un request."""

    username: str = Field(..., description="Usuario para HTTP Basic.")
    password: str = Field(default="", description="Password (puede ser vacío).")


class RestRequest(BaseModel):
    """Describe un request a ejecutar y las formas donde decodificar la respuesta.

    Reglas:
    - `params` solo se aplica en GET; en otros métodos se ignora en silencio.
    - `data=None` significa "sin body".
    - `error=None` hace que el `Client` use su `default_error`.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    url: str = Field(..., min_length=1, description="URL cruda (absoluta).")
    method: Method = Field(default=Method.GET, description="Verbo HTTP.")
    userinfo: BasicAuth | None = Field(
        default=None,
        description="Usuario/password para autenticar con HTTP Basic.",
    )
    params: dict[str, str | int | float | bool] | None = Field(
        default=None,
        description="Parámetros de query para GET (ignorados en otros métodos).",
    )
    headers: dict[str, str] | None = Field(
        default=None,
        description="Headers que sobrescriben los defaults.",
    )
    data: Any = Field(default=None, description="Payload a codificar como JSON.")
    result: Any = Field(
        default=None,
        description="Forma de destino para respuestas 2xx (None = genérico).",
    )
    error: Any = Field(
        default=None,
        description="Forma de destino para respuestas no 2xx (None = default del Client).",
    )
    label: str | None = Field(
        default=None,
        description="Etiqueta/correlation id del caller, se incluye en los logs.",
    )


class TypedBody(BaseModel):
    """Cuerpo decodificado respetando la forma declarada."""

    kind: Literal["typed"] = "typed"
    value: Any = None


class GenericBody(BaseModel):
    """Cuerpo decodificado como árbol JSON sin tipo (fallback)."""

    kind: Literal["generic"] = "generic"
    value: Any = None


DecodedBody = Annotated[Union[TypedBody, GenericBody], Field(discriminator="kind")]


class RestResponse(BaseModel):
    """Resultado de ejecutar un `RestRequest`.

    Invariante: como mucho uno de `result`/`error` está poblado, elegido solo
    por el rango del status.
    """

    status: int = Field(..., description="Status HTTP.")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de ejecución (UTC).",
    )
    result: DecodedBody | None = Field(default=None, description="Body decodificado (2xx).")
    error: DecodedBody | None = Field(default=None, description="Body decodificado (no 2xx).")
    raw_text: str = Field(default="", description="Texto crudo de la respuesta.")
    headers: dict[str, str] = Field(default_factory=dict, description="Headers de la respuesta.")
    request: RestRequest

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class TransportMessage(BaseModel):
    """Mensaje listo para el transporte (sin I/O asociado)."""

    method: Method
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes | None = None


class TransportReply(BaseModel):
    """Respuesta cruda del transporte."""

    status: int
    content: bytes = b""
    headers: dict[str, str] = Field(default_factory=dict)
