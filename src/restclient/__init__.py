"""restclient: cliente mínimo para APIs REST con JSON.

Uso:

    from restclient import Client, Method, RestRequest

    with Client() as client:
        resp = client.execute(RestRequest(url="https://api.test/items", params={"q": "shoes"}))

`restclient.execute`/`restclient.do` usan un cliente compartido creado de
forma perezosa.
"""

from restclient.core.domain.models import (
    BasicAuth,
    GenericBody,
    Method,
    RestRequest,
    RestResponse,
    TypedBody,
)
from restclient.core.errors import (
    DecodeError,
    EncodeError,
    RestClientError,
    TransportError,
    UrlParseError,
)
from restclient.core.services.client import (
    Client,
    do,
    execute,
    get_default_client,
    set_default_client,
)

__all__ = [
    "BasicAuth",
    "Client",
    "DecodeError",
    "EncodeError",
    "GenericBody",
    "Method",
    "RestClientError",
    "RestRequest",
    "RestResponse",
    "TransportError",
    "TypedBody",
    "UrlParseError",
    "do",
    "execute",
    "get_default_client",
    "set_default_client",
]
