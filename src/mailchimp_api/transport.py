"""Transporte HTTP padrão baseado em httpx."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from mailchimp_api.config.logging import get_logger
from mailchimp_api.errors import TransportError
from mailchimp_api.protocols import RawResponse

if TYPE_CHECKING:
    from mailchimp_api.options import RequestOptions

logger = get_logger(__name__)

# Opções de httpx.AsyncClient.request aceitas como chaves extras
PASSTHROUGH_OPTIONS = frozenset(
    {
        "auth",
        "content",
        "cookies",
        "data",
        "extensions",
        "files",
        "follow_redirects",
        "params",
    }
)

# Alias aceito para a query string, ex: {"query": {"count": 10}}
QUERY_ALIAS = "query"


class HttpxTransport:
    """Envia requisições com ``httpx.AsyncClient``, um cliente por chamada.

    Respostas 4xx/5xx são devolvidas como ``RawResponse`` comum; só falhas
    sem resposta (conexão, DNS, timeout, protocolo) viram ``TransportError``.
    """

    def __init__(self, mount: httpx.AsyncBaseTransport | None = None) -> None:
        """Inicializa transporte.

        Args:
            mount: Transporte httpx de baixo nível opcional
                (ex: ``httpx.MockTransport`` em testes).
        """
        self._mount = mount

    async def send(
        self,
        method: str,
        url: str,
        options: RequestOptions,
    ) -> RawResponse:
        request_kwargs = _passthrough_kwargs(method, options.extra)
        request_kwargs["headers"] = _stringify_headers(options.headers)
        request_kwargs["timeout"] = options.timeout
        if options.has_json:
            request_kwargs["json"] = options.json

        try:
            async with httpx.AsyncClient(verify=options.verify, transport=self._mount) as client:
                response = await client.request(method, url, **request_kwargs)
        except httpx.HTTPStatusError as exc:
            # Auth flows ou transportes montados podem levantar raise_for_status
            response = exc.response
        except httpx.HTTPError as exc:
            logger.debug(
                "mailchimp_transport_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise TransportError(f"{method} request failed: {type(exc).__name__}") from exc

        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=_read_content(response),
        )


def _read_content(response: httpx.Response) -> bytes:
    try:
        return response.content
    except httpx.ResponseNotRead:
        # Hook levantou antes da leitura; httpx já fechou o stream
        return b""


def _stringify_headers(headers: dict[str, Any]) -> dict[str, str]:
    return {key: value if isinstance(value, str) else str(value) for key, value in headers.items()}


def _passthrough_kwargs(method: str, extra: dict[str, Any]) -> dict[str, Any]:
    """Filtra as opções extras para as que ``AsyncClient.request`` aceita.

    ``query`` vira ``params`` quando ``params`` não foi informado; demais
    chaves desconhecidas são descartadas com um record DEBUG.
    """
    kwargs: dict[str, Any] = {}
    for key, value in extra.items():
        if key in PASSTHROUGH_OPTIONS:
            kwargs[key] = value
        elif key == QUERY_ALIAS and "params" not in extra:
            kwargs["params"] = value
        else:
            logger.debug(
                "mailchimp_option_ignored",
                extra={"method": method, "option": key},
            )
    return kwargs
