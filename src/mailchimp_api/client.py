"""Cliente da API MailChimp v3.

Resolve o endpoint do datacenter a partir da API key, mescla headers e
opções, aplica a política de métodos HTTP e delega o envio ao transporte.
Toda resposta passa por ``format_response`` antes de voltar ao chamador.

Uso:
    client = MailChimpClient("abc123-us6")
    response = await client.get("lists", {"params": {"count": 10}})
    response.body["lists"]
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mailchimp_api import __version__
from mailchimp_api.api_logging import log_request
from mailchimp_api.errors import (
    InvalidArgumentError,
    InvalidCredentialError,
    UnsupportedMethodError,
    expects_type_message,
)
from mailchimp_api.options import (
    DEFAULT_TIMEOUT_SECONDS,
    build_request_options,
    coerce_args,
    deep_merge,
)
from mailchimp_api.response import format_response

if TYPE_CHECKING:
    from mailchimp_api.options import RequestArgsLike
    from mailchimp_api.protocols import TransportProtocol
    from mailchimp_api.response import MailChimpResponse

API_URL_TEMPLATE = "https://%s.api.mailchimp.com/3.0"
API_KEY_SEPARATOR = "-"
USER_AGENT = f"mailchimp-api-python/{__version__}"

VALID_METHODS: tuple[str, ...] = ("DELETE", "GET", "PATCH", "POST", "PUT")
BODY_METHODS = frozenset({"PATCH", "POST", "PUT"})


class MailChimpClient:
    """Cliente assíncrono, agnóstico de recurso, para a API MailChimp.

    Uma instância por API key, reutilizada entre chamadas. Headers,
    credencial e flag TLS não são sincronizados: mutações concorrentes
    com requisições em voo devem ser serializadas pelo chamador.
    """

    def __init__(
        self,
        api_key: str,
        transport: TransportProtocol | None = None,
        *,
        verify: bool = True,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
    ) -> None:
        """Inicializa cliente.

        Args:
            api_key: API key no formato ``<key>-<datacenter>``
            transport: Transporte HTTP; ``HttpxTransport`` se None
            verify: Verifica certificado do servidor
            timeout: Timeout padrão em segundos
            user_agent: Valor do header User-Agent

        Raises:
            InvalidArgumentError: Se api_key não for string
            InvalidCredentialError: Se api_key não tiver datacenter
        """
        self._api_key = ""
        self._endpoint: str | None = None
        self._headers: dict[str, Any] = {}
        self._verify = True
        self._timeout = timeout
        self._transport = transport

        self.set_api_key(api_key)
        self.set_headers(self.default_headers(user_agent))
        self.set_verify(verify)

    # Credencial e endpoint

    @property
    def api_key(self) -> str:
        return self._api_key

    def set_api_key(self, api_key: str) -> None:
        """Valida e armazena a API key; invalida o endpoint em cache."""
        if not isinstance(api_key, str):
            raise InvalidArgumentError(expects_type_message("set_api_key", "string", api_key))
        if API_KEY_SEPARATOR not in api_key:
            raise InvalidCredentialError("Invalid MailChimp API key supplied.")
        self._api_key = api_key
        self._endpoint = None

    @property
    def endpoint(self) -> str:
        """URL base da API para o datacenter da API key (memoizada)."""
        if self._endpoint is None:
            # Só o segundo segmento conta: "a-us6-x" resolve para "us6"
            datacenter = self._api_key.split(API_KEY_SEPARATOR)[1]
            self._endpoint = API_URL_TEMPLATE % datacenter
        return self._endpoint

    def get_endpoint(self) -> str:
        return self.endpoint

    # Headers

    @staticmethod
    def default_headers(user_agent: str = USER_AGENT) -> dict[str, str]:
        return {
            "Accept": "application/vnd.api+json",
            "Content-Type": "application/vnd.api+json",
            "User-Agent": user_agent,
        }

    def get_headers(self, key: str | None = None) -> dict[str, Any] | Any:
        """Retorna todos os headers, ou o valor de ``key`` ("" se ausente)."""
        if key is None:
            return dict(self._headers)
        if not isinstance(key, str):
            raise InvalidArgumentError(expects_type_message("get_headers", "string", key))
        return self._headers.get(key, "")

    def set_headers(self, headers: Mapping[str, Any]) -> None:
        for key, value in headers.items():
            self.set_header(key, value)

    def set_header(self, key: str, value: Any) -> None:
        if not isinstance(key, str):
            raise InvalidArgumentError(expects_type_message("set_header", "string", key))
        self._headers[key] = value

    # TLS

    @property
    def verify(self) -> bool:
        return self._verify

    def set_verify(self, verify: bool) -> None:
        if not isinstance(verify, bool):
            raise InvalidArgumentError(expects_type_message("set_verify", "bool", verify))
        self._verify = verify

    # Transporte

    @property
    def transport(self) -> TransportProtocol:
        if self._transport is None:
            from mailchimp_api.transport import HttpxTransport

            self._transport = HttpxTransport()
        return self._transport

    # Política de métodos

    @staticmethod
    def valid_methods() -> tuple[str, ...]:
        return VALID_METHODS

    @staticmethod
    def is_valid_method(method: str) -> bool:
        if not isinstance(method, str):
            raise InvalidArgumentError(expects_type_message("is_valid_method", "string", method))
        return method in VALID_METHODS

    @staticmethod
    def body_allowed(method: str) -> bool:
        if not isinstance(method, str):
            raise InvalidArgumentError(expects_type_message("body_allowed", "string", method))
        return method in BODY_METHODS

    # Verbos

    async def get(self, path: str, args: RequestArgsLike = None) -> MailChimpResponse:
        return await self.request("GET", path, args)

    async def post(self, path: str, args: RequestArgsLike = None) -> MailChimpResponse:
        return await self.request("POST", path, args)

    async def put(self, path: str, args: RequestArgsLike = None) -> MailChimpResponse:
        return await self.request("PUT", path, args)

    async def patch(self, path: str, args: RequestArgsLike = None) -> MailChimpResponse:
        return await self.request("PATCH", path, args)

    async def delete(self, path: str, args: RequestArgsLike = None) -> MailChimpResponse:
        return await self.request("DELETE", path, args)

    async def request(
        self,
        method: str,
        path: str,
        args: RequestArgsLike = None,
    ) -> MailChimpResponse:
        """Executa uma requisição e valida a resposta.

        Args:
            method: Um de ``VALID_METHODS``
            path: Caminho relativo ao endpoint, sem barra inicial (ex: "lists")
            args: Opções (body, headers, timeout, verify, extras do transporte)

        Returns:
            Resposta normalizada com HTTP 200.

        Raises:
            UnsupportedMethodError: Se o método não for reconhecido
            InvalidArgumentError: Se method não for string ou args inválidos
            TransportError: Se o transporte não completar a troca
            ResponseError: Se a resposta for reprovada na validação
        """
        if not self.is_valid_method(method):
            raise UnsupportedMethodError(method, VALID_METHODS)

        caller_args = coerce_args(args)
        authorization = f"apikey {self._api_key}"
        self.set_header("Authorization", authorization)

        url = f"{self.endpoint}/{path}"
        defaults: dict[str, Any] = {
            "headers": self.get_headers(),
            "timeout": self._timeout,
            "verify": self.verify,
        }
        merged = deep_merge(defaults, caller_args)
        # Autenticação não pode ser sobrescrita pelo chamador
        headers = {
            key: value
            for key, value in merged["headers"].items()
            if key.lower() != "authorization"
        }
        headers["Authorization"] = authorization
        merged["headers"] = headers

        body_allowed = self.body_allowed(method)
        options = build_request_options(merged, body_allowed=body_allowed)

        log_request(method, path, options.has_json)
        raw = await self.transport.send(method, url, options)
        return format_response(raw, method, path)
