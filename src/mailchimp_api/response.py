"""Resposta normalizada da API MailChimp e validação em dois níveis."""

from __future__ import annotations

import codecs
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from mailchimp_api.api_logging import log_response_rejected, log_success
from mailchimp_api.config.logging import get_logger
from mailchimp_api.errors import ResponseError

if TYPE_CHECKING:
    from mailchimp_api.protocols import RawResponse

logger = get_logger(__name__)

SUCCESS_STATUS = 200


@dataclass(frozen=True, slots=True)
class MailChimpResponse:
    """Valor imutável com status, headers e body decodificado.

    Attributes:
        status_code: Status HTTP da resposta
        headers: Headers como recebidos do transporte (somente leitura)
        body: Estrutura JSON decodificada, ou texto bruto se não for JSON
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_raw(cls, raw: RawResponse) -> MailChimpResponse:
        """Normaliza a resposta bruta do transporte."""
        headers = dict(raw.headers)
        return cls(
            status_code=raw.status_code,
            headers=headers,
            body=_decode_body(raw.content, headers),
        )

    def get_header(self, name: str, default: str = "") -> str:
        """Retorna um header sem diferenciar maiúsculas/minúsculas."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    def to_dict(self) -> dict[str, Any]:
        return {
            "status_code": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


def format_response(raw: RawResponse, method: str = "", path: str = "") -> MailChimpResponse:
    """Normaliza e valida a resposta.

    Sucesso exige HTTP 200 exato e, quando o body traz um campo ``status``
    inteiro, que ele também seja 200. Outros 2xx (201, 204...) são erro.

    Raises:
        ResponseError: Se a resposta for reprovada em qualquer um dos níveis.
    """
    response = MailChimpResponse.from_raw(raw)

    if response.status_code != SUCCESS_STATUS:
        log_response_rejected(method, path, response.status_code, reason="http_status")
        raise ResponseError(response)

    embedded = _embedded_status(response.body)
    if embedded is not None and embedded != SUCCESS_STATUS:
        log_response_rejected(method, path, response.status_code, reason="embedded_status")
        raise ResponseError(response)

    log_success(method, path, response.status_code)
    return response


def _embedded_status(body: Any) -> int | None:
    if not isinstance(body, dict):
        return None
    status = body.get("status")
    # bool é subclasse de int, mas não é um status
    if isinstance(status, int) and not isinstance(status, bool):
        return status
    return None


def _decode_body(content: bytes, headers: dict[str, str]) -> Any:
    if not content:
        return ""
    try:
        return json.loads(content)
    except ValueError:
        return content.decode(_charset(headers), errors="replace")


def _charset(headers: dict[str, str]) -> str:
    content_type = ""
    for key, value in headers.items():
        if key.lower() == "content-type":
            content_type = value
            break
    for part in content_type.split(";")[1:]:
        name, _, value = part.strip().partition("=")
        if name.lower() == "charset" and value:
            charset = value.strip("\"'")
            try:
                codecs.lookup(charset)
            except LookupError:
                logger.debug("mailchimp_unknown_charset", extra={"charset": charset})
                break
            return charset
    return "utf-8"
