"""Exceções do cliente MailChimp.

Toda falha chega ao chamador de forma síncrona, sem ser engolida:
- argumentos inválidos são rejeitados antes de qualquer IO
- falhas de transporte encadeiam a exceção original (``raise ... from``)
- respostas reprovadas na validação carregam a resposta normalizada
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mailchimp_api.response import MailChimpResponse


class MailChimpError(Exception):
    """Base para todos os erros do cliente."""


class InvalidArgumentError(MailChimpError, ValueError):
    """Argumento com tipo inválido em um setter/getter público."""


class InvalidCredentialError(MailChimpError, ValueError):
    """API key sem o separador de datacenter."""


class UnsupportedMethodError(InvalidArgumentError):
    """Método HTTP fora do conjunto reconhecido."""

    def __init__(self, method: str, valid_methods: tuple[str, ...]) -> None:
        super().__init__(
            f'"{method}" is not a valid HTTP method: '
            f"available methods are {', '.join(valid_methods)}."
        )
        self.method = method
        self.valid_methods = valid_methods


class TransportError(MailChimpError):
    """Transporte não conseguiu completar a troca HTTP (rede, DNS, timeout)."""


class ResponseError(MailChimpError):
    """Troca HTTP completa, mas reprovada na validação.

    Attributes:
        response: Resposta normalizada (status, headers, body) para inspeção.
    """

    def __init__(self, response: MailChimpResponse) -> None:
        super().__init__(_describe(response))
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.response.headers

    @property
    def body(self) -> Any:
        return self.response.body


def expects_type_message(operation: str, kind: str, value: object) -> str:
    """Mensagem padrão para argumentos com tipo errado."""
    return f'{operation}: expects a {kind} argument; received "{type(value).__name__}"'


def _describe(response: MailChimpResponse) -> str:
    message = f"MailChimp API error (HTTP {response.status_code})"
    body = response.body
    if isinstance(body, dict):
        title = body.get("title")
        detail = body.get("detail")
        if title and detail:
            return f"{message}: {title} - {detail}"
        if title or detail:
            return f"{message}: {title or detail}"
    return message
