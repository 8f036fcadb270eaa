"""Contratos do transporte HTTP usado pelo cliente.

O cliente depende apenas deste protocolo; a implementação padrão
(httpx) fica em ``mailchimp_api.transport`` e pode ser substituída
por qualquer objeto compatível (ex: fakes em testes).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mailchimp_api.options import RequestOptions


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Resposta bruta do transporte, independente da biblioteca HTTP."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes = b""


class TransportProtocol(Protocol):
    """Contrato mínimo para o transporte HTTP.

    Respostas com status não-2xx devem ser devolvidas como ``RawResponse``
    comum. Falhas sem resposta (conexão, DNS, timeout) levantam
    ``TransportError``.
    """

    async def send(
        self,
        method: str,
        url: str,
        options: RequestOptions,
    ) -> RawResponse: ...
