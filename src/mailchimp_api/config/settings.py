"""Settings do cliente MailChimp lidas do ambiente.

Centraliza a leitura de env para que aplicações montem o cliente
sem espalhar parse de configuração.
"""

from __future__ import annotations

import math
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from mailchimp_api.options import DEFAULT_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from mailchimp_api.client import MailChimpClient
    from mailchimp_api.protocols import TransportProtocol


class MailChimpSettings(BaseModel):
    """Configurações do cliente MailChimp."""

    model_config = ConfigDict(extra="ignore")

    api_key: str = Field(
        default="",
        description="API key no formato <key>-<datacenter>.",
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Timeout padrão das requisições em segundos.",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verifica o certificado TLS do servidor.",
    )
    user_agent: str | None = Field(
        default=None,
        description="User-Agent customizado; None usa o identificador da biblioteca.",
    )
    load_errors: list[str] = Field(
        default_factory=list,
        description="Valores de env descartados na carga (default aplicado).",
    )

    def validate_settings(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = list(self.load_errors)

        if not self.api_key:
            errors.append("MAILCHIMP_API_KEY não configurada")
        elif "-" not in self.api_key:
            errors.append("MAILCHIMP_API_KEY sem datacenter (formato <key>-<dc>)")

        if self.request_timeout_seconds <= 0:
            errors.append("MAILCHIMP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_timeout(raw_value: str | None, load_errors: list[str]) -> float:
    """Converte o timeout da env; valor malformado usa o default e vira erro."""
    if raw_value is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw_value)
    except ValueError:
        timeout = math.nan
    if not math.isfinite(timeout):
        load_errors.append(f"MAILCHIMP_REQUEST_TIMEOUT_SECONDS inválido: {raw_value!r}")
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


def _load_mailchimp_from_env() -> MailChimpSettings:
    """Carrega MailChimpSettings a partir de variáveis de ambiente."""
    load_errors: list[str] = []
    timeout = _parse_timeout(
        _read_optional_env("MAILCHIMP_REQUEST_TIMEOUT_SECONDS"),
        load_errors,
    )
    return MailChimpSettings(
        api_key=os.getenv("MAILCHIMP_API_KEY", "").strip(),
        request_timeout_seconds=timeout,
        verify_ssl=_parse_bool(os.getenv("MAILCHIMP_VERIFY_SSL", "true")),
        user_agent=_read_optional_env("MAILCHIMP_USER_AGENT"),
        load_errors=load_errors,
    )


@lru_cache(maxsize=1)
def get_mailchimp_settings() -> MailChimpSettings:
    """Retorna instância cacheada de MailChimpSettings."""
    return _load_mailchimp_from_env()


def create_mailchimp_client(
    settings: MailChimpSettings | None = None,
    transport: TransportProtocol | None = None,
) -> MailChimpClient:
    """Factory para criar cliente MailChimp a partir das settings.

    Args:
        settings: MailChimpSettings opcional. Se None, carrega do ambiente.
        transport: Transporte HTTP opcional.

    Raises:
        InvalidCredentialError: Se a API key não tiver datacenter.
    """
    # Import local para evitar dependência circular
    from mailchimp_api.client import USER_AGENT, MailChimpClient

    mailchimp = settings or get_mailchimp_settings()
    return MailChimpClient(
        mailchimp.api_key,
        transport,
        verify=mailchimp.verify_ssl,
        timeout=mailchimp.request_timeout_seconds,
        user_agent=mailchimp.user_agent or USER_AGENT,
    )


__all__ = [
    "MailChimpSettings",
    "create_mailchimp_client",
    "get_mailchimp_settings",
]
