"""Opções por requisição: argumentos do chamador e opções finais do transporte."""

from __future__ import annotations

import ssl
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mailchimp_api.errors import InvalidArgumentError, expects_type_message

DEFAULT_TIMEOUT_SECONDS: float = 10.0


class RequestArgs(BaseModel):
    """Argumentos aceitos por ``request`` e pelos verbos HTTP.

    Chaves fora dos campos declarados são repassadas ao transporte
    (ex: ``params`` para query string no httpx).
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    body: Any = Field(default=None, description="Valor a codificar como JSON.")
    headers: dict[str, Any] | None = Field(
        default=None,
        description="Headers que sobrescrevem os headers do cliente.",
    )
    timeout: float | None = Field(default=None, gt=0, description="Timeout em segundos.")
    verify: bool | ssl.SSLContext | None = Field(
        default=None,
        description="Verificação TLS (bool) ou ``ssl.SSLContext`` com CA próprio.",
    )


RequestArgsLike = RequestArgs | Mapping[str, Any] | None


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Opções finais entregues ao transporte.

    Attributes:
        headers: Headers finais, já com Authorization
        timeout: Timeout em segundos (None desativa)
        verify: Verificação TLS do peer remoto
        json: Body a codificar como JSON; None quando o método não leva body
        extra: Opções repassadas ao transporte sem interpretação
    """

    headers: dict[str, Any] = field(default_factory=dict)
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS
    verify: bool | ssl.SSLContext = True
    json: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def has_json(self) -> bool:
        return self.json is not None


def coerce_args(args: RequestArgsLike) -> dict[str, Any]:
    """Valida os argumentos do chamador e retorna apenas as chaves informadas.

    Raises:
        InvalidArgumentError: Se os argumentos não forem um mapping válido.
    """
    if args is None:
        return {}
    if isinstance(args, RequestArgs):
        validated = args
    elif isinstance(args, Mapping):
        try:
            validated = RequestArgs.model_validate(dict(args))
        except ValidationError as exc:
            raise InvalidArgumentError(
                f"request: invalid options ({exc.error_count()} errors)"
            ) from exc
    else:
        raise InvalidArgumentError(expects_type_message("request", "mapping", args))

    dumped = validated.model_dump(exclude_unset=True)
    # headers=None equivale a não informar headers
    if "headers" in dumped and dumped["headers"] is None:
        del dumped["headers"]
    return dumped


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Mescla recursivamente; ``override`` vence em todos os níveis.

    Chaves irmãs ausentes em ``override`` são preservadas. Nenhum dos
    mappings de entrada é alterado.
    """
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def build_request_options(merged: Mapping[str, Any], *, body_allowed: bool) -> RequestOptions:
    """Converte o dicionário mesclado em ``RequestOptions``.

    A chave ``body`` nunca chega ao transporte: vira ``json`` para métodos
    com body (string vazia quando ausente) e é descartada nos demais.
    """
    remaining = dict(merged)
    body = remaining.pop("body", None)
    headers = dict(remaining.pop("headers", None) or {})
    timeout = remaining.pop("timeout", DEFAULT_TIMEOUT_SECONDS)
    verify = remaining.pop("verify", True)

    json_body = None
    if body_allowed:
        json_body = "" if body is None else body

    return RequestOptions(
        headers=headers,
        timeout=timeout,
        verify=True if verify is None else verify,
        json=json_body,
        extra=remaining,
    )
