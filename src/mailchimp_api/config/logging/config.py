"""Configuração opcional de logging JSON para aplicações que usam o cliente.

A biblioteca nunca chama ``configure_logging``; seus módulos apenas obtêm
loggers via ``get_logger`` (sempre sob ``mailchimp_api``) e emitem records
DEBUG. Aplicações chamam uma vez no bootstrap:

    from mailchimp_api.config.logging import configure_logging

    # Logger raiz inteiro em JSON
    configure_logging(level="DEBUG", service_name="newsletter_worker")

    # Ou só os records do cliente, sem tocar no logger raiz
    configure_logging(level="DEBUG", logger_name="mailchimp_api")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mailchimp_api.config.logging.filters import CorrelationIdFilter
from mailchimp_api.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "mailchimp_api"
LIBRARY_LOGGER_NAME = "mailchimp_api"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    *,
    logger_name: str | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).
        logger_name: Logger alvo. None configura o logger raiz; um nome
            (ex: ``LIBRARY_LOGGER_NAME``) configura só esse logger e
            desliga a propagação para o raiz.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    target = logging.getLogger(logger_name)
    target.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    target.handlers = [handler]
    if logger_name is not None:
        target.propagate = False


def get_logger(name: str = LIBRARY_LOGGER_NAME) -> logging.Logger:
    """Retorna logger sob o namespace ``mailchimp_api``.

    Nomes fora do namespace são prefixados, para que ``configure_logging``
    com ``logger_name=LIBRARY_LOGGER_NAME`` alcance todos os records.
    """
    if name != LIBRARY_LOGGER_NAME and not name.startswith(f"{LIBRARY_LOGGER_NAME}."):
        name = f"{LIBRARY_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
