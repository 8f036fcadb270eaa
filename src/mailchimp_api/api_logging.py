"""Helpers de logging para a API MailChimp (sem API key nem headers)."""

from __future__ import annotations

from mailchimp_api.config.logging import LIBRARY_LOGGER_NAME, get_logger

logger = get_logger(LIBRARY_LOGGER_NAME)


def log_request(method: str, path: str, has_body: bool) -> None:
    """Loga despacho de requisição sem expor credenciais."""
    logger.debug(
        "mailchimp_request",
        extra={
            "method": method,
            "path": path,
            "has_body": has_body,
        },
    )


def log_success(method: str, path: str, status_code: int) -> None:
    """Loga resposta aprovada na validação."""
    logger.debug(
        "mailchimp_response_ok",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )


def log_response_rejected(
    method: str,
    path: str,
    status_code: int,
    reason: str,
) -> None:
    """Loga resposta reprovada; o erro continua sendo levantado ao chamador."""
    logger.debug(
        "mailchimp_response_rejected",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "reason": reason,
        },
    )
