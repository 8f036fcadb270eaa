"""Formatter JSON para os records do cliente MailChimp.

Todo record sai com os campos base (asctime, level, logger, message,
correlation_id, service) e com os campos de requisição do cliente
(method, path, status_code, reason, has_body), nulos quando ausentes.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Campos emitidos via ``extra`` por mailchimp_api.api_logging
MAILCHIMP_LOG_FIELDS = ("method", "path", "status_code", "reason", "has_body")

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos base e campos de requisição.

    Exemplo de output de uma resposta reprovada:
        {
            "asctime": "2026-10-17 10:30:00,123",
            "correlation_id": "abc-123",
            "level": "DEBUG",
            "logger": "mailchimp_api",
            "message": "mailchimp_response_rejected",
            "service": "mailchimp_api",
            "method": "GET",
            "path": "lists/x",
            "status_code": 404,
            "reason": "http_status",
            "has_body": null
        }
    """
    fields = [*sorted(REQUIRED_LOG_FIELDS), *MAILCHIMP_LOG_FIELDS]
    return JsonFormatter(
        " ".join(f"%({field})s" for field in fields),
        rename_fields=FIELD_RENAME_MAP,
    )
