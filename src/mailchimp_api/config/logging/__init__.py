"""Logging estruturado JSON (python-json-logger) do cliente MailChimp.

Uso:
    from mailchimp_api.config.logging import configure_logging

    configure_logging(level="DEBUG", service_name="newsletter_worker")
"""

from mailchimp_api.config.logging.config import LIBRARY_LOGGER_NAME, configure_logging, get_logger
from mailchimp_api.config.logging.filters import CorrelationIdFilter, redact_api_key
from mailchimp_api.config.logging.formatters import (
    FIELD_RENAME_MAP,
    MAILCHIMP_LOG_FIELDS,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "LIBRARY_LOGGER_NAME",
    "MAILCHIMP_LOG_FIELDS",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_api_key",
]
