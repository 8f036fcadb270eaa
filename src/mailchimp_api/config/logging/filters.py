"""Filter de logging do cliente: contexto de correlação e redação da API key."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# "apikey <key>-<dc>" como enviado no header Authorization
_API_KEY_PATTERN = re.compile(r"(apikey\s+)\S+", re.IGNORECASE)
REDACTED = "***"


def redact_api_key(text: str) -> str:
    return _API_KEY_PATTERN.sub(rf"\g<1>{REDACTED}", text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service e remove API keys da mensagem.

    Se correlation_id já veio via ``extra``, o valor é preservado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name

        message = record.getMessage()
        redacted = redact_api_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True
