"""Testes para mailchimp_api.config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter, redact_api_key,
create_json_formatter e os records emitidos pelo cliente.
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from mailchimp_api import MailChimpClient, ResponseError
from mailchimp_api.config.logging import (
    FIELD_RENAME_MAP,
    LIBRARY_LOGGER_NAME,
    MAILCHIMP_LOG_FIELDS,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    redact_api_key,
)
from mailchimp_api.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from tests.fakes.fake_transport import FakeTransport, json_response


@pytest.fixture(autouse=True)
def _restore_loggers() -> Iterator[None]:
    root = logging.getLogger()
    library = logging.getLogger(LIBRARY_LOGGER_NAME)
    saved = [
        (logger, list(logger.handlers), logger.level, logger.propagate)
        for logger in (root, library)
    ]
    yield
    for logger, handlers, level, propagate in saved:
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


def _record(msg: str = "msg", level: int = logging.INFO, args: tuple = ()) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


def _capture(logger_name: str | None = None) -> io.StringIO:
    stream = io.StringIO()
    handler = logging.getLogger(logger_name).handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    handler.setStream(stream)
    return stream


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_configure_library_logger_only(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        configure_logging(level="DEBUG", logger_name=LIBRARY_LOGGER_NAME)
        library = logging.getLogger(LIBRARY_LOGGER_NAME)
        assert library.level == logging.DEBUG
        assert len(library.handlers) == 1
        assert library.propagate is False
        assert logging.getLogger().handlers == root_handlers

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "mailchimp_api"
        assert LIBRARY_LOGGER_NAME == "mailchimp_api"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_defaults_to_library_logger(self) -> None:
        assert get_logger() is logging.getLogger(LIBRARY_LOGGER_NAME)

    def test_get_logger_keeps_library_module_names(self) -> None:
        logger = get_logger("mailchimp_api.transport")
        assert logger.name == "mailchimp_api.transport"
        assert get_logger("mailchimp_api.transport") is logger

    def test_get_logger_prefixes_foreign_names(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "mailchimp_api.test.module"

    def test_library_modules_log_under_namespace(self) -> None:
        from mailchimp_api import api_logging, response, transport

        assert api_logging.logger.name == LIBRARY_LOGGER_NAME
        assert response.logger.name == "mailchimp_api.response"
        assert transport.logger.name == "mailchimp_api.transport"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name")
        record = _record(level=logging.ERROR)
        assert filter_.filter(record) is True
        assert record.correlation_id == ""

    def test_filter_redacts_api_key_in_message_args(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record("header: %s", args=("apikey secret123-us6",))
        filter_.filter(record)
        assert record.getMessage() == "header: apikey ***"

    def test_filter_keeps_message_without_key(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record("lists %s", args=("ok",))
        filter_.filter(record)
        assert record.msg == "lists %s"
        assert record.args == ("ok",)


class TestRedactApiKey:
    """Testes para redact_api_key."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Authorization: apikey secret-us6", "Authorization: apikey ***"),
            ("APIKEY abc-us19 trailing", "APIKEY *** trailing"),
            ("nothing to hide", "nothing to hide"),
        ],
    )
    def test_redact(self, text: str, expected: str) -> None:
        assert redact_api_key(text) == expected


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert expected == REQUIRED_LOG_FIELDS

    def test_mailchimp_log_fields_content(self) -> None:
        assert MAILCHIMP_LOG_FIELDS == ("method", "path", "status_code", "reason", "has_body")

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        formatter = create_json_formatter()
        record = _record("Test message")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        payload = json.loads(formatter.format(record))
        assert payload["message"] == "Test message"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"
        assert payload["service"] == "test_service"

    def test_json_formatter_renders_rejected_response_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record("mailchimp_response_rejected", level=logging.DEBUG)
        record.method = "GET"
        record.path = "lists/x"
        record.status_code = 404
        record.reason = "http_status"
        payload = json.loads(formatter.format(record))
        assert payload["method"] == "GET"
        assert payload["path"] == "lists/x"
        assert payload["status_code"] == 404
        assert payload["reason"] == "http_status"
        assert payload["has_body"] is None


class TestClientLogging:
    """Records emitidos pelo cliente durante uma requisição."""

    @pytest.mark.asyncio
    async def test_request_logs_are_json_and_hide_api_key(self) -> None:
        configure_logging(level="DEBUG", service_name="newsletter", correlation_id_getter=lambda: "c-1")
        stream = _capture()

        client = MailChimpClient("secret123-us6", FakeTransport(json_response(200)))
        await client.get("lists")

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        messages = [line["message"] for line in lines]
        assert "mailchimp_request" in messages
        assert "mailchimp_response_ok" in messages
        assert all(line["service"] == "newsletter" for line in lines)
        assert all(line["correlation_id"] == "c-1" for line in lines)
        assert "secret123" not in stream.getvalue()

    @pytest.mark.asyncio
    async def test_rejected_response_record_carries_request_fields(self) -> None:
        configure_logging(level="DEBUG", logger_name=LIBRARY_LOGGER_NAME)
        stream = _capture(LIBRARY_LOGGER_NAME)

        client = MailChimpClient("secret123-us6", FakeTransport(json_response(404)))
        with pytest.raises(ResponseError, match="HTTP 404"):
            await client.get("lists/x")

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        rejected = next(line for line in lines if line["message"] == "mailchimp_response_rejected")
        assert rejected["method"] == "GET"
        assert rejected["path"] == "lists/x"
        assert rejected["status_code"] == 404
        assert rejected["reason"] == "http_status"
        assert rejected["logger"] == LIBRARY_LOGGER_NAME
        request = next(line for line in lines if line["message"] == "mailchimp_request")
        assert request["has_body"] is False
