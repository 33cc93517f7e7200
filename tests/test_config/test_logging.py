"""Testes para config.logging.

Cobre: configure_logging, configure_logging_from_settings, get_logger,
ServiceContextFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    BASE_LOG_FIELDS,
    FIELD_RENAME_MAP,
    ServiceContextFilter,
    configure_logging,
    configure_logging_from_settings,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from config.settings import get_workflow_settings


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="workflow.test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_existing_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

        handler = root.handlers[0]
        assert any(isinstance(f, ServiceContextFilter) for f in handler.filters)

    def test_from_settings_uses_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WORKFLOW_LOG_LEVEL", "debug")
        monkeypatch.setenv("WORKFLOW_SERVICE_NAME", "orders")
        get_workflow_settings.cache_clear()
        try:
            configure_logging_from_settings()
        finally:
            get_workflow_settings.cache_clear()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        context_filter = next(
            f for f in root.handlers[0].filters if isinstance(f, ServiceContextFilter)
        )
        assert context_filter.service_name == "orders"

    def test_from_settings_rejects_invalid_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WORKFLOW_LOG_LEVEL", "LOUD")
        get_workflow_settings.cache_clear()
        try:
            with pytest.raises(ValueError, match="WORKFLOW_LOG_LEVEL"):
                configure_logging_from_settings()
        finally:
            get_workflow_settings.cache_clear()

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "workflow"


class TestGetLogger:
    def test_returns_named_logger(self) -> None:
        logger = get_logger("workflow.manager.engine")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("workflow.manager.engine")


class TestServiceContextFilter:
    def test_injects_service_and_correlation_id(self) -> None:
        record = _record()
        assert ServiceContextFilter("orders", lambda: "corr-1").filter(record) is True
        assert record.service == "orders"
        assert record.correlation_id == "corr-1"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit"
        ServiceContextFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit"

    def test_empty_correlation_id_without_getter(self) -> None:
        record = _record(level=logging.ERROR)
        ServiceContextFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestJsonFormatter:
    def test_constants(self) -> None:
        assert "service" in BASE_LOG_FIELDS
        assert "correlation_id" in BASE_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_extras(self) -> None:
        formatter = create_json_formatter()
        record = _record("Transition rejected")
        record.service = "workflow"
        record.correlation_id = "abc"
        record.transition = "publish"
        record.state = "archived"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Transition rejected"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "workflow.test"
        assert payload["service"] == "workflow"
        assert payload["transition"] == "publish"
        assert payload["state"] == "archived"
