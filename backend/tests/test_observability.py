"""Logging setup — renderer and level follow settings."""

import structlog

from validflow.config import get_settings
from validflow.observability import configure_logging


def test_json_renderer_by_default(monkeypatch):
    monkeypatch.setenv("VALIDFLOW_DEBUG", "false")
    get_settings.cache_clear()
    configure_logging()
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)


def test_console_renderer_in_debug(monkeypatch):
    monkeypatch.setenv("VALIDFLOW_DEBUG", "true")
    get_settings.cache_clear()
    configure_logging()
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


def test_level_filters_lower_events(monkeypatch, capsys):
    monkeypatch.setenv("VALIDFLOW_LOG_LEVEL", "warning")
    get_settings.cache_clear()
    configure_logging()
    logger = structlog.get_logger()
    logger.info("hidden_event")
    logger.warning("shown_event")
    out = capsys.readouterr().out
    assert "hidden_event" not in out
    assert "shown_event" in out
