"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_dated_file_under_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place the file in logs/<subdir>/."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240603"),
    )

    builder = logger_module.LoggerBuilder()
    price_logger = (
        builder.name("goldnest.test.prices")
        .subdir("prices")
        .prefix("daily_price")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert price_logger.level == logging.WARNING
    assert price_logger.propagate is False
    [handler] = price_logger.handlers
    assert isinstance(handler, logging.FileHandler)
    expected = tmp_path / "logs" / "prices" / "20240603_daily_price.log"
    assert handler.baseFilename == str(expected)
    assert builder.build() is price_logger
    handler.close()


def test_logger_builder_uses_custom_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    fmt = logging.Formatter("%(message)s")

    built = (
        logger_module.LoggerBuilder()
        .name("goldnest.test.custom")
        .formatter(lambda: fmt)
        .file_handler(lambda path, formatter: file_handler)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should log at INFO with the given formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "goldnest.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates_and_is_singleton(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("goldnest")
    wrapper.info("deposit credited")
    wrapper.warning("promo rejected")
    wrapper.exception("boom")

    fake_logger.info.assert_called_with("deposit credited")
    fake_logger.warning.assert_called_with("promo rejected")
    fake_logger.exception.assert_called_with("boom")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    built = []

    def _fake_build(self):
        built.append((self._name, self._subdir, self._level))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built == [
        ("goldnest", "app", logging.DEBUG),
        ("goldnest.usage", "usage", logging.DEBUG),
    ]
