"""Tests for onerepmax.logger module."""
import importlib
import logging

import pytest

import onerepmax.logger as logger_module
from onerepmax.logger import log_function_call, setup_logger


class TestSetupLogger:
    """Logger construction."""

    def test_console_only(self):
        lg = setup_logger("onerepmax.test.console", level="warning")
        assert lg.level == logging.WARNING
        assert len(lg.handlers) == 1

    def test_numeric_level(self):
        lg = setup_logger("onerepmax.test.numeric", level=logging.ERROR)
        assert lg.level == logging.ERROR

    def test_unknown_level_raises_value_error(self):
        with pytest.raises(ValueError, match="verbose"):
            setup_logger("onerepmax.test.unknown", level="verbose")

    def test_file_handler_creates_directory(self, tmp_path):
        path = tmp_path / "logs" / "app.log"
        lg = setup_logger("onerepmax.test.file", log_file=str(path), console=False)
        lg.info("hello")
        for handler in lg.handlers:
            handler.flush()
            handler.close()
        assert path.exists()
        assert "hello" in path.read_text(encoding="utf-8")

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logger("onerepmax.test.repeat")
        lg = setup_logger("onerepmax.test.repeat")
        assert len(lg.handlers) == 1


class TestPackageLoggerFromEnvironment:
    """The package logger reads its level when the module is imported."""

    def test_bad_level_on_import_names_variable(self, clean_env):
        clean_env.setenv("ONEREPMAX_LOG_LEVEL", "verbose")
        try:
            with pytest.raises(ValueError, match="ONEREPMAX_LOG_LEVEL"):
                importlib.reload(logger_module)
        finally:
            clean_env.delenv("ONEREPMAX_LOG_LEVEL", raising=False)
            importlib.reload(logger_module)


class TestLogFunctionCall:
    """The call-logging decorator."""

    def test_passes_result_through(self, caplog):
        @log_function_call
        def double(x):
            return 2 * x

        with caplog.at_level(logging.DEBUG, logger="onerepmax"):
            assert double(21) == 42
        assert "Calling double" in caplog.text
        assert "double returned 42" in caplog.text

    def test_reraises(self, caplog):
        @log_function_call
        def boom():
            raise RuntimeError("nope")

        with caplog.at_level(logging.ERROR, logger="onerepmax"):
            with pytest.raises(RuntimeError, match="nope"):
                boom()
        assert "boom raised RuntimeError: nope" in caplog.text

    def test_arguments_not_formatted_when_debug_is_off(self, caplog):
        class CountingRepr:
            calls = 0

            def __repr__(self):
                CountingRepr.calls += 1
                return "CountingRepr()"

        @log_function_call
        def identity(x):
            return x

        with caplog.at_level(logging.INFO, logger="onerepmax"):
            identity(CountingRepr())
        assert CountingRepr.calls == 0
