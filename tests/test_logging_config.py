"""
Tests for logging configuration.

Tests the centralized logging setup including:
- Standard library logging interception
- Third-party logger configuration
- JSON record serialization
- Exception formatting
"""

import json
import logging
from datetime import datetime, timezone
from types import SimpleNamespace


class TestInterceptHandler:
    """Tests for InterceptHandler class."""

    def test_intercept_handler_is_logging_handler(self):
        from core.logger import InterceptHandler

        assert isinstance(InterceptHandler(), logging.Handler)

    def test_intercept_handler_emit(self):
        """emit routes a stdlib record to Loguru without raising."""
        from core.logger import InterceptHandler

        handler = InterceptHandler()
        record = logging.LogRecord(
            name="uvicorn.error",
            level=logging.INFO,
            pathname="server.py",
            lineno=1,
            msg="Started server process",
            args=(),
            exc_info=None,
        )

        handler.emit(record)

    def test_intercept_handler_custom_level(self):
        """Unknown level names fall back to the numeric level."""
        from core.logger import InterceptHandler

        record = logging.LogRecord(
            name="test",
            level=25,
            pathname="test.py",
            lineno=1,
            msg="custom level",
            args=(),
            exc_info=None,
        )
        record.levelname = "NOTICE"

        InterceptHandler().emit(record)


class TestConfigureThirdPartyLoggers:

    def test_quiets_http_client_loggers(self):
        from core.logger import configure_third_party_loggers

        configure_third_party_loggers()

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_keeps_uvicorn_at_info(self):
        from core.logger import configure_third_party_loggers

        configure_third_party_loggers()

        assert logging.getLogger("uvicorn.access").level == logging.INFO


class TestInterceptStandardLogging:

    def test_root_logger_has_intercept_handler(self):
        from core.logger import intercept_standard_logging

        intercept_standard_logging()

        handler_types = [type(h).__name__ for h in logging.getLogger().handlers]
        assert "InterceptHandler" in handler_types


class TestSetupLogger:

    def test_setup_logger_creates_handlers(self):
        from core.logger import logger, setup_logger

        logger.remove()
        setup_logger()

        assert len(logger._core.handlers) >= 1

    def test_setup_logger_idempotent(self):
        from core.logger import logger, setup_logger

        setup_logger()
        handlers_count_1 = len(logger._core.handlers)

        setup_logger()
        handlers_count_2 = len(logger._core.handlers)

        assert handlers_count_2 == handlers_count_1


class TestSerializeLogRecord:

    def make_record(self, **extra):
        return {
            "time": datetime(2026, 1, 1, tzinfo=timezone.utc),
            "level": SimpleNamespace(name="INFO"),
            "message": "Downloaded <1MB> {ok}",
            "module": "audio_downloader",
            "function": "download",
            "line": 42,
            "exception": None,
            "extra": extra,
        }

    def test_flat_json_with_escaping(self):
        from core.logger import serialize_log_record

        output = serialize_log_record(self.make_record(request_url="https://x"))

        assert output.endswith("\n")
        # Undo Loguru escaping to recover the JSON document
        raw = output.replace("{{", "{").replace("}}", "}").replace("\\<", "<")
        data = json.loads(raw)
        assert data["level"] == "INFO"
        assert data["module"] == "audio_downloader"
        assert data["request_url"] == "https://x"

    def test_non_serializable_extra_is_stringified(self):
        from core.logger import serialize_log_record

        output = serialize_log_record(self.make_record(path=object()))

        assert "object object at" in output


class TestFormatExceptionShort:

    def test_format_exception_with_context(self):
        from core.logger import format_exception_short

        try:
            raise ValueError("Test error")
        except ValueError as e:
            result = format_exception_short(e, "Relaying audio")

        assert "Relaying audio" in result
        assert "ValueError: Test error" in result
        assert "test_logging_config.py" in result

    def test_format_exception_without_traceback(self):
        from core.logger import format_exception_short

        result = format_exception_short(RuntimeError("never raised"))

        assert result == "RuntimeError: never raised | (unknown)"


class TestLoggerExports:

    def test_all_exports_available(self):
        from core import logger as logger_module

        for export in logger_module.__all__:
            assert hasattr(logger_module, export), f"Missing export: {export}"
