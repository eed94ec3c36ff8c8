"""
Structured logging tests: JSON output and the exception decorator.
"""

import asyncio
import json
import logging

import pytest

from util_logger import (
    ComponentType,
    JSONFormatter,
    LogContext,
    LoggerFactory,
    LogLevel,
    log_exceptions,
)


def _record(message="hello", **extra):
    record = logging.LogRecord("parser.Test", logging.INFO, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    def test_output_is_json(self):
        payload = json.loads(JSONFormatter().format(_record()))
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "parser.Test"

    def test_custom_dimensions(self):
        payload = json.loads(JSONFormatter().format(_record(custom_dimensions={"rule_index": 2})))
        assert payload["customDimensions"] == {"rule_index": 2}

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            import sys
            record = _record()
            record.exc_info = sys.exc_info()
        payload = json.loads(JSONFormatter().format(record))
        assert payload["exception"]["type"] == "ValueError"
        assert payload["exception"]["message"] == "boom"


class TestLoggerFactory:
    def test_logger_name(self):
        logger = LoggerFactory.create_logger(ComponentType.TRANSLATOR, "UnitTest")
        assert logger.name == "translator.UnitTest"

    def test_single_json_handler(self):
        LoggerFactory.create_logger(ComponentType.CLASSIFIER, "Repeated")
        logger = LoggerFactory.create_logger(ComponentType.CLASSIFIER, "Repeated")
        json_handlers = [h for h in logger.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(json_handlers) == 1

    def test_component_dimensions_injected(self, caplog):
        logger = LoggerFactory.create_logger(ComponentType.DISPATCHER, "Dims")
        with caplog.at_level(logging.INFO, logger=logger.name):
            logger.info("x", extra={"custom_dimensions": {"rule_index": 0}})
        dims = caplog.records[-1].custom_dimensions
        assert dims["component_type"] == "dispatcher"
        assert dims["component_name"] == "Dims"
        assert dims["rule_index"] == 0

    def test_log_level_from_string(self):
        assert LogLevel.from_string("warning").to_python_level() == logging.WARNING

    def test_context_drops_unset_fields(self):
        assert LogContext(style_name="roads").to_dict() == {"style_name": "roads"}

    def test_context_fields(self):
        assert LogContext(style_name="roads", rule_index=0).to_dict() == {"style_name": "roads", "rule_index": 0}


class TestLogExceptions:
    def test_sync_reraises(self, caplog):
        @log_exceptions(ComponentType.PARSER, "SyncTest")
        def fail():
            raise RuntimeError("sync failure")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(RuntimeError, match="sync failure"):
                fail()
        assert any(r.getMessage() == "Exception in fail" for r in caplog.records)

    def test_async_reraises(self, caplog):
        @log_exceptions(ComponentType.PARSER, "AsyncTest")
        async def fail():
            raise RuntimeError("async failure")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(RuntimeError, match="async failure"):
                asyncio.run(fail())
        assert any(r.getMessage() == "Exception in fail" for r in caplog.records)

    def test_async_result_passes_through(self):
        @log_exceptions(ComponentType.PARSER, "AsyncOk")
        async def ok():
            return 42

        assert asyncio.run(ok()) == 42
