"""Tests for observability/logger.py"""
import io
import json
import logging
import sys


class TestStructuredFormatter:
    def _get_record(
        self,
        msg,
        level=logging.INFO,
        exc_info=None,
        stack_info=None,
        extra_fields=None,
    ):
        record = logging.LogRecord(
            name="test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        if stack_info is not None:
            record.stack_info = stack_info
        return record

    def test_basic_format(self):
        from mdchain.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        result = json.loads(fmt.format(self._get_record("hello world")))
        assert result["message"] == "hello world"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        from mdchain.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        record = self._get_record("msg", extra_fields={"op": "to_string", "fragments": 5})
        result = json.loads(fmt.format(record))
        assert result["op"] == "to_string"
        assert result["fragments"] == 5

    def test_exception_info_included(self):
        from mdchain.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()
        result = json.loads(fmt.format(self._get_record("error msg", exc_info=exc_info)))
        assert "exception" in result
        assert "ValueError" in result["exception"]

    def test_stack_info_included(self):
        from mdchain.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        record = self._get_record("msg", stack_info="Stack Trace Here")
        result = json.loads(fmt.format(record))
        assert result["stack_info"] == "Stack Trace Here"

    def test_non_serialisable_extra_uses_str(self):
        from mdchain.observability.logger import StructuredFormatter

        fmt = StructuredFormatter()
        record = self._get_record("msg", extra_fields={"obj": object()})
        result = json.loads(fmt.format(record))
        assert result["obj"].startswith("<object object")


class TestGetLogger:
    def test_returns_logger_with_handler(self):
        from mdchain.observability.logger import get_logger

        logger = get_logger("test.observability.unique1")
        assert isinstance(logger, logging.Logger)
        assert len(logger.handlers) > 0

    def test_default_level_is_warning(self):
        from mdchain.observability.logger import get_logger

        logger = get_logger("test.observability.default_level")
        assert logger.level == logging.WARNING

    def test_string_level(self):
        from mdchain.observability.logger import get_logger

        logger = get_logger("test.observability.unique2", level="debug")
        assert logger.level == logging.DEBUG

    def test_idempotent_no_duplicate_handlers(self):
        from mdchain.observability.logger import get_logger

        name = "test.observability.unique3"
        handler_count = len(get_logger(name).handlers)
        assert len(get_logger(name).handlers) == handler_count

    def test_custom_stream(self):
        from mdchain.observability.logger import get_logger

        stream = io.StringIO()
        logger = get_logger("test.observability.stream_unique", stream=stream)
        logger.warning("test message", extra={"extra_fields": {"key": "val"}})
        entry = json.loads(stream.getvalue())
        assert entry["message"] == "test message"
        assert entry["key"] == "val"

    def test_library_loggers_do_not_propagate(self):
        import mdchain.document  # noqa: F401  (configures the logger)

        assert logging.getLogger("mdchain.document").propagate is False


class TestRenderLogging:
    def test_render_emits_debug_record(self):
        from mdchain import Document
        from mdchain.observability.logger import StructuredFormatter

        logger = logging.getLogger("mdchain.render")
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter())
        old_level = logger.level
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            Document.make(newline="\n").line("a").line("b").to_string()
        finally:
            logger.removeHandler(handler)
            logger.setLevel(old_level)

        entries = [json.loads(line) for line in stream.getvalue().splitlines()]
        (entry,) = [e for e in entries if e["message"] == "document rendered"]
        assert entry["op"] == "to_string"
        assert entry["fragments"] == 2
        assert entry["chars"] == len("a\n\nb")
        assert entry["suppressed"] is False
