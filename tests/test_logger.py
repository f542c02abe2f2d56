"""Tests for the logger, logger builder and registry"""

import io
import threading
from unittest.mock import Mock

import pytest

from log_facade import (
    FilterResult,
    Handler,
    HandlerBuilder,
    LogLevel,
    LogRecord,
    Logger,
    LoggerBuilder,
    Marker,
    get_logger,
    get_marker,
)
from log_facade.core.logger_registry import LoggerRegistry, get_registry
from log_facade.filters import (
    AlwaysAcceptFilter,
    AlwaysDenyFilter,
    CallbackFilter,
    MarkerFilter,
    RateLimitFilter,
)
from log_facade.handlers import AndroidLogHandler, ConsoleHandler
from log_facade.platform import AndroidLevel


class MockHandler(Handler):
    """Handler that keeps published records."""

    def __init__(self, config=None):
        super().__init__(config)
        self.records = []
        self.flushed = False
        self.closed = False

    def emit(self, record):
        self.records.append(record)

    def flush(self):
        self.flushed = True

    def close(self):
        self.closed = True


def handler(level=LogLevel.TRACE, *filters, location=False):
    return (HandlerBuilder(MockHandler)
        .with_level(level)
        .with_filters(filters)
        .with_location(location)
        .build())


class TestLogger:
    """Test main logger functionality."""

    def test_accept_filter_does_not_bypass_threshold(self):
        h = handler(LogLevel.INFO, AlwaysAcceptFilter())
        logger = Logger("svc.auth", [h])

        logger.log(LogLevel.DEBUG, "x")
        assert h.records == []

        logger.log(LogLevel.INFO, "x")
        assert len(h.records) == 1
        record = h.records[0]
        assert record.level is LogLevel.INFO
        assert record.message == "x"
        assert record.logger_name == "svc.auth"

    def test_no_handlers_is_noop(self):
        supplier = Mock(return_value="expensive")
        logger = Logger("empty")
        logger.log(LogLevel.CRITICAL, supplier)
        logger.error("value %s", Mock(side_effect=AssertionError("formatted")))
        supplier.assert_not_called()
        assert logger.get_metrics()["logged"] == 0

    def test_message_not_built_when_nobody_accepts(self):
        supplier = Mock(return_value="expensive")
        logger = Logger("svc", [handler(LogLevel.ERROR), handler(LogLevel.TRACE, AlwaysDenyFilter())])
        logger.info(supplier)
        supplier.assert_not_called()
        assert logger.get_metrics()["filtered"] == 1

    def test_supplier_called_once_for_many_handlers(self):
        supplier = Mock(return_value="built")
        h1, h2 = handler(), handler()
        logger = Logger("svc", [h1, h2])
        logger.warn(supplier)
        supplier.assert_called_once_with()
        assert h1.records[0].message == "built"

    def test_one_shared_record(self):
        h1, h2, h3 = handler(), handler(LogLevel.ERROR), handler()
        logger = Logger("svc", [h1, h2, h3])
        logger.info("hello")
        assert len(h1.records) == 1
        assert h2.records == []
        assert h1.records[0] is h3.records[0]

    def test_publish_order_follows_attachment(self):
        order = []

        class Tracking(MockHandler):
            def __init__(self, tag):
                super().__init__()
                self.tag = tag

            def emit(self, record):
                order.append(self.tag)

        logger = Logger("svc", [Tracking("a"), Tracking("b"), Tracking("c")])
        logger.info("x")
        assert order == ["a", "b", "c"]

    def test_percent_args(self):
        h = handler()
        Logger("svc", [h]).info("user %s has %d items", "ann", 3)
        assert h.records[0].message == "user ann has 3 items"

    def test_format_error_absorbed(self):
        h = handler()
        Logger("svc", [h]).info("%d items", "not-a-number")
        assert h.records[0].message.startswith("[FORMAT ERROR:")

    def test_supplier_error_absorbed(self):
        h = handler()

        def broken():
            raise RuntimeError("nope")

        Logger("svc", [h]).info(broken)
        assert "nope" in h.records[0].message

    def test_non_string_supplier_result(self):
        h = handler()
        Logger("svc", [h]).debug(lambda: {"k": 1})
        assert h.records[0].message == "{'k': 1}"

    def test_marker_and_throwable(self):
        audit = Marker("AUDIT")
        h = handler(LogLevel.TRACE, MarkerFilter(audit, when_matched=FilterResult.ACCEPT))
        logger = Logger("svc", [h])
        err = ValueError("bad")

        logger.error("no marker", throwable=err)
        logger.error("marked", marker=audit, throwable=err)

        assert len(h.records) == 1
        assert h.records[0].marker is audit
        assert h.records[0].throwable is err

    def test_exception_helper(self):
        h = handler()
        logger = Logger("svc", [h])
        try:
            raise KeyError("missing")
        except KeyError:
            logger.exception("lookup failed")
        record = h.records[0]
        assert record.level is LogLevel.ERROR
        assert isinstance(record.throwable, KeyError)

    def test_convenience_levels(self):
        h = handler()
        logger = Logger("svc", [h])
        logger.trace("t")
        logger.debug("d")
        logger.info("i")
        logger.warn("w")
        logger.error("e")
        logger.critical("c")
        assert [r.level for r in h.records] == list(LogLevel)

    def test_invalid_level(self):
        with pytest.raises(TypeError):
            Logger("svc", [handler()]).log(20, "x")

    def test_sink_failure_does_not_reach_caller(self, capsys):
        class Broken(MockHandler):
            def emit(self, record):
                raise OSError("gone")

        good = handler()
        logger = Logger("svc", [Broken(), good])
        logger.info("still works")
        assert len(good.records) == 1

    def test_is_loggable(self):
        logger = Logger("svc", [handler(LogLevel.WARN)])
        assert logger.is_loggable(LogLevel.ERROR)
        assert not logger.is_loggable(LogLevel.INFO)
        assert not Logger("empty").is_loggable(LogLevel.CRITICAL)

    def test_location_captured_only_when_requested(self):
        plain = handler()
        logger = Logger("svc", [plain])
        logger.info("x")
        assert not plain.records[0].has_location

        located = handler(location=True)
        logger.add_handler(located)
        logger.info("y")
        record = located.records[0]
        assert record.file_name == "test_logger.py"
        assert record.function_name == "test_location_captured_only_when_requested"
        assert record.line_number > 0
        assert plain.records[1] is record

    def test_metrics(self):
        logger = Logger("svc", [handler(), handler(LogLevel.ERROR)])
        logger.info("a")
        logger.error("b")
        metrics = logger.get_metrics()
        assert metrics["logged"] == 2
        assert metrics["published"] == 3

    def test_concurrent_metrics_are_exact(self):
        logger = Logger("svc", [handler(), handler(), handler(LogLevel.CRITICAL)])

        def worker():
            for _ in range(250):
                logger.info("x")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        metrics = logger.get_metrics()
        assert metrics["logged"] == 2000
        assert metrics["published"] == 4000
        assert metrics["filtered"] == 0

    def test_marker_name_is_resolved(self):
        audit = get_marker("tests.logger.AUDIT")
        h = handler(LogLevel.TRACE, MarkerFilter(audit, when_matched=FilterResult.ACCEPT))
        logger = Logger("svc", [h])
        assert logger.is_loggable(LogLevel.INFO, marker="tests.logger.AUDIT")
        logger.info("x", marker="tests.logger.AUDIT")
        assert len(h.records) == 1
        assert h.records[0].marker is audit

    def test_bad_marker_or_throwable_rejected_before_handlers(self):
        calls = []

        def spy(*args):
            calls.append(args)
            return FilterResult.NEUTRAL

        logger = Logger("svc", [handler(LogLevel.TRACE, CallbackFilter(spy))])
        with pytest.raises(TypeError):
            logger.info("x", marker=42)
        with pytest.raises(TypeError):
            logger.info("x", throwable="boom")
        with pytest.raises(TypeError):
            logger.is_loggable(LogLevel.INFO, marker=object())
        with pytest.raises(TypeError):
            Logger("empty").error("x", throwable="boom")
        assert calls == []

    def test_guard_does_not_use_rate_limit_quota(self):
        h = handler(LogLevel.TRACE, RateLimitFilter(max_events=2, interval=60.0), location=True)
        logger = Logger("svc", [h])
        for i in range(4):
            if logger.is_loggable(LogLevel.INFO):
                logger.info("call %d", i)
        assert [r.message for r in h.records] == ["call 0", "call 1"]


class TestLoggerSettings:
    """Test per-logger level, marker and location."""

    def test_own_level_gates_before_handlers(self):
        calls = []

        def spy(*args):
            calls.append(args)
            return FilterResult.NEUTRAL

        h = handler(LogLevel.TRACE, CallbackFilter(spy))
        logger = Logger("svc", [h], level=LogLevel.WARN)
        supplier = Mock(return_value="expensive")
        logger.info(supplier)
        assert not logger.is_loggable(LogLevel.INFO)
        assert calls == []
        supplier.assert_not_called()
        assert logger.get_metrics()["filtered"] == 0

        logger.warn("shown")
        assert [r.message for r in h.records] == ["shown"]

    def test_level_property(self):
        logger = Logger("svc")
        assert logger.log_level is None
        assert logger.effective_level is LogLevel.TRACE
        logger.log_level = "error"
        assert logger.effective_level is LogLevel.ERROR
        logger.log_level = None
        assert logger.effective_level is LogLevel.TRACE
        with pytest.raises(TypeError):
            logger.log_level = 40
        with pytest.raises(ValueError):
            Logger("svc", level="loud")

    def test_default_marker(self):
        audit, other = Marker("AUDIT"), Marker("OTHER")
        h = handler()
        logger = Logger("svc", [h], marker=audit)
        logger.info("a")
        logger.info("b", marker=other)
        assert h.records[0].marker is audit
        assert h.records[1].marker is other

    def test_default_marker_reaches_filters(self):
        audit = Marker("AUDIT")
        h = handler(LogLevel.TRACE, MarkerFilter(audit, when_matched=FilterResult.ACCEPT))
        logger = Logger("svc", [h], marker=audit)
        assert logger.is_loggable(LogLevel.INFO)
        logger.marker = None
        assert not logger.is_loggable(LogLevel.INFO)

    def test_logger_location(self):
        h = handler()
        logger = Logger("svc", [h], include_location=True)
        logger.info("x")
        assert h.records[0].function_name == "test_logger_location"
        logger.include_location = False
        logger.info("y")
        assert not h.records[1].has_location


class TestHandlerSet:
    """Test handler attachment."""

    def test_add_remove(self):
        h = handler()
        logger = Logger("svc")
        logger.add_handler(h)
        assert logger.handlers == (h,)
        assert logger.remove_handler(h) is True
        assert logger.remove_handler(h) is False
        assert logger.handlers == ()

    def test_add_rejects_non_handler(self):
        with pytest.raises(TypeError):
            Logger("svc").add_handler(object())

    def test_add_during_log_uses_snapshot(self):
        late = handler()

        class Adding(MockHandler):
            def emit(self, record):
                super().emit(record)
                logger.add_handler(late)

        first = Adding()
        logger = Logger("svc", [first])
        logger.info("one")
        assert len(first.records) == 1
        assert late.records == []

        logger.info("two")
        assert len(late.records) == 1

    def test_remove_during_log_uses_snapshot(self):
        second = handler()

        class Removing(MockHandler):
            def emit(self, record):
                super().emit(record)
                logger.remove_handler(second)

        logger = Logger("svc", [Removing(), second])
        logger.info("one")
        assert len(second.records) == 1
        logger.info("two")
        assert len(second.records) == 1

    def test_concurrent_add_and_log(self):
        logger = Logger("svc", [handler()])
        errors = []
        stop = threading.Event()

        def log_loop():
            try:
                while not stop.is_set():
                    logger.info("x")
            except Exception as e:
                errors.append(e)

        def add_loop():
            try:
                for _ in range(200):
                    h = handler()
                    logger.add_handler(h)
                    logger.remove_handler(h)
            except Exception as e:
                errors.append(e)

        loggers = [threading.Thread(target=log_loop) for _ in range(4)]
        adders = [threading.Thread(target=add_loop) for _ in range(2)]
        for t in loggers + adders:
            t.start()
        for t in adders:
            t.join()
        stop.set()
        for t in loggers:
            t.join()

        assert errors == []
        assert len(logger.handlers) == 1

    def test_flush_and_shutdown(self):
        h = handler()
        logger = Logger("svc", [h])
        logger.flush()
        assert h.flushed
        logger.shutdown()
        assert h.closed
        assert logger.handlers == ()


class TestLoggerBuilder:
    """Test logger builder."""

    def test_builder_pattern(self):
        h = handler()
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .add_handler(h)
            .build())
        assert logger.name == "builder_test"
        assert logger.handlers == (h,)

    def test_with_console(self):
        stream = io.StringIO()
        logger = (LoggerBuilder()
            .with_name("console")
            .with_console(LogLevel.WARN, colored=False, stream=stream)
            .build())
        logger.info("hidden")
        logger.warn("shown")
        assert isinstance(logger.handlers[0], ConsoleHandler)
        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_with_android(self):
        calls = []
        logger = (LoggerBuilder()
            .with_name("app.ui.MainActivity")
            .with_android("debug", sink=lambda *args: calls.append(args))
            .build())
        logger.trace("hidden")
        logger.critical("wtf")
        assert isinstance(logger.handlers[0], AndroidLogHandler)
        assert calls == [(AndroidLevel.ASSERT, "MainActivity", "wtf", None)]

    def test_rejects_non_handler(self):
        with pytest.raises(TypeError):
            LoggerBuilder().add_handler("console")

    def test_logger_settings(self):
        logger = (LoggerBuilder()
            .with_name("svc")
            .with_level("warn")
            .with_marker("tests.builder.AUDIT")
            .with_location()
            .build())
        assert logger.log_level is LogLevel.WARN
        assert logger.marker is get_marker("tests.builder.AUDIT")
        assert logger.include_location


class TestLogRecord:
    """Test log record structure."""

    def test_create_record(self):
        record = LogRecord(level=LogLevel.INFO, message="Test message")
        assert record.level is LogLevel.INFO
        assert record.logger_name == ""
        assert record.marker is None
        assert record.throwable is None
        assert record.thread_name == threading.current_thread().name

    def test_immutable(self):
        record = LogRecord(level=LogLevel.INFO, message="x")
        with pytest.raises(AttributeError):
            record.message = "y"

    def test_validation(self):
        with pytest.raises(TypeError):
            LogRecord(level=20, message="x")
        with pytest.raises(TypeError):
            LogRecord(level=LogLevel.INFO, message="x", marker="AUDIT")
        with pytest.raises(TypeError):
            LogRecord(level=LogLevel.INFO, message="x", throwable="boom")
        assert LogRecord(level=LogLevel.INFO, message=42).message == "42"

    def test_to_dict(self):
        record = LogRecord(
            level=LogLevel.DEBUG,
            message="Test",
            logger_name="svc",
            marker=Marker("AUDIT"),
        )
        data = record.to_dict()
        assert data["level"] == "DEBUG"
        assert data["message"] == "Test"
        assert data["logger_name"] == "svc"
        assert data["marker"] == "AUDIT"
        assert data["throwable"] == ""


class TestRegistry:
    """Test the named logger registry."""

    def test_get_or_create(self):
        registry = LoggerRegistry()
        first = registry.get("svc.auth")
        assert registry.get("svc.auth") is first
        assert registry.exists("svc.auth")
        assert registry.names() == ["svc.auth"]

    def test_remove_and_clear(self):
        registry = LoggerRegistry()
        registry.get("a")
        assert registry.remove("a") is True
        assert registry.remove("a") is False
        registry.get("b")
        registry.clear()
        assert registry.names() == []

    def test_default_handlers_for_new_loggers(self):
        registry = LoggerRegistry()
        existing = registry.get("old")
        h = handler()
        registry.set_default_handlers([h])
        assert registry.get("new").handlers == (h,)
        assert existing.handlers == ()

    def test_default_handlers_validated(self):
        with pytest.raises(TypeError):
            LoggerRegistry().set_default_handlers([object()])

    def test_concurrent_get_returns_one_instance(self):
        registry = LoggerRegistry()
        seen = []
        lock = threading.Lock()

        def worker():
            logger = registry.get("shared")
            with lock:
                seen.append(logger)

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(logger is seen[0] for logger in seen)

    def test_module_level_get_logger(self):
        logger = get_logger("tests.registry.module")
        assert get_logger("tests.registry.module") is logger
        assert get_registry().remove("tests.registry.module")

    def test_child_inherits_parent_level(self):
        registry = LoggerRegistry()
        parent = registry.get("svc")
        child = registry.get("svc.auth.tokens")
        parent.log_level = LogLevel.ERROR
        assert child.log_level is None
        assert child.effective_level is LogLevel.ERROR

        h = handler()
        child.add_handler(h)
        child.warn("hidden")
        child.error("shown")
        assert [r.message for r in h.records] == ["shown"]

    def test_nearest_ancestor_wins(self):
        registry = LoggerRegistry()
        registry.root().log_level = LogLevel.CRITICAL
        registry.get("svc").log_level = LogLevel.WARN
        child = registry.get("svc.auth")
        assert child.effective_level is LogLevel.WARN
        assert registry.get("web").effective_level is LogLevel.CRITICAL
        child.log_level = LogLevel.DEBUG
        assert child.effective_level is LogLevel.DEBUG

    def test_find_does_not_create(self):
        registry = LoggerRegistry()
        assert registry.find("svc") is None
        assert not registry.exists("svc")
        assert registry.find("svc") is None
        logger = registry.get("svc")
        assert registry.find("svc") is logger
