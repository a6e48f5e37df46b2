"""Unit tests for logging context and statement tracing."""

from __future__ import annotations

import json
import threading
from typing import Generator

import pytest
import structlog
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from memdb.application import Database
from memdb.infrastructure import tracing
from memdb.infrastructure.logging import get_logger, setup_logging, statement_context
from memdb.ports.inbound import UnknownTableError


@pytest.fixture
def span_exporter(monkeypatch: pytest.MonkeyPatch) -> Generator[InMemorySpanExporter, None, None]:
    """Route statement spans to an in-memory exporter."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(tracing, "_tracer", provider.get_tracer("test"))
    yield exporter
    exporter.clear()


@pytest.mark.unit
class TestStatementContext:
    """Tests for statement_context."""

    def test_binds_and_unbinds(self) -> None:
        with statement_context("delete from author", kind="delete"):
            bound = structlog.contextvars.get_contextvars()
            assert bound["statement"] == "delete from author"
            assert bound["kind"] == "delete"

        assert "statement" not in structlog.contextvars.get_contextvars()


@pytest.fixture
def json_logging() -> Generator[None, None, None]:
    """Configure JSON logging for one test and restore structlog defaults."""
    setup_logging(level="DEBUG", log_format="json")
    yield
    structlog.reset_defaults()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_event_carries_statement_and_thread(
        self, json_logging: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        logger = get_logger("memdb.test")
        with statement_context("select id from author"):
            logger.info("statement_executed", kind="select")

        event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])

        assert event["event"] == "statement_executed"
        assert event["level"] == "info"
        assert event["kind"] == "select"
        assert event["statement"] == "select id from author"
        assert event["thread"] == threading.current_thread().name
        assert "timestamp" in event

    def test_level_filtering(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(level="WARNING", log_format="json")
        try:
            get_logger("memdb.test").info("hidden")
        finally:
            structlog.reset_defaults()

        assert capsys.readouterr().out == ""


@pytest.mark.unit
class TestStatementSpan:
    """Tests for statement spans."""

    def test_span_per_statement(
        self, author_db: Database, span_exporter: InMemorySpanExporter
    ) -> None:
        span_exporter.clear()
        author_db.execute("select name from author").result()

        spans = span_exporter.get_finished_spans()
        assert [span.name for span in spans] == ["memdb.select"]
        assert spans[0].attributes["memdb.statement"] == "select name from author"

    def test_failed_statement_marks_span(
        self, db: Database, span_exporter: InMemorySpanExporter
    ) -> None:
        with pytest.raises(UnknownTableError):
            db.execute("delete from ghost").result()

        (span,) = span_exporter.get_finished_spans()
        assert span.name == "memdb.delete"
        assert span.status.status_code == StatusCode.ERROR
        assert [event.name for event in span.events] == ["exception"]

    def test_syntax_error_has_no_span(
        self, db: Database, span_exporter: InMemorySpanExporter
    ) -> None:
        with pytest.raises(Exception):
            db.execute("bogus").result()

        assert span_exporter.get_finished_spans() == ()
