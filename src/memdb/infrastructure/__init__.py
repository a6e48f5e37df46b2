"""Infrastructure layer - cross-cutting concerns."""

from memdb.infrastructure.config import Config, get_config
from memdb.infrastructure.logging import get_logger, setup_logging, statement_context
from memdb.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from memdb.infrastructure.tracing import get_tracer, setup_tracing, statement_span, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "statement_context",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
    "statement_span",
]
