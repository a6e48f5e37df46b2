"""Database - execution facade for memdb.

This module provides the Database class that accepts raw statements,
parses them, dispatches them to the table engine and delivers results
through futures.

Usage:
    from memdb.application import Database

    with Database() as db:
        db.execute("create table author (id number, name string)").result()
        db.execute("insert into author (id, name) values (1, Ann)").result()
        rows = db.execute("select name from author").result()

Scheduling:
    Every statement is submitted to a thread pool and runs once its
    configured delay, measured from submission, has elapsed. With the
    default single worker, statements run strictly in submission order,
    so a batch submitted at once completes after roughly one delay.
    With more workers, concurrent statements on the same table race
    unless serialize_mutations is enabled.
"""

from __future__ import annotations

import asyncio
import contextlib
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, ContextManager, Iterable

from memdb.adapters.inbound.statement_parser import StatementParser
from memdb.domain.entities import Row
from memdb.domain.services import TableEngine
from memdb.domain.value_objects import Command, CommandKind
from memdb.infrastructure.config import Config, get_config
from memdb.infrastructure.logging import get_logger, statement_context
from memdb.infrastructure.metrics import MetricsRegistry, get_metrics
from memdb.infrastructure.tracing import statement_span
from memdb.ports.inbound.table_store import (
    DatabaseError,
    StatementSyntaxError,
    TableStore,
)

logger = get_logger(__name__)

# Engine method per statement kind; operands are passed positionally.
_OPERATIONS: dict[CommandKind, str] = {
    CommandKind.CREATE_TABLE: "create_table",
    CommandKind.INSERT: "insert",
    CommandKind.SELECT: "select",
    CommandKind.DELETE: "delete",
}

Result = list[Row] | None


class Database:
    """Execution facade over a statement parser and a table store.

    Features:
        - Deferred results (concurrent.futures.Future, or awaitable
          through execute_async)
        - Batch fan-out with execute_many
        - Configurable simulated latency per statement
        - Optional global lock around table operations

    Thread Safety:
        execute() may be called from any thread. Table operations are
        serialized by the single default worker; with max_workers > 1
        enable serialize_mutations to avoid lost updates.
    """

    def __init__(
        self,
        execution_delay: float = 0.0,
        max_workers: int = 1,
        serialize_mutations: bool = False,
        store: TableStore | None = None,
        parser: StatementParser | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the database.

        Args:
            execution_delay: Seconds each statement waits after submission
                before it runs.
            max_workers: Worker threads running statements.
            serialize_mutations: Hold one global lock around every table
                operation.
            store: Table store to execute against (new TableEngine if None).
            parser: Statement parser (new StatementParser if None).
            metrics: Metrics registry (global registry if None).
        """
        if execution_delay < 0:
            raise ValueError("execution_delay must be non-negative")
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        self._execution_delay = execution_delay
        self._max_workers = max_workers
        self._store: TableStore = store if store is not None else TableEngine()
        self._parser = parser or StatementParser()
        self._metrics = metrics or get_metrics()
        # Readers always hold the store lock; workers only with serialize_mutations.
        self._store_lock = threading.Lock()
        self._lock: ContextManager[Any] = (
            self._store_lock if serialize_mutations else contextlib.nullcontext()
        )

        self._pool: ThreadPoolExecutor | None = None
        self._stats_lock = threading.Lock()
        self._statements_total = 0
        self._failed_total = 0

    @classmethod
    def from_config(
        cls,
        config: Config | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> "Database":
        """Build a database from configuration settings."""
        config = config or get_config()
        return cls(
            execution_delay=config.execution.execution_delay,
            max_workers=config.execution.max_workers,
            serialize_mutations=config.execution.serialize_mutations,
            metrics=metrics,
        )

    @property
    def is_started(self) -> bool:
        """Check if the database accepts statements."""
        return self._pool is not None

    @property
    def store(self) -> TableStore:
        return self._store

    def start(self) -> None:
        """Start the worker pool.

        Raises:
            RuntimeError: If already started.
        """
        if self._pool is not None:
            raise RuntimeError("Database already started")
        self._pool = ThreadPoolExecutor(
            max_workers=self._max_workers,
            thread_name_prefix="memdb",
        )
        logger.info(
            "database_started",
            max_workers=self._max_workers,
            execution_delay=self._execution_delay,
        )

    def stop(self) -> None:
        """Wait for in-flight statements and stop the worker pool.

        Tables are kept; the database can be started again.

        Raises:
            RuntimeError: If not started.
        """
        if self._pool is None:
            raise RuntimeError("Database not started")
        self._pool.shutdown(wait=True)
        self._pool = None
        logger.info("database_stopped")

    def execute(self, statement: str) -> Future[Result]:
        """Submit a statement for execution.

        Args:
            statement: Raw statement text.

        Returns:
            A future resolving to the selected rows for a select and to
            None for the other statements. The future fails with
            StatementSyntaxError if no statement shape matches, or with
            UnknownTableError for a table that was never created.

        Raises:
            RuntimeError: If the database is not started.
        """
        if self._pool is None:
            raise RuntimeError("Database not started")
        submitted_at = time.monotonic()
        return self._pool.submit(self._run, statement, submitted_at)

    async def execute_async(self, statement: str) -> Result:
        """Execute a statement and await its result."""
        return await asyncio.wrap_future(self.execute(statement))

    def execute_many(self, statements: Iterable[str]) -> list[Result]:
        """Submit statements together and wait for all of them.

        Args:
            statements: Statements to submit, in order.

        Returns:
            Results in submission order.

        Raises:
            DatabaseError: The first failure in submission order, raised
                only after every statement has settled.
        """
        futures = [self.execute(statement) for statement in statements]
        wait(futures)
        return [future.result() for future in futures]

    def snapshot(self) -> dict[str, Any]:
        """Return a JSON-ready dump of every table.

        Safe to call while statements run; tables changed mid-dump may
        appear in either their old or new state.
        """
        snapshot: dict[str, Any] = {}
        with self._store_lock:
            for name in self._store.table_names():
                table = self._store.get_table(name)
                if table is not None:
                    snapshot[name] = table.to_dict()
        return snapshot

    def get_stats(self) -> dict[str, Any]:
        """Get database statistics."""
        with self._store_lock:
            store_stats = self._store.get_stats()
        with self._stats_lock:
            total, failed = self._statements_total, self._failed_total
        return {
            "started": self.is_started,
            "tables": store_stats.table_count,
            "rows": dict(store_stats.row_counts),
            "statements_total": total,
            "statements_failed": failed,
        }

    def _run(self, statement: str, submitted_at: float) -> Result:
        """Run one statement on a worker thread."""
        remaining = submitted_at + self._execution_delay - time.monotonic()
        if remaining > 0:
            time.sleep(remaining)

        with statement_context(statement):
            return self._run_parsed(statement, submitted_at)

    def _run_parsed(self, statement: str, submitted_at: float) -> Result:
        command = self._parser.parse(statement)
        if command is None:
            self._record("unknown", submitted_at, success=False)
            logger.warning("statement_rejected")
            raise StatementSyntaxError(statement)

        kind = command.kind.value
        with statement_span(kind, statement):
            try:
                with self._lock:
                    result = self._dispatch(command)
                    if command.kind is not CommandKind.SELECT:
                        self._refresh_storage_gauges()
            except DatabaseError as e:
                if e.statement is None:
                    e.statement = statement
                self._record(kind, submitted_at, success=False)
                logger.warning("statement_failed", kind=kind, error=e.message)
                raise

        self._record(kind, submitted_at, success=True)
        logger.debug("statement_executed", kind=kind)
        return result

    def _dispatch(self, command: Command) -> Result:
        operation = getattr(self._store, _OPERATIONS[command.kind])
        result = operation(*command.operands)
        if command.kind is CommandKind.SELECT:
            return result
        return None

    def _record(self, kind: str, submitted_at: float, success: bool) -> None:
        status = "success" if success else "error"
        self._metrics.statements_total.labels(kind=kind, status=status).inc()
        self._metrics.statement_latency_seconds.labels(kind=kind).observe(
            time.monotonic() - submitted_at
        )
        with self._stats_lock:
            self._statements_total += 1
            if not success:
                self._failed_total += 1

    def _refresh_storage_gauges(self) -> None:
        stats = self._store.get_stats()
        self._metrics.tables.set(stats.table_count)
        for name, count in stats.row_counts.items():
            self._metrics.rows.labels(table=name).set(count)

    def __enter__(self) -> "Database":
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.stop()
