"""Inbound ports - API contracts for the table engine."""

from memdb.ports.inbound.table_store import (
    DatabaseError,
    StatementSyntaxError,
    TableStore,
    TableStoreStats,
    UnknownTableError,
)

__all__ = [
    "DatabaseError",
    "StatementSyntaxError",
    "TableStore",
    "TableStoreStats",
    "UnknownTableError",
]
