"""Ports layer - interface definitions following Hexagonal Architecture.

Inbound ports define what the table engine offers to the execution
facade, together with the error kinds it can raise.
"""

from memdb.ports.inbound import (
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
