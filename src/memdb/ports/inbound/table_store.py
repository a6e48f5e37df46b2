"""Table store port.

This inbound port defines the contract for the table engine: one
operation per statement kind, each taking the raw operand strings the
statement parser captured.

Operands are deliberately untokenized here. Splitting comma-separated
lists and where-clauses is the store's job.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Protocol

from memdb.domain.entities import Row, Table


@dataclass
class TableStoreStats:
    """Statistics for table store monitoring."""

    table_count: int
    row_counts: dict[str, int] = field(default_factory=dict)

    @property
    def total_rows(self) -> int:
        return sum(self.row_counts.values())


class TableStore(Protocol):
    """Protocol for table storage operations.

    Thread Safety:
        Implementations are not required to synchronize. Callers that
        run statements concurrently must serialize access themselves.
    """

    @abstractmethod
    def create_table(self, name: str, column_defs: str) -> None:
        """Create (or replace) a table from a column definition blob.

        Args:
            name: Table name.
            column_defs: Raw `col type, col type, ...` text.
        """
        ...

    @abstractmethod
    def insert(self, name: str, columns: str, values: str) -> None:
        """Append one row built from paired column and value lists.

        Raises:
            UnknownTableError: If the table was never created.
        """
        ...

    @abstractmethod
    def select(self, columns: str, name: str, where: str | None = None) -> list[Row]:
        """Return rows of a table, projected or filtered.

        Raises:
            UnknownTableError: If the table was never created.
        """
        ...

    @abstractmethod
    def delete(self, name: str, where: str | None = None) -> int:
        """Remove matching rows (all rows without a where-clause).

        Returns:
            Number of rows removed.

        Raises:
            UnknownTableError: If the table was never created.
        """
        ...

    @abstractmethod
    def get_table(self, name: str) -> Table | None:
        """Return a table by name, or None."""
        ...

    @abstractmethod
    def table_names(self) -> list[str]:
        """Return table names in creation order."""
        ...

    @abstractmethod
    def get_stats(self) -> TableStoreStats:
        """Return store statistics for monitoring."""
        ...


class DatabaseError(Exception):
    """Base error for statement execution.

    Attributes:
        message: Human-readable message.
        statement: The statement that failed, when known.
    """

    def __init__(self, message: str, statement: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.statement = statement


class StatementSyntaxError(DatabaseError):
    """Raised when a statement matches none of the recognized shapes."""

    def __init__(self, statement: str) -> None:
        super().__init__(f"Syntax error: {statement}", statement)


class UnknownTableError(DatabaseError):
    """Raised when a statement references a table that was never created."""

    def __init__(self, table_name: str, statement: str | None = None) -> None:
        super().__init__(f"Unknown table: {table_name}", statement)
        self.table_name = table_name
