"""Table engine: in-memory table registry and statement operations.

The engine keeps every table in a dict keyed by name and executes the
four statement kinds against it. Operand handling is permissive:

- malformed column definitions produce odd schema entries, not errors
- insert pairs columns with values positionally; extra values are
  dropped and missing values are stored as None
- select and delete never check filter or projection columns against
  the schema; they use whatever keys the stored rows carry

The only failure is a reference to a table that was never created,
which raises UnknownTableError.
"""

from __future__ import annotations

from memdb.domain.entities import Row, Table
from memdb.domain.value_objects import WhereClause, split_list
from memdb.infrastructure.logging import get_logger
from memdb.ports.inbound.table_store import TableStoreStats, UnknownTableError

logger = get_logger(__name__)


class TableEngine:
    """In-memory implementation of the TableStore port.

    Not thread-safe. The execution facade either runs statements on a
    single worker or wraps calls in a lock.
    """

    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}

    def create_table(self, name: str, column_defs: str) -> None:
        """Create a table, replacing any existing table of the same name."""
        table = Table(name=name)
        for definition in split_list(column_defs):
            parts = definition.split()
            column = parts[0] if parts else ""
            table.columns[column] = parts[1] if len(parts) > 1 else None

        replaced = name in self._tables
        self._tables[name] = table
        logger.debug(
            "table_replaced" if replaced else "table_created",
            table=name,
            columns=list(table.columns),
        )

    def insert(self, name: str, columns: str, values: str) -> None:
        table = self._require(name)
        column_names = split_list(columns)
        value_list = split_list(values)

        row: Row = {}
        for i, column in enumerate(column_names):
            row[column] = value_list[i] if i < len(value_list) else None
        table.append(row)

    def select(self, columns: str, name: str, where: str | None = None) -> list[Row]:
        """Return matching rows.

        With a where-clause the full rows are returned and the column
        list is ignored. Without one, every row is projected to the
        requested columns.
        """
        table = self._require(name)
        column_names = split_list(columns)

        if where:
            clause = WhereClause.parse(where)
            return [dict(row) for row in table.rows if clause.matches(row)]

        return [
            {column: row.get(column) for column in column_names}
            for row in table.rows
        ]

    def delete(self, name: str, where: str | None = None) -> int:
        table = self._require(name)
        before = table.row_count

        if where:
            clause = WhereClause.parse(where)
            table.rows = [row for row in table.rows if not clause.matches(row)]
        else:
            table.rows = []

        removed = before - table.row_count
        logger.debug("rows_deleted", table=name, removed=removed)
        return removed

    def get_table(self, name: str) -> Table | None:
        return self._tables.get(name)

    def table_names(self) -> list[str]:
        """Return table names in creation order."""
        return list(self._tables)

    def get_stats(self) -> TableStoreStats:
        # list() copies the registry in one step; a worker may be adding tables.
        tables = list(self._tables.items())
        return TableStoreStats(
            table_count=len(tables),
            row_counts={name: t.row_count for name, t in tables},
        )

    def _require(self, name: str) -> Table:
        table = self._tables.get(name)
        if table is None:
            raise UnknownTableError(name)
        return table
