"""Table entity.

A table holds a declared schema and an ordered list of rows. Type tags
in the schema are never interpreted, and rows are not checked against
the schema: a row carries exactly the columns its insert supplied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Row = dict[str, str | None]
Schema = dict[str, str | None]


@dataclass
class Table:
    """A named table.

    Attributes:
        name: Table name, unique within a store.
        columns: Ordered mapping of column name to type tag.
        rows: Stored rows in insertion order.
    """

    name: str
    columns: Schema = field(default_factory=dict)
    rows: list[Row] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def append(self, row: Row) -> None:
        self.rows.append(row)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the table to a JSON-ready dictionary."""
        return {
            "columns": dict(self.columns),
            "data": [dict(row) for row in list(self.rows)],
        }
