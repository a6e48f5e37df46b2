"""Statement descriptor and operand helpers.

A Command is produced by the statement parser for every recognized
statement and consumed immediately by the table engine. Operands are the
raw captured strings; tokenizing them is done here, on the engine side.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

LIST_SEPARATOR = ", "
WHERE_SEPARATOR = " = "


class CommandKind(Enum):
    """Recognized statement shapes, in matching order."""

    CREATE_TABLE = "create_table"
    INSERT = "insert"
    SELECT = "select"
    DELETE = "delete"


@dataclass(frozen=True)
class Command:
    """A parsed statement.

    Attributes:
        kind: Which of the four shapes matched.
        operands: Captured operand strings in capture order. An absent
            optional where-clause is None.
    """

    kind: CommandKind
    operands: tuple[str | None, ...]

    def __str__(self) -> str:
        args = ", ".join(repr(o) for o in self.operands)
        return f"{self.kind.name}({args})"


@dataclass(frozen=True)
class WhereClause:
    """Equality filter `column = value`."""

    column: str
    value: str | None

    @classmethod
    def parse(cls, clause: str) -> WhereClause:
        """Split a where-clause blob on the first two ' = ' parts.

        A clause without a separator filters on a missing value, so it
        only matches rows that lack the column.
        """
        parts = clause.split(WHERE_SEPARATOR)
        value = parts[1] if len(parts) > 1 else None
        return cls(column=parts[0], value=value)

    def matches(self, row: dict[str, str | None]) -> bool:
        return row.get(self.column) == self.value


def split_list(blob: str) -> list[str]:
    """Split a comma-separated operand blob. Commas inside values are not escaped."""
    return blob.split(LIST_SEPARATOR)
