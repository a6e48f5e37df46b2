"""Value objects for the memdb domain.

Exports:
    - CommandKind: The four recognized statement shapes
    - Command: Parsed statement descriptor (kind + operands)
    - WhereClause: Equality filter split out of a where-clause blob
    - split_list: Split a comma-separated operand blob
"""

from memdb.domain.value_objects.command import (
    LIST_SEPARATOR,
    WHERE_SEPARATOR,
    Command,
    CommandKind,
    WhereClause,
    split_list,
)

__all__ = [
    "LIST_SEPARATOR",
    "WHERE_SEPARATOR",
    "Command",
    "CommandKind",
    "WhereClause",
    "split_list",
]
