"""Domain entities.

Exports:
    - Table: Named schema plus ordered row list
    - Row: Column name to raw text value mapping
"""

from memdb.domain.entities.table import Row, Schema, Table

__all__ = ["Row", "Schema", "Table"]
