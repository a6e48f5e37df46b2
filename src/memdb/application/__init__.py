"""Application layer for memdb.

The application layer wires the statement parser to the table engine
and owns statement scheduling.

Exports:
    - Database: Execution facade, the single entry point for statements
"""

from memdb.application.database import Database

__all__ = ["Database"]
