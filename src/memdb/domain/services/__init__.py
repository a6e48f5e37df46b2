"""Domain services.

Exports:
    - TableEngine: In-memory table registry executing the four statements
"""

from memdb.domain.services.table_engine import TableEngine

__all__ = ["TableEngine"]
