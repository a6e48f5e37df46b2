"""Inbound adapters for memdb.

Exports:
    Statement Parser:
        - StatementParser: Recognizes the four statement shapes

The REST API lives in memdb.adapters.inbound.rest_api and is imported
explicitly by callers that serve HTTP.
"""

from memdb.adapters.inbound.statement_parser import StatementParser

__all__ = ["StatementParser"]
