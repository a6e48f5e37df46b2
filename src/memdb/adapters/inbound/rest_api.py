"""REST API adapter for memdb.

This module provides a FastAPI-based REST API that submits statements
to a Database, one statement per request.

Endpoints:
    POST /execute - Execute a statement
    POST /execute/batch - Execute statements together
    GET /tables - Dump every table
    GET /health - Health check
    GET /stats - Database statistics

Usage:
    from memdb.adapters.inbound.rest_api import create_app
    from memdb.application import Database

    db = Database()
    db.start()

    app = create_app(db)
    # Run with uvicorn: uvicorn app:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from memdb import __version__
from memdb.application import Database
from memdb.ports.inbound.table_store import DatabaseError


class StatementRequest(BaseModel):
    """Request model for statement execution."""

    statement: str = Field(..., description="Statement to execute")


class BatchRequest(BaseModel):
    """Request model for batch execution."""

    statements: list[str] = Field(..., description="Statements to execute together")


class StatementResponse(BaseModel):
    """Response model for statement execution."""

    success: bool = Field(..., description="Whether the statement succeeded")
    message: str = Field("", description="Status or error message")
    rows: list[dict[str, Any]] | None = Field(None, description="Selected rows")


class StatsResponse(BaseModel):
    """Response model for database statistics."""

    started: bool = Field(..., description="Whether the database is started")
    tables: int = Field(..., description="Number of tables")
    rows: dict[str, int] = Field(default_factory=dict, description="Row count per table")
    statements_total: int = Field(0, description="Statements processed")
    statements_failed: int = Field(0, description="Statements that failed")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


def _error_response(error: DatabaseError) -> StatementResponse:
    return StatementResponse(success=False, message=error.message)


def create_app(db: Database) -> FastAPI:
    """Create a FastAPI application for a database.

    Args:
        db: The database to submit statements to.

    Returns:
        A configured FastAPI application.
    """
    app = FastAPI(
        title="memdb API",
        description="REST API for executing memdb statements",
        version=__version__,
    )

    def _require_started() -> None:
        if not db.is_started:
            raise HTTPException(status_code=503, detail="Database not started")

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy" if db.is_started else "unhealthy",
            version=__version__,
        )

    @app.get("/stats", response_model=StatsResponse, tags=["Stats"])
    async def get_stats() -> StatsResponse:
        """Get database statistics."""
        _require_started()
        return StatsResponse(**db.get_stats())

    @app.get("/tables", tags=["Tables"])
    async def get_tables() -> dict[str, Any]:
        """Dump every table with its schema and rows."""
        _require_started()
        return db.snapshot()

    @app.post("/execute", response_model=StatementResponse, tags=["Statements"])
    async def execute_statement(request: StatementRequest) -> StatementResponse:
        """Execute one statement."""
        _require_started()
        try:
            rows = await db.execute_async(request.statement)
        except DatabaseError as e:
            return _error_response(e)
        return StatementResponse(success=True, message="OK", rows=rows)

    @app.post("/execute/batch", response_model=list[StatementResponse], tags=["Statements"])
    async def execute_batch(request: BatchRequest) -> list[StatementResponse]:
        """Execute statements together; each gets its own response."""
        _require_started()
        futures = [db.execute(statement) for statement in request.statements]
        responses = []
        for future in futures:
            try:
                rows = await asyncio.wrap_future(future)
            except DatabaseError as e:
                responses.append(_error_response(e))
                continue
            responses.append(StatementResponse(success=True, message="OK", rows=rows))
        return responses

    return app


def run_server(
    db: Database,
    host: str = "0.0.0.0",
    port: int = 8000,
) -> None:
    """Run the REST API server.

    Args:
        db: The database.
        host: Host to bind to.
        port: Port to bind to.
    """
    import uvicorn

    app = create_app(db)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    from memdb.infrastructure import get_config, setup_logging, setup_metrics, setup_tracing

    config = get_config()
    setup_logging(config.observability.log_level, config.observability.log_format)
    setup_tracing(config.observability.otel_service_name, config.observability.otel_endpoint)
    metrics = setup_metrics(config.server.metrics_port)
    with Database.from_config(config, metrics=metrics) as db:
        run_server(db, host=config.server.host, port=config.server.port)
