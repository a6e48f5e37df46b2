"""Pytest configuration and fixtures for memdb tests."""

from __future__ import annotations

from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from memdb.application import Database
from memdb.domain.services import TableEngine
from memdb.infrastructure.config import Config, ExecutionConfig
from memdb.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def test_config() -> Config:
    """Provide a configuration with no simulated latency."""
    return Config(execution=ExecutionConfig(execution_delay=0.0, max_workers=1))


@pytest.fixture
def engine() -> TableEngine:
    """Provide an empty table engine."""
    return TableEngine()


@pytest.fixture
def db(
    test_config: Config, metrics_registry: MetricsRegistry
) -> Generator[Database, None, None]:
    """Provide a started database."""
    database = Database.from_config(test_config, metrics=metrics_registry)
    database.start()
    yield database
    database.stop()


@pytest.fixture
def author_db(db: Database) -> Database:
    """Provide a database holding the author table with two rows."""
    db.execute_many(
        [
            "create table author (id number, name string, age number)",
            "insert into author (id, name, age) values (1, Ann, 30)",
            "insert into author (id, name, age) values (2, Bo, 40)",
        ]
    )
    return db


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
