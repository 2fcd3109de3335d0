"""Global pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest

from simple_migrations import setup_test_logging
from simple_migrations.config import Config
from simple_migrations.database import Database, QueryResult
from simple_migrations.schema import Blueprint, BlueprintOptions, Schema
from simple_migrations.types import Engine


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture
def config_data() -> dict:
    """Raw configuration as read from simple-migrations-config.json."""
    return {
        "log_queries": True,
        "connection": {
            "host": "db.local",
            "port": 3307,
            "username": "migrator",
            "password": "secret",
            "database": "app",
        },
        "database": {
            "engine": "InnoDB",
            "charset": "utf8",
            "collation": "utf8_croatian_ci",
        },
    }


@pytest.fixture
def config(config_data: dict) -> Config:
    return Config(config_data)


@pytest.fixture
def blueprint() -> Blueprint:
    """Blueprint for a ``users`` table with the default options."""
    return Blueprint(
        BlueprintOptions(
            name="users",
            engine=Engine.INNODB,
            charset="utf8",
            collate="utf8_croatian_ci",
        )
    )


@pytest.fixture
def mock_database() -> AsyncMock:
    """Database collaborator recording executed statements."""
    database = AsyncMock(spec=Database)
    database.execute.return_value = QueryResult()
    return database


@pytest.fixture
def schema(mock_database: AsyncMock, config: Config) -> Schema:
    return Schema(mock_database, config)
