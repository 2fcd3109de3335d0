"""Database connection interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any

from simple_migrations.types import DatabaseParamType


@dataclass
class QueryResult:
    """Result of an executed statement."""

    rows: list[dict[str, Any]] = field(default_factory=list)
    affected_rows: int = 0
    last_insert_id: int | None = None


class DatabaseConnection(ABC):
    """Abstract database connection interface."""

    @abstractmethod
    async def connect(self) -> None:
        """Establish database connection."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close database connection."""
        pass

    @abstractmethod
    async def execute(
        self,
        query: str,
        params: DatabaseParamType = None,
    ) -> QueryResult:
        """Execute a query.

        Args:
            query: SQL query
            params: Query parameters

        Returns:
            Returned rows, affected row count and last inserted id
        """
        pass

    @abstractmethod
    async def fetch_one(
        self,
        query: str,
        params: DatabaseParamType = None,
    ) -> dict[str, Any] | None:
        """Fetch single row.

        Args:
            query: SQL query
            params: Query parameters

        Returns:
            Single row as dictionary or None if not found
        """
        pass

    @abstractmethod
    async def fetch_all(
        self,
        query: str,
        params: DatabaseParamType = None,
    ) -> list[dict[str, Any]]:
        """Fetch all rows.

        Args:
            query: SQL query
            params: Query parameters

        Returns:
            List of rows as dictionaries
        """
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Check if connection is active."""
        pass

    async def __aenter__(self) -> "DatabaseConnection":
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.disconnect()
