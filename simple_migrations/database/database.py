"""Database facade used by migrations."""

import re
from datetime import datetime
from typing import Any

from simple_migrations.database.interfaces import DatabaseConnection, QueryResult
from simple_migrations.log import get_logger
from simple_migrations.types import DatabaseParamType

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_PLACEHOLDER = re.compile(r"%s|\?")


class Database:
    """Thin wrapper over a connection with optional query logging."""

    def __init__(
        self, connection: DatabaseConnection, log_queries: bool = False
    ) -> None:
        """Initialize database.

        Args:
            connection: Connection statements are executed on
            log_queries: Log every query with its parameters interpolated
        """
        self.connection = connection
        self.log_queries = log_queries

    async def connect(self) -> None:
        await self.connection.connect()

    async def disconnect(self) -> None:
        """End the connection."""
        await self.connection.disconnect()

    async def execute(
        self, query: str, params: DatabaseParamType = None
    ) -> QueryResult:
        """Execute a statement.

        Args:
            query: SQL statement
            params: Statement parameters

        Returns:
            Raw query result
        """
        self.log_query(query, params)
        return await self.connection.execute(query, params)

    async def query(self, query: str, params: DatabaseParamType = None) -> QueryResult:
        """Return a raw query result."""
        return await self.execute(query, params)

    async def select(
        self, query: str, params: DatabaseParamType = None
    ) -> list[dict[str, Any]]:
        """Return the selected rows."""
        result = await self.execute(query, params)
        return result.rows

    async def insert(self, query: str, params: DatabaseParamType = None) -> int | None:
        """Return the last inserted id."""
        result = await self.execute(query, params)
        return result.last_insert_id

    async def update(self, query: str, params: DatabaseParamType = None) -> int:
        """Return the number of updated rows."""
        result = await self.execute(query, params)
        return result.affected_rows

    async def delete(self, query: str, params: DatabaseParamType = None) -> int:
        """Return the number of deleted rows."""
        result = await self.execute(query, params)
        return result.affected_rows

    def log_query(self, query: str, params: DatabaseParamType = None) -> None:
        """Log a query with its parameters filled in.

        Only positional parameters are interpolated. Nothing is logged unless
        ``log_queries`` is enabled.
        """
        if not self.log_queries:
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        logger.info(f"[{timestamp}] {format_query(query, params)}")


def format_query(query: str, params: DatabaseParamType = None) -> str:
    """Collapse whitespace and substitute positional placeholders.

    Args:
        query: SQL query
        params: Positional parameters

    Returns:
        Single line query text
    """
    query = _WHITESPACE.sub(" ", query).strip()
    if not params or isinstance(params, dict):
        return query

    remaining = iter(params)

    def substitute(match: re.Match[str]) -> str:
        try:
            return str(next(remaining))
        except StopIteration:
            return match.group(0)

    return _PLACEHOLDER.sub(substitute, query)
