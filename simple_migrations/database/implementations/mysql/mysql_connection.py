"""MySQL database connection implementation."""

from typing import Any

import aiomysql

from simple_migrations.config import ConnectionSettings
from simple_migrations.database.interfaces import DatabaseConnection, QueryResult
from simple_migrations.log import get_logger
from simple_migrations.types import DatabaseParamType

logger = get_logger(__name__)


class MySQLConnection(DatabaseConnection):
    """Single aiomysql connection."""

    def __init__(self, details: ConnectionSettings) -> None:
        """Initialize MySQL connection.

        Args:
            details: Host, port, credentials and schema name
        """
        self.details = details
        self._connection: aiomysql.Connection | None = None

    async def connect(self) -> None:
        """Establish MySQL database connection."""
        try:
            self._connection = await aiomysql.connect(
                host=self.details.host,
                port=self.details.port,
                user=self.details.username,
                password=self.details.password,
                db=self.details.database,
                autocommit=True,
                cursorclass=aiomysql.DictCursor,
            )
            logger.info(
                f"Connected to MySQL: {self.details.host}:{self.details.port}"
                f"/{self.details.database}"
            )
        except aiomysql.Error as e:
            logger.error(f"Failed to connect to MySQL database: {e}")
            raise

    async def disconnect(self) -> None:
        """Close MySQL database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from MySQL")

    def _require_connection(self) -> aiomysql.Connection:
        if not self._connection:
            raise RuntimeError("Database not connected")
        return self._connection

    async def execute(
        self, query: str, params: DatabaseParamType = None
    ) -> QueryResult:
        """Execute a query.

        Args:
            query: SQL query
            params: Query parameters

        Returns:
            Query result
        """
        connection = self._require_connection()

        try:
            async with connection.cursor() as cursor:
                await cursor.execute(query, params or None)
                rows = await cursor.fetchall()
                return QueryResult(
                    rows=list(rows or []),
                    affected_rows=cursor.rowcount,
                    last_insert_id=cursor.lastrowid,
                )
        except aiomysql.Error as e:
            logger.error(f"Query execution failed: {e}")
            raise

    async def fetch_one(
        self, query: str, params: DatabaseParamType = None
    ) -> dict[str, Any] | None:
        """Fetch single row.

        Args:
            query: SQL query
            params: Query parameters

        Returns:
            Single row as dictionary or None
        """
        connection = self._require_connection()

        try:
            async with connection.cursor() as cursor:
                await cursor.execute(query, params or None)
                row = await cursor.fetchone()
                return dict(row) if row else None
        except aiomysql.Error as e:
            logger.error(f"Fetch one failed: {e}")
            raise

    async def fetch_all(
        self, query: str, params: DatabaseParamType = None
    ) -> list[dict[str, Any]]:
        """Fetch all rows.

        Args:
            query: SQL query
            params: Query parameters

        Returns:
            List of rows as dictionaries
        """
        connection = self._require_connection()

        try:
            async with connection.cursor() as cursor:
                await cursor.execute(query, params or None)
                rows = await cursor.fetchall()
                return [dict(row) for row in rows]
        except aiomysql.Error as e:
            logger.error(f"Fetch all failed: {e}")
            raise

    @property
    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self._connection is not None
