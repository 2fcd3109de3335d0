"""Database access for migrations."""

from .database import Database, format_query
from .implementations import MySQLConnection
from .interfaces import DatabaseConnection, QueryResult

__all__ = [
    "Database",
    "DatabaseConnection",
    "MySQLConnection",
    "QueryResult",
    "format_query",
]
