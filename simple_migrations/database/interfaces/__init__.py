"""Database interfaces module."""

from .connection import DatabaseConnection, QueryResult

__all__ = [
    "DatabaseConnection",
    "QueryResult",
]
