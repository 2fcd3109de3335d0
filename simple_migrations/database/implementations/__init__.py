"""Database implementations package."""

from .mysql import MySQLConnection

__all__ = [
    "MySQLConnection",
]
