"""MySQL database implementation package."""

from .mysql_connection import MySQLConnection

__all__ = [
    "MySQLConnection",
]
