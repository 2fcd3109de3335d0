"""Fluent table definitions compiled to MySQL DDL."""

from .config import Config, Settings, load_config
from .database import Database, MySQLConnection, QueryResult
from .exceptions import ConfigParseError, NoConnectionDetails, SimpleMigrationsError
from .log import get_logger, setup_logging, setup_test_logging
from .schema import Blueprint, BlueprintField, Schema
from .types import Engine, Environment, FieldType

__all__ = [
    "Blueprint",
    "BlueprintField",
    "Config",
    "ConfigParseError",
    "Database",
    "Engine",
    "Environment",
    "FieldType",
    "MySQLConnection",
    "NoConnectionDetails",
    "QueryResult",
    "Schema",
    "Settings",
    "SimpleMigrationsError",
    "get_logger",
    "load_config",
    "setup_logging",
    "setup_test_logging",
]
