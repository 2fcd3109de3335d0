"""Configuration management for simple-migrations."""

import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigParseError
from .types import Engine, Environment

CONFIG_FILE = "./simple-migrations-config.json"


class ConnectionSettings(BaseModel):
    """MySQL connection details."""

    host: str = Field(default="127.0.0.1", description="Database host")
    port: int = Field(default=3306, description="Database port")
    username: str = Field(description="Database user")
    password: str = Field(default="", description="Database password")
    database: str = Field(description="Schema to connect to")


class TableDefaults(BaseModel):
    """Defaults applied to every new table blueprint."""

    engine: Engine | None = Field(default=Engine.INNODB, description="Storage engine")
    charset: str | None = Field(default="utf8", description="Character set")
    collation: str | None = Field(default="utf8_croatian_ci", description="Collation")


class Settings(BaseModel):
    """Application settings."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_queries: bool = Field(
        default=False, description="Whether executed queries are logged"
    )
    connection: ConnectionSettings | None = Field(
        default=None, description="Connection details"
    )
    database: TableDefaults = Field(default_factory=TableDefaults)


class Config:
    """Dotted-path lookup over the raw configuration data."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._settings: Settings | None = None

    def get(self, path: str, default: Any = None) -> Any:
        """Return the value at ``path`` (e.g. ``"database.engine"``).

        Args:
            path: Dot separated key path
            default: Value returned when any segment of the path is missing

        Returns:
            The configured value or ``default``
        """
        node: Any = self._data
        for key in path.split("."):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    @property
    def settings(self) -> Settings:
        """Validated settings built from the raw data."""
        if self._settings is None:
            try:
                self._settings = Settings.model_validate(self._data)
            except ValidationError as e:
                raise ConfigParseError(f"Failed parsing configuration: {e}") from e
        return self._settings


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    environment = os.getenv("SIMPLE_MIGRATIONS_ENV")
    if environment:
        data["environment"] = environment

    log_level = os.getenv("SIMPLE_MIGRATIONS_LOG_LEVEL")
    if log_level:
        data["log_level"] = log_level.upper()

    log_queries = os.getenv("SIMPLE_MIGRATIONS_LOG_QUERIES")
    if log_queries is not None:
        data["log_queries"] = log_queries.lower() in ["true", "1", "yes", "on"]

    return data


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from the JSON config file and environment.

    Args:
        path: Config file path. Defaults to ``SIMPLE_MIGRATIONS_CONFIG`` or
            ``./simple-migrations-config.json``.

    Returns:
        Loaded configuration

    Raises:
        ConfigParseError: If the file is missing, malformed or invalid
    """
    load_dotenv()

    config_path = Path(path or os.getenv("SIMPLE_MIGRATIONS_CONFIG", CONFIG_FILE))
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigParseError() from e

    if not isinstance(data, dict):
        raise ConfigParseError()

    config = Config(_apply_env_overrides(data))
    # Fail early on invalid values
    config.settings
    return config
