"""Schema service: builds blueprints and runs their statements."""

from typing import Any, Callable

from simple_migrations.config import Config
from simple_migrations.database.database import Database
from simple_migrations.log import get_logger
from simple_migrations.schema.blueprint import Blueprint, BlueprintOptions

logger = get_logger(__name__)


class Schema:
    """Create and drop tables on a database."""

    def __init__(self, database: Database, config: Config) -> None:
        """Initialize schema service.

        Args:
            database: Database the compiled statements are sent to
            config: Configuration providing the default table options
        """
        self.database = database
        self.config = config

    def blueprint(self, name: str) -> Blueprint:
        """Create an empty blueprint seeded with the configured table options.

        Args:
            name: Table name

        Returns:
            New blueprint
        """
        defaults = self.config.settings.database
        options = BlueprintOptions(
            name=name,
            engine=defaults.engine,
            charset=defaults.charset,
            collate=defaults.collation,
        )
        return Blueprint(options)

    async def table(self, name: str, callback: Callable[[Blueprint], Any]) -> None:
        """Create a table.

        The callback receives the blueprint and must configure it
        synchronously. Statements are executed one after another; the first
        failure is raised and the remaining statements are not sent.

        Args:
            name: Table name
            callback: Function declaring the columns and indexes
        """
        blueprint = self.blueprint(name)
        callback(blueprint)

        statements = blueprint.compile_sql()
        logger.info(f"Creating table {name} ({len(statements)} statements)")

        for statement in statements:
            await self.database.execute(statement)

    async def drop_table(self, name: str) -> None:
        """Drop a table.

        Args:
            name: Table name
        """
        logger.info(f"Dropping table {name}")
        await self.database.execute(f"DROP TABLE {name}")
