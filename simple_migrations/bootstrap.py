"""Build the database and schema services from configuration."""

from simple_migrations.config import Config, load_config
from simple_migrations.database import Database, MySQLConnection
from simple_migrations.exceptions import NoConnectionDetails
from simple_migrations.log import get_logger, setup_logging
from simple_migrations.schema import Schema

logger = get_logger(__name__)


def create_database(config: Config) -> Database:
    """Create a database facade from the ``connection`` config section.

    The connection is not opened.

    Args:
        config: Loaded configuration

    Returns:
        Database wrapping a MySQL connection

    Raises:
        NoConnectionDetails: If the config has no ``connection`` section
    """
    connection = config.settings.connection
    if connection is None:
        raise NoConnectionDetails()

    return Database(
        MySQLConnection(connection),
        log_queries=config.settings.log_queries,
    )


def create_schema(config: Config, database: Database) -> Schema:
    return Schema(database, config)


async def connect(config: Config | None = None) -> Schema:
    """Load configuration, configure logging and open the database.

    Args:
        config: Configuration to use, loaded from the config file when omitted

    Returns:
        Schema service bound to a connected database
    """
    if config is None:
        config = load_config()

    setup_logging(config.settings.log_level)

    database = create_database(config)
    await database.connect()
    logger.info("Database connection established")

    return create_schema(config, database)
