#!/usr/bin/env python3
"""Create and drop a ``users`` table using simple-migrations-config.json."""

import asyncio

from simple_migrations.bootstrap import connect
from simple_migrations.log import get_logger
from simple_migrations.schema import Blueprint


def users(table: Blueprint) -> None:
    table.int_("id", 11).auto_increment().primary()
    table.varchar("email", 255).unique()
    table.varchar("name", 128).nullable().comment("Display name")
    table.enum("role", ["admin", "editor", "viewer"]).default("viewer")
    table.tinyint("active", 1).default(1)
    table.json("preferences").nullable()
    table.timestamp("created_at")
    table.add_unique_index("idx_email", ["email"])


async def main() -> None:
    """Run the demo migration."""
    logger = get_logger(__name__)

    schema = await connect()
    try:
        # Dry run: print the statements without executing them
        preview = schema.blueprint("users")
        users(preview)
        for statement in preview.compile_sql():
            logger.info(f"Compiled: {statement}")

        await schema.table("users", users)
        logger.info("Table users created")

        await schema.drop_table("users")
        logger.info("Table users dropped")
    finally:
        await schema.database.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
