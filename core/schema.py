# =============================================================================
# core/schema.py - Users Table Bootstrap
# =============================================================================
# Creates the users table when it doesn't exist. The UNIQUE constraint on
# email backs up the service-level duplicate check, which is not atomic.
# =============================================================================

import logging

from lib.database import StorageClient

logger = logging.getLogger(__name__)


USERS_TABLE_DDL = {
    "postgresql": """
        CREATE TABLE IF NOT EXISTS users (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """,
    # AUTOINCREMENT keeps SQLite from reusing the ids of deleted rows
    "sqlite": """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        )
    """,
}


async def init_schema(storage: StorageClient) -> None:
    """
    Create the users table for the storage dialect.

    Raises:
        ValueError: If the dialect has no DDL
        StorageError: If the statement fails
    """
    ddl = USERS_TABLE_DDL.get(storage.dialect)
    if ddl is None:
        raise ValueError(f"Unsupported database dialect: {storage.dialect}")

    await storage.execute(ddl)
    logger.info("Users table ready")
