"""
Database table creation script.

Creates the file, section, and chunk tables for a connection target ahead
of first use, instead of waiting for lazy initialization.

Dependencies: sqlalchemy, knowledge_store.configs
System role: Database schema initialization

Usage:
    python -m knowledge_store.boundary.db.create_tables [connection_target]
"""

import asyncio
import logging
import sys

from knowledge_store.boundary.db.base import Base
from knowledge_store.boundary.db.knowledge_store import KnowledgeStore
from knowledge_store.configs import get_settings
from knowledge_store.observability.log_utils import log_exception_with_context
from knowledge_store.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables(connection_target: str | None = None) -> None:
    """
    Create all tables and indexes for a connection target.

    Idempotent: every statement is IF NOT EXISTS, so safe to run multiple
    times. Existing tables and rows remain unchanged.

    Args:
        connection_target: Path or URL; defaults to the configured target

    Raises:
        SQLAlchemyError: If the database cannot be opened or written
    """
    target = connection_target or get_settings().database.connection_target
    store = KnowledgeStore(target)
    try:
        await store.load()
    finally:
        await store.dispose()
    logger.info("Knowledge store tables created at %s", target)


async def drop_all_tables(connection_target: str | None = None) -> None:
    """
    Drop the file, section, and chunk tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        connection_target: Path or URL; defaults to the configured target
    """
    target = connection_target or get_settings().database.connection_target
    store = KnowledgeStore(target)
    try:
        async with store.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    finally:
        await store.dispose()
    logger.info("Knowledge store tables dropped at %s", target)


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = sys.argv[1:] if argv is None else argv
    target = args[0] if args else None
    try:
        asyncio.run(create_all_tables(target))
    except Exception as exc:
        log_exception_with_context(logger, "Table creation failed", exc, target=target)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
