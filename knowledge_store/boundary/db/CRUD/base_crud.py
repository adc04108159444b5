"""
Base store operations for SQLAlchemy models.

Provides lazy schema creation, explicit load/save, and the generic
primary-key lookups shared by the file, section, and chunk stores.

Dependencies: sqlalchemy, uuid
System role: Foundation for all store implementations
"""

import asyncio
import logging
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import Table, select
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.schema import CreateIndex, CreateTable

from knowledge_store.boundary.db.base import Base
from knowledge_store.boundary.db.connection import create_store_engine, get_session_factory
from knowledge_store.core.exceptions import ValidationError
from knowledge_store.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def schema_tables(table: Table) -> list[Table]:
    """
    List a table and every table its foreign keys reach, parents first.

    A store creates all of them so it works without the other stores
    having been loaded; SQLite rejects inserts whose parent table is missing.
    """
    ordered: list[Table] = []
    for fk in sorted(table.foreign_keys, key=lambda fk: fk.target_fullname):
        for parent in schema_tables(fk.column.table):
            if parent not in ordered:
                ordered.append(parent)
    ordered.append(table)
    return ordered


class BaseStore(Generic[ModelT]):
    """
    Generic base class for SQLite-backed stores.

    Each store lazily creates its schema on first use. Creation runs under
    an asyncio.Lock and every statement is IF NOT EXISTS, so concurrent
    first calls, in this process or another one, are harmless.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class the store owns
    """

    def __init__(
        self,
        model: type[ModelT],
        connection_target: str | None = None,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize store against a connection target or a shared engine.

        Args:
            model: SQLAlchemy model class for database operations
            connection_target: Path, ":memory:", or sqlite URL
            engine: Existing engine to share; takes precedence over the target

        Raises:
            ValidationError: If neither a target nor an engine is given
        """
        if engine is None:
            if connection_target is None:
                raise ValidationError(
                    "Connection target cannot be null",
                    field="connection_target",
                )
            engine = create_store_engine(connection_target)
            self._owns_engine = True
        else:
            self._owns_engine = False

        self.model = model
        self._engine = engine
        self._session_factory = get_session_factory(engine)
        self._is_initialized = False
        self._init_lock = asyncio.Lock()

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    async def load(self) -> None:
        """
        Create this store's tables and indexes if they are absent.

        Idempotent; later calls return immediately.
        """
        if self._is_initialized:
            return
        async with self._init_lock:
            if self._is_initialized:
                return
            await self._initialize_schema()
            self._is_initialized = True

    async def save(self) -> None:
        """No-op: every mutation is committed before its call returns."""
        return None

    async def dispose(self) -> None:
        """Release pooled connections if this store created its own engine."""
        if self._owns_engine:
            await self._engine.dispose()

    async def _ensure_loaded(self) -> None:
        if not self._is_initialized:
            await self.load()

    async def _initialize_schema(self) -> None:
        tables = schema_tables(self.model.__table__)
        async with self._engine.begin() as conn:
            for table in tables:
                await conn.execute(CreateTable(table, if_not_exists=True))
                for index in sorted(table.indexes, key=lambda index: index.name):
                    await conn.execute(CreateIndex(index, if_not_exists=True))
        log_with_context(
            logger,
            logging.DEBUG,
            "Schema initialized",
            table=self.model.__tablename__,
            tables=[table.name for table in tables],
        )

    async def _get_by_id(self, id: UUID) -> ModelT | None:
        """
        Retrieve a single row by primary key.

        Args:
            id: UUID primary key

        Returns:
            Model instance if found, None otherwise
        """
        await self._ensure_loaded()
        stmt = select(self.model).where(self.model.id == id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def _exists(self, id: UUID) -> bool:
        """
        Check if a row exists by primary key.

        Args:
            id: UUID primary key

        Returns:
            True if row exists, False otherwise
        """
        await self._ensure_loaded()
        stmt = select(self.model.id).where(self.model.id == id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none() is not None
