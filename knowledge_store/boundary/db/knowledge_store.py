"""
Knowledge store facade.

Composes the file, section, and chunk stores over one shared engine so a
single connection target backs all three.

Dependencies: knowledge_store.boundary.db.CRUD, knowledge_store.configs
System role: Single entry point to the storage layer
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncEngine

from knowledge_store.boundary.db.connection import create_store_engine
from knowledge_store.boundary.db.CRUD import ChunkStore, FileStore, SectionStore
from knowledge_store.configs import Settings, get_settings
from knowledge_store.core.exceptions import ValidationError
from knowledge_store.models.section import KnowledgeFileSection

logger = logging.getLogger(__name__)


class KnowledgeStore:
    """
    Facade over FileStore, SectionStore, and ChunkStore.

    Lifecycle: Uninitialized until load() or the first store operation,
    then Initialized for the rest of the instance's life. save() exists for
    symmetry with load() and does nothing, since every write commits before
    returning.

    Attributes:
        files: File metadata store
        sections: Section store (hydrates chunks through `chunks`)
        chunks: Chunk and embedding store

    Usage:
        async with await KnowledgeStore.create("knowledge.db") as store:
            await store.files.add(file)
            await store.add_section_with_chunks(section)
    """

    def __init__(
        self,
        connection_target: str | None = None,
        *,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize the facade and its component stores.

        Args:
            connection_target: Path, ":memory:", or sqlite URL
            engine: Existing engine to use instead of creating one

        Raises:
            ValidationError: If neither a usable target nor an engine is given
        """
        if engine is None:
            if connection_target is None or not connection_target.strip():
                raise ValidationError(
                    "Connection string cannot be null or empty",
                    field="connection_target",
                )
            engine = create_store_engine(connection_target)

        self.connection_target = connection_target
        self._engine = engine
        self.files = FileStore(engine=engine)
        self.chunks = ChunkStore(engine=engine)
        self.sections = SectionStore(chunk_store=self.chunks, engine=engine)

    @classmethod
    async def create(cls, path: str) -> "KnowledgeStore":
        """
        Build a store for a database path and initialize its schema.

        Args:
            path: SQLite file path (or ":memory:")

        Returns:
            KnowledgeStore: Loaded store
        """
        store = cls(path)
        await store.load()
        return store

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "KnowledgeStore":
        """
        Build a store from configuration.

        Args:
            settings: Settings to read; defaults to get_settings()

        Returns:
            KnowledgeStore: Store for settings.database.connection_target
        """
        db_config = (settings or get_settings()).database
        engine = create_store_engine(
            db_config.connection_target,
            busy_timeout=db_config.busy_timeout,
            echo=db_config.echo_sql,
        )
        return cls(db_config.connection_target, engine=engine)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def load(self) -> None:
        """Initialize every component store. Safe to call repeatedly."""
        await self.files.load()
        await self.sections.load()
        await self.chunks.load()
        logger.debug("Knowledge store loaded: %s", self.connection_target)

    async def save(self) -> None:
        await self.files.save()
        await self.chunks.save()
        await self.sections.save()

    async def delete_file(self, file_id: UUID) -> bool:
        """
        Delete a file together with all of its sections and chunks.

        Args:
            file_id: File UUID

        Returns:
            True if the file existed, False otherwise
        """
        return await self.files.delete(file_id)

    async def add_section_with_chunks(self, section: KnowledgeFileSection) -> None:
        """Write a section and its chunks atomically."""
        await self.sections.add_with_chunks(section)

    async def dispose(self) -> None:
        """Close pooled connections held by the shared engine."""
        await self._engine.dispose()

    async def __aenter__(self) -> "KnowledgeStore":
        await self.load()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.dispose()
