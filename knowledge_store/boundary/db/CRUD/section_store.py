"""
Section store operations.

Provides insert, lookup by id or position, and delete-by-file for sections.
Reads hydrate the section's chunks through the chunk store.

Dependencies: sqlalchemy, knowledge_store.boundary.db.CRUD.chunk_store
System role: Section persistence
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncEngine

from knowledge_store.boundary.db.CRUD.base_crud import BaseStore
from knowledge_store.boundary.db.CRUD.chunk_store import ChunkStore
from knowledge_store.boundary.db.models.chunk_model import ChunkModel
from knowledge_store.boundary.db.models.section_model import SectionModel
from knowledge_store.core.exceptions import ValidationError
from knowledge_store.models.section import KnowledgeFileSection
from knowledge_store.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class SectionStore(BaseStore[SectionModel]):
    """
    SQLite store for KnowledgeFileSection records.

    add() writes the section row only; chunks are persisted separately
    through the chunk store, or together with the section through
    add_with_chunks().
    """

    def __init__(
        self,
        connection_target: str | None = None,
        chunk_store: ChunkStore | None = None,
        *,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize SectionStore.

        Args:
            connection_target: Path, ":memory:", or sqlite URL
            chunk_store: Store used to hydrate chunks; one sharing this
                store's engine is created when omitted
            engine: Shared engine (used by the KnowledgeStore facade)
        """
        super().__init__(SectionModel, connection_target, engine)
        self._chunk_store = chunk_store or ChunkStore(engine=self._engine)

    @property
    def chunk_store(self) -> ChunkStore:
        return self._chunk_store

    async def add(self, section: KnowledgeFileSection) -> None:
        """
        Insert the section row. Its chunk list is not written.

        Args:
            section: Section to persist

        Raises:
            ValidationError: If section is None
            sqlalchemy.exc.IntegrityError: If the id or (file_id, section_index)
                already exists, or the owning file does not exist
        """
        if section is None:
            raise ValidationError("Section cannot be None", field="section")

        await self._ensure_loaded()
        async with self._session_factory() as session:
            async with session.begin():
                session.add(SectionModel.from_domain(section))

    async def add_with_chunks(self, section: KnowledgeFileSection) -> None:
        """
        Insert the section row and all of its chunks in one transaction.

        Either everything is written or nothing is. The chunks' file id is
        taken from the section, so no lookup is needed.

        Args:
            section: Section whose chunks all carry section.id as section_id

        Raises:
            ValidationError: If section is None or a chunk belongs to another section
            sqlalchemy.exc.IntegrityError: On any constraint violation
        """
        if section is None:
            raise ValidationError("Section cannot be None", field="section")
        for chunk in section.chunks:
            if chunk.section_id != section.id:
                raise ValidationError(
                    "Chunk does not belong to the section being written",
                    field="chunks",
                    details={"chunk_id": str(chunk.id), "section_id": str(section.id)},
                )

        await self._ensure_loaded()
        await self._chunk_store.load()
        async with self._session_factory() as session:
            async with session.begin():
                session.add(SectionModel.from_domain(section))
                # Parent row must be inserted before its chunks reference it
                await session.flush()
                session.add_all(
                    [ChunkModel.from_domain(chunk, section.file_id) for chunk in section.chunks]
                )

        log_with_context(
            logger,
            logging.DEBUG,
            "Section written with chunks",
            section_id=section.id,
            chunk_count=len(section.chunks),
        )

    async def get(self, section_id: UUID) -> KnowledgeFileSection | None:
        """
        Retrieve a section by id with its chunks.

        Args:
            section_id: Section UUID

        Returns:
            KnowledgeFileSection with chunks ordered by index, None if not found
        """
        row = await self._get_by_id(section_id)
        if row is None:
            return None
        chunks = await self._chunk_store.get_by_section(row.id)
        return row.to_domain(chunks)

    async def get_by_index(
        self,
        file_id: UUID,
        section_index: int,
    ) -> KnowledgeFileSection | None:
        """
        Retrieve the section at a position within a file, with its chunks.

        Args:
            file_id: Owning file UUID
            section_index: Zero-based position

        Returns:
            KnowledgeFileSection if found, None otherwise
        """
        await self._ensure_loaded()
        stmt = select(SectionModel).where(
            SectionModel.file_id == file_id,
            SectionModel.section_index == section_index,
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()

        if row is None:
            return None
        chunks = await self._chunk_store.get_by_section(row.id)
        return row.to_domain(chunks)

    async def delete_by_file(self, file_id: UUID) -> bool:
        """
        Delete every section of a file; ON DELETE CASCADE removes their chunks.

        Args:
            file_id: Owning file UUID

        Returns:
            True if at least one section was removed, False otherwise
        """
        await self._ensure_loaded()
        stmt = (
            delete(SectionModel)
            .where(SectionModel.file_id == file_id)
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(stmt)

        log_with_context(
            logger,
            logging.DEBUG,
            "Sections deleted by file",
            file_id=file_id,
            count=result.rowcount,
        )
        return result.rowcount > 0
