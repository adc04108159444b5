"""
Chunk store operations.

Provides insert, lookup, bulk lookup, and delete-by-file for chunks.
Embeddings go through the EmbeddingBlob column type, so rows carry plain
float lists and the packing stays in one place.

Dependencies: sqlalchemy, knowledge_store.boundary.db.models
System role: Chunk and embedding persistence
"""

import logging
from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from knowledge_store.boundary.db.CRUD.base_crud import BaseStore
from knowledge_store.boundary.db.models.chunk_model import ChunkModel
from knowledge_store.boundary.db.models.section_model import SectionModel
from knowledge_store.core.exceptions import ValidationError
from knowledge_store.models.chunk import KnowledgeFileChunk
from knowledge_store.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ChunkStore(BaseStore[ChunkModel]):
    """
    SQLite store for KnowledgeFileChunk records.

    Each row stores the owning file id next to the section id. On insert
    that id is read from the section table on the same connection; a
    file id passed by the caller must agree with it. Foreign keys are
    enforced, so a section deleted in between makes the insert fail
    rather than leave an orphan chunk.
    """

    def __init__(
        self,
        connection_target: str | None = None,
        *,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize ChunkStore.

        Args:
            connection_target: Path, ":memory:", or sqlite URL
            engine: Shared engine (used by the KnowledgeStore facade)
        """
        super().__init__(ChunkModel, connection_target, engine)

    async def add(self, chunk: KnowledgeFileChunk, file_id: UUID | None = None) -> None:
        """
        Insert a chunk.

        Args:
            chunk: Chunk to persist; a None embedding is stored as NULL
            file_id: Expected owning file id; checked against the section

        Raises:
            ValidationError: If chunk is None, or file_id differs from the
                owning section's file
            sqlalchemy.exc.IntegrityError: If the id or (section_id, chunk_index)
                already exists, or the owning section does not exist
        """
        if chunk is None:
            raise ValidationError("Chunk cannot be None", field="chunk")

        await self._ensure_loaded()
        async with self._session_factory() as session:
            async with session.begin():
                owning_file_id = await self._resolve_file_id(session, chunk.section_id)
                if file_id is not None and owning_file_id not in (None, file_id):
                    raise ValidationError(
                        "Chunk file id does not match its section",
                        field="file_id",
                        details={
                            "section_id": str(chunk.section_id),
                            "expected_file_id": str(owning_file_id),
                        },
                    )
                if owning_file_id is None:
                    owning_file_id = file_id
                session.add(ChunkModel.from_domain(chunk, owning_file_id))

    async def get(self, chunk_id: UUID) -> KnowledgeFileChunk | None:
        """
        Retrieve a chunk by id.

        Args:
            chunk_id: Chunk UUID

        Returns:
            KnowledgeFileChunk if found, None otherwise
        """
        row = await self._get_by_id(chunk_id)
        return row.to_domain() if row is not None else None

    async def get_many(self, chunk_ids: Iterable[UUID]) -> list[KnowledgeFileChunk]:
        """
        Retrieve several chunks in a single IN (...) query.

        Args:
            chunk_ids: Chunk UUIDs; missing ids are skipped

        Returns:
            list[KnowledgeFileChunk]: The chunks that exist, each once, in no
            guaranteed order

        Raises:
            ValidationError: If chunk_ids is None
        """
        if chunk_ids is None:
            raise ValidationError("Chunk ids cannot be None", field="chunk_ids")

        ids = list(chunk_ids)
        if not ids:
            return []

        await self._ensure_loaded()
        stmt = select(ChunkModel).where(ChunkModel.id.in_(ids))
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [row.to_domain() for row in result.scalars().all()]

    async def get_by_index(
        self,
        section_id: UUID,
        chunk_index: int,
    ) -> KnowledgeFileChunk | None:
        """
        Retrieve the chunk at a position within a section.

        Args:
            section_id: Owning section UUID
            chunk_index: Zero-based position

        Returns:
            KnowledgeFileChunk if found, None otherwise
        """
        await self._ensure_loaded()
        stmt = select(ChunkModel).where(
            ChunkModel.section_id == section_id,
            ChunkModel.chunk_index == chunk_index,
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
        return row.to_domain() if row is not None else None

    async def get_by_section(self, section_id: UUID) -> list[KnowledgeFileChunk]:
        """
        Retrieve all chunks of a section.

        Args:
            section_id: Owning section UUID

        Returns:
            list[KnowledgeFileChunk]: Chunks ordered by chunk_index ascending
        """
        await self._ensure_loaded()
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.section_id == section_id)
            .order_by(ChunkModel.chunk_index)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [row.to_domain() for row in result.scalars().all()]

    async def update_embedding(
        self,
        chunk_id: UUID,
        embedding: Sequence[float] | None,
    ) -> bool:
        """
        Replace a chunk's embedding without touching its content or position.

        Args:
            chunk_id: Chunk UUID
            embedding: New vector, or None to mark the chunk as not embedded

        Returns:
            True if the chunk exists and was updated, False otherwise
        """
        await self._ensure_loaded()
        stmt = (
            update(ChunkModel)
            .where(ChunkModel.id == chunk_id)
            .values(embedding=list(embedding) if embedding is not None else None)
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(stmt)
        return result.rowcount > 0

    async def delete_by_file(self, file_id: UUID) -> bool:
        """
        Delete every chunk that belongs to a file.

        Args:
            file_id: Owning file UUID

        Returns:
            True if at least one chunk was removed, False otherwise
        """
        await self._ensure_loaded()
        stmt = (
            delete(ChunkModel)
            .where(ChunkModel.file_id == file_id)
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(stmt)

        log_with_context(
            logger,
            logging.DEBUG,
            "Chunks deleted by file",
            file_id=file_id,
            count=result.rowcount,
        )
        return result.rowcount > 0

    @staticmethod
    async def _resolve_file_id(session: AsyncSession, section_id: UUID) -> UUID | None:
        stmt = select(SectionModel.file_id).where(SectionModel.id == section_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()
