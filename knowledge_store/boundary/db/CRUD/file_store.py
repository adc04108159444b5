"""
File store operations.

Provides Create, Read, Update, Delete operations for knowledge files.
Deleting a file cascades to its sections and their chunks in the engine.

Dependencies: sqlalchemy, knowledge_store.boundary.db.models.file_model
System role: File metadata persistence
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from knowledge_store.boundary.db.CRUD.base_crud import BaseStore
from knowledge_store.boundary.db.models.file_model import FileModel
from knowledge_store.core.exceptions import KnowledgeFileNotFoundError, ValidationError
from knowledge_store.models.file import KnowledgeFile
from knowledge_store.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class FileStore(BaseStore[FileModel]):
    """
    SQLite store for KnowledgeFile records.

    Absence is reported as None/False on reads and deletes; only update
    treats a missing file as an error.
    """

    def __init__(
        self,
        connection_target: str | None = None,
        *,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize FileStore.

        Args:
            connection_target: Path, ":memory:", or sqlite URL
            engine: Shared engine (used by the KnowledgeStore facade)
        """
        super().__init__(FileModel, connection_target, engine)

    async def add(self, file: KnowledgeFile) -> UUID:
        """
        Insert a new file.

        Args:
            file: File to persist

        Returns:
            UUID: The file's id

        Raises:
            ValidationError: If file is None
            sqlalchemy.exc.IntegrityError: If the id already exists
        """
        if file is None:
            raise ValidationError("File cannot be None", field="file")

        await self._ensure_loaded()
        async with self._session_factory() as session:
            async with session.begin():
                session.add(FileModel.from_domain(file))
        return file.id

    async def get(self, file_id: UUID) -> KnowledgeFile | None:
        """
        Retrieve a file by id.

        Args:
            file_id: File UUID

        Returns:
            KnowledgeFile if found, None otherwise
        """
        row = await self._get_by_id(file_id)
        return row.to_domain() if row is not None else None

    async def exists(self, file_id: UUID) -> bool:
        return await self._exists(file_id)

    async def get_all(self) -> list[KnowledgeFile]:
        """
        Retrieve every file in the store.

        Returns:
            list[KnowledgeFile]: All files, in no particular order
        """
        await self._ensure_loaded()
        async with self._session_factory() as session:
            result = await session.execute(select(FileModel))
            return [row.to_domain() for row in result.scalars().all()]

    async def update(self, file: KnowledgeFile) -> None:
        """
        Overwrite name, hash, processed_at, and status of an existing file.

        Args:
            file: File carrying the new values

        Raises:
            ValidationError: If file is None
            KnowledgeFileNotFoundError: If no row has the file's id
        """
        if file is None:
            raise ValidationError("File cannot be None", field="file")

        await self._ensure_loaded()
        stmt = (
            update(FileModel)
            .where(FileModel.id == file.id)
            .values(
                name=file.name,
                hash=file.hash,
                processed_at=file.processed_at,
                status=int(file.status),
            )
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(stmt)

        if result.rowcount == 0:
            raise KnowledgeFileNotFoundError(str(file.id))

    async def delete(self, file_id: UUID) -> bool:
        """
        Delete a file and, through ON DELETE CASCADE, its sections and chunks.

        Args:
            file_id: File UUID

        Returns:
            True if the file existed and was removed, False otherwise
        """
        await self._ensure_loaded()
        stmt = (
            delete(FileModel)
            .where(FileModel.id == file_id)
            .execution_options(synchronize_session=False)
        )
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(stmt)

        deleted = result.rowcount > 0
        if deleted:
            log_with_context(logger, logging.DEBUG, "File deleted", file_id=file_id)
        return deleted
