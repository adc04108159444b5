"""
Shared test fixtures and configuration for entire test suite.

Provides: file-backed and in-memory stores, domain object builders
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid
from pathlib import Path
from typing import Callable

import pytest

from knowledge_store.boundary.db.CRUD import ChunkStore, FileStore, SectionStore
from knowledge_store.boundary.db.knowledge_store import KnowledgeStore
from knowledge_store.models import KnowledgeFile, KnowledgeFileChunk, KnowledgeFileSection


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """
    Provide a path for a fresh SQLite database file.

    The file is not created up front; the first store operation creates it.
    """
    return str(tmp_path / "knowledge.db")


@pytest.fixture
async def file_store(db_path: str):
    """Provide FileStore on the test database file."""
    store = FileStore(db_path)
    yield store
    await store.dispose()


@pytest.fixture
async def chunk_store(db_path: str):
    """Provide ChunkStore on the test database file."""
    store = ChunkStore(db_path)
    yield store
    await store.dispose()


@pytest.fixture
async def section_store(db_path: str, chunk_store: ChunkStore):
    """Provide SectionStore on the test database file, hydrating via chunk_store."""
    store = SectionStore(db_path, chunk_store)
    yield store
    await store.dispose()


@pytest.fixture
async def knowledge_store(db_path: str):
    """Provide loaded KnowledgeStore facade on the test database file."""
    store = await KnowledgeStore.create(db_path)
    yield store
    await store.dispose()


@pytest.fixture
async def memory_store():
    """Provide loaded KnowledgeStore facade on an in-memory database."""
    store = await KnowledgeStore.create(":memory:")
    yield store
    await store.dispose()


@pytest.fixture
def make_file() -> Callable[..., KnowledgeFile]:
    """Build KnowledgeFile instances with fresh ids."""

    def _make(name: str = "test.txt", hash: bytes = b"\x01\x02\x03\x04") -> KnowledgeFile:
        return KnowledgeFile(id=uuid.uuid4(), name=name, hash=hash)

    return _make


@pytest.fixture
def make_chunk() -> Callable[..., KnowledgeFileChunk]:
    """Build KnowledgeFileChunk instances with fresh ids."""

    def _make(
        section_id: uuid.UUID,
        chunk_index: int = 0,
        content: str = "Test chunk content",
        embedding: list[float] | None = None,
    ) -> KnowledgeFileChunk:
        return KnowledgeFileChunk(
            id=uuid.uuid4(),
            section_id=section_id,
            chunk_index=chunk_index,
            content=content,
            embedding=embedding,
        )

    return _make


@pytest.fixture
def make_section(make_chunk) -> Callable[..., KnowledgeFileSection]:
    """Build sections through the chunk-list factory."""

    def _make(
        file_id: uuid.UUID,
        section_index: int = 0,
        chunk_count: int = 1,
        summary: str | None = "Test section",
    ) -> KnowledgeFileSection:
        section_id = uuid.uuid4()
        chunks = [
            make_chunk(
                section_id,
                index,
                f"Chunk {index} of section {section_index}",
                [0.1 * (index + 1), 0.2, 0.3],
            )
            for index in range(chunk_count)
        ]
        section = KnowledgeFileSection.create_from_chunks(chunks, file_id, section_index)
        section.summary = summary
        return section

    return _make
