"""
Test suite for shared store behavior.

Covers lazy schema creation, the tables and indexes it creates, and
several store instances working on one database file.

System role: Verification of the store foundation and file-backed sharing
"""

import asyncio

import pytest
from sqlalchemy import text

from knowledge_store.boundary.db.CRUD import ChunkStore, FileStore, SectionStore
from knowledge_store.boundary.db.CRUD.base_crud import schema_tables
from knowledge_store.boundary.db.models import ChunkModel, FileModel, SectionModel
from knowledge_store.core.exceptions import ValidationError


class TestSchemaTables:
    """Test suite for schema_tables ordering."""

    def test_chunk_table_should_list_parents_first(self) -> None:
        """Test the chunk table pulls in section and file tables, parents first."""
        names = [table.name for table in schema_tables(ChunkModel.__table__)]

        assert names == ["knowledge_file", "knowledge_section", "knowledge_chunk"]

    def test_file_table_should_stand_alone(self) -> None:
        """Test a table without foreign keys lists only itself."""
        assert schema_tables(FileModel.__table__) == [FileModel.__table__]

    def test_row_models_should_share_metadata(self) -> None:
        """Test every row model is registered on the same metadata."""
        assert SectionModel.metadata is FileModel.metadata is ChunkModel.metadata


class TestLazyInitialization:
    """Test suite for BaseStore.load and first-use initialization."""

    def test_store_without_target_should_raise(self) -> None:
        """Test a store needs a target or an engine."""
        with pytest.raises(ValidationError):
            FileStore()

    @pytest.mark.asyncio
    async def test_first_operation_should_create_schema(self, file_store: FileStore, make_file) -> None:
        """Test the store is uninitialized until first use."""
        # Arrange
        assert file_store.is_initialized is False

        # Act
        await file_store.add(make_file())

        # Assert
        assert file_store.is_initialized is True

    @pytest.mark.asyncio
    async def test_concurrent_first_calls_should_initialize_once(self, file_store: FileStore, make_file) -> None:
        """Test many simultaneous first calls all succeed."""
        # Arrange
        files = [make_file(name=f"f{i}.txt") for i in range(5)]

        # Act
        results = await asyncio.gather(*(file_store.exists(f.id) for f in files))

        # Assert
        assert results == [False] * 5
        assert file_store.is_initialized is True

    @pytest.mark.asyncio
    async def test_load_should_create_tables_and_indexes(self, chunk_store: ChunkStore) -> None:
        """Test schema objects exist after load, including parent tables."""
        # Act
        await chunk_store.load()
        await chunk_store.load()

        # Assert
        async with chunk_store.engine.connect() as conn:
            result = await conn.execute(
                text("SELECT type, name FROM sqlite_master WHERE name LIKE 'knowledge_%' OR name LIKE 'idx_%'")
            )
            objects = {(row.type, row.name) for row in result}

        assert ("table", "knowledge_file") in objects
        assert ("table", "knowledge_section") in objects
        assert ("table", "knowledge_chunk") in objects
        for index in (
            "idx_sections_file_id",
            "idx_sections_file_index",
            "idx_chunks_section_id",
            "idx_chunks_file_id",
            "idx_chunks_section_index",
        ):
            assert ("index", index) in objects

    @pytest.mark.asyncio
    async def test_load_should_keep_existing_rows(self, db_path: str, make_file) -> None:
        """Test re-initializing an existing database changes nothing."""
        # Arrange
        first = FileStore(db_path)
        file = make_file()
        await first.add(file)
        await first.dispose()

        # Act
        second = FileStore(db_path)
        try:
            await second.load()
            found = await second.get(file.id)
        finally:
            await second.dispose()

        # Assert
        assert found is not None


class TestSharedDatabaseFile:
    """Test suite for several store instances on one database file."""

    @pytest.mark.asyncio
    async def test_write_should_be_visible_to_other_instance(self, db_path: str, make_file) -> None:
        """Test one instance reads what another committed."""
        # Arrange
        writer = FileStore(db_path)
        reader = FileStore(db_path)
        file = make_file()

        # Act
        try:
            await writer.add(file)
            found = await reader.get(file.id)
        finally:
            await writer.dispose()
            await reader.dispose()

        # Assert
        assert found is not None
        assert found.name == file.name

    @pytest.mark.asyncio
    async def test_concurrent_writers_should_all_succeed(self, db_path: str, make_file) -> None:
        """Test interleaved inserts from two instances all land."""
        # Arrange
        stores = [FileStore(db_path), FileStore(db_path)]
        for store in stores:
            await store.load()
        files = [make_file(name=f"file_{i}.txt") for i in range(20)]

        # Act
        try:
            await asyncio.gather(
                *(stores[i % 2].add(file) for i, file in enumerate(files))
            )
            stored = await stores[0].get_all()
        finally:
            for store in stores:
                await store.dispose()

        # Assert
        assert {f.id for f in stored} == {f.id for f in files}

    @pytest.mark.asyncio
    async def test_stores_loaded_in_any_order_should_work(self, db_path: str, make_file, make_section) -> None:
        """Test the chunk store works before the file or section store is loaded."""
        # Arrange
        chunks = ChunkStore(db_path)
        sections = SectionStore(db_path, chunks)
        files = FileStore(db_path)
        await chunks.load()
        file = make_file()
        section = make_section(file.id)

        # Act
        try:
            await files.add(file)
            await sections.add(section)
            await chunks.add(section.chunks[0])
            stored = await sections.get(section.id)
        finally:
            for store in (chunks, sections, files):
                await store.dispose()

        # Assert
        assert len(stored.chunks) == 1
