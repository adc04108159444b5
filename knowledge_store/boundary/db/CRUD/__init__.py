"""
Store operations for database models.

Exports the base store class and the file, section, and chunk stores.

Usage:
    from knowledge_store.boundary.db.CRUD import FileStore, ChunkStore, SectionStore

    chunks = ChunkStore("knowledge.db")
    sections = SectionStore("knowledge.db", chunks)
    section = await sections.get(section_id)
"""

from knowledge_store.boundary.db.CRUD.base_crud import BaseStore
from knowledge_store.boundary.db.CRUD.chunk_store import ChunkStore
from knowledge_store.boundary.db.CRUD.file_store import FileStore
from knowledge_store.boundary.db.CRUD.section_store import SectionStore

__all__ = [
    "BaseStore",
    "FileStore",
    "SectionStore",
    "ChunkStore",
]
