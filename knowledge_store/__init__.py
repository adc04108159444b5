"""
Knowledge store: embedded persistence for files, sections, and chunks.

Exports:
  - KnowledgeStore: Facade composing the file, section, and chunk stores
  - FileStore, SectionStore, ChunkStore: Individual SQLite-backed stores
  - KnowledgeFile, KnowledgeFileSection, KnowledgeFileChunk, IndexingStatus: Domain models

Dependencies: sqlalchemy, aiosqlite, pydantic, numpy
System role: Leaf storage layer for the indexing and search pipelines
"""

from knowledge_store.boundary.db import (
    ChunkStore,
    FileStore,
    KnowledgeStore,
    SectionStore,
)
from knowledge_store.models import (
    IndexingStatus,
    KnowledgeFile,
    KnowledgeFileChunk,
    KnowledgeFileSection,
)

__all__ = [
    "KnowledgeStore",
    "FileStore",
    "SectionStore",
    "ChunkStore",
    "KnowledgeFile",
    "KnowledgeFileSection",
    "KnowledgeFileChunk",
    "IndexingStatus",
]
