"""
Domain models package.

Exports:
  - KnowledgeFile, IndexingStatus: Root file record and its processing state
  - KnowledgeFileSection: Ordered grouping of chunks within a file
  - KnowledgeFileChunk: Leaf text unit with optional embedding

Dependencies: pydantic
System role: Store-agnostic data structures exchanged with callers
"""

from knowledge_store.models.chunk import KnowledgeFileChunk
from knowledge_store.models.file import IndexingStatus, KnowledgeFile
from knowledge_store.models.section import KnowledgeFileSection

__all__ = [
    "IndexingStatus",
    "KnowledgeFile",
    "KnowledgeFileSection",
    "KnowledgeFileChunk",
]
