"""
Database models package.

Exports:
  - FileModel: knowledge_file rows
  - SectionModel: knowledge_section rows (cascade from file)
  - ChunkModel: knowledge_chunk rows (cascade from section)

Dependencies: sqlalchemy, knowledge_store.boundary.db.base
System role: Row definitions for the three-table hierarchy
"""

from knowledge_store.boundary.db.models.chunk_model import ChunkModel
from knowledge_store.boundary.db.models.file_model import FileModel
from knowledge_store.boundary.db.models.section_model import SectionModel

__all__ = [
    "FileModel",
    "SectionModel",
    "ChunkModel",
]
