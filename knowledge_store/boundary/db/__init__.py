"""
Database boundary layer: ORM models, stores, and connection management.

Exports:
  - Base, UUIDMixin: Model building blocks
  - build_database_url(), create_store_engine(), get_session_factory(): Connection management
  - FileModel, SectionModel, ChunkModel: Row models
  - BaseStore, FileStore, SectionStore, ChunkStore: Stores
  - KnowledgeStore: Facade over the three stores

Dependencies: sqlalchemy, aiosqlite, knowledge_store.configs
System role: Database adapter providing persistent storage for files,
sections, and chunks with lazy schema creation.
"""

from knowledge_store.boundary.db.base import Base, UUIDMixin
from knowledge_store.boundary.db.connection import (
    build_database_url,
    create_store_engine,
    get_session_factory,
)
from knowledge_store.boundary.db.models import ChunkModel, FileModel, SectionModel
from knowledge_store.boundary.db.CRUD import (
    BaseStore,
    ChunkStore,
    FileStore,
    SectionStore,
)
from knowledge_store.boundary.db.knowledge_store import KnowledgeStore

__all__ = [
    # Base classes
    "Base",
    "UUIDMixin",
    # Connection
    "build_database_url",
    "create_store_engine",
    "get_session_factory",
    # Models
    "FileModel",
    "SectionModel",
    "ChunkModel",
    # Stores
    "BaseStore",
    "FileStore",
    "SectionStore",
    "ChunkStore",
    "KnowledgeStore",
]
