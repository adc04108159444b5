"""
SQLAlchemy declarative base, common mixins, and column types.

Provides base class for all ORM models, the UUID primary key mixin, and
type decorators for ISO-8601 timestamps and packed embedding vectors.

Dependencies: sqlalchemy, knowledge_store.boundary.db.embedding_codec
System role: Foundation for all database models
"""

import uuid
from datetime import datetime

from sqlalchemy import LargeBinary, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from knowledge_store.boundary.db.embedding_codec import decode_embedding, encode_embedding


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All row models inherit from this class so their tables share one
    MetaData and foreign keys between them resolve at DDL time.
    """

    pass


class UUIDMixin:
    """
    Mixin providing UUID primary key to all models.

    Ids are normally assigned by callers; the default only covers rows
    created without one. SQLite stores them as 32-character hex strings.

    Attributes:
        id: UUID primary key
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )


class IsoDateTime(TypeDecorator):
    """Datetime stored as ISO-8601 text, keeping any timezone offset."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> str | None:
        if value is None:
            return None
        return value.isoformat()

    def process_result_value(self, value: str | None, dialect) -> datetime | None:
        if value is None:
            return None
        return datetime.fromisoformat(value)


class EmbeddingBlob(TypeDecorator):
    """Embedding vector stored as packed float32; NULL means not embedded."""

    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value, dialect) -> bytes | None:
        if value is None:
            return None
        return encode_embedding(value)

    def process_result_value(self, value: bytes | None, dialect) -> list[float] | None:
        if value is None:
            return None
        return decode_embedding(value)
