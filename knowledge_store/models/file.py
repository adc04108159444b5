"""
Knowledge file domain model.

Represents a source file with its content hash and indexing state.

Dependencies: pydantic
System role: Root of the file → section → chunk hierarchy
"""

import enum
import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field


class IndexingStatus(int, enum.Enum):
    """
    Indexing lifecycle states, persisted as integers.

    PENDING: Waiting to be processed
    INDEXED: Successfully indexed and available for search
    ERROR: Processing failed
    UNSUPPORTED_CONTENT_TYPE: Content type cannot be indexed
    """

    PENDING = 0
    INDEXED = 1
    ERROR = 2
    UNSUPPORTED_CONTENT_TYPE = 3


class KnowledgeFile(BaseModel):
    """Knowledge file metadata."""

    id: uuid.UUID = Field(description="Unique file identifier")
    name: str = Field(description="Display name of the file")
    hash: bytes = Field(description="Content hash used for upstream change detection")
    processed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the file was last processed",
    )
    status: IndexingStatus = Field(
        default=IndexingStatus.PENDING,
        description="Current indexing status",
    )
