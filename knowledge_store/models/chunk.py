"""
Chunk domain model.

Represents a leaf unit of file content with an optional embedding vector.

Dependencies: pydantic
System role: Smallest addressable unit for indexing and search
"""

import uuid

from pydantic import BaseModel, Field


class KnowledgeFileChunk(BaseModel):
    """Chunk of section content with optional embedding."""

    id: uuid.UUID = Field(description="Unique chunk identifier")
    section_id: uuid.UUID = Field(description="Owning section identifier")
    chunk_index: int = Field(ge=0, description="Zero-based position within the section")
    content: str = Field(description="Chunk text content")
    embedding: list[float] | None = Field(
        default=None,
        description="Embedding vector; None until the chunk has been embedded",
    )

    def vector(self) -> list[float]:
        """Return the embedding, or an empty list when not yet embedded."""
        return self.embedding if self.embedding is not None else []

    def contains_vector(self) -> bool:
        return self.embedding is not None

    def __str__(self) -> str:
        return self.content
