"""
Chunk ORM model.

Stores chunk text and its packed embedding. Each row also carries the
owning file id, copied from the section at insert time, so a whole file's
chunks can be deleted without a join.

Dependencies: sqlalchemy, knowledge_store.boundary.db.base
System role: Leaf table of the knowledge hierarchy
"""

import uuid

from sqlalchemy import ForeignKey, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from knowledge_store.boundary.db.base import Base, EmbeddingBlob, UUIDMixin
from knowledge_store.models.chunk import KnowledgeFileChunk


class ChunkModel(Base, UUIDMixin):
    """
    Chunk ORM model.

    Attributes:
        id: UUID primary key
        section_id: Owning section (ON DELETE CASCADE)
        chunk_index: Zero-based position within the section
        content: Chunk text
        embedding: Packed float32 vector, NULL when not embedded
        file_id: Owning file, denormalized from the section

    Constraints:
        (section_id, chunk_index): UNIQUE
    """

    __tablename__ = "knowledge_chunk"
    __table_args__ = (
        Index("idx_chunks_section_id", "section_id"),
        Index("idx_chunks_file_id", "file_id"),
        Index("idx_chunks_section_index", "section_id", "chunk_index", unique=True),
    )

    section_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("knowledge_section.id", ondelete="CASCADE"),
        nullable=False,
    )
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    embedding: Mapped[list[float] | None] = mapped_column(EmbeddingBlob, nullable=True)
    file_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)

    @classmethod
    def from_domain(cls, chunk: KnowledgeFileChunk, file_id: uuid.UUID) -> "ChunkModel":
        return cls(
            id=chunk.id,
            section_id=chunk.section_id,
            chunk_index=chunk.chunk_index,
            content=chunk.content,
            embedding=chunk.embedding,
            file_id=file_id,
        )

    def to_domain(self) -> KnowledgeFileChunk:
        return KnowledgeFileChunk(
            id=self.id,
            section_id=self.section_id,
            chunk_index=self.chunk_index,
            content=self.content,
            embedding=self.embedding,
        )
