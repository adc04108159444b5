"""
Section ORM model.

Stores section rows only; chunks live in their own table and are joined in
by the section store on read.

Dependencies: sqlalchemy, knowledge_store.boundary.db.base
System role: Middle table of the knowledge hierarchy
"""

import uuid

from sqlalchemy import ForeignKey, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from knowledge_store.boundary.db.base import Base, UUIDMixin
from knowledge_store.models.chunk import KnowledgeFileChunk
from knowledge_store.models.section import KnowledgeFileSection


class SectionModel(Base, UUIDMixin):
    """
    Section ORM model.

    Attributes:
        id: UUID primary key
        file_id: Owning file (ON DELETE CASCADE)
        section_index: Zero-based position within the file
        summary: Optional summary text
        additional_context: Optional free-text context

    Constraints:
        (file_id, section_index): UNIQUE
    """

    __tablename__ = "knowledge_section"
    __table_args__ = (
        Index("idx_sections_file_id", "file_id"),
        Index("idx_sections_file_index", "file_id", "section_index", unique=True),
    )

    file_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("knowledge_file.id", ondelete="CASCADE"),
        nullable=False,
    )
    section_index: Mapped[int] = mapped_column(Integer, nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    additional_context: Mapped[str | None] = mapped_column(Text, nullable=True)

    @classmethod
    def from_domain(cls, section: KnowledgeFileSection) -> "SectionModel":
        return cls(
            id=section.id,
            file_id=section.file_id,
            section_index=section.section_index,
            summary=section.summary,
            additional_context=section.additional_context,
        )

    def to_domain(self, chunks: list[KnowledgeFileChunk]) -> KnowledgeFileSection:
        return KnowledgeFileSection(
            id=self.id,
            file_id=self.file_id,
            section_index=self.section_index,
            summary=self.summary,
            additional_context=self.additional_context,
            chunks=chunks,
        )
