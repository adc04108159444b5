"""
File ORM model.

Stores knowledge file metadata: name, content hash, processing time, and
indexing status.

Dependencies: sqlalchemy, knowledge_store.boundary.db.base
System role: Root table of the knowledge hierarchy
"""

from datetime import datetime

from sqlalchemy import Integer, LargeBinary, Text
from sqlalchemy.orm import Mapped, mapped_column

from knowledge_store.boundary.db.base import Base, IsoDateTime, UUIDMixin
from knowledge_store.models.file import IndexingStatus, KnowledgeFile


class FileModel(Base, UUIDMixin):
    """
    File ORM model.

    Attributes:
        id: UUID primary key
        name: Display name
        hash: Opaque content hash bytes
        processed_at: Last processing time, ISO-8601 text
        status: IndexingStatus stored as its integer value

    Constraints:
        Sections reference this table with ON DELETE CASCADE
    """

    __tablename__ = "knowledge_file"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    hash: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    processed_at: Mapped[datetime] = mapped_column(IsoDateTime, nullable=False)
    status: Mapped[int] = mapped_column(Integer, nullable=False)

    @classmethod
    def from_domain(cls, file: KnowledgeFile) -> "FileModel":
        return cls(
            id=file.id,
            name=file.name,
            hash=file.hash,
            processed_at=file.processed_at,
            status=int(file.status),
        )

    def to_domain(self) -> KnowledgeFile:
        return KnowledgeFile(
            id=self.id,
            name=self.name,
            hash=self.hash,
            processed_at=self.processed_at,
            status=IndexingStatus(self.status),
        )
