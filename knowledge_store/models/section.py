"""
Section domain model.

Represents an ordered group of chunks within a file, plus optional summary
and additional context produced upstream.

Dependencies: pydantic, knowledge_store.models.chunk
System role: Middle level of the file → section → chunk hierarchy
"""

import uuid

from pydantic import BaseModel, Field

from knowledge_store.core.exceptions import ValidationError
from knowledge_store.models.chunk import KnowledgeFileChunk


class KnowledgeFileSection(BaseModel):
    """
    Section of a knowledge file.

    The chunk list is hydrated from the chunk table on read and is never
    stored inline with the section row.
    """

    id: uuid.UUID = Field(description="Unique section identifier")
    file_id: uuid.UUID = Field(description="Owning file identifier")
    section_index: int = Field(ge=0, description="Zero-based position within the file")
    summary: str | None = Field(default=None, description="Human-readable summary")
    additional_context: str | None = Field(
        default=None,
        description="Free-text context attached to the section",
    )
    chunks: list[KnowledgeFileChunk] = Field(
        default_factory=list,
        description="Chunks ordered by chunk_index",
    )

    @classmethod
    def create_from_chunks(
        cls,
        chunks: list[KnowledgeFileChunk],
        file_id: uuid.UUID,
        section_index: int,
    ) -> "KnowledgeFileSection":
        """
        Build a section from a flat chunk list.

        The section takes the id of the first chunk's section_id so chunks
        created ahead of the section keep pointing at it. Every chunk is
        copied with that section_id and its list position as chunk_index.

        Args:
            chunks: Non-empty list of chunks in reading order
            file_id: Owning file identifier
            section_index: Zero-based position of the section within the file

        Returns:
            KnowledgeFileSection with renumbered chunk copies

        Raises:
            ValidationError: If chunks is None or empty
        """
        if chunks is None:
            raise ValidationError("Chunks are required", field="chunks")
        if not chunks:
            raise ValidationError(
                "A knowledge file section must contain at least one chunk",
                field="chunks",
            )

        section_id = chunks[0].section_id
        numbered = [
            chunk.model_copy(update={"section_id": section_id, "chunk_index": index})
            for index, chunk in enumerate(chunks)
        ]
        return cls(
            id=section_id,
            file_id=file_id,
            section_index=section_index,
            chunks=numbered,
        )

    def text(self, separator: str = "") -> str:
        """Join chunk contents in order with the given separator."""
        return separator.join(chunk.content for chunk in self.chunks)

    def __str__(self) -> str:
        return self.text()
