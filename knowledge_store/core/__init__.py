"""
Core module.

Contains the exception hierarchy shared by the domain models and the stores.
"""

from knowledge_store.core.exceptions import (
    EmbeddingCodecError,
    KnowledgeFileNotFoundError,
    KnowledgeStoreException,
    ValidationError,
)

__all__ = [
    "KnowledgeStoreException",
    "ValidationError",
    "KnowledgeFileNotFoundError",
    "EmbeddingCodecError",
]
