"""
Embedding BLOB codec.

Embeddings are stored as tightly packed little-endian float32 values with
no header; the vector length is len(blob) / 4.

Dependencies: numpy
System role: Binary serialization of chunk embeddings
"""

from typing import Sequence

import numpy as np

from knowledge_store.core.exceptions import EmbeddingCodecError

EMBEDDING_DTYPE = np.dtype("<f4")


def encode_embedding(embedding: Sequence[float]) -> bytes:
    """
    Pack an embedding into its BLOB representation.

    Args:
        embedding: One-dimensional sequence of floats

    Returns:
        bytes: 4 * len(embedding) bytes of little-endian float32

    Raises:
        EmbeddingCodecError: If the embedding is not one-dimensional
    """
    vector = np.asarray(embedding, dtype=EMBEDDING_DTYPE)
    if vector.ndim != 1:
        raise EmbeddingCodecError(
            f"Embedding must be one-dimensional, got {vector.ndim} dimensions"
        )
    return vector.tobytes()


def decode_embedding(data: bytes) -> list[float]:
    """
    Unpack a BLOB produced by encode_embedding.

    Args:
        data: Raw column value

    Returns:
        list[float]: Decoded vector (float32 precision)

    Raises:
        EmbeddingCodecError: If the length is not a multiple of 4
    """
    if len(data) % EMBEDDING_DTYPE.itemsize:
        raise EmbeddingCodecError(
            "Embedding blob length is not a multiple of 4",
            byte_length=len(data),
        )
    return np.frombuffer(data, dtype=EMBEDDING_DTYPE).tolist()
