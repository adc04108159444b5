"""
Test suite for the embedding BLOB codec.

Verifies the little-endian float32 layout, the empty-vector case, and the
errors raised for malformed input.

System role: Verification of embedding serialization
"""

import numpy as np
import pytest

from knowledge_store.boundary.db.embedding_codec import (
    EMBEDDING_DTYPE,
    decode_embedding,
    encode_embedding,
)
from knowledge_store.core.exceptions import EmbeddingCodecError


class TestEncodeEmbedding:
    """Test suite for encode_embedding."""

    def test_encode_should_produce_four_bytes_per_value(self) -> None:
        """Test blob length is 4 * len(embedding)."""
        # Arrange
        embedding = [0.1, 0.2, 0.3]

        # Act
        blob = encode_embedding(embedding)

        # Assert
        assert len(blob) == 12

    def test_encode_should_use_little_endian_float32(self) -> None:
        """Test byte layout matches IEEE-754 single precision, little-endian."""
        # Act
        blob = encode_embedding([1.0, -2.0])

        # Assert
        assert blob == b"\x00\x00\x80\x3f\x00\x00\x00\xc0"

    def test_encode_empty_embedding_should_return_empty_bytes(self) -> None:
        """Test an empty vector packs to zero bytes."""
        assert encode_embedding([]) == b""

    def test_encode_should_reject_two_dimensional_input(self) -> None:
        """Test nested vectors raise EmbeddingCodecError."""
        with pytest.raises(EmbeddingCodecError):
            encode_embedding([[0.1, 0.2], [0.3, 0.4]])


class TestDecodeEmbedding:
    """Test suite for decode_embedding."""

    def test_decode_should_restore_float32_values(self) -> None:
        """Test decoded values equal their float32 rounding."""
        # Arrange
        embedding = [0.1, 0.2, 0.3]
        expected = np.asarray(embedding, dtype=np.float32).tolist()

        # Act
        result = decode_embedding(encode_embedding(embedding))

        # Assert
        assert result == expected
        assert all(isinstance(value, float) for value in result)

    def test_decode_should_be_bit_identical_for_large_vectors(self) -> None:
        """Test a 10,000-dimension vector survives byte for byte."""
        # Arrange
        rng = np.random.default_rng(7)
        vector = rng.standard_normal(10_000).astype(EMBEDDING_DTYPE)
        blob = vector.tobytes()

        # Act
        result = decode_embedding(blob)

        # Assert
        assert len(result) == 10_000
        assert np.asarray(result, dtype=EMBEDDING_DTYPE).tobytes() == blob

    def test_decode_empty_bytes_should_return_empty_list(self) -> None:
        """Test an empty blob decodes to an empty vector."""
        assert decode_embedding(b"") == []

    def test_decode_should_reject_partial_values(self) -> None:
        """Test a length that is not a multiple of 4 raises EmbeddingCodecError."""
        # Act & Assert
        with pytest.raises(EmbeddingCodecError) as exc_info:
            decode_embedding(b"\x00" * 5)

        assert exc_info.value.details["byte_length"] == 5
