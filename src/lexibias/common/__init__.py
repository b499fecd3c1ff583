"""Shared data model and primitives for embedding training and analysis."""

from .errors import (
    EmbeddingQueryError,
    MissingWordError,
    EmptyWordSetError,
    AmbiguousMethodError,
    DimensionMismatchError,
)
from .similarity import cosine_similarity, cosine_similarity_matrix
from .embedding_space import EmbeddingSpace

__all__ = [
    "EmbeddingQueryError",
    "MissingWordError",
    "EmptyWordSetError",
    "AmbiguousMethodError",
    "DimensionMismatchError",
    "cosine_similarity",
    "cosine_similarity_matrix",
    "EmbeddingSpace",
]
