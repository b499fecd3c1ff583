"""
General-purpose bias analysis tools for word embeddings.

This module provides implicit-association measures that work with any
EmbeddingSpace, whether trained with ``train.glove`` or loaded from a
pretrained vector file.
"""

from .bias_query import Method, QueryResult, REQUIRED_SETS, infer_method, query

__all__ = [
    "Method",
    "QueryResult",
    "REQUIRED_SETS",
    "infer_method",
    "query",
]
