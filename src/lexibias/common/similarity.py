"""Cosine similarity primitives."""
from __future__ import annotations

import logging

import numpy as np
from scipy import sparse

from .errors import DimensionMismatchError

logger = logging.getLogger(__name__)

__all__ = [
    "cosine_similarity",
    "cosine_similarity_matrix",
]


def cosine_similarity(u, v) -> float:
    """
    Compute the cosine of the angle between two vectors.

    Args:
        u: First vector (any 1-D array-like of numbers).
        v: Second vector, same length as ``u``.

    Returns:
        float: ``dot(u, v) / (||u|| * ||v||)``. If either vector has zero norm
        the cosine is undefined and ``nan`` is returned instead of raising.

    Raises:
        DimensionMismatchError: If the vectors do not have the same shape.
    """
    u = np.asarray(u, dtype=np.float64).ravel()
    v = np.asarray(v, dtype=np.float64).ravel()
    if u.shape != v.shape:
        raise DimensionMismatchError(u.shape, v.shape)

    denom = np.linalg.norm(u) * np.linalg.norm(v)
    if denom == 0:
        logger.debug("Cosine similarity undefined for zero-norm vector")
        return float("nan")

    return float(np.dot(u, v) / denom)


def cosine_similarity_matrix(matrix) -> np.ndarray:
    """
    Pairwise cosine similarity between the rows of a matrix.

    Args:
        matrix: 2-D array, pandas DataFrame, or scipy.sparse matrix with one
            observation (document or word) per row.

    Returns:
        np.ndarray: Symmetric ``(n_rows, n_rows)`` matrix. Rows with zero norm
        produce ``nan`` in their row and column.
    """
    if sparse.issparse(matrix):
        dense = matrix.toarray().astype(np.float64)
    else:
        dense = np.asarray(matrix, dtype=np.float64)
    if dense.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got shape {dense.shape}")

    norms = np.linalg.norm(dense, axis=1)
    with np.errstate(divide="ignore", invalid="ignore"):
        sims = (dense @ dense.T) / np.outer(norms, norms)
    sims[norms == 0, :] = np.nan
    sims[:, norms == 0] = np.nan
    return sims
