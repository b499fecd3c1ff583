"""Vocabulary and distance-weighted co-occurrence matrix construction."""
from __future__ import annotations

from collections import Counter
from typing import List, Sequence

import numpy as np
from scipy import sparse

__all__ = [
    "build_vocabulary",
    "build_cooccurrence",
]


def build_vocabulary(tokenized_docs: Sequence[Sequence[str]], min_count: int = 1) -> List[str]:
    """
    Collect the vocabulary of a tokenized corpus.

    Args:
        tokenized_docs: One token list per document
        min_count: Minimum corpus frequency for a term to be kept

    Returns:
        Terms ordered by descending frequency, ties broken alphabetically
    """
    if min_count < 1:
        raise ValueError(f"min_count must be at least 1, got {min_count}")

    counts = Counter(token for doc in tokenized_docs for token in doc)
    kept = [(term, n) for term, n in counts.items() if n >= min_count]
    kept.sort(key=lambda item: (-item[1], item[0]))
    return [term for term, _ in kept]


def build_cooccurrence(
    tokenized_docs: Sequence[Sequence[str]],
    vocabulary: Sequence[str],
    window_size: int,
) -> sparse.csr_matrix:
    """
    Build a symmetric term co-occurrence matrix with 1/distance weighting.

    Two tokens ``d`` positions apart (1 <= d <= window_size) within the same
    document add ``1/d`` to cell (i, j) and to cell (j, i). Windows never cross
    document boundaries, and tokens outside the vocabulary are removed before
    distances are measured. A term co-occurring with itself is counted once.

    Args:
        tokenized_docs: One token list per document
        vocabulary: Terms defining row/column order
        window_size: Maximum token distance W

    Returns:
        ``(len(vocabulary), len(vocabulary))`` CSR matrix of float64 weights
    """
    if window_size < 1:
        raise ValueError(f"window_size must be a positive integer, got {window_size}")

    index = {term: i for i, term in enumerate(vocabulary)}
    n_terms = len(index)

    rows, cols, weights = [], [], []
    for doc in tokenized_docs:
        ids = [index[token] for token in doc if token in index]
        for pos, term_id in enumerate(ids):
            for distance in range(1, window_size + 1):
                if pos + distance >= len(ids):
                    break
                rows.append(term_id)
                cols.append(ids[pos + distance])
                weights.append(1.0 / distance)

    # Duplicate (row, col) entries are summed on conversion
    forward = sparse.coo_matrix(
        (
            np.asarray(weights, dtype=np.float64),
            (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64)),
        ),
        shape=(n_terms, n_terms),
    ).tocsr()

    symmetric = forward + forward.T - sparse.diags(forward.diagonal())
    symmetric = sparse.csr_matrix(symmetric)
    symmetric.eliminate_zeros()
    return symmetric
