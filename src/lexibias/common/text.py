"""Tokenization and document-term helpers for small teaching corpora."""
from __future__ import annotations

from typing import Iterable, List, Sequence
import re

import pandas as pd
from sklearn.feature_extraction.text import CountVectorizer

from .similarity import cosine_similarity

__all__ = [
    "tokenize",
    "tokenize_corpus",
    "document_term_matrix",
    "document_similarity",
]

_WORD_RE = re.compile(r"\w+", re.UNICODE)


def tokenize(text: str, lowercase: bool = True) -> List[str]:
    """
    Split text into word tokens.

    Punctuation is discarded; runs of letters, digits and underscores form
    tokens.

    Args:
        text: Raw text
        lowercase: Lowercase tokens before returning them

    Returns:
        List of tokens

    Example:
        >>> tokenize("Cats chase mice, don't they?")
        ['cats', 'chase', 'mice', 'don', 't', 'they']
    """
    if lowercase:
        text = text.lower()
    return _WORD_RE.findall(text)


def tokenize_corpus(documents: Iterable[str], lowercase: bool = True) -> List[List[str]]:
    """Tokenize every document in a corpus."""
    return [tokenize(doc, lowercase=lowercase) for doc in documents]


def document_term_matrix(documents: Sequence[str], binary: bool = False) -> pd.DataFrame:
    """
    Build a document-term count matrix.

    Args:
        documents: Corpus as a sequence of document strings
        binary: Record presence (0/1) instead of counts

    Returns:
        DataFrame indexed ``Doc1..DocN`` with one column per vocabulary term
        (terms in alphabetical order).
    """
    if not documents:
        raise ValueError("Cannot build a document-term matrix from an empty corpus.")

    vectorizer = CountVectorizer(
        tokenizer=tokenize, lowercase=False, token_pattern=None, binary=binary
    )
    counts = vectorizer.fit_transform(documents)
    return pd.DataFrame(
        counts.toarray(),
        index=[f"Doc{i}" for i in range(1, len(documents) + 1)],
        columns=vectorizer.get_feature_names_out(),
    )


def document_similarity(dtm: pd.DataFrame, first: str, second: str) -> float:
    """Cosine similarity between two labelled rows of a document-term matrix."""
    for label in (first, second):
        if label not in dtm.index:
            raise KeyError(f"Document '{label}' not in the document-term matrix.")
    return cosine_similarity(dtm.loc[first].to_numpy(), dtm.loc[second].to_numpy())
