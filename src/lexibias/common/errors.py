"""Error types raised by embedding lookups and association queries."""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

__all__ = [
    "EmbeddingQueryError",
    "MissingWordError",
    "EmptyWordSetError",
    "AmbiguousMethodError",
    "DimensionMismatchError",
]


class EmbeddingQueryError(Exception):
    """Base class for all errors raised while querying an embedding space."""


class MissingWordError(EmbeddingQueryError, KeyError):
    """One or more words are not in the embedding vocabulary.

    Attributes:
        words: Every absent word, in the order it was requested.
    """

    def __init__(self, words: Iterable[str]):
        self.words = list(words)
        super().__init__(f"Words not in the embedding vocabulary: {self.words}")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class EmptyWordSetError(EmbeddingQueryError, ValueError):
    """A word set required by the resolved method is empty."""

    def __init__(self, set_name: str, method: Optional[str] = None):
        self.set_name = set_name
        self.method = method
        if method:
            message = f"Word set {set_name} must not be empty for method '{method}'"
        else:
            message = f"Word set {set_name} must not be empty"
        super().__init__(message)


class AmbiguousMethodError(EmbeddingQueryError, ValueError):
    """Method inference could not map the supplied word sets to one method."""

    def __init__(self, provided: Tuple[str, ...]):
        self.provided = tuple(provided)
        super().__init__(
            f"Cannot infer a method from non-empty word sets {list(self.provided)}. "
            "Supply S and A (mac), S, A and B (rnd) or S, T, A and B (weat), "
            "or name the method explicitly."
        )


class DimensionMismatchError(EmbeddingQueryError, ValueError):
    """Vectors or matrices that must align have incompatible shapes."""

    def __init__(self, first_shape, second_shape):
        self.first_shape = tuple(first_shape)
        self.second_shape = tuple(second_shape)
        super().__init__(
            f"Dimension mismatch: {self.first_shape} vs {self.second_shape}"
        )
