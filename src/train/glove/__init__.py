"""
GloVe embedding training for small corpora.

Main entry point:
    train_embeddings() - corpus strings to EmbeddingSpace

Key components:
    - config: Training hyperparameters
    - cooccurrence: Vocabulary and 1/distance weighted co-occurrence matrix
    - factorization: AdaGrad GloVe fit and target/context combination
    - display: Console banners
"""

from .config import GloveConfig
from .cooccurrence import build_vocabulary, build_cooccurrence
from .factorization import GloveFactorizer, combine_vectors
from .pipeline import train_embeddings

__all__ = [
    "GloveConfig",
    "build_vocabulary",
    "build_cooccurrence",
    "GloveFactorizer",
    "combine_vectors",
    "train_embeddings",
]
