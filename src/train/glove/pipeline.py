"""End-to-end GloVe training: corpus in, EmbeddingSpace out."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from lexibias.common.embedding_space import EmbeddingSpace
from lexibias.common.text import tokenize_corpus

from .config import GloveConfig, format_config
from .cooccurrence import build_cooccurrence, build_vocabulary
from .factorization import GloveFactorizer, combine_vectors

logger = logging.getLogger(__name__)

__all__ = ["train_embeddings"]


def train_embeddings(
    corpus: Sequence[str],
    config: Optional[GloveConfig] = None,
    verbose: bool = False,
) -> EmbeddingSpace:
    """
    Train GloVe word vectors on a corpus of raw document strings.

    Pipeline:
    1. Tokenizes each document
    2. Builds the vocabulary (``config.min_count``)
    3. Builds the 1/distance weighted co-occurrence matrix (``config.window_size``)
    4. Factorizes it into target and context vectors
    5. Sums target and transposed context vectors into one vector per word

    Args:
        corpus: Documents as strings
        config: Training hyperparameters (defaults to ``GloveConfig()``)
        verbose: Print a configuration header and completion banner

    Returns:
        EmbeddingSpace with one ``config.rank``-dimensional vector per vocabulary term

    Raises:
        ValueError: If the corpus is empty or yields no usable co-occurrences

    Example:
        >>> from lexibias.common.datasets import TOY_CORPUS
        >>> space = train_embeddings(TOY_CORPUS, GloveConfig(rank=4, seed=1))
        >>> space.vector_size
        4
    """
    config = config or GloveConfig()
    start_time = datetime.now()

    if not corpus:
        raise ValueError("Cannot train embeddings on an empty corpus.")

    tokenized = tokenize_corpus(corpus)
    vocabulary = build_vocabulary(tokenized, min_count=config.min_count)
    if not vocabulary:
        raise ValueError(
            f"No terms occur at least min_count={config.min_count} times in the corpus."
        )
    logger.info("Vocabulary: %d terms from %d documents", len(vocabulary), len(corpus))

    cooccurrence = build_cooccurrence(tokenized, vocabulary, config.window_size)
    logger.info("Co-occurrence matrix: %d non-zero cells", cooccurrence.nnz)

    if verbose:
        from .display import print_training_header
        print_training_header(
            start_time=start_time,
            num_documents=len(corpus),
            vocab_size=len(vocabulary),
            num_cells=cooccurrence.nnz,
            config_lines=format_config(config),
        )

    factorizer = GloveFactorizer(
        rank=config.rank,
        learning_rate=config.learning_rate,
        max_iterations=config.max_iterations,
        convergence_tolerance=config.convergence_tolerance,
        x_max=config.x_max,
        alpha=config.alpha,
        seed=config.seed,
        show_progress=config.show_progress,
    )
    target, context = factorizer.fit(cooccurrence)
    space = EmbeddingSpace.from_matrix(vocabulary, combine_vectors(target, context))

    runtime = datetime.now() - start_time
    logger.info(
        "Trained %d vectors of size %d in %d iterations (%s)",
        len(space), space.vector_size, factorizer.n_iterations, runtime,
    )

    if verbose:
        from .display import print_completion_banner
        print_completion_banner(
            vocab_size=len(space),
            vector_size=space.vector_size,
            n_iterations=factorizer.n_iterations,
            final_loss=factorizer.loss_history[-1],
            runtime=runtime,
        )

    return space
