"""GloVe factorization of a weighted co-occurrence matrix."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np
from scipy import sparse
from tqdm import tqdm

from lexibias.common.errors import DimensionMismatchError

logger = logging.getLogger(__name__)

__all__ = [
    "GloveFactorizer",
    "combine_vectors",
    "relative_improvement",
]


class GloveFactorizer:
    """
    Fit GloVe target and context vectors with per-cell AdaGrad updates.

    Minimises ``sum f(X_ij) (w_i . c_j + b_i + b~_j - log X_ij)^2`` over the
    non-zero cells of the co-occurrence matrix X, where
    ``f(x) = min(1, (x / x_max) ** alpha)``. Cells are visited in a freshly
    shuffled order on every iteration.

    After ``fit``, ``loss_history`` holds the mean loss of each completed
    iteration and ``n_iterations`` the number of iterations run.
    """

    def __init__(
        self,
        rank: int,
        learning_rate: float = 0.05,
        max_iterations: int = 100,
        convergence_tolerance: float = 0.001,
        x_max: float = 10.0,
        alpha: float = 0.75,
        seed: Optional[int] = None,
        show_progress: bool = False,
    ):
        if rank < 1:
            raise ValueError(f"rank must be a positive integer, got {rank}")
        self.rank = rank
        self.learning_rate = learning_rate
        self.max_iterations = max_iterations
        self.convergence_tolerance = convergence_tolerance
        self.x_max = x_max
        self.alpha = alpha
        self.seed = seed
        self.show_progress = show_progress

        self.loss_history: List[float] = []
        self.n_iterations = 0

    def fit(self, cooccurrence) -> Tuple[np.ndarray, np.ndarray]:
        """
        Factorize a square co-occurrence matrix.

        Args:
            cooccurrence: Square (V, V) scipy.sparse or dense matrix of
                non-negative weights.

        Returns:
            tuple: ``(target, context)`` where ``target`` has shape (V, rank)
            and ``context`` has shape (rank, V).

        Raises:
            ValueError: If the matrix is not square or has no positive cells.
            RuntimeError: If the loss becomes non-finite (learning rate too high).
        """
        matrix = sparse.coo_matrix(cooccurrence)
        if matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Co-occurrence matrix must be square, got shape {matrix.shape}")

        positive = matrix.data > 0
        rows = matrix.row[positive]
        cols = matrix.col[positive]
        counts = matrix.data[positive].astype(np.float64)
        if counts.size == 0:
            raise ValueError("Co-occurrence matrix has no positive entries to factorize.")

        n_terms = matrix.shape[0]
        rng = np.random.default_rng(self.seed)

        target = (rng.random((n_terms, self.rank)) - 0.5) / self.rank
        context = (rng.random((self.rank, n_terms)) - 0.5) / self.rank
        target_bias = (rng.random(n_terms) - 0.5) / self.rank
        context_bias = (rng.random(n_terms) - 0.5) / self.rank

        # AdaGrad accumulators start at 1 so the first step equals the learning rate
        grad_sq_target = np.ones_like(target)
        grad_sq_context = np.ones_like(context)
        grad_sq_target_bias = np.ones_like(target_bias)
        grad_sq_context_bias = np.ones_like(context_bias)

        weights = np.minimum(1.0, (counts / self.x_max) ** self.alpha)
        log_counts = np.log(counts)

        self.loss_history = []
        self.n_iterations = 0
        lr = self.learning_rate

        iterations = tqdm(
            range(self.max_iterations),
            desc="Fitting GloVe",
            unit=" iter",
            disable=not self.show_progress,
        )
        for iteration in iterations:
            total_loss = 0.0
            for cell in rng.permutation(counts.size):
                i, j = rows[cell], cols[cell]
                w_i = target[i]
                c_j = context[:, j]

                diff = w_i @ c_j + target_bias[i] + context_bias[j] - log_counts[cell]
                weighted_diff = weights[cell] * diff
                total_loss += 0.5 * weighted_diff * diff

                grad_w = weighted_diff * c_j
                grad_c = weighted_diff * w_i

                target[i] -= lr * grad_w / np.sqrt(grad_sq_target[i])
                context[:, j] -= lr * grad_c / np.sqrt(grad_sq_context[:, j])
                target_bias[i] -= lr * weighted_diff / np.sqrt(grad_sq_target_bias[i])
                context_bias[j] -= lr * weighted_diff / np.sqrt(grad_sq_context_bias[j])

                grad_sq_target[i] += grad_w ** 2
                grad_sq_context[:, j] += grad_c ** 2
                grad_sq_target_bias[i] += weighted_diff ** 2
                grad_sq_context_bias[j] += weighted_diff ** 2

            loss = total_loss / counts.size
            if not np.isfinite(loss):
                raise RuntimeError(
                    f"GloVe loss diverged at iteration {iteration + 1}; lower the learning rate."
                )

            self.loss_history.append(loss)
            self.n_iterations = iteration + 1
            logger.debug("Iteration %d: loss %.6f", self.n_iterations, loss)

            if len(self.loss_history) > 1:
                previous = self.loss_history[-2]
                improvement = relative_improvement(previous, loss)
                if improvement < 0:
                    logger.warning(
                        "Loss rose at iteration %d (%.6f -> %.6f)",
                        self.n_iterations, previous, loss,
                    )
                elif improvement < self.convergence_tolerance:
                    logger.info(
                        "Converged after %d iterations (relative improvement %.2e < %.2e)",
                        self.n_iterations, improvement, self.convergence_tolerance,
                    )
                    break
        else:
            logger.info("Reached max_iterations=%d without converging", self.max_iterations)

        self.target_ = target
        self.context_ = context
        return target, context


def combine_vectors(target, context) -> np.ndarray:
    """
    Combine GloVe target and context vectors into one vector per word.

    The context matrix is stored as (rank, V); it is transposed and added
    element-wise to the (V, rank) target matrix.

    Raises:
        DimensionMismatchError: If the transposed context does not match the target shape.
    """
    target = np.asarray(target)
    context = np.asarray(context)
    if target.shape != context.T.shape:
        raise DimensionMismatchError(target.shape, context.shape)
    return target + context.T


def relative_improvement(previous: float, current: float) -> float:
    """
    Fractional loss reduction from one iteration to the next.

    Returns ``(previous - current) / previous``; negative when the loss rose,
    and 0.0 when the previous loss was already zero.
    """
    if previous <= 0:
        return 0.0
    return (previous - current) / previous
