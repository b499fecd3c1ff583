"""
Implicit-association metrics over an embedding space.

Every function takes an EmbeddingSpace plus already-validated word lists
(non-empty, all words in the vocabulary) and returns a triple
``(effect_size, breakdown, details)``:

- ``effect_size`` (float): the method's summary statistic
- ``breakdown`` (list of (word, score)): per-target-word scores in input order
- ``details`` (dict): method-specific intermediate values

Validation lives in ``analyze.bias_query``; call ``query`` rather than these
functions unless the inputs are known to be valid.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
from scipy.stats import entropy, spearmanr
from sklearn.linear_model import LogisticRegression

from lexibias.common.embedding_space import EmbeddingSpace
from lexibias.common.similarity import cosine_similarity

logger = logging.getLogger(__name__)

__all__ = [
    "mean_average_cosine",
    "relative_norm_distance",
    "relative_negative_sentiment_bias",
    "semaxis",
    "normalized_association",
    "embedding_coherence",
    "weat",
]

MetricOutput = Tuple[float, List[Tuple[str, float]], Dict[str, object]]


def _cosines(space: EmbeddingSpace, word: str, others: Sequence[str]) -> np.ndarray:
    """Cosine similarity of ``word`` with each word in ``others``."""
    vec = space.vector(word)
    return np.array([cosine_similarity(vec, space.vector(other)) for other in others])


def _centroid(space: EmbeddingSpace, words: Sequence[str]) -> np.ndarray:
    return space.vectors(words).mean(axis=0)


def mean_average_cosine(space, S, A) -> MetricOutput:
    """
    Mean Average Cosine similarity (Manzini et al. 2019).

    Each target word scores the mean of its cosine similarities with the
    attribute words; the effect size is the mean of those scores. Higher
    values mean S is more associated with A.
    """
    scores = [float(np.mean(_cosines(space, s, A))) for s in S]
    breakdown = list(zip(S, scores))
    return float(np.mean(scores)), breakdown, {}


def relative_norm_distance(space, S, A, B) -> MetricOutput:
    """
    Relative Norm Distance (Garg et al. 2018).

    Each target word scores ``||s - mean(A)|| - ||s - mean(B)||``; the effect
    size is the mean score. Positive values mean S sits closer to B.
    """
    centroid_a = _centroid(space, A)
    centroid_b = _centroid(space, B)

    scores = []
    for s in S:
        vec = space.vector(s)
        scores.append(float(np.linalg.norm(vec - centroid_a) - np.linalg.norm(vec - centroid_b)))

    return float(np.mean(scores)), list(zip(S, scores)), {
        "centroid_a": centroid_a,
        "centroid_b": centroid_b,
    }


def relative_negative_sentiment_bias(space, S, A, B) -> MetricOutput:
    """
    Relative Negative Sentiment Bias (Sweeney & Najafian 2019).

    A logistic regression is trained to separate the negative pole A (label 1)
    from the positive pole B (label 0). Each target word's predicted
    probability of belonging to A is normalised so the scores sum to one; the
    effect size is the Kullback-Leibler divergence of that distribution from
    uniform. Zero means every target word carries the same negative
    sentiment; larger values mean the sentiment is unevenly spread over S.
    """
    X = np.vstack([space.vectors(A), space.vectors(B)])
    y = np.concatenate([np.ones(len(A)), np.zeros(len(B))])

    classifier = LogisticRegression(max_iter=1000)
    classifier.fit(X, y)

    positive_column = list(classifier.classes_).index(1.0)
    negative_probability = classifier.predict_proba(space.vectors(S))[:, positive_column]
    distribution = negative_probability / negative_probability.sum()

    uniform = np.full(len(S), 1.0 / len(S))
    effect_size = float(entropy(distribution, uniform))

    breakdown = [(s, float(p)) for s, p in zip(S, distribution)]
    return effect_size, breakdown, {"negative_probability": negative_probability}


def semaxis(space, S, A, B) -> MetricOutput:
    """
    SemAxis (An et al. 2018).

    The axis runs from mean(B) to mean(A); each target word scores its cosine
    similarity with the axis and the effect size is the mean score. Positive
    values point towards the A pole, negative towards B. Identical poles give
    a zero axis and ``nan`` scores.
    """
    axis = _centroid(space, A) - _centroid(space, B)
    scores = [cosine_similarity(space.vector(s), axis) for s in S]
    return float(np.mean(scores)), list(zip(S, scores)), {"axis": axis}


def normalized_association(space, S, A, B) -> MetricOutput:
    """
    Normalized Association Score (Caliskan et al. 2017).

    Each target word scores the difference between its mean cosine with B and
    its mean cosine with A, divided by the sample standard deviation of all
    its cosines with A and B. Positive values mean closer to B. A word whose
    cosines have no spread scores ``nan``.
    """
    scores = []
    for s in S:
        cos_a = _cosines(space, s, A)
        cos_b = _cosines(space, s, B)
        pooled = np.concatenate([cos_a, cos_b])
        spread = np.std(pooled, ddof=1) if pooled.size > 1 else 0.0
        if spread == 0:
            logger.warning("No variation in cosines for '%s'; score is nan", s)
            scores.append(float("nan"))
        else:
            scores.append(float((cos_b.mean() - cos_a.mean()) / spread))

    return float(np.mean(scores)), list(zip(S, scores)), {}


def embedding_coherence(space, S, A, B) -> MetricOutput:
    """
    Embedding Coherence Test (Dev & Phillips 2019).

    Each target word is compared with the centroids of A and B, giving two
    cosine series over S. The effect size is their Spearman rank correlation:
    values near 1 mean S relates to both poles in the same order (no bias).
    The breakdown holds the per-word difference ``cos(s, mean(A)) - cos(s, mean(B))``.
    """
    centroid_a = _centroid(space, A)
    centroid_b = _centroid(space, B)

    cos_a = np.array([cosine_similarity(space.vector(s), centroid_a) for s in S])
    cos_b = np.array([cosine_similarity(space.vector(s), centroid_b) for s in S])

    if len(S) < 2:
        logger.warning("Embedding coherence needs at least two target words; returning nan")
        rho = float("nan")
    else:
        rho, _ = spearmanr(cos_a, cos_b)
        rho = float(rho)

    breakdown = [(s, float(a - b)) for s, a, b in zip(S, cos_a, cos_b)]
    return rho, breakdown, {"cosine_a": cos_a, "cosine_b": cos_b}


def weat(
    space,
    S,
    T,
    A,
    B,
    standardize: bool = True,
    num_permutations: int = 0,
    seed: Optional[int] = None,
) -> MetricOutput:
    """
    Word Embedding Association Test (Caliskan et al. 2017).

    Each target word w scores ``s(w) = mean cos(w, A) - mean cos(w, B)``. The
    effect size is ``(mean_{x in S} s(x) - mean_{y in T} s(y))`` divided by the
    sample standard deviation of s over S and T. Positive values mean S is
    more associated with A (and T with B) than the reverse.

    Args:
        space: EmbeddingSpace to query.
        S, T: Target word lists.
        A, B: Attribute word lists.
        standardize: Divide by the pooled standard deviation. If False the
            raw mean difference is returned.
        num_permutations: Number of random re-partitions of S and T for the
            one-sided permutation test; 0 skips the test.
        seed: Seed for the permutation test.

    Returns:
        tuple: (effect_size, breakdown over S then T, details). ``details``
        contains ``p_value`` (None when no test was run), ``mean_difference``,
        ``pooled_std`` and ``test_statistic``.
    """
    def s(word):
        """Association difference for a single target word (Equation 2)."""
        return float(np.mean(_cosines(space, word, A)) - np.mean(_cosines(space, word, B)))

    s_vals_s = np.array([s(x) for x in S])
    s_vals_t = np.array([s(y) for y in T])
    all_s_vals = np.concatenate([s_vals_s, s_vals_t])

    # Test statistic is the sum difference; effect size uses means
    test_statistic = float(s_vals_s.sum() - s_vals_t.sum())
    mean_diff = float(s_vals_s.mean() - s_vals_t.mean())
    pooled_std = float(np.std(all_s_vals, ddof=1)) if all_s_vals.size > 1 else 0.0

    if not standardize:
        effect_size = mean_diff
    elif pooled_std == 0:
        logger.warning("No variation in association scores. Returning NaN for WEAT effect size.")
        effect_size = float("nan")
    else:
        effect_size = mean_diff / pooled_std

    p_value = None
    if num_permutations > 0:
        rng = np.random.default_rng(seed)
        n = len(S)
        permuted = np.empty(num_permutations)
        for k in range(num_permutations):
            shuffled = rng.permutation(all_s_vals)
            permuted[k] = shuffled[:n].sum() - shuffled[n:].sum()
        # One-sided: Pr[s(X_i, Y_i, A, B) > s(X, Y, A, B)]
        p_value = float(np.mean(permuted > test_statistic))

    breakdown = [(w, float(v)) for w, v in zip(list(S) + list(T), all_s_vals)]
    return effect_size, breakdown, {
        "p_value": p_value,
        "mean_difference": mean_diff,
        "pooled_std": pooled_std,
        "test_statistic": test_statistic,
    }
