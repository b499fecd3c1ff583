"""
Association queries: validate word sets and dispatch to a bias metric.

Example:
    >>> from analyze.bias_query import query
    >>> result = query(space, S=["he", "him"], A=["doctor", "nurse"])
    >>> result.method
    <Method.MAC: 'mac'>
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

import pandas as pd

from lexibias.common.errors import AmbiguousMethodError, EmptyWordSetError

from . import bias_metrics

logger = logging.getLogger(__name__)

__all__ = [
    "Method",
    "QueryResult",
    "REQUIRED_SETS",
    "infer_method",
    "query",
]


class Method(str, Enum):
    """Bias quantification methods understood by ``query``."""
    MAC = "mac"
    RND = "rnd"
    RNSB = "rnsb"
    SEMAXIS = "semaxis"
    NAS = "nas"
    ECT = "ect"
    WEAT = "weat"
    GUESS = "guess"


REQUIRED_SETS: Dict[Method, Tuple[str, ...]] = {
    Method.MAC: ("S", "A"),
    Method.RND: ("S", "A", "B"),
    Method.RNSB: ("S", "A", "B"),
    Method.SEMAXIS: ("S", "A", "B"),
    Method.NAS: ("S", "A", "B"),
    Method.ECT: ("S", "A", "B"),
    Method.WEAT: ("S", "T", "A", "B"),
}

# Inference precedence: the first signature whose sets are all non-empty wins,
# so methods needing more sets come first. Among methods sharing the (S, A, B)
# signature, RND is the one inferred.
_GUESS_ORDER = (
    (("S", "T", "A", "B"), Method.WEAT),
    (("S", "A", "B"), Method.RND),
    (("S", "A"), Method.MAC),
)

_WEAT_OPTIONS = ("standardize", "num_permutations", "seed")


@dataclass(frozen=True)
class QueryResult:
    """Outcome of an association query.

    Attributes:
        method: The method that produced the result (never GUESS)
        effect_size: Method-specific summary statistic
        breakdown: Per-target-word ``(word, score)`` pairs in input order
        p_value: Permutation-test p-value (WEAT with ``num_permutations > 0`` only)
        details: Method-specific intermediate values
    """
    method: Method
    effect_size: float
    breakdown: Tuple[Tuple[str, float], ...] = ()
    p_value: Optional[float] = None
    details: Mapping[str, object] = field(default_factory=dict)

    def to_frame(self) -> pd.DataFrame:
        """Per-word breakdown as a DataFrame with columns ``word`` and ``score``."""
        return pd.DataFrame(list(self.breakdown), columns=["word", "score"])


def _as_word_list(words) -> Tuple[str, ...]:
    """
    Normalise a word set: a bare string is a single word, duplicates are
    dropped keeping the first occurrence.
    """
    if words is None:
        return ()
    words = (words,) if isinstance(words, str) else tuple(words)
    unique = tuple(dict.fromkeys(words))
    if len(unique) != len(words):
        logger.debug("Dropped duplicate words from word set: %s", list(words))
    return unique


def _coerce_method(method) -> Method:
    if isinstance(method, Method):
        return method
    try:
        return Method(str(method).lower())
    except ValueError:
        valid = ", ".join(m.value for m in Method)
        raise ValueError(f"Unknown method {method!r}. Choose one of: {valid}.") from None


def infer_method(S=(), T=(), A=(), B=()) -> Method:
    """
    Infer the method from which word sets are non-empty.

    A method matches when every set it requires is non-empty; extra sets are
    allowed. The first match in this order wins:
        S, T, A, B -> WEAT
        S, A, B    -> RND
        S, A       -> MAC
    So S, T and A without B resolves to MAC. Without both S and A nothing
    matches.

    Raises:
        AmbiguousMethodError: If no method has all its required sets non-empty.
    """
    provided = tuple(
        name for name, words in (("S", S), ("T", T), ("A", A), ("B", B)) if words
    )
    for signature, method in _GUESS_ORDER:
        if set(signature) <= set(provided):
            return method
    raise AmbiguousMethodError(provided)


def query(space, S=(), T=(), A=(), B=(), method="guess", **options) -> QueryResult:
    """
    Measure the association between target and attribute word sets.

    Args:
        space (EmbeddingSpace): Vectors to query. Not modified.
        S, T: Target word sets. A string counts as a single word.
        A, B: Attribute word sets.
        method (str or Method): One of mac, rnd, rnsb, semaxis, nas, ect,
            weat, or "guess" to infer it from the non-empty sets.
        **options: WEAT only: ``standardize``, ``num_permutations``, ``seed``.

    Returns:
        QueryResult

    Raises:
        AmbiguousMethodError: "guess" cannot resolve a method.
        EmptyWordSetError: A set the method requires is empty.
        MissingWordError: Words from the required sets are not in the space.
        ValueError: Unknown method name.
        TypeError: Unknown option, or options given to a method other than WEAT.
    """
    sets = {
        "S": _as_word_list(S),
        "T": _as_word_list(T),
        "A": _as_word_list(A),
        "B": _as_word_list(B),
    }

    method = _coerce_method(method)
    if method is Method.GUESS:
        method = infer_method(**sets)
        logger.debug("Inferred method %s", method.value)

    unknown = set(options) - set(_WEAT_OPTIONS)
    if unknown:
        raise TypeError(f"Unknown query options: {sorted(unknown)}")
    if options and method is not Method.WEAT:
        raise TypeError(f"Options {sorted(options)} only apply to method 'weat'")

    required = REQUIRED_SETS[method]
    for name in required:
        if not sets[name]:
            raise EmptyWordSetError(name, method.value)

    ignored = [name for name in sets if name not in required and sets[name]]
    if ignored:
        logger.debug("Method %s ignores word sets %s", method.value, ignored)

    # Report every absent word at once
    space.ensure_words([word for name in required for word in sets[name]])

    if method is Method.MAC:
        effect_size, breakdown, details = bias_metrics.mean_average_cosine(space, sets["S"], sets["A"])
    elif method is Method.WEAT:
        effect_size, breakdown, details = bias_metrics.weat(
            space, sets["S"], sets["T"], sets["A"], sets["B"], **options
        )
    else:
        metric = {
            Method.RND: bias_metrics.relative_norm_distance,
            Method.RNSB: bias_metrics.relative_negative_sentiment_bias,
            Method.SEMAXIS: bias_metrics.semaxis,
            Method.NAS: bias_metrics.normalized_association,
            Method.ECT: bias_metrics.embedding_coherence,
        }[method]
        effect_size, breakdown, details = metric(space, sets["S"], sets["A"], sets["B"])

    details = dict(details)
    p_value = details.pop("p_value", None)
    return QueryResult(
        method=method,
        effect_size=effect_size,
        breakdown=tuple(breakdown),
        p_value=p_value,
        details=details,
    )
