"""Charts for association query results."""

import matplotlib.pyplot as plt
import seaborn as sns

from .bias_query import Method

__all__ = [
    "plot_breakdown",
    "plot_ect",
]


def plot_breakdown(result, ax=None, title=None, figsize=(8, 5)):
    """
    Horizontal bar chart of per-word scores from a QueryResult.

    Args:
        result (QueryResult): Query outcome with a non-empty breakdown.
        ax (matplotlib.axes.Axes, optional): Axes to draw on. A new figure is
            created if omitted.
        title (str, optional): Plot title. Defaults to the method and effect size.
        figsize (tuple): Figure size when a new figure is created.

    Returns:
        matplotlib.axes.Axes: The axes drawn on.

    Raises:
        ValueError: If the result has no per-word breakdown.
    """
    if not result.breakdown:
        raise ValueError("Result has no per-word breakdown to plot.")

    df = result.to_frame()
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    sns.barplot(data=df, x="score", y="word", orient="h", color="steelblue", ax=ax)
    ax.axvline(0, color="black", linewidth=0.8)
    ax.set_xlabel("Score", fontsize=12)
    ax.set_ylabel("")
    if title is None:
        title = f"{result.method.value.upper()} (effect size {result.effect_size:.3f})"
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.grid(True, axis="x", alpha=0.3)
    return ax


def plot_ect(result, ax=None, figsize=(6, 6)):
    """
    Scatter the two cosine series of an Embedding Coherence Test result.

    Each target word is placed at (cos to mean(A), cos to mean(B)); points on
    a rising diagonal indicate coherent, unbiased rankings.

    Raises:
        ValueError: If the result was not produced by the ECT method.
    """
    if result.method is not Method.ECT:
        raise ValueError(f"plot_ect needs an ECT result, got {result.method.value}")

    cos_a = result.details["cosine_a"]
    cos_b = result.details["cosine_b"]
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    ax.scatter(cos_a, cos_b, color="steelblue")
    for (word, _), x, y in zip(result.breakdown, cos_a, cos_b):
        ax.annotate(word, (x, y), textcoords="offset points", xytext=(4, 4), fontsize=9)

    ax.set_xlabel("Cosine to A centroid", fontsize=12)
    ax.set_ylabel("Cosine to B centroid", fontsize=12)
    ax.set_title(f"ECT (Spearman rho {result.effect_size:.3f})", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.3)
    return ax
