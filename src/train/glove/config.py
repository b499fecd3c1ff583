"""Configuration for GloVe embedding training."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

__all__ = [
    "GloveConfig",
    "format_config",
]


@dataclass
class GloveConfig:
    """Hyperparameters for training GloVe vectors on a small corpus.

    Attributes:
        window_size: Context window W; co-occurrences at distance d <= W get weight 1/d
        rank: Dimensionality of the learned vectors
        learning_rate: Initial AdaGrad step size
        max_iterations: Upper bound on passes over the co-occurrence cells
        convergence_tolerance: Stop once the relative loss improvement falls below this
        x_max: Co-occurrence count at which the weighting function saturates
        alpha: Exponent of the weighting function
        min_count: Drop terms occurring fewer times than this
        seed: Seed for vector initialisation and cell shuffling (None = nondeterministic)
        show_progress: Show a tqdm progress bar over iterations
    """
    window_size: int = 5
    rank: int = 50
    learning_rate: float = 0.05
    max_iterations: int = 100
    convergence_tolerance: float = 0.001
    x_max: float = 10.0
    alpha: float = 0.75
    min_count: int = 1
    seed: Optional[int] = None
    show_progress: bool = False

    def __post_init__(self):
        for name in ("window_size", "rank", "max_iterations", "min_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        for name in ("learning_rate", "convergence_tolerance", "x_max", "alpha"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {value!r}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer or None, got {self.seed!r}")


def format_config(config: GloveConfig) -> str:
    """Render a config as aligned ``name: value`` lines for console headers."""
    lines = ["Hyperparameters", "─" * 100]
    for field in fields(config):
        label = f"{field.name.replace('_', ' ').capitalize()}:"
        lines.append(f"{label:<22}{getattr(config, field.name)}")
    return "\n".join(lines)
