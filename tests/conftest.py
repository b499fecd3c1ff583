"""
Shared test fixtures and configuration for pytest.
"""

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lexibias.common.embedding_space import EmbeddingSpace  # noqa: E402


# Two-dimensional space: the x axis is "male", the y axis is "female"
GENDER_VECTORS = {
    "he": [1.0, 0.0],
    "she": [0.0, 1.0],
    "man": [0.9, 0.1],
    "woman": [0.1, 0.9],
    "doctor": [0.8, 0.3],
    "engineer": [0.95, 0.2],
    "nurse": [0.2, 0.9],
    "dancer": [0.15, 0.85],
}


@pytest.fixture
def gender_space():
    """Small space with known geometry for metric tests."""
    return EmbeddingSpace.from_dict(GENDER_VECTORS)


@pytest.fixture
def one_hot_space():
    """Three orthogonal unit vectors."""
    return EmbeddingSpace.from_dict({
        "x": [1.0, 0.0, 0.0],
        "a": [0.0, 1.0, 0.0],
        "b": [0.0, 0.0, 1.0],
    })
