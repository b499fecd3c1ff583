"""Tests for result charts."""

import matplotlib.pyplot as plt
import pytest

from analyze import Method, QueryResult, query
from analyze.plotting import plot_breakdown, plot_ect

MALE = ["he", "man"]
FEMALE = ["she", "woman"]
TARGETS = ["doctor", "engineer", "nurse", "dancer"]


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_plot_breakdown(gender_space):
    result = query(gender_space, S=TARGETS, A=MALE, B=FEMALE, method="semaxis")
    ax = plot_breakdown(result)
    assert ax.get_title().startswith("SEMAXIS")
    assert len(ax.patches) == len(TARGETS)


def test_plot_breakdown_on_given_axes(gender_space):
    _, ax = plt.subplots()
    result = query(gender_space, S=TARGETS, A=MALE)
    assert plot_breakdown(result, ax=ax, title="MAC") is ax
    assert ax.get_title() == "MAC"


def test_plot_breakdown_requires_breakdown():
    with pytest.raises(ValueError):
        plot_breakdown(QueryResult(method=Method.MAC, effect_size=0.0))


def test_plot_ect(gender_space):
    result = query(gender_space, S=TARGETS, A=MALE, B=FEMALE, method="ect")
    ax = plot_ect(result)
    assert "Spearman" in ax.get_title()
    assert len(ax.texts) == len(TARGETS)


def test_plot_ect_rejects_other_methods(gender_space):
    result = query(gender_space, S=TARGETS, A=MALE)
    with pytest.raises(ValueError):
        plot_ect(result)
