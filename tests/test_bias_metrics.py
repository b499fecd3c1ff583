"""Tests for the association metric formulas."""

import math

import numpy as np
import pytest

from analyze import bias_metrics

MALE = ["he", "man"]
FEMALE = ["she", "woman"]
CAREER = ["doctor", "engineer"]
CARE = ["nurse", "dancer"]


class TestMeanAverageCosine:

    def test_breakdown_and_mean(self, gender_space):
        effect, breakdown, _ = bias_metrics.mean_average_cosine(gender_space, ["he", "she"], ["he"])
        assert breakdown[0] == ("he", pytest.approx(1.0))
        assert breakdown[1] == ("she", pytest.approx(0.0))
        assert effect == pytest.approx(0.5)

    def test_more_associated_scores_higher(self, gender_space):
        career, _, _ = bias_metrics.mean_average_cosine(gender_space, CAREER, MALE)
        care, _, _ = bias_metrics.mean_average_cosine(gender_space, CARE, MALE)
        assert career > care


class TestRelativeNormDistance:

    def test_identical_attribute_sets_give_zero(self, one_hot_space):
        effect, breakdown, _ = bias_metrics.relative_norm_distance(one_hot_space, ["x"], ["a"], ["a"])
        assert effect == 0.0
        assert breakdown == [("x", 0.0)]

    def test_closer_to_a_is_negative(self, gender_space):
        effect, _, _ = bias_metrics.relative_norm_distance(gender_space, ["he"], ["he"], ["she"])
        assert effect == pytest.approx(-math.sqrt(2))

    def test_closer_to_b_is_positive(self, gender_space):
        effect, _, _ = bias_metrics.relative_norm_distance(gender_space, CARE, MALE, FEMALE)
        assert effect > 0


class TestRelativeNegativeSentimentBias:

    def test_distribution_and_divergence(self, gender_space):
        effect, breakdown, details = bias_metrics.relative_negative_sentiment_bias(
            gender_space, ["doctor", "nurse"], FEMALE, MALE
        )
        scores = dict(breakdown)
        assert sum(scores.values()) == pytest.approx(1.0)
        assert scores["nurse"] > scores["doctor"]
        assert effect > 0
        assert details["negative_probability"].shape == (2,)

    def test_single_target_has_no_divergence(self, gender_space):
        effect, breakdown, _ = bias_metrics.relative_negative_sentiment_bias(
            gender_space, ["doctor"], FEMALE, MALE
        )
        assert effect == pytest.approx(0.0)
        assert breakdown[0][1] == pytest.approx(1.0)


class TestSemAxis:

    def test_poles(self, gender_space):
        effect, breakdown, details = bias_metrics.semaxis(gender_space, ["he", "she"], ["he"], ["she"])
        assert breakdown[0][1] == pytest.approx(1 / math.sqrt(2))
        assert breakdown[1][1] == pytest.approx(-1 / math.sqrt(2))
        assert effect == pytest.approx(0.0)
        assert np.allclose(details["axis"], [1.0, -1.0])

    def test_identical_poles_give_nan(self, gender_space):
        effect, _, _ = bias_metrics.semaxis(gender_space, ["nurse"], ["he"], ["he"])
        assert math.isnan(effect)


class TestNormalizedAssociation:

    def test_closer_to_b_is_positive(self, gender_space):
        effect, breakdown, _ = bias_metrics.normalized_association(gender_space, ["he"], FEMALE, MALE)
        assert effect > 0
        assert breakdown[0][0] == "he"

    def test_sign_flips_with_poles(self, gender_space):
        forward, _, _ = bias_metrics.normalized_association(gender_space, CARE, MALE, FEMALE)
        backward, _, _ = bias_metrics.normalized_association(gender_space, CARE, FEMALE, MALE)
        assert forward == pytest.approx(-backward)

    def test_no_spread_gives_nan(self, one_hot_space):
        effect, _, _ = bias_metrics.normalized_association(one_hot_space, ["x"], ["a"], ["b"])
        assert math.isnan(effect)


class TestEmbeddingCoherence:

    def test_opposed_rankings(self, gender_space):
        effect, breakdown, details = bias_metrics.embedding_coherence(
            gender_space, CAREER + CARE, MALE, FEMALE
        )
        assert effect == pytest.approx(-1.0)
        assert [word for word, _ in breakdown] == CAREER + CARE
        assert dict(breakdown)["engineer"] > 0 > dict(breakdown)["nurse"]
        assert len(details["cosine_a"]) == 4

    def test_single_target_gives_nan(self, gender_space):
        effect, _, _ = bias_metrics.embedding_coherence(gender_space, ["nurse"], MALE, FEMALE)
        assert math.isnan(effect)


class TestWeat:

    def test_positive_when_s_associates_with_a(self, gender_space):
        effect, breakdown, details = bias_metrics.weat(gender_space, CAREER, CARE, MALE, FEMALE)
        assert effect > 0
        assert [word for word, _ in breakdown] == CAREER + CARE
        assert details["p_value"] is None
        assert effect == pytest.approx(details["mean_difference"] / details["pooled_std"])

    def test_sign_flips_when_attributes_swapped(self, gender_space):
        forward, _, _ = bias_metrics.weat(gender_space, CAREER, CARE, MALE, FEMALE)
        backward, _, _ = bias_metrics.weat(gender_space, CAREER, CARE, FEMALE, MALE)
        assert backward == pytest.approx(-forward)

    def test_effect_size_is_bounded(self, gender_space):
        # |d| <= 2 for a pooled sample standard deviation
        effect, _, _ = bias_metrics.weat(gender_space, CAREER, CARE, MALE, FEMALE)
        assert abs(effect) <= 2.0

    def test_unstandardized(self, gender_space):
        effect, _, details = bias_metrics.weat(
            gender_space, CAREER, CARE, MALE, FEMALE, standardize=False
        )
        assert effect == pytest.approx(details["mean_difference"])

    def test_no_variation_gives_nan(self, gender_space):
        effect, _, _ = bias_metrics.weat(gender_space, ["doctor"], ["doctor"], MALE, FEMALE)
        assert math.isnan(effect)

    def test_permutation_p_value(self, gender_space):
        _, _, first = bias_metrics.weat(
            gender_space, CAREER, CARE, MALE, FEMALE, num_permutations=200, seed=5
        )
        _, _, second = bias_metrics.weat(
            gender_space, CAREER, CARE, MALE, FEMALE, num_permutations=200, seed=5
        )
        assert 0.0 <= first["p_value"] <= 1.0
        assert first["p_value"] == second["p_value"]
        # The observed split is the most extreme one, so no permutation exceeds it
        assert first["p_value"] == 0.0
