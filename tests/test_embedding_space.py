"""Tests for the EmbeddingSpace wrapper."""

import numpy as np
import pytest
from gensim.models import KeyedVectors

from lexibias.common.embedding_space import EmbeddingSpace
from lexibias.common.errors import DimensionMismatchError, MissingWordError


class TestConstruction:

    def test_from_dict(self, gender_space):
        assert len(gender_space) == 8
        assert gender_space.vector_size == 2
        assert "nurse" in gender_space
        assert "pilot" not in gender_space
        assert gender_space.words[0] == "he"

    def test_from_dict_ragged_vectors(self):
        with pytest.raises(DimensionMismatchError):
            EmbeddingSpace.from_dict({"a": [1.0, 2.0], "b": [1.0, 2.0, 3.0]})

    def test_from_matrix_row_count_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            EmbeddingSpace.from_matrix(["a", "b"], np.ones((3, 2)))

    def test_from_matrix_duplicate_words(self):
        with pytest.raises(ValueError):
            EmbeddingSpace.from_matrix(["a", "a"], np.ones((2, 2)))

    def test_rejects_non_keyed_vectors(self):
        with pytest.raises(TypeError):
            EmbeddingSpace({"a": [1.0]})


class TestLookup:

    def test_vector_returns_copy(self, gender_space):
        vec = gender_space["he"]
        vec[0] = 42.0
        assert gender_space["he"][0] == pytest.approx(1.0)

    def test_vocab_is_immutable(self, gender_space):
        assert isinstance(gender_space.vocab, frozenset)
        with pytest.raises(AttributeError):
            gender_space.vocab.add("pilot")
        assert "pilot" not in gender_space

    def test_vectors_stack_in_order(self, gender_space):
        stacked = gender_space.vectors(["she", "he"])
        assert stacked.shape == (2, 2)
        assert np.allclose(stacked[0], [0.0, 1.0])

    def test_missing_word_lists_all_absent(self, gender_space):
        with pytest.raises(MissingWordError) as excinfo:
            gender_space.vectors(["he", "pilot", "farmer"])
        assert excinfo.value.words == ["pilot", "farmer"]
        assert "pilot" in str(excinfo.value)

    def test_missing_word_is_key_error(self, gender_space):
        with pytest.raises(KeyError):
            gender_space.vector("pilot")

    def test_similarity(self, gender_space):
        assert gender_space.similarity("he", "she") == pytest.approx(0.0)
        assert gender_space.similarity("he", "he") == pytest.approx(1.0)

    def test_most_similar(self, gender_space):
        neighbours = gender_space.most_similar("he", topn=2)
        assert [word for word, _ in neighbours] == ["man", "engineer"]


class TestPersistence:

    def test_save_and_load_round_trip(self, gender_space, tmp_path):
        path = tmp_path / "space.kv"
        gender_space.save(path)
        loaded = EmbeddingSpace.load(path)
        assert loaded.vocab == gender_space.vocab
        assert np.allclose(loaded["nurse"], gender_space["nurse"])

    def test_save_requires_kv_extension(self, gender_space, tmp_path):
        with pytest.raises(ValueError):
            gender_space.save(tmp_path / "space.bin")

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EmbeddingSpace.load(tmp_path / "absent.kv")

    def test_load_pretrained_glove_text(self, tmp_path):
        path = tmp_path / "vectors.txt"
        path.write_text("cat 0.1 0.2 0.3\ndog 0.4 0.5 0.6\nfish -1.0 0.0 1.0\n")
        space = EmbeddingSpace.load_pretrained(path)
        assert isinstance(space.model, KeyedVectors)
        assert len(space) == 3
        assert space.vector_size == 3
        assert np.allclose(space["fish"], [-1.0, 0.0, 1.0])

    def test_load_pretrained_with_header_and_limit(self, tmp_path):
        path = tmp_path / "vectors.txt"
        path.write_text("3 2\ncat 0.1 0.2\ndog 0.3 0.4\nfish 0.5 0.6\n")
        space = EmbeddingSpace.load_pretrained(path, limit=2, has_header=True)
        assert space.words == ["cat", "dog"]
