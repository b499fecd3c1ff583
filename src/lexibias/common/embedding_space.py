import os

import numpy as np
from gensim.models import KeyedVectors

from .errors import DimensionMismatchError, MissingWordError


class EmbeddingSpace:
    """
    A read-only mapping from words to dense vectors backed by gensim
    ``KeyedVectors``.

    Spaces are produced either by training (``train.glove``) or by parsing a
    pretrained vector file, and are never mutated afterwards. Every vector has
    the same dimensionality (``vector_size``).
    """

    def __init__(self, keyed_vectors):
        """
        Wrap an existing ``KeyedVectors`` instance.

        Args:
            keyed_vectors (KeyedVectors): Vectors to expose.

        Raises:
            TypeError: If the argument is not a ``KeyedVectors`` instance.
        """
        if not isinstance(keyed_vectors, KeyedVectors):
            raise TypeError("keyed_vectors must be a gensim KeyedVectors instance.")

        self.model = keyed_vectors
        self.vocab = frozenset(self.model.index_to_key)
        self.vector_size = self.model.vector_size

    @classmethod
    def from_matrix(cls, words, matrix):
        """
        Build a space from a word list and a matching ``(len(words), rank)`` matrix.

        Args:
            words (sequence of str): Vocabulary, one word per matrix row.
            matrix (array-like): Dense vectors, row-aligned with ``words``.

        Returns:
            EmbeddingSpace: The new space.

        Raises:
            ValueError: If the matrix is not 2-D or words are repeated.
            DimensionMismatchError: If the number of rows differs from the number of words.
        """
        words = list(words)
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.ndim != 2:
            raise ValueError(f"Expected a 2-D matrix, got shape {matrix.shape}")
        if matrix.shape[0] != len(words):
            raise DimensionMismatchError((len(words),), matrix.shape)
        if len(set(words)) != len(words):
            raise ValueError("Words must be unique within an embedding space.")

        kv = KeyedVectors(vector_size=matrix.shape[1], dtype=np.float64)
        if words:
            kv.add_vectors(words, matrix)
        return cls(kv)

    @classmethod
    def from_dict(cls, mapping):
        """
        Build a space from a ``{word: vector}`` mapping.

        Raises:
            DimensionMismatchError: If the vectors do not all have the same length.
        """
        words = list(mapping)
        rows = [np.asarray(mapping[word], dtype=np.float64).ravel() for word in words]
        if rows:
            expected = rows[0].shape
            for row in rows[1:]:
                if row.shape != expected:
                    raise DimensionMismatchError(expected, row.shape)
            matrix = np.vstack(rows)
        else:
            matrix = np.empty((0, 0))
        return cls.from_matrix(words, matrix)

    @classmethod
    def load(cls, model_path):
        """
        Load a space saved with ``save`` (gensim native ``.kv`` file).

        Raises:
            FileNotFoundError: If the provided path does not exist.
            ValueError: If the file is not a .kv file.
        """
        if not os.path.exists(model_path):
            raise FileNotFoundError(f"Model file not found: {model_path}")
        if not str(model_path).endswith(".kv"):
            raise ValueError("The model file must be a .kv file.")

        return cls(KeyedVectors.load(str(model_path)))

    @classmethod
    def load_pretrained(cls, path, limit=None, has_header=False):
        """
        Parse a whitespace-delimited text vector file (``word f1 f2 ... fR`` per line).

        This is the format of the published GloVe vectors. word2vec text files,
        which start with a ``<count> <rank>`` header line, are read with
        ``has_header=True``.

        Args:
            path (str): Path to the text file (may be gzip/bz2 compressed).
            limit (int, optional): Read only the first ``limit`` vectors.
            has_header (bool): Whether the first line is a word2vec header.

        Returns:
            EmbeddingSpace: The parsed space.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Vector file not found: {path}")

        kv = KeyedVectors.load_word2vec_format(
            str(path), binary=False, limit=limit, no_header=not has_header
        )
        return cls(kv)

    def save(self, output_path):
        """
        Save the space to ``output_path`` in gensim's native ``.kv`` format.

        Raises:
            ValueError: If the path does not end in .kv.
        """
        if not str(output_path).endswith(".kv"):
            raise ValueError("The output file must be a .kv file.")
        self.model.save(str(output_path))

    def __len__(self):
        return len(self.model.index_to_key)

    def __contains__(self, word):
        return word in self.vocab

    def __getitem__(self, word):
        return self.vector(word)

    @property
    def words(self):
        """Vocabulary in index order."""
        return list(self.model.index_to_key)

    def ensure_words(self, words):
        """
        Check that every word is in the vocabulary.

        Raises:
            MissingWordError: Listing every absent word, if any.
        """
        missing = [word for word in words if word not in self.vocab]
        if missing:
            raise MissingWordError(missing)

    def vector(self, word):
        """
        Return a copy of the vector for ``word``.

        Raises:
            MissingWordError: If the word is not in the vocabulary.
        """
        self.ensure_words([word])
        return np.array(self.model[word], dtype=np.float64)

    def vectors(self, words):
        """
        Stack the vectors of ``words`` into a ``(len(words), vector_size)`` array.

        Raises:
            MissingWordError: If any word is not in the vocabulary.
        """
        words = list(words)
        self.ensure_words(words)
        if not words:
            return np.empty((0, self.vector_size))
        return np.vstack([self.model[word] for word in words]).astype(np.float64)

    def similarity(self, word1, word2):
        """
        Compute the cosine similarity between two words.

        Raises:
            MissingWordError: If either word is not in the vocabulary.
        """
        self.ensure_words([word1, word2])
        return float(self.model.similarity(word1, word2))

    def most_similar(self, word, topn=10):
        """
        Return the ``topn`` nearest neighbours of ``word`` as ``(word, cosine)`` pairs.

        Raises:
            MissingWordError: If the word is not in the vocabulary.
        """
        self.ensure_words([word])
        return self.model.most_similar(word, topn=topn)

    def __repr__(self):
        return f"EmbeddingSpace(words={len(self)}, vector_size={self.vector_size})"
