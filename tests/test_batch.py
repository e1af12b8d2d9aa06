import numpy as np
import pytest

from shingle_similarity import (QGram, SorensenDice, distance_matrix,
                                find_nearest, similarity_matrix)
from shingle_similarity.data import Match


class TestDistanceMatrix:
    """Unit tests for pairwise matrices."""

    @pytest.fixture
    def strings(self):
        return ["night", "nacht", "night", "x"]

    def test_qgram_matrix(self, strings):
        matrix = distance_matrix(QGram(2), strings)
        assert matrix.shape == (4, 4)
        assert matrix[0, 1] == 6.0
        assert matrix[0, 2] == 0.0
        assert matrix[0, 3] == 4.0
        np.testing.assert_array_equal(matrix, matrix.T)
        np.testing.assert_array_equal(np.diag(matrix), np.zeros(4))

    def test_similarity_matrix(self, strings):
        matrix = similarity_matrix(SorensenDice(2), strings)
        assert matrix[0, 1] == 0.25
        assert matrix[1, 0] == 0.25
        # "x" has no bigram, so its self-comparison is degenerate
        assert matrix[3, 3] == 1.0
        assert matrix[0, 3] == 0.0

    def test_similarity_requires_similarity_metric(self, strings):
        with pytest.raises(TypeError):
            similarity_matrix(QGram(2), strings)

    def test_empty_input(self):
        assert distance_matrix(QGram(), []).shape == (0, 0)

    def test_with_progress(self, strings):
        matrix = distance_matrix(QGram(2), strings, show_progress=True)
        assert matrix[1, 2] == 6.0


class TestFindNearest:
    """Unit tests for nearest-candidate search."""

    @pytest.fixture
    def candidates(self):
        return ["nacht", "nightly", "knight", "day", "night"]

    def test_ranked_by_distance(self, candidates):
        matches = find_nearest(QGram(2), "night", candidates, top_n=3)
        assert [m.candidate for m in matches] == ["night", "knight", "nightly"]
        assert matches[0] == Match(candidate="night", index=4, distance=0.0)

    def test_ties_keep_input_order(self):
        matches = find_nearest(QGram(2), "ab", ["xy", "zw", "ab"], top_n=3)
        assert [m.index for m in matches] == [2, 0, 1]

    def test_default_top_n_from_config(self):
        candidates = [f"item{i}" for i in range(8)]
        assert len(find_nearest(QGram(), "item", candidates)) == 5

    def test_invalid_top_n(self, candidates):
        with pytest.raises(ValueError):
            find_nearest(QGram(), "night", candidates, top_n=0)

    def test_dice_distance(self, candidates):
        matches = find_nearest(SorensenDice(2), "night", candidates, top_n=1)
        assert matches[0].candidate == "night"
        assert matches[0].distance == 0.0


class TestMatch:
    """Unit tests for Match records."""

    def test_dict_round_trip(self):
        match = Match(candidate="night", index=2, distance=1.5)
        data = match.to_dict()
        assert data == {"candidate": "night", "index": 2, "distance": 1.5}
        assert Match.from_dict(data) == match
