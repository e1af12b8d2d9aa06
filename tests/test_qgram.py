import pytest
from pydantic import ValidationError

from shingle_similarity import QGram
from shingle_similarity.core.interfaces import StringDistance
from shingle_similarity.errors import ConfigurationError, InvalidInputError


class TestQGram:
    """Unit tests for Q-gram distance."""

    @pytest.fixture
    def qgram(self):
        return QGram()

    def test_default_k(self, qgram):
        assert qgram.k == 3
        assert isinstance(qgram, StringDistance)

    def test_positional_and_keyword_k(self):
        assert QGram(2).k == 2
        assert QGram(k=4).k == 4

    def test_night_nacht(self):
        """Only "ht" is shared: 3 unmatched shingles on each side."""
        assert QGram(2).distance("night", "nacht") == 6.0

    def test_empty_vs_exact_k(self, qgram):
        assert qgram.distance("", "abc") == 1.0

    def test_short_vs_exact_k(self, qgram):
        assert qgram.distance("ab", "abc") == 1.0

    def test_both_short(self, qgram):
        assert qgram.distance("", "") == 0.0
        assert qgram.distance("ab", "xy") == 0.0

    def test_one_empty_counts_all_occurrences(self, qgram):
        assert qgram.distance("", "mississippi") == 9.0
        assert qgram.distance("abcabc", "") == 4.0

    def test_identical(self, qgram):
        assert qgram.distance("hello world", "hello world") == 0.0

    def test_multiplicity_matters(self):
        """aa x3 against aa x1."""
        assert QGram(2).distance("aaaa", "aa") == 2.0

    def test_same_multiset_different_order(self):
        """Rotations can share every shingle occurrence."""
        assert QGram(1).distance("abc", "cab") == 0.0

    def test_returns_float(self, qgram):
        assert isinstance(qgram.distance("abcd", "abce"), float)

    @pytest.mark.parametrize("k", [0, -3])
    def test_non_positive_k(self, k):
        with pytest.raises(ConfigurationError):
            QGram(k)

    def test_wrong_type_k(self):
        with pytest.raises(ConfigurationError):
            QGram("3")

    def test_immutable(self, qgram):
        with pytest.raises(ValidationError):
            qgram.k = 5

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            QGram(k=3, unknown=1)

    def test_none_input(self, qgram):
        with pytest.raises(InvalidInputError) as exc_info:
            qgram.distance(None, "abc")
        assert exc_info.value.argument == "s1"

        with pytest.raises(InvalidInputError) as exc_info:
            qgram.distance("abc", None)
        assert exc_info.value.argument == "s2"

    def test_non_string_input(self, qgram):
        with pytest.raises(InvalidInputError) as exc_info:
            qgram.distance("abc", 123)
        assert exc_info.value.argument == "s2"

    def test_equal_instances(self):
        assert QGram(2) == QGram(k=2)
        assert QGram(2) != QGram(3)
