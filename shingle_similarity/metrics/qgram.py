from __future__ import annotations

from shingle_similarity.core.interfaces import StringDistance
from shingle_similarity.metrics.base import ShingleBased


class QGram(ShingleBased, StringDistance):
    """
    Q-gram distance, as defined by Ukkonen in "Approximate string-matching
    with q-grams and maximal matches".

    The distance is the L1 norm of the difference between the two shingle
    profiles: SUM(|V1_i - V2_i|). It is a lower bound on Levenshtein
    distance (scaled by 2k) and runs in O(|s1| + |s2|) rather than
    O(|s1| * |s2|).

    Example:
        QGram(2).distance("night", "nacht")   # 6.0
    """

    def distance(self, s1: str, s2: str) -> float:
        """L1 distance between the shingle profiles of s1 and s2."""
        profile1, profile2 = self._profiles(s1, s2)
        return float(sum(abs(c1 - c2) for c1, c2 in zip(profile1, profile2)))
