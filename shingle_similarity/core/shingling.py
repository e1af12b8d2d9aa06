"""
K-shingle profiling.

A shingle is a window of exactly k consecutive characters. A profile counts
how often each shingle occurs in a string, indexed by the order in which the
shingles were first seen during one profiling session.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

from shingle_similarity.errors import ConfigurationError

DEFAULT_K = 3


def validate_k(k: int) -> int:
    """Return k unchanged, or raise ConfigurationError if it is not a positive int."""
    if isinstance(k, bool) or not isinstance(k, int):
        raise ConfigurationError(f"k must be a positive integer, got {k!r}")
    if k <= 0:
        raise ConfigurationError(f"k must be a positive integer, got {k}")
    return k


def iter_shingles(s: str, k: int = DEFAULT_K) -> Iterator[str]:
    """
    Every k-length window of s, left to right (nothing if len(s) < k).

    k is checked on the call, not on the first next().
    """
    validate_k(k)
    return (s[i:i + k] for i in range(len(s) - k + 1))


class ShingleProfiler:
    """
    One profiling session.

    Every distinct shingle seen by this object, across all the strings it
    profiles, gets the next free index starting at 0. Profiles of strings
    compared against each other must come from the same session so that
    position i means the same shingle in both.

    Example:
        profiler = ShingleProfiler(k=2)
        profiler.profile("abab")   # [2, 1]     (ab, ba)
        profiler.profile("abc")    # [1, 0, 1]  (ab, ba, bc)
    """

    def __init__(self, k: int = DEFAULT_K):
        self._k = validate_k(k)
        self._index: dict[str, int] = {}

    @property
    def k(self) -> int:
        return self._k

    @property
    def vocabulary(self) -> tuple[str, ...]:
        """Shingles discovered so far, in index order."""
        return tuple(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"ShingleProfiler(k={self._k}, shingles={len(self._index)})"

    def profile(self, s: str) -> list[int]:
        """
        Count the shingles of s over this session's index.

        Args:
            s: String to profile

        Returns:
            Occurrence counts, one per shingle discovered so far in the
            session. Empty if s is shorter than k.
        """
        if len(s) < self._k:
            return []

        counts = [0] * len(self._index)
        for shingle in iter_shingles(s, self._k):
            idx = self._index.get(shingle)
            if idx is None:
                idx = len(self._index)
                self._index[shingle] = idx
                counts.append(0)
            counts[idx] += 1
        return counts

    def profile_map(self, s: str) -> dict[str, int]:
        """Shingle -> occurrence count for s alone; the session index is untouched."""
        return dict(Counter(iter_shingles(s, self._k)))


def aligned_profiles(s1: str, s2: str, k: int = DEFAULT_K) -> tuple[list[int], list[int]]:
    """
    Profile two strings in a fresh session and zero-pad them to equal length.

    An index missing from the shorter profile belongs to a shingle the
    string does not contain, so padding with 0 keeps the counts exact.
    """
    profiler = ShingleProfiler(k)
    profile1 = profiler.profile(s1)
    profile2 = profiler.profile(s2)

    length = max(len(profile1), len(profile2))
    profile1.extend([0] * (length - len(profile1)))
    profile2.extend([0] * (length - len(profile2)))
    return profile1, profile2
