"""
Abstract contracts shared by string metrics.
"""
from abc import ABC, abstractmethod


class StringDistance(ABC):
    """Something that measures how far apart two strings are."""

    @abstractmethod
    def distance(self, s1: str, s2: str) -> float:
        """Distance between s1 and s2 (0 means no difference)."""


class StringSimilarity(ABC):
    """Something that measures how alike two strings are."""

    @abstractmethod
    def similarity(self, s1: str, s2: str) -> float:
        """Similarity between s1 and s2 (higher means more alike)."""


class NormalizedStringDistance(StringDistance):
    """A distance whose values lie in [0, 1]."""


class NormalizedStringSimilarity(StringSimilarity):
    """A similarity whose values lie in [0, 1]."""
