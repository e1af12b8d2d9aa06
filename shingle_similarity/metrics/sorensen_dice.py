from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import Field, field_validator

from shingle_similarity.core.interfaces import (NormalizedStringDistance,
                                                NormalizedStringSimilarity)
from shingle_similarity.core.shingling import DEFAULT_K
from shingle_similarity.errors import (ConfigurationError,
                                       DegenerateComparisonError)
from shingle_similarity.metrics.base import ShingleBased

logger = logging.getLogger(__name__)

EmptyPolicy = Literal["identical", "raise"]
EMPTY_POLICIES = ("identical", "raise")


class SorensenDice(ShingleBased, NormalizedStringDistance, NormalizedStringSimilarity):
    """
    Sørensen–Dice coefficient, aka Sørensen index, Dice's coefficient or
    Czekanowski's binary (non-quantitative) index.

    Both strings are reduced to the sets of their k-shingles, then
    similarity = 2 * |A ∩ B| / (|A| + |B|). Multiplicities are ignored.
    Attention: the derived distance does not satisfy the triangle inequality.

    When neither string is long enough to hold a shingle the ratio is 0/0.
    on_empty decides what happens then:
        "identical": similarity 1.0, distance 0.0
        "raise":     DegenerateComparisonError

    Example:
        SorensenDice(2).similarity("night", "nacht")   # 0.25
    """

    on_empty: EmptyPolicy = Field("identical", description="Policy when both strings have no shingles")

    def __init__(self, k: int = DEFAULT_K, on_empty: EmptyPolicy = "identical", **data: Any):
        super().__init__(k=k, on_empty=on_empty, **data)

    @field_validator("on_empty", mode="before")
    @classmethod
    def _check_on_empty(cls, value: Any) -> str:
        if value not in EMPTY_POLICIES:
            raise ConfigurationError(f"on_empty must be one of {EMPTY_POLICIES}, got {value!r}")
        return value

    def similarity(self, s1: str, s2: str) -> float:
        """2 * |A ∩ B| / (|A| + |B|) over the shingle sets of s1 and s2."""
        profile1, profile2 = self._profiles(s1, s2)

        inter = 0
        total = 0
        for c1, c2 in zip(profile1, profile2):
            if c1 > 0 and c2 > 0:
                inter += 1
            if c1 > 0:
                total += 1
            if c2 > 0:
                total += 1

        if total == 0:
            if self.on_empty == "raise":
                raise DegenerateComparisonError(
                    f"neither string has a shingle of length {self.k}"
                )
            logger.debug(f"No shingles of length {self.k} on either side, treating strings as identical")
            return 1.0

        return 2.0 * inter / total

    def distance(self, s1: str, s2: str) -> float:
        """1 - similarity(s1, s2)."""
        return 1.0 - self.similarity(s1, s2)
