"""
Core building blocks: shingle profiling and metric contracts.
"""

from .interfaces import (NormalizedStringDistance, NormalizedStringSimilarity,
                         StringDistance, StringSimilarity)
from .shingling import (DEFAULT_K, ShingleProfiler, aligned_profiles,
                        iter_shingles, validate_k)

__all__ = [
    "DEFAULT_K",
    "ShingleProfiler",
    "aligned_profiles",
    "iter_shingles",
    "validate_k",
    "StringDistance",
    "StringSimilarity",
    "NormalizedStringDistance",
    "NormalizedStringSimilarity",
]
