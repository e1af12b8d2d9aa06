"""
Pairwise and one-to-many comparisons for deduplication and record linkage.
"""
import logging
from collections.abc import Callable, Sequence

import numpy as np
from tqdm import tqdm

from shingle_similarity.config import settings
from shingle_similarity.core.interfaces import StringDistance, StringSimilarity
from shingle_similarity.data.match import Match

logger = logging.getLogger(__name__)


def _pairwise(score: Callable[[str, str], float], strings: Sequence[str],
              show_progress: bool | None, desc: str) -> np.ndarray:
    """Fill a symmetric n x n matrix, scoring each unordered pair (diagonal included) once."""
    if show_progress is None:
        show_progress = settings.cfg.batch.show_progress

    n = len(strings)
    matrix = np.zeros((n, n), dtype=float)
    pairs = [(i, j) for i in range(n) for j in range(i, n)]
    logger.debug(f"{desc}: {n} strings, {len(pairs)} pairs")

    for i, j in tqdm(pairs, desc=desc, ncols=100, disable=not show_progress):
        value = score(strings[i], strings[j])
        matrix[i, j] = value
        matrix[j, i] = value
    return matrix


def distance_matrix(metric: StringDistance, strings: Sequence[str],
                    show_progress: bool | None = None) -> np.ndarray:
    """
    Distances between every pair of strings.

    Args:
        metric: Any StringDistance (QGram, SorensenDice, ...)
        strings: Strings to compare
        show_progress: Show a tqdm bar; defaults to batch.show_progress from config

    Returns:
        Symmetric (n, n) float array, entry [i, j] = metric.distance(strings[i], strings[j])
    """
    return _pairwise(metric.distance, strings, show_progress, "Distances")


def similarity_matrix(metric: StringSimilarity, strings: Sequence[str],
                      show_progress: bool | None = None) -> np.ndarray:
    """Like distance_matrix, using metric.similarity."""
    if not isinstance(metric, StringSimilarity):
        raise TypeError(f"{type(metric).__name__} does not provide a similarity")
    return _pairwise(metric.similarity, strings, show_progress, "Similarities")


def find_nearest(metric: StringDistance, query: str, candidates: Sequence[str],
                 top_n: int | None = None) -> list[Match]:
    """
    Rank candidates by distance to query.

    Args:
        metric: Any StringDistance
        query: String to match
        candidates: Strings to rank
        top_n: Number of matches to keep; defaults to batch.top_n from config

    Returns:
        Up to top_n matches, closest first. Equal distances keep input order.
    """
    if top_n is None:
        top_n = settings.cfg.batch.top_n
    if top_n <= 0:
        raise ValueError(f"top_n must be positive, got {top_n}")

    matches = [
        Match(candidate=candidate, index=i, distance=metric.distance(query, candidate))
        for i, candidate in enumerate(candidates)
    ]
    matches.sort(key=lambda m: m.distance)
    return matches[:top_n]
