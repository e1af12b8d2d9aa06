"""Result records for batch comparisons"""

from shingle_similarity.data.match import Match

__all__ = [
    "Match",
]
