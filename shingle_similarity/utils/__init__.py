"""Batch helpers built on top of single-pair metrics"""

from shingle_similarity.utils.batch import (distance_matrix, find_nearest,
                                            similarity_matrix)

__all__ = [
    "distance_matrix",
    "similarity_matrix",
    "find_nearest",
]
