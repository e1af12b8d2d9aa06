__version__ = "0.1.0"
from shingle_similarity.config import ConfigManager, settings
from shingle_similarity.core import (ShingleProfiler, aligned_profiles,
                                     iter_shingles)
from shingle_similarity.errors import (ConfigurationError,
                                       DegenerateComparisonError,
                                       InvalidInputError,
                                       ShingleSimilarityError)
from shingle_similarity.metrics import (QGram, SorensenDice,
                                        build_metric)
from shingle_similarity.utils import (distance_matrix, find_nearest,
                                      similarity_matrix)

__all__ = [
    "__version__",
    "ConfigManager",
    "settings",
    "ShingleProfiler",
    "aligned_profiles",
    "iter_shingles",
    "QGram",
    "SorensenDice",
    "build_metric",
    "distance_matrix",
    "similarity_matrix",
    "find_nearest",
    "ShingleSimilarityError",
    "ConfigurationError",
    "InvalidInputError",
    "DegenerateComparisonError",
]
