"""
Shingle-profile metrics.
"""

from .base import ShingleBased
from .factory import build_metric
from .qgram import QGram
from .sorensen_dice import SorensenDice

__all__ = [
    "ShingleBased",
    "QGram",
    "SorensenDice",
    "build_metric",
]
