"""
Result records for batch comparisons.
"""
from dataclasses import dataclass


@dataclass
class Match:
    """
    One candidate scored against a query.

    Attributes:
        candidate: The candidate string
        index: Position of the candidate in the input sequence
        distance: Metric distance between query and candidate
    """
    candidate: str
    index: int
    distance: float

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {
            "candidate": self.candidate,
            "index": self.index,
            "distance": self.distance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Match':
        """Create Match from dictionary"""
        return cls(
            candidate=data["candidate"],
            index=data["index"],
            distance=data["distance"],
        )
