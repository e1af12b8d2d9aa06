from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shingle_similarity.core.shingling import DEFAULT_K, aligned_profiles, validate_k
from shingle_similarity.errors import InvalidInputError


class ShingleBased(BaseModel):
    """
    Immutable base for metrics computed from k-shingle profiles.

    The only state is the configuration; every comparison profiles its two
    strings in a session of its own, so one instance can be shared freely.

    Examples:
        QGram()        # k = 3
        QGram(2)
        QGram(k=4)
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    k: int = Field(DEFAULT_K, description="Shingle length")

    def __init__(self, k: int = DEFAULT_K, **data: Any):
        super().__init__(k=k, **data)

    @field_validator("k", mode="before")
    @classmethod
    def _check_k(cls, value: Any) -> int:
        return validate_k(value)

    def _profiles(self, s1: str, s2: str) -> tuple[list[int], list[int]]:
        """Validate both arguments and return their aligned profiles."""
        _require_string("s1", s1)
        _require_string("s2", s2)
        return aligned_profiles(s1, s2, self.k)


def _require_string(name: str, value: Any) -> None:
    if value is None:
        raise InvalidInputError(name, f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidInputError(name, f"{name} must be a string, got {type(value).__name__}")
