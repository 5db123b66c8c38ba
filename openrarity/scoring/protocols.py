"""
Scoring handler contract.

Any object implementing these two methods can be plugged into Scorer.
Handlers are responsible for making `score_tokens` efficient for their
algorithm, typically by computing collection-level statistics once.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from openrarity.models.collection import Collection
from openrarity.models.token import Token


@runtime_checkable
class ScoringHandler(Protocol):
    """Protocol for rarity scoring algorithms."""

    def score_token(self, collection: Collection, token: Token) -> float:
        """Score one token against the attribute distribution of its collection."""
        ...

    def score_tokens(self, collection: Collection, tokens: Sequence[Token]) -> list[float]:
        """Score a batch of tokens belonging to the collection, in order."""
        ...
