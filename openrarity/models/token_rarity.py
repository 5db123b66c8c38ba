from dataclasses import dataclass

from openrarity.models.token import Token


@dataclass(frozen=True, slots=True)
class TokenRankingFeatures:
    """
    Auxiliary ranking signals for a token.

    Attributes:
        unique_attribute_count: String attributes held by this token only
    """

    unique_attribute_count: int


@dataclass
class TokenRarity:
    """
    A token with its rarity score and rank.

    Higher scores are rarer. Rank is 1-based and stays 0 until assigned
    by the ranker.
    """

    token: Token
    score: float
    token_features: TokenRankingFeatures
    rank: int = 0
