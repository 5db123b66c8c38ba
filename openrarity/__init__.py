"""Information-content rarity scoring and ranking for token collections."""

from openrarity.analysis import (
    extract_unique_attribute_count,
    rank_collection,
    rank_collections,
    set_rarity_ranks,
)
from openrarity.models import (
    Collection,
    CollectionValidationError,
    RankInvariantError,
    RarityError,
    ScoreDimensionError,
    StringAttribute,
    Token,
    TokenMetadata,
    TokenRarity,
    TokenStandard,
    UnsupportedAttributeValueError,
)
from openrarity.scoring import InformationContentScoringHandler, Scorer, ScoringHandler


def build_default_scorer() -> Scorer:
    """Scorer backed by the information content handler."""
    return Scorer(InformationContentScoringHandler())


__all__ = [
    "Collection",
    "CollectionValidationError",
    "InformationContentScoringHandler",
    "RankInvariantError",
    "RarityError",
    "ScoreDimensionError",
    "Scorer",
    "ScoringHandler",
    "StringAttribute",
    "Token",
    "TokenMetadata",
    "TokenRarity",
    "TokenStandard",
    "UnsupportedAttributeValueError",
    "build_default_scorer",
    "extract_unique_attribute_count",
    "rank_collection",
    "rank_collections",
    "set_rarity_ranks",
]
