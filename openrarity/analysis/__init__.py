from openrarity.analysis.features import extract_unique_attribute_count
from openrarity.analysis.ranker import (
    is_score_close,
    rank_collection,
    rank_collections,
    set_rarity_ranks,
)

__all__ = [
    "extract_unique_attribute_count",
    "is_score_close",
    "rank_collection",
    "rank_collections",
    "set_rarity_ranks",
]
