"""
Rarity ranking algorithm.

Ranks tokens of a collection from rarest (rank 1) to most common with a
multi-factor sort:
1. Unique attribute count (descending)
2. Rarity score (descending)

Ranks follow competition ranking (RANK, not DENSE_RANK): tied tokens share
a rank and the next distinct token takes its 1-based position, e.g.
1, 2, 2, 2, 5.

Ties are detected SEQUENTIALLY: each token is compared only with its
immediate predecessor in sorted order, using an absolute score tolerance.
A long run of scores drifting by less than the tolerance per step therefore
shares one rank even when its ends are further apart than the tolerance.
"""

import logging
import math
from collections.abc import Sequence

from openrarity.analysis.features import extract_unique_attribute_count
from openrarity.config import settings
from openrarity.models.collection import Collection
from openrarity.models.failure import RankInvariantError, ScoreDimensionError
from openrarity.models.token_rarity import TokenRarity
from openrarity.scoring.scorer import Scorer

logger = logging.getLogger(__name__)


def rank_collection(
    collection: Collection,
    scorer: Scorer,
    tolerance: float | None = None,
) -> list[TokenRarity]:
    """
    Score and rank every token of a collection.

    Args:
        collection: Collection to rank
        scorer: Scorer used to score all tokens in one batch
        tolerance: Absolute score tolerance for ties
            (default: settings.rank_score_tolerance)

    Returns:
        TokenRarity list sorted rarest first, ranks assigned

    Raises:
        CollectionValidationError: If the collection is not eligible for scoring
        ScoreDimensionError: If the scorer returns the wrong number of scores
        RankInvariantError: If rank assignment finds an unranked predecessor
    """
    tokens = collection.tokens
    if not tokens:
        return []

    scores = scorer.score_tokens(collection, tokens)
    if len(scores) != len(tokens):
        raise ScoreDimensionError(expected=len(tokens), actual=len(scores))

    token_rarities = [
        TokenRarity(
            token=token,
            score=score,
            token_features=extract_unique_attribute_count(token, collection),
        )
        for token, score in zip(tokens, scores)
    ]

    ranked = set_rarity_ranks(token_rarities, tolerance)
    logger.info("Ranked collection %r: %d tokens", collection.name, len(ranked))
    return ranked


def set_rarity_ranks(
    token_rarities: list[TokenRarity],
    tolerance: float | None = None,
) -> list[TokenRarity]:
    """
    Sort token rarities in place and assign competition ranks.

    The sort is stable, so tokens equal on both keys keep their input order.

    Args:
        token_rarities: Scored tokens (ranks may be unset)
        tolerance: Absolute score tolerance for ties
            (default: settings.rank_score_tolerance)

    Returns:
        The same list, sorted rarest first, with ranks assigned

    Raises:
        RankInvariantError: If a tie is found with an unranked predecessor
    """
    if tolerance is None:
        tolerance = settings.rank_score_tolerance

    token_rarities.sort(
        key=lambda r: (r.token_features.unique_attribute_count, r.score),
        reverse=True,
    )

    for i, token_rarity in enumerate(token_rarities):
        rank = i + 1
        if i > 0:
            previous = token_rarities[i - 1]
            if is_score_close(token_rarity.score, previous.score, tolerance):
                if previous.rank == 0:
                    raise RankInvariantError(position=i - 1)
                rank = previous.rank
        token_rarity.rank = rank

    return token_rarities


def is_score_close(a: float, b: float, tolerance: float) -> bool:
    """Check if two scores are equal within an absolute tolerance."""
    return math.isclose(a, b, rel_tol=0.0, abs_tol=tolerance)


def rank_collections(
    collections: Sequence[Collection],
    scorer: Scorer,
    tolerance: float | None = None,
) -> list[list[TokenRarity]]:
    """
    Rank several independent collections.

    Fails fast: the first collection that cannot be ranked aborts the call.
    """
    return [rank_collection(collection, scorer, tolerance) for collection in collections]
