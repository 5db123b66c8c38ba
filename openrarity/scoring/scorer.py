"""
Scorer: validation gate in front of a scoring handler.

Every scoring entry point validates the collection first. A collection that
fails validation produces NO scores: the error is raised and nothing is
returned.

Validation rules:
- Numeric and date attributes are not supported
- Only ERC721 and Metaplex non-fungible tokens are supported
"""

import logging
from collections.abc import Sequence

from openrarity.models.collection import Collection
from openrarity.models.failure import CollectionValidationError, FailureKind
from openrarity.models.token import Token
from openrarity.models.token_standard import TokenStandard
from openrarity.scoring.information_content import InformationContentScoringHandler
from openrarity.scoring.protocols import ScoringHandler

logger = logging.getLogger(__name__)

ALLOWED_TOKEN_STANDARDS = frozenset(
    {
        TokenStandard.ERC721,
        TokenStandard.METAPLEX_NON_FUNGIBLE,
    }
)


class Scorer:
    """
    Scores tokens of a collection with a pluggable handler.

    Usage:
        scorer = Scorer()  # information content handler
        scores = scorer.score_collection(collection)
    """

    def __init__(self, handler: ScoringHandler | None = None) -> None:
        if handler is None:
            handler = InformationContentScoringHandler()
        self.handler: ScoringHandler = handler

    def validate_collection(self, collection: Collection) -> None:
        """
        Check that a collection is eligible for scoring.

        Raises:
            CollectionValidationError: If the collection has numeric/date
                attributes or a token standard outside the allow-list
        """
        if collection.has_numeric_attribute():
            logger.warning("Refusing collection %r: numeric or date attributes", collection.name)
            raise CollectionValidationError(
                kind=FailureKind.NUMERIC_ATTRIBUTES_UNSUPPORTED,
                message="Collections with numeric or date attributes are not supported",
                detail=f"collection '{collection.name}'",
            )

        unsupported = [
            standard
            for standard in collection.token_standards()
            if standard not in ALLOWED_TOKEN_STANDARDS
        ]
        if unsupported:
            logger.warning(
                "Refusing collection %r: unsupported standards %s",
                collection.name,
                [standard.value for standard in unsupported],
            )
            raise CollectionValidationError(
                kind=FailureKind.UNSUPPORTED_TOKEN_STANDARD,
                message="Only ERC721 and Metaplex non-fungible token standards are supported",
                detail=", ".join(standard.value for standard in unsupported),
            )

    def score_token(self, collection: Collection, token: Token) -> float:
        """Score one token based on the attribute distribution of the collection."""
        self.validate_collection(collection)
        return self.handler.score_token(collection, token)

    def score_tokens(self, collection: Collection, tokens: Sequence[Token]) -> list[float]:
        """
        Score a batch of tokens belonging to the collection.

        More efficient than calling score_token for each token.
        """
        self.validate_collection(collection)
        return self.handler.score_tokens(collection, tokens)

    def score_collection(self, collection: Collection) -> list[float]:
        """Score every token of the collection, in collection order."""
        self.validate_collection(collection)
        scores = self.handler.score_tokens(collection, collection.tokens)
        logger.info("Scored collection %r: %d tokens", collection.name, len(scores))
        return scores

    def score_collections(self, collections: Sequence[Collection]) -> list[list[float]]:
        """
        Score every token of every collection.

        Fails fast: the first invalid collection aborts the whole call.
        """
        all_scores: list[list[float]] = []
        for collection in collections:
            all_scores.append(self.score_collection(collection))
        return all_scores
