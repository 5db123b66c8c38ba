"""
Information-content rarity scoring.

Rarity is treated as "surprise" at a token's attributes within its
collection. Self-information measures that surprise; information entropy is
the expected self-information across the whole collection.

Every attribute name is a categorical distribution over its values, with
the absence of the attribute counted as a "Null" value. A token's
information content (IC) is the sum of the self-information of each value
it holds. Adding attributes to every token inflates both a token's IC and
the collection entropy, so scores are divided by the entropy to give a
relative surprise that is comparable between collections.

Score formula:
    p(name, value) = tokens with value / total supply
    entropy        = -sum(p * log2(p)) over every (name, value), nulls included
    IC(token)      = sum(log2(1 / p)) over the token's merged attributes
    score(token)   = IC(token) / entropy   (entropy 0 is replaced by 1)
"""

import logging
import math
from collections.abc import Sequence

from openrarity.models.collection import Collection, CollectionAttribute
from openrarity.models.token import Token
from openrarity.scoring.utils import get_token_attributes_scores_and_weights

logger = logging.getLogger(__name__)


class InformationContentScoringHandler:
    """Scores tokens by information content normalized by collection entropy."""

    def get_collection_entropy(
        self,
        collection: Collection,
        attributes: dict[str, list[CollectionAttribute]] | None = None,
        null_attributes: dict[str, CollectionAttribute] | None = None,
    ) -> float:
        """
        Calculate the entropy of the collection.

        Flat sum of -p * log2(p) over the probability of every attribute
        name/value pair in the collection, null values included.

        Args:
            collection: Collection to measure
            attributes: Precomputed collection attributes (optional)
            null_attributes: Precomputed null attributes (optional)

        Returns:
            Entropy in bits, always >= 0
        """
        if attributes is None:
            attributes = collection.extract_collection_attributes()
        if null_attributes is None:
            null_attributes = collection.extract_null_attributes()

        supply = collection.token_total_supply
        probabilities: list[float] = []
        for name, values in attributes.items():
            counts = [value.total_tokens for value in values]
            null_attribute = null_attributes.get(name)
            if null_attribute is not None:
                counts.append(null_attribute.total_tokens)
            probabilities.extend(count / supply for count in counts)

        entropy = -sum(p * math.log2(p) for p in probabilities)
        # Degenerate distributions sum to -0.0
        return abs(entropy)

    def score_tokens(self, collection: Collection, tokens: Sequence[Token]) -> list[float]:
        """
        Score a batch of tokens belonging to the collection.

        Null attributes and entropy are computed once for the whole batch.
        """
        null_attributes = collection.extract_null_attributes()
        entropy = self._normalization_entropy(
            collection,
            collection.extract_collection_attributes(),
            null_attributes,
        )
        scores = [
            self._score_token(collection, token, null_attributes, entropy) for token in tokens
        ]
        logger.debug("Scored %d tokens of %r", len(scores), collection.name)
        return scores

    def score_token(self, collection: Collection, token: Token) -> float:
        """Score a single token against the collection."""
        null_attributes = collection.extract_null_attributes()
        entropy = self._normalization_entropy(
            collection,
            collection.extract_collection_attributes(),
            null_attributes,
        )
        return self._score_token(collection, token, null_attributes, entropy)

    def _normalization_entropy(
        self,
        collection: Collection,
        attributes: dict[str, list[CollectionAttribute]],
        null_attributes: dict[str, CollectionAttribute],
    ) -> float:
        entropy = self.get_collection_entropy(collection, attributes, null_attributes)
        logger.debug(
            "Collection %r: entropy=%.6f bits, %d null attributes",
            collection.name,
            entropy,
            len(null_attributes),
        )
        if entropy == 0:
            return 1.0
        return entropy

    def _score_token(
        self,
        collection: Collection,
        token: Token,
        null_attributes: dict[str, CollectionAttribute],
        entropy: float,
    ) -> float:
        return self._information_content(collection, token, null_attributes) / entropy

    def _information_content(
        self,
        collection: Collection,
        token: Token,
        null_attributes: dict[str, CollectionAttribute],
    ) -> float:
        # Attribute scores are inverted probabilities: supply / count
        attribute_scores, _ = get_token_attributes_scores_and_weights(
            collection,
            token,
            normalized=False,
            collection_null_attributes=null_attributes,
        )
        # log2(1 / p) per attribute; an uncounted value (score inf) gives inf
        return sum(math.log2(score) for score in attribute_scores)
