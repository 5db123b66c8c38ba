import math

from openrarity.models.collection import Collection, CollectionAttribute
from openrarity.models.token import Token


def get_token_attributes_scores_and_weights(
    collection: Collection,
    token: Token,
    normalized: bool,
    collection_null_attributes: dict[str, CollectionAttribute] | None = None,
) -> tuple[list[float], list[float]]:
    """
    Calculate per-attribute scores and weights for a token.

    If the token lacks an attribute name seen in the collection, the
    probability of that attribute being null is used instead. Attributes
    are ordered by name so results are deterministic.

    Args:
        collection: Collection the token belongs to
        token: Token to score
        normalized: Weight each attribute by 1 / distinct values of its name
            instead of by the attribute count
        collection_null_attributes: Precomputed null attributes (computed
            from the collection when None)

    Returns:
        (scores, weights) where score = total supply / tokens with the value.
        A value the collection never counted scores math.inf.
    """
    null_attributes = collection_null_attributes
    if null_attributes is None:
        null_attributes = collection.extract_null_attributes()

    # Real attributes override the null placeholder for the same name
    combined = {
        **null_attributes,
        **_token_collection_attributes(collection, token),
    }
    sorted_names = sorted(combined)
    supply = collection.token_total_supply

    if normalized:
        weights = [1.0 / collection.total_attribute_values(name) for name in sorted_names]
    else:
        weights = [float(len(sorted_names))] * len(sorted_names)

    scores = [_attribute_score(supply, combined[name].total_tokens) for name in sorted_names]
    return scores, weights


def _attribute_score(supply: int, total_tokens: int) -> float:
    # Absent from the frozen frequency table: infinitely surprising
    if total_tokens == 0:
        return math.inf
    return supply / total_tokens


def _token_collection_attributes(
    collection: Collection, token: Token
) -> dict[str, CollectionAttribute]:
    """Pair each string attribute of the token with its collection count."""
    return {
        name: CollectionAttribute(
            attribute=attribute,
            total_tokens=collection.total_tokens_with_attribute(attribute),
        )
        for name, attribute in token.metadata.string_attributes.items()
    }
