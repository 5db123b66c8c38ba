from openrarity.models.collection import Collection
from openrarity.models.token import Token
from openrarity.models.token_rarity import TokenRankingFeatures


def extract_unique_attribute_count(token: Token, collection: Collection) -> TokenRankingFeatures:
    """Count the token's string attributes that no other token in the collection holds."""
    unique_attribute_count = sum(
        1
        for attribute in token.metadata.string_attributes.values()
        if collection.total_tokens_with_attribute(attribute) == 1
    )
    return TokenRankingFeatures(unique_attribute_count=unique_attribute_count)
