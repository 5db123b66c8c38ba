from openrarity.models.attribute import (
    NULL_ATTRIBUTE_VALUE,
    TRAIT_COUNT_ATTRIBUTE_NAME,
    Attribute,
    DateAttribute,
    NamedAttribute,
    NumericAttribute,
    StringAttribute,
    normalize_attribute_name,
    normalize_attribute_string,
    normalize_attribute_value,
)
from openrarity.models.collection import Collection, CollectionAttribute
from openrarity.models.failure import (
    CollectionValidationError,
    FailureDetail,
    FailureKind,
    RankInvariantError,
    RarityError,
    ScoreDimensionError,
    UnsupportedAttributeValueError,
)
from openrarity.models.token import Token
from openrarity.models.token_identifier import (
    EVMContractTokenIdentifier,
    IdentifierType,
    SolanaMintAddressTokenIdentifier,
    TokenIdentifier,
)
from openrarity.models.token_metadata import TokenMetadata
from openrarity.models.token_rarity import TokenRankingFeatures, TokenRarity
from openrarity.models.token_standard import TokenStandard

__all__ = [
    "Attribute",
    "Collection",
    "CollectionAttribute",
    "CollectionValidationError",
    "DateAttribute",
    "EVMContractTokenIdentifier",
    "FailureDetail",
    "FailureKind",
    "IdentifierType",
    "NULL_ATTRIBUTE_VALUE",
    "NamedAttribute",
    "NumericAttribute",
    "RankInvariantError",
    "RarityError",
    "ScoreDimensionError",
    "SolanaMintAddressTokenIdentifier",
    "StringAttribute",
    "TRAIT_COUNT_ATTRIBUTE_NAME",
    "Token",
    "TokenIdentifier",
    "TokenMetadata",
    "TokenRankingFeatures",
    "TokenRarity",
    "TokenStandard",
    "UnsupportedAttributeValueError",
    "normalize_attribute_name",
    "normalize_attribute_string",
    "normalize_attribute_value",
]
