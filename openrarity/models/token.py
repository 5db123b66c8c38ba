from collections.abc import Mapping
from dataclasses import dataclass

from openrarity.models.attribute import normalize_attribute_value
from openrarity.models.token_identifier import (
    EVMContractTokenIdentifier,
    SolanaMintAddressTokenIdentifier,
    TokenIdentifier,
)
from openrarity.models.token_metadata import TokenMetadata
from openrarity.models.token_standard import TokenStandard

# String values that do not count as a trait
_EMPTY_TRAIT_VALUES = frozenset({"", "none"})


@dataclass
class Token:
    """
    A token on the blockchain, e.g. a non-fungible or semi-fungible token.

    Tokens are treated as immutable once built, except for the single
    trait count attribute injected by Collection.

    Attributes:
        token_identifier: Chain-specific identifier
        token_standard: Standard the token respects
        metadata: Typed attributes of the token
    """

    token_identifier: TokenIdentifier
    token_standard: TokenStandard
    metadata: TokenMetadata

    @classmethod
    def from_erc721(
        cls,
        contract_address: str,
        token_id: int,
        attributes: Mapping[str, object],
    ) -> "Token":
        """
        Create an ERC721 EVM token from raw attributes.

        Raises:
            UnsupportedAttributeValueError: If an attribute value has an invalid type
        """
        return cls(
            token_identifier=EVMContractTokenIdentifier(contract_address, token_id),
            token_standard=TokenStandard.ERC721,
            metadata=TokenMetadata.from_attributes(attributes),
        )

    @classmethod
    def from_metaplex_non_fungible(
        cls,
        mint_address: str,
        attributes: Mapping[str, object],
    ) -> "Token":
        """
        Create a Metaplex non-fungible Solana token from raw attributes.

        Raises:
            UnsupportedAttributeValueError: If an attribute value has an invalid type
        """
        return cls(
            token_identifier=SolanaMintAddressTokenIdentifier(mint_address),
            token_standard=TokenStandard.METAPLEX_NON_FUNGIBLE,
            metadata=TokenMetadata.from_attributes(attributes),
        )

    def trait_count(self) -> int:
        """
        Count the traits this token has.

        String attributes only count when their value is not empty or "none";
        numeric and date attributes always count.
        """
        string_count = sum(
            1
            for attribute in self.metadata.string_attributes.values()
            if normalize_attribute_value(attribute.value) not in _EMPTY_TRAIT_VALUES
        )
        return (
            string_count
            + len(self.metadata.numeric_attributes)
            + len(self.metadata.date_attributes)
        )

    def has_attribute(self, name: str) -> bool:
        """Check if the token has a string attribute with this name."""
        return self.metadata.attribute_exists(name)
