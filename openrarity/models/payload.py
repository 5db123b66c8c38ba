"""
Serializable payloads for reading collections and writing rankings.

Payloads are UNTRUSTED input. Attribute values are kept untyped here and
classified by `TokenMetadata.from_attributes()`, which owns rejection of
unsupported value types.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from openrarity.models.collection import Collection
from openrarity.models.token import Token
from openrarity.models.token_identifier import (
    EVMContractTokenIdentifier,
    SolanaMintAddressTokenIdentifier,
    TokenIdentifier,
)
from openrarity.models.token_metadata import TokenMetadata
from openrarity.models.token_rarity import TokenRarity
from openrarity.models.token_standard import TokenStandard


class TokenPayload(BaseModel):
    """One token: an EVM (contract_address + token_id) or Solana (mint_address) id."""

    contract_address: str | None = Field(
        default=None,
        description="EVM contract address",
    )
    token_id: int | None = Field(
        default=None,
        description="EVM token id within the contract",
    )
    mint_address: str | None = Field(
        default=None,
        description="Solana mint account address",
    )
    token_standard: TokenStandard | None = Field(
        default=None,
        description=(
            "Standard the token respects "
            "(default: erc721 for EVM ids, metaplex_non_fungible for Solana ids)"
        ),
    )
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw attributes {name: value}",
    )

    @model_validator(mode="after")
    def check_identifier(self) -> "TokenPayload":
        has_evm = self.contract_address is not None and self.token_id is not None
        has_solana = self.mint_address is not None
        if has_evm == has_solana:
            raise ValueError(
                "token needs either contract_address and token_id, or mint_address"
            )
        return self

    def identifier(self) -> TokenIdentifier:
        if self.mint_address is not None:
            return SolanaMintAddressTokenIdentifier(self.mint_address)
        if self.contract_address is None or self.token_id is None:
            raise ValueError("token has no identifier")
        return EVMContractTokenIdentifier(self.contract_address, self.token_id)

    def standard(self) -> TokenStandard:
        """Explicit standard, or the usual one for the identifier's chain."""
        if self.token_standard is not None:
            return self.token_standard
        if self.mint_address is not None:
            return TokenStandard.METAPLEX_NON_FUNGIBLE
        return TokenStandard.ERC721

    def to_token(self) -> Token:
        """
        Build the domain token.

        Raises:
            UnsupportedAttributeValueError: If an attribute value has an invalid type
        """
        return Token(
            token_identifier=self.identifier(),
            token_standard=self.standard(),
            metadata=TokenMetadata.from_attributes(self.attributes),
        )


class CollectionPayload(BaseModel):
    """A named, ordered list of tokens."""

    name: str = ""
    tokens: list[TokenPayload] = Field(default_factory=list)

    def to_collection(self) -> Collection:
        return Collection([token.to_token() for token in self.tokens], name=self.name)


class RankedTokenPayload(BaseModel):
    """Output row for a ranked token."""

    identifier: str
    rank: int
    score: float
    unique_attribute_count: int

    @classmethod
    def from_rarity(cls, rarity: TokenRarity) -> "RankedTokenPayload":
        return cls(
            identifier=str(rarity.token.token_identifier),
            rank=rarity.rank,
            score=rarity.score,
            unique_attribute_count=rarity.token_features.unique_attribute_count,
        )
