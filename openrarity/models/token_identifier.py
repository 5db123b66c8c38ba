from dataclasses import dataclass
from enum import Enum


class IdentifierType(str, Enum):
    """How tokens of a collection are identified and grouped."""

    EVM_CONTRACT = "evm_contract"
    SOLANA_MINT_ADDRESS = "solana_mint_address"


@dataclass(frozen=True, slots=True)
class EVMContractTokenIdentifier:
    """
    Token identified by contract address and numeric token id.

    Follows ERC721 and ERC1155, where unique tokens belong to the same
    contract but have their own token id.
    """

    contract_address: str
    token_id: int

    @property
    def identifier_type(self) -> IdentifierType:
        return IdentifierType.EVM_CONTRACT

    def __str__(self) -> str:
        return f"{self.contract_address}:{self.token_id}"


@dataclass(frozen=True, slots=True)
class SolanaMintAddressTokenIdentifier:
    """Token identified by its Solana mint account address."""

    mint_address: str

    @property
    def identifier_type(self) -> IdentifierType:
        return IdentifierType.SOLANA_MINT_ADDRESS

    def __str__(self) -> str:
        return self.mint_address


TokenIdentifier = EVMContractTokenIdentifier | SolanaMintAddressTokenIdentifier
