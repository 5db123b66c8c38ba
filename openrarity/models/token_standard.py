from enum import Enum


class TokenStandard(str, Enum):
    """
    The interface or standard a token respects.

    Each chain may have its own token standards.
    """

    # Ethereum/EVM: https://eips.ethereum.org/EIPS/eip-721
    ERC721 = "erc721"
    # Ethereum/EVM: https://eips.ethereum.org/EIPS/eip-1155
    ERC1155 = "erc1155"

    # Solana: https://docs.metaplex.com/programs/token-metadata/token-standard
    METAPLEX_NON_FUNGIBLE = "metaplex_non_fungible"
