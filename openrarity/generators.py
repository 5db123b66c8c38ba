"""
Synthetic collection generators.

Used to exercise the scorer on collections with a known attribute spread:
uniform rarity, a single rare token, or a realistic mixed distribution.
"""

import random
from collections.abc import Mapping, Sequence

from openrarity.models.attribute import StringAttribute
from openrarity.models.collection import Collection
from openrarity.models.token import Token
from openrarity.models.token_identifier import (
    EVMContractTokenIdentifier,
    IdentifierType,
    SolanaMintAddressTokenIdentifier,
    TokenIdentifier,
)
from openrarity.models.token_metadata import TokenMetadata
from openrarity.models.token_standard import TokenStandard

DEFAULT_CONTRACT_ADDRESS = "0x0"

# Share of the supply holding each trait value
MIXED_TRAIT_SHARES: dict[str, list[tuple[str, float]]] = {
    "hat": [("cap", 0.2), ("beanie", 0.3), ("hood", 0.45), ("visor", 0.05)],
    "shirt": [("white-t", 0.8), ("vest", 0.2)],
    "special": [("true", 0.1), ("null", 0.9)],
}


def _string_token(token_id: int, values: Mapping[str, str]) -> Token:
    return Token(
        token_identifier=EVMContractTokenIdentifier(DEFAULT_CONTRACT_ADDRESS, token_id),
        token_standard=TokenStandard.ERC721,
        metadata=TokenMetadata.from_string_attributes(
            {name: StringAttribute(name, value) for name, value in values.items()}
        ),
    )


def uniform_rarity_tokens(
    attribute_count: int,
    values_per_attribute: int,
    total_supply: int,
) -> list[Token]:
    """Tokens whose attribute values are spread evenly across the supply."""
    bucket = total_supply // values_per_attribute
    return [
        _string_token(
            token_id,
            {str(i): str(token_id // bucket) for i in range(attribute_count)},
        )
        for token_id in range(total_supply)
    ]


def one_rare_rarity_tokens(
    attribute_count: int,
    values_per_attribute: int,
    total_supply: int,
) -> list[Token]:
    """Evenly spread tokens plus one last token holding a value nobody else has."""
    bucket = total_supply // (values_per_attribute - 1)
    tokens = [
        _string_token(
            token_id,
            {str(i): str(token_id // bucket - 1) for i in range(attribute_count)},
        )
        for token_id in range(total_supply - 1)
    ]
    tokens.append(
        _string_token(
            total_supply - 1,
            {str(i): str(values_per_attribute) for i in range(attribute_count)},
        )
    )
    return tokens


def mixed_trait_spread(total_supply: int) -> dict[str, list[tuple[str, int]]]:
    """
    Token counts per trait value for a supply.

    Rounding leftovers go to the last value so every trait covers the supply.
    """
    spread: dict[str, list[tuple[str, int]]] = {}
    for trait_name, shares in MIXED_TRAIT_SHARES.items():
        counts = [(value, int(total_supply * share)) for value, share in shares]
        assigned = sum(count for _, count in counts)
        last_value, last_count = counts[-1]
        counts[-1] = (last_value, last_count + total_supply - assigned)
        spread[trait_name] = counts
    return spread


def generate_mixed_collection(total_supply: int, seed: int | None = None) -> Collection:
    """
    Generate a collection with the mixed trait spread over shuffled token ids.

    Args:
        total_supply: Number of tokens, a multiple of 10 and at least 100
        seed: Seed for the token id shuffle (random when None)

    Raises:
        ValueError: If total_supply is not a multiple of 10 or below 100
    """
    if total_supply % 10 != 0 or total_supply < 100:
        raise ValueError("total_supply must be a multiple of 10 and at least 100")

    token_ids = list(range(total_supply))
    random.Random(seed).shuffle(token_ids)
    spread = mixed_trait_spread(total_supply)

    traits_by_token_id: list[dict[str, object]] = [{} for _ in range(total_supply)]
    for idx, token_id in enumerate(token_ids):
        traits_by_token_id[token_id] = {
            trait_name: _value_at(counts, idx) for trait_name, counts in spread.items()
        }

    return generate_collection_with_token_traits(traits_by_token_id, IdentifierType.EVM_CONTRACT)


def _value_at(counts: Sequence[tuple[str, int]], idx: int) -> str:
    """Value whose cumulative count range contains idx."""
    upper = 0
    for value, count in counts:
        upper += count
        if idx < upper:
            return value
    raise IndexError(f"index {idx} beyond trait spread")


def generate_collection_with_token_traits(
    tokens_traits: Sequence[Mapping[str, object]],
    identifier_type: IdentifierType = IdentifierType.EVM_CONTRACT,
    name: str = "My Collection",
) -> Collection:
    """
    Build an ERC721 collection from raw traits, one mapping per token.

    Raises:
        UnsupportedAttributeValueError: If a trait value has an invalid type
    """
    tokens = []
    for idx, traits in enumerate(tokens_traits):
        identifier: TokenIdentifier
        if identifier_type == IdentifierType.EVM_CONTRACT:
            identifier = EVMContractTokenIdentifier(DEFAULT_CONTRACT_ADDRESS, idx)
        else:
            identifier = SolanaMintAddressTokenIdentifier(f"Fake-Address-{idx}")
        tokens.append(
            Token(
                token_identifier=identifier,
                token_standard=TokenStandard.ERC721,
                metadata=TokenMetadata.from_attributes(traits),
            )
        )
    return Collection(tokens, name=name)
