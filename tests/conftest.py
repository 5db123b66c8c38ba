import pytest

from openrarity.generators import generate_collection_with_token_traits
from openrarity.models.collection import Collection
from openrarity.models.token import Token


@pytest.fixture
def sample_tokens() -> list[Token]:
    """Three ERC721 tokens; the third is the only one with a color."""
    return [
        Token.from_erc721("0xa3049", 1, {"hat": "cap", "shirt": "blue"}),
        Token.from_erc721("0xa3049", 2, {"hat": "visor", "shirt": "green"}),
        Token.from_erc721("0xa3049", 3, {"hat": "visor", "shirt": "blue", "color": "blue"}),
    ]


@pytest.fixture
def sample_collection(sample_tokens: list[Token]) -> Collection:
    return Collection(sample_tokens, name="Sample")


@pytest.fixture
def collection_with_null() -> Collection:
    """Six tokens where only the first two carry "special"."""
    return generate_collection_with_token_traits(
        [
            {"bottom": "spec", "hat": "spec", "special": "true"},
            {"bottom": "1", "hat": "1", "special": "true"},
            {"bottom": "1", "hat": "1"},
            {"bottom": "2", "hat": "2"},
            {"bottom": "2", "hat": "2"},
            {"bottom": "3", "hat": "2"},
        ]
    )
