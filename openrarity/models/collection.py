"""
Token Collection: the statistical universe for rarity scoring.

A token's rarity is influenced by the attribute frequencies of all tokens
in its collection. The frequency table is derived ONCE at construction:

1. Every token gets the synthetic "meta_trait:trait_count" string attribute
2. Every string attribute of every token is counted per (name, value)

INVARIANT: sum(counts[name]) + null_deficit[name] == token_total_supply
for every attribute name.

NOTE: The frequency table is a frozen snapshot. Mutating tokens after the
collection is built does NOT refresh it; build a new Collection instead.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from openrarity.models.attribute import (
    NULL_ATTRIBUTE_VALUE,
    TRAIT_COUNT_ATTRIBUTE_NAME,
    StringAttribute,
)
from openrarity.models.token import Token
from openrarity.models.token_standard import TokenStandard

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CollectionAttribute:
    """
    A string attribute held by at least one token, with its token count.

    "hat" = "cap" and "hat" = "beanie" are two distinct collection
    attributes even though they share the attribute name.
    """

    attribute: StringAttribute
    total_tokens: int


class Collection:
    """
    An ordered, closed set of tokens with derived attribute frequencies.

    Usage:
        collection = Collection(tokens, name="My Collection")
        collection.total_tokens_with_attribute(StringAttribute("hat", "cap"))
    """

    def __init__(self, tokens: Iterable[Token], name: str = "") -> None:
        self.name = name
        self._tokens: list[Token] = list(tokens)
        self._traitcountify()
        self._attributes_frequency_counts = self._derive_frequency_counts()
        logger.info(
            "Built collection %r: %d tokens, %d attribute names",
            name,
            len(self._tokens),
            len(self._attributes_frequency_counts),
        )

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"Collection(name={self.name!r}, tokens={len(self._tokens)})"

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    def _traitcountify(self) -> None:
        """Set the trait count attribute on every token, replacing a stale one."""
        for token in self._tokens:
            trait_count = token.trait_count()
            if token.has_attribute(TRAIT_COUNT_ATTRIBUTE_NAME):
                trait_count -= 1
            token.metadata.add_attribute(
                StringAttribute(TRAIT_COUNT_ATTRIBUTE_NAME, str(trait_count))
            )

    def _derive_frequency_counts(self) -> dict[str, dict[str, int]]:
        """Count tokens per (name, value) over string attributes only."""
        counts: dict[str, dict[str, int]] = {}
        for token in self._tokens:
            for name, attribute in token.metadata.string_attributes.items():
                values = counts.setdefault(name, {})
                values[attribute.value] = values.get(attribute.value, 0) + 1
        return counts

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def tokens(self) -> list[Token]:
        """Tokens in caller-supplied order."""
        return self._tokens

    @property
    def token_total_supply(self) -> int:
        return len(self._tokens)

    @property
    def attributes_frequency_counts(self) -> dict[str, dict[str, int]]:
        """Copy of the frequency table {name: {value: token count}}."""
        return {name: dict(values) for name, values in self._attributes_frequency_counts.items()}

    def total_tokens_with_attribute(self, attribute: StringAttribute) -> int:
        """Number of tokens holding this exact (name, value) pair, 0 if none."""
        return self._attributes_frequency_counts.get(attribute.name, {}).get(attribute.value, 0)

    def total_attribute_values(self, attribute_name: str) -> int:
        """Number of distinct values seen for an attribute name."""
        return len(self._attributes_frequency_counts.get(attribute_name, {}))

    def extract_null_attributes(self) -> dict[str, CollectionAttribute]:
        """
        Model missing attributes as a "Null" value.

        For every attribute name, tokens lacking it entirely are counted
        as holding the null sentinel. Names present on every token are
        omitted.

        Returns:
            {attribute name: CollectionAttribute(name="Null", deficit)}
        """
        supply = self.token_total_supply
        result: dict[str, CollectionAttribute] = {}
        for name, values in self._attributes_frequency_counts.items():
            tokens_without_attribute = supply - sum(values.values())
            if tokens_without_attribute > 0:
                result[name] = CollectionAttribute(
                    attribute=StringAttribute(name, NULL_ATTRIBUTE_VALUE),
                    total_tokens=tokens_without_attribute,
                )
        return result

    def extract_collection_attributes(self) -> dict[str, list[CollectionAttribute]]:
        """
        Flatten the frequency table into {name: [CollectionAttribute, ...]}.

        Value order within a name carries no meaning.
        """
        return {
            name: [
                CollectionAttribute(attribute=StringAttribute(name, value), total_tokens=count)
                for value, count in values.items()
            ]
            for name, values in self._attributes_frequency_counts.items()
        }

    def has_numeric_attribute(self) -> bool:
        """Check if any token carries a numeric or date attribute."""
        return any(
            token.metadata.numeric_attributes or token.metadata.date_attributes
            for token in self._tokens
        )

    def token_standards(self) -> list[TokenStandard]:
        """Distinct token standards, in order of first occurrence."""
        return list(dict.fromkeys(token.token_standard for token in self._tokens))
