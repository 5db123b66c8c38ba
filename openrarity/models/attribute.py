"""
Token Attribute Models.

An attribute is a (name, value) pair describing one trait of a token.
Three variants exist: string, numeric and date. Only string attributes take
part in rarity scoring; the other two are modelled so collections carrying
them can be recognized and rejected.

INVARIANTS:
- Attribute names are always normalized (trimmed, lower-cased)
- String values are normalized the same way; numeric/date values are not
- All attribute models are frozen (immutable after construction)
"""

from dataclasses import dataclass
from typing import Protocol

# Reserved name of the synthetic attribute injected by Collection
TRAIT_COUNT_ATTRIBUTE_NAME = "meta_trait:trait_count"

# Sentinel value representing the absence of an attribute on a token
NULL_ATTRIBUTE_VALUE = "Null"


def normalize_attribute_string(value: str) -> str:
    """Trim surrounding whitespace and lower-case an attribute name or value."""
    return value.strip().lower()


normalize_attribute_name = normalize_attribute_string
normalize_attribute_value = normalize_attribute_string


class NamedAttribute(Protocol):
    """Minimal attribute capability: anything with a normalized name."""

    @property
    def name(self) -> str: ...


@dataclass(frozen=True, slots=True)
class StringAttribute:
    """
    A string-valued attribute, e.g. "hat" = "cap".

    Both name and value are normalized, so StringAttribute(" Hat ", "CAP")
    compares equal to StringAttribute("hat", "cap").
    """

    name: str
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_attribute_name(self.name))
        object.__setattr__(self, "value", normalize_attribute_value(self.value))


@dataclass(frozen=True, slots=True)
class NumericAttribute:
    """A numeric attribute; the value keeps its original int or float type."""

    name: str
    value: int | float

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_attribute_name(self.name))


@dataclass(frozen=True, slots=True)
class DateAttribute:
    """A date attribute; the value is a unix timestamp in seconds."""

    name: str
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_attribute_name(self.name))


Attribute = StringAttribute | NumericAttribute | DateAttribute
