"""
Token Metadata: the typing boundary for raw attributes.

Raw attributes arrive as a flat mapping of name -> dynamically typed value.
`TokenMetadata.from_attributes()` is the SINGLE point where those values are
classified into string, numeric or date attributes. Unknown value types are
rejected here, never downstream.

NOTE: `attribute_exists()` and `add_attribute()` only look at string
attributes. Numeric and date attributes are invisible to both. Callers rely
on this asymmetry; do not widen it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone

from openrarity.models.attribute import (
    DateAttribute,
    NamedAttribute,
    NumericAttribute,
    StringAttribute,
    normalize_attribute_name,
)
from openrarity.models.failure import UnsupportedAttributeValueError


@dataclass
class TokenMetadata:
    """
    EIP-721 / EIP-1155 compatible metadata, split by attribute type.

    Attributes:
        string_attributes: {normalized name: StringAttribute}
        numeric_attributes: {normalized name: NumericAttribute}
        date_attributes: {normalized name: DateAttribute}
    """

    string_attributes: dict[str, StringAttribute] = field(default_factory=dict)
    numeric_attributes: dict[str, NumericAttribute] = field(default_factory=dict)
    date_attributes: dict[str, DateAttribute] = field(default_factory=dict)

    @classmethod
    def from_string_attributes(cls, attributes: Mapping[str, StringAttribute]) -> "TokenMetadata":
        """Build metadata holding only pre-built string attributes."""
        return cls(string_attributes={attr.name: attr for attr in attributes.values()})

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, object]) -> "TokenMetadata":
        """
        Classify raw attribute values into typed attributes.

        Args:
            attributes: {attribute name: str | int | float | datetime}.
                Naive datetimes are read as UTC.

        Returns:
            TokenMetadata with every attribute placed in its typed mapping

        Raises:
            UnsupportedAttributeValueError: If a value has any other type
                (bool and None included)
        """
        metadata = cls()
        for raw_name, value in attributes.items():
            name = normalize_attribute_name(raw_name)
            # bool is an int subclass, reject it before the numeric branch
            if isinstance(value, bool):
                raise UnsupportedAttributeValueError(name, type(value))
            # A name lives in at most one typed mapping; the last raw key wins
            metadata.string_attributes.pop(name, None)
            metadata.numeric_attributes.pop(name, None)
            metadata.date_attributes.pop(name, None)
            if isinstance(value, str):
                metadata.string_attributes[name] = StringAttribute(name, value)
            elif isinstance(value, int | float):
                metadata.numeric_attributes[name] = NumericAttribute(name, value)
            elif isinstance(value, datetime):
                metadata.date_attributes[name] = DateAttribute(name, _unix_seconds(value))
            else:
                raise UnsupportedAttributeValueError(name, type(value))
        return metadata

    def attribute_exists(self, name: str) -> bool:
        """Check if a string attribute with this name exists."""
        return name in self.string_attributes

    def add_attribute(self, attribute: NamedAttribute) -> None:
        """
        Add a string attribute, overriding any existing one with the same name.

        Numeric and date attributes are ignored.
        """
        if isinstance(attribute, StringAttribute):
            self.string_attributes[attribute.name] = attribute


def _unix_seconds(value: datetime) -> int:
    """Unix timestamp in seconds, independent of the host timezone."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())
