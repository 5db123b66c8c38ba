from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from openrarity.models.attribute import (
    TRAIT_COUNT_ATTRIBUTE_NAME,
    DateAttribute,
    NumericAttribute,
    StringAttribute,
    normalize_attribute_name,
    normalize_attribute_string,
    normalize_attribute_value,
)
from openrarity.models.failure import FailureKind, UnsupportedAttributeValueError
from openrarity.models.token import Token
from openrarity.models.token_identifier import (
    EVMContractTokenIdentifier,
    IdentifierType,
    SolanaMintAddressTokenIdentifier,
)
from openrarity.models.token_metadata import TokenMetadata
from openrarity.models.token_standard import TokenStandard


class TestNormalization:
    def test_trims_and_lowercases(self) -> None:
        assert normalize_attribute_string("  Hat Color \t") == "hat color"

    @pytest.mark.parametrize("raw", ["Cap", "  BLUE  ", "meta_trait:trait_count", "", " none "])
    def test_idempotent(self, raw: str) -> None:
        once = normalize_attribute_string(raw)
        assert normalize_attribute_string(once) == once

    def test_name_and_value_normalize_alike(self) -> None:
        assert normalize_attribute_name(" X ") == normalize_attribute_value(" X ") == "x"


class TestAttributes:
    def test_string_attribute_normalizes_name_and_value(self) -> None:
        attribute = StringAttribute("  Hat ", " CAP")

        assert attribute.name == "hat"
        assert attribute.value == "cap"
        assert attribute == StringAttribute("hat", "cap")

    def test_numeric_attribute_keeps_value_type(self) -> None:
        int_attribute = NumericAttribute(" Level ", 3)
        float_attribute = NumericAttribute("Power", 2.5)

        assert int_attribute.name == "level"
        assert int_attribute.value == 3
        assert isinstance(int_attribute.value, int)
        assert isinstance(float_attribute.value, float)

    def test_date_attribute_normalizes_name_only(self) -> None:
        attribute = DateAttribute("Birthday", 1_600_000_000)

        assert attribute.name == "birthday"
        assert attribute.value == 1_600_000_000

    def test_attributes_are_frozen(self) -> None:
        attribute = StringAttribute("hat", "cap")

        with pytest.raises(FrozenInstanceError):
            attribute.value = "visor"  # type: ignore[misc]


class TestTokenMetadata:
    def test_from_attributes_classifies_values(self) -> None:
        moment = datetime(2022, 1, 1, tzinfo=timezone.utc)
        metadata = TokenMetadata.from_attributes(
            {"Hat": "Cap", "level": 3, "power": 2.5, "born": moment}
        )

        assert metadata.string_attributes == {"hat": StringAttribute("hat", "cap")}
        assert metadata.numeric_attributes == {
            "level": NumericAttribute("level", 3),
            "power": NumericAttribute("power", 2.5),
        }
        assert metadata.date_attributes == {
            "born": DateAttribute("born", int(moment.timestamp()))
        }

    def test_naive_datetime_is_read_as_utc(self) -> None:
        metadata = TokenMetadata.from_attributes({"born": datetime(2022, 1, 1)})

        # 2022-01-01T00:00:00Z
        assert metadata.date_attributes["born"].value == 1_640_995_200

    def test_aware_datetime_keeps_its_zone(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        metadata = TokenMetadata.from_attributes(
            {"born": datetime(2022, 1, 1, 2, 0, tzinfo=plus_two)}
        )

        assert metadata.date_attributes["born"].value == 1_640_995_200

    @pytest.mark.parametrize("value", [None, True, ["a"], {"a": 1}, b"bytes"])
    def test_from_attributes_rejects_unsupported_types(self, value: object) -> None:
        with pytest.raises(UnsupportedAttributeValueError) as exc_info:
            TokenMetadata.from_attributes({"hat": "cap", "odd": value})

        assert exc_info.value.kind == FailureKind.UNSUPPORTED_VALUE_TYPE
        assert type(value).__name__ in str(exc_info.value)

    def test_name_lives_in_one_mapping(self) -> None:
        """Raw names normalizing to the same key: the last one wins."""
        metadata = TokenMetadata.from_attributes({"Hat": "cap", "hat ": 7})

        assert "hat" not in metadata.string_attributes
        assert metadata.numeric_attributes["hat"].value == 7

    def test_attribute_exists_only_sees_string_attributes(self) -> None:
        """Numeric and date attributes are deliberately invisible here."""
        metadata = TokenMetadata.from_attributes({"hat": "cap", "level": 3})

        assert metadata.attribute_exists("hat")
        assert not metadata.attribute_exists("level")

    def test_add_attribute_overrides_string_attribute(self) -> None:
        metadata = TokenMetadata.from_attributes({"hat": "cap"})

        metadata.add_attribute(StringAttribute("HAT", "visor"))

        assert metadata.string_attributes["hat"].value == "visor"

    def test_add_attribute_ignores_numeric_and_date(self) -> None:
        metadata = TokenMetadata()

        metadata.add_attribute(NumericAttribute("level", 3))
        metadata.add_attribute(DateAttribute("born", 0))

        assert metadata.string_attributes == {}
        assert metadata.numeric_attributes == {}
        assert metadata.date_attributes == {}

    def test_from_string_attributes_keys_by_normalized_name(self) -> None:
        metadata = TokenMetadata.from_string_attributes({"Any Key": StringAttribute("Hat", "cap")})

        assert list(metadata.string_attributes) == ["hat"]


class TestToken:
    def test_trait_count_skips_empty_and_none(self) -> None:
        token = Token.from_erc721(
            "0x0",
            1,
            {"hat": "cap", "shirt": " None ", "shoes": "", "level": 3, "power": 1.5},
        )

        # hat + level + power
        assert token.trait_count() == 3

    def test_trait_count_counts_dates(self) -> None:
        token = Token.from_erc721("0x0", 1, {"born": datetime(2020, 5, 1)})

        assert token.trait_count() == 1

    def test_has_attribute(self) -> None:
        token = Token.from_erc721("0x0", 1, {"hat": "cap", "level": 3})

        assert token.has_attribute("hat")
        assert not token.has_attribute("level")
        assert not token.has_attribute(TRAIT_COUNT_ATTRIBUTE_NAME)

    def test_from_erc721(self) -> None:
        token = Token.from_erc721("0xabc", 42, {"hat": "cap"})

        assert token.token_standard == TokenStandard.ERC721
        assert token.token_identifier == EVMContractTokenIdentifier("0xabc", 42)
        assert token.token_identifier.identifier_type == IdentifierType.EVM_CONTRACT
        assert str(token.token_identifier) == "0xabc:42"

    def test_from_metaplex_non_fungible(self) -> None:
        token = Token.from_metaplex_non_fungible("Mint111", {"hat": "cap"})

        assert token.token_standard == TokenStandard.METAPLEX_NON_FUNGIBLE
        assert token.token_identifier == SolanaMintAddressTokenIdentifier("Mint111")
        assert token.token_identifier.identifier_type == IdentifierType.SOLANA_MINT_ADDRESS
        assert str(token.token_identifier) == "Mint111"

    def test_from_erc721_propagates_unsupported_type(self) -> None:
        with pytest.raises(UnsupportedAttributeValueError):
            Token.from_erc721("0x0", 1, {"hat": None})
