import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from openrarity.cli import load_collection, main, rank_rows
from openrarity.models.failure import UnsupportedAttributeValueError
from openrarity.models.payload import CollectionPayload, TokenPayload
from openrarity.models.token_identifier import SolanaMintAddressTokenIdentifier
from openrarity.models.token_standard import TokenStandard


def _write_collection(tmp_path: Path, tokens: list[dict]) -> Path:
    path = tmp_path / "collection.json"
    path.write_text(json.dumps({"name": "Test", "tokens": tokens}))
    return path


@pytest.fixture
def collection_file(tmp_path: Path) -> Path:
    return _write_collection(
        tmp_path,
        [
            {"contract_address": "0xa3049", "token_id": 1, "attributes": {"hat": "cap", "shirt": "blue"}},
            {"contract_address": "0xa3049", "token_id": 2, "attributes": {"hat": "visor", "shirt": "green"}},
            {
                "contract_address": "0xa3049",
                "token_id": 3,
                "attributes": {"hat": "visor", "shirt": "blue", "color": "blue"},
            },
        ],
    )


class TestPayload:
    def test_evm_token(self) -> None:
        token = TokenPayload(contract_address="0x1", token_id=5, attributes={"hat": "Cap"}).to_token()

        assert str(token.token_identifier) == "0x1:5"
        assert token.token_standard == TokenStandard.ERC721
        assert token.metadata.string_attributes["hat"].value == "cap"

    def test_solana_token(self) -> None:
        token = TokenPayload(
            mint_address="Mint1",
            token_standard="metaplex_non_fungible",
            attributes={"hat": "cap"},
        ).to_token()

        assert token.token_identifier == SolanaMintAddressTokenIdentifier("Mint1")
        assert token.token_standard == TokenStandard.METAPLEX_NON_FUNGIBLE

    def test_solana_token_defaults_to_metaplex(self) -> None:
        token = TokenPayload(mint_address="Mint1", attributes={"hat": "cap"}).to_token()

        assert token.token_standard == TokenStandard.METAPLEX_NON_FUNGIBLE

    def test_explicit_standard_wins(self) -> None:
        token = TokenPayload(
            contract_address="0x1", token_id=1, token_standard="erc1155"
        ).to_token()

        assert token.token_standard == TokenStandard.ERC1155

    @pytest.mark.parametrize(
        "fields",
        [
            {},
            {"contract_address": "0x1"},
            {"contract_address": "0x1", "token_id": 1, "mint_address": "Mint1"},
        ],
    )
    def test_identifier_required(self, fields: dict) -> None:
        with pytest.raises(ValidationError):
            TokenPayload(**fields)

    def test_unsupported_value_rejected_on_conversion(self) -> None:
        payload = TokenPayload(contract_address="0x1", token_id=1, attributes={"hat": True})

        with pytest.raises(UnsupportedAttributeValueError):
            payload.to_token()

    def test_collection_payload(self) -> None:
        payload = CollectionPayload(
            name="Pair",
            tokens=[
                TokenPayload(contract_address="0x1", token_id=1, attributes={"hat": "cap"}),
                TokenPayload(contract_address="0x1", token_id=2, attributes={"hat": "visor"}),
            ],
        )

        collection = payload.to_collection()

        assert collection.name == "Pair"
        assert collection.token_total_supply == 2


class TestRankRows:
    def test_load_and_rank(self, collection_file: Path) -> None:
        rows = rank_rows(load_collection(collection_file))

        assert [row.rank for row in rows] == [1, 2, 2]
        assert rows[0].identifier == "0xa3049:3"
        assert rows[0].unique_attribute_count == 2

    def test_top(self, collection_file: Path) -> None:
        rows = rank_rows(load_collection(collection_file), top=1)

        assert len(rows) == 1


class TestMain:
    def test_rank_json(self, collection_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["rank", str(collection_file), "--json"])

        rows = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert rows[0]["identifier"] == "0xa3049:3"
        assert rows[0]["rank"] == 1

    def test_rank_table(self, collection_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["rank", str(collection_file)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "identifier" in out
        assert "0xa3049:3" in out

    def test_numeric_collection_fails(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write_collection(
            tmp_path,
            [
                {"contract_address": "0x1", "token_id": 1, "attributes": {"hat": "cap"}},
                {"contract_address": "0x1", "token_id": 2, "attributes": {"hat": "cap", "level": 3}},
            ],
        )

        exit_code = main(["rank", str(path)])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "numeric_attributes_unsupported" in captured.err

    def test_missing_file_fails(self, tmp_path: Path) -> None:
        assert main(["rank", str(tmp_path / "missing.json")]) == 1

    def test_demo(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["demo", "--supply", "100", "--seed", "3", "--top", "5", "--json"])

        rows = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert len(rows) == 5
        assert rows[0]["rank"] == 1
        assert [row["rank"] for row in rows] == sorted(row["rank"] for row in rows)

    def test_demo_bad_supply(self) -> None:
        assert main(["demo", "--supply", "55"]) == 1

    def test_negative_top_rejected(
        self, collection_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["rank", str(collection_file), "--top", "-1"])

        assert exc_info.value.code == 2
        assert "--top" in capsys.readouterr().err

    def test_zero_top_prints_no_rows(
        self, collection_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = main(["rank", str(collection_file), "--top", "0", "--json"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == []
