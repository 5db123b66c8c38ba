"""Rank token collections from the command line.

Usage:
    openrarity rank collection.json --top 10
    openrarity demo --supply 10000 --seed 7 --json
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from openrarity import build_default_scorer
from openrarity.analysis.ranker import rank_collection
from openrarity.config import LOG_FORMAT, settings
from openrarity.generators import generate_mixed_collection
from openrarity.models.collection import Collection
from openrarity.models.failure import RarityError
from openrarity.models.payload import CollectionPayload, RankedTokenPayload

logger = logging.getLogger(__name__)

DEFAULT_DEMO_SUPPLY = 10_000


def load_collection(path: Path) -> Collection:
    """
    Load a collection from a JSON file.

    Raises:
        ValidationError: If the file does not match CollectionPayload
        UnsupportedAttributeValueError: If an attribute value has an invalid type
    """
    payload = CollectionPayload.model_validate_json(path.read_text())
    return payload.to_collection()


def rank_rows(collection: Collection, top: int | None = None) -> list[RankedTokenPayload]:
    """Rank a collection with the default scorer and return output rows."""
    ranked = rank_collection(collection, build_default_scorer())
    if top is not None:
        ranked = ranked[:top]
    return [RankedTokenPayload.from_rarity(rarity) for rarity in ranked]


def _print_rows(rows: list[RankedTokenPayload], as_json: bool) -> None:
    if as_json:
        print(json.dumps([row.model_dump() for row in rows], indent=2))
        return
    print(f"{'rank':>6}  {'score':>12}  {'unique':>6}  identifier")
    for row in rows:
        print(f"{row.rank:>6}  {row.score:>12.6f}  {row.unique_attribute_count:>6}  {row.identifier}")


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score and rank token collections by rarity")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rank_parser = subparsers.add_parser("rank", help="Rank a collection stored as JSON")
    rank_parser.add_argument("path", type=Path, help="Collection JSON file")

    demo_parser = subparsers.add_parser("demo", help="Rank a generated mixed collection")
    demo_parser.add_argument(
        "--supply",
        type=int,
        default=DEFAULT_DEMO_SUPPLY,
        help=f"Number of tokens, multiple of 10 and >= 100 (default: {DEFAULT_DEMO_SUPPLY})",
    )
    demo_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for token id shuffling",
    )

    for sub in (rank_parser, demo_parser):
        sub.add_argument(
            "--top",
            type=_non_negative_int,
            default=None,
            help="Only print the N rarest tokens",
        )
        sub.add_argument(
            "--json",
            action="store_true",
            help="Print rows as JSON",
        )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    args = _build_parser().parse_args(argv)

    try:
        if args.command == "rank":
            collection = load_collection(args.path)
        else:
            collection = generate_mixed_collection(args.supply, seed=args.seed)
        rows = rank_rows(collection, top=args.top)
    except RarityError as e:
        logger.error("Ranking failed: %s", e)
        print(e.to_detail().model_dump_json(), file=sys.stderr)
        return 1
    except (OSError, ValidationError, ValueError) as e:
        logger.error("Could not load collection: %s", e)
        return 1

    _print_rows(rows, as_json=args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
