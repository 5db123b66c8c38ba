"""
Rarity Failure Classification.

Every error raised by the scoring pipeline carries a FailureKind so callers
can tell the four failure families apart without parsing messages:

- UNSUPPORTED_VALUE_TYPE: raw attribute value could not be typed
- NUMERIC_ATTRIBUTES_UNSUPPORTED / UNSUPPORTED_TOKEN_STANDARD: collection
  refused by validation before scoring
- DIMENSION_MISMATCH: a scoring handler returned the wrong number of scores
- INVARIANT_VIOLATION: rank assignment found an unranked predecessor

INVARIANT: No partial result is ever returned alongside an error.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input failures
    UNSUPPORTED_VALUE_TYPE = "unsupported_value_type"

    # Validation failures
    NUMERIC_ATTRIBUTES_UNSUPPORTED = "numeric_attributes_unsupported"
    UNSUPPORTED_TOKEN_STANDARD = "unsupported_token_standard"

    # Handler contract failures
    DIMENSION_MISMATCH = "dimension_mismatch"

    # Internal errors
    INVARIANT_VIOLATION = "invariant_violation"


class FailureDetail(BaseModel):
    """Structured description of a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )


class RarityError(Exception):
    """
    Base class for all classified rarity failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(kind=self.kind, message=self.message, detail=self.detail)


class UnsupportedAttributeValueError(RarityError):
    """Raised when a raw attribute value is not a string, number or datetime."""

    def __init__(self, attribute_name: str, value_type: type):
        self.attribute_name = attribute_name
        self.value_type = value_type
        super().__init__(
            kind=FailureKind.UNSUPPORTED_VALUE_TYPE,
            message=(
                f"Provided attribute value has invalid type: {value_type.__name__}, "
                "must be str, int, float or datetime"
            ),
            detail=f"attribute '{attribute_name}'",
        )


class CollectionValidationError(RarityError):
    """
    Raised when a collection is not eligible for scoring.

    The entire scoring call fails and no scores are produced.
    """


class ScoreDimensionError(RarityError):
    """Raised when a handler returns a score count that differs from the token count."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            kind=FailureKind.DIMENSION_MISMATCH,
            message="Dimension of scores doesn't match dimension of tokens",
            detail=f"expected {expected} scores, got {actual}",
        )


class RankInvariantError(RarityError):
    """
    Raised when a tie is found but the preceding token has no rank yet.

    Unreachable with a correct sort; signals an internal bug, not bad input.
    """

    def __init__(self, position: int):
        self.position = position
        super().__init__(
            kind=FailureKind.INVARIANT_VIOLATION,
            message="Previous token rarity rank is unassigned",
            detail=f"sorted position {position}",
        )
