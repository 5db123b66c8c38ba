from openrarity.scoring.information_content import InformationContentScoringHandler
from openrarity.scoring.protocols import ScoringHandler
from openrarity.scoring.scorer import ALLOWED_TOKEN_STANDARDS, Scorer
from openrarity.scoring.utils import get_token_attributes_scores_and_weights

__all__ = [
    "ALLOWED_TOKEN_STANDARDS",
    "InformationContentScoringHandler",
    "Scorer",
    "ScoringHandler",
    "get_token_attributes_scores_and_weights",
]
