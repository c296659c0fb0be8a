from .lexical import clamp, count_numbers, penalty_if, presence_score, word_count
from .dimensions import DIMENSION_RULES, DimensionRule, score_dimension, score_dimensions
from .scoring_engine import Evaluation, classify_verdict, evaluate_idea

__all__ = [
    "clamp",
    "count_numbers",
    "penalty_if",
    "presence_score",
    "word_count",
    "DIMENSION_RULES",
    "DimensionRule",
    "score_dimension",
    "score_dimensions",
    "Evaluation",
    "classify_verdict",
    "evaluate_idea",
]
