"""Deterministic Idea Scoring Engine.

Converts a free-text pitch into eleven rubric scores, then aggregates
them into a verdict, weak-dimension issues, recommendations and the
fixed validation test plan.

Rules
-----
- NO API calls
- NO DB writes
- NO LLMs
- NO state between calls
- Never raises for a string input; length checks belong to the caller
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from ..constants import (
    BULLETPROOF_THRESHOLD,
    GOOD_THRESHOLD,
    ISSUE_TEMPLATE,
    RECOMMENDATION_TEMPLATE,
    SUMMARIES,
    TEST_PLAN,
    TRASH_THRESHOLD,
    VERDICT_BULLETPROOF,
    VERDICT_TRASH,
    VERDICT_WEAK,
    WEAK_THRESHOLD,
)
from ..schemas.evaluation_schema import EvaluationResponse
from .dimensions import score_dimensions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """Result of a single ``evaluate_idea`` call."""

    verdict: str
    summary: str
    scores: Dict[str, float]
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    test_plan: List[str] = field(default_factory=list)
    average: float = 0.0

    def to_response(self) -> EvaluationResponse:
        """Wire model; ``average`` stays internal."""
        return EvaluationResponse(
            verdict=self.verdict,
            summary=self.summary,
            scores=dict(self.scores),
            issues=list(self.issues),
            recommendations=list(self.recommendations),
            test_plan=list(self.test_plan),
        )


# ===================================================================== #
#  Aggregation                                                            #
# ===================================================================== #

def average_score(scores: Dict[str, float]) -> float:
    """Equal-weight mean of all dimension scores, unrounded."""
    if not scores:
        return 0.0
    return sum(scores.values()) / len(scores)


def format_score(score: float) -> str:
    """One decimal place, exact ties rounded up (3.25 -> "3.3")."""
    return str(Decimal(score).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def collect_issues(scores: Dict[str, float]) -> List[str]:
    """One issue per dimension below the weak threshold, in rubric order."""
    return [
        ISSUE_TEMPLATE.format(name=name, score=format_score(score))
        for name, score in scores.items()
        if score < WEAK_THRESHOLD
    ]


def collect_recommendations(scores: Dict[str, float]) -> List[str]:
    """One recommendation per dimension below the good threshold, in rubric order."""
    return [
        RECOMMENDATION_TEMPLATE.format(name=name.lower())
        for name, score in scores.items()
        if score < GOOD_THRESHOLD
    ]


def classify_verdict(average: float, issues: List[str]) -> str:
    """BULLETPROOF needs a high average AND no weak dimension at all."""
    if average >= BULLETPROOF_THRESHOLD and not issues:
        return VERDICT_BULLETPROOF
    if average < TRASH_THRESHOLD:
        return VERDICT_TRASH
    return VERDICT_WEAK


# ===================================================================== #
#  Entry point                                                            #
# ===================================================================== #

def evaluate_idea(idea: str) -> Evaluation:
    """Score *idea* and assemble the full evaluation.

    Parameters
    ----------
    idea : str
        Pitch text. Callers are expected to have trimmed and length-checked it.

    Returns
    -------
    Evaluation
        Verdict, summary, eleven clamped scores, issues, recommendations
        and a fresh copy of the test plan.
    """
    scores = score_dimensions(idea)
    average = average_score(scores)
    issues = collect_issues(scores)
    recommendations = collect_recommendations(scores)
    verdict = classify_verdict(average, issues)

    logger.debug(
        "Evaluated idea: verdict=%s average=%.2f issues=%d recommendations=%d",
        verdict, average, len(issues), len(recommendations),
    )

    return Evaluation(
        verdict=verdict,
        summary=SUMMARIES[verdict],
        scores=scores,
        issues=issues,
        recommendations=recommendations,
        test_plan=list(TEST_PLAN),
        average=average,
    )
