"""Rubric dimension rules — deterministic, no LLM, no randomness.

Every dimension is one declarative ``DimensionRule``: a base term computed
from the raw text, a keyword list rewarded by hit ratio, and red-flag
predicates that subtract a flat penalty. ``score_dimension`` is the single
evaluator shared by all of them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Tuple

from .lexical import (
    Predicate,
    clamp,
    contains,
    count_numbers,
    penalty_if,
    presence_score,
    word_count,
)

BaseRule = Callable[[str], float]

_SENTENCE_END_RE = re.compile(r"[.!?]")
_COMPETITION_FRAMING_RE = re.compile(r"(unbundl|bundl|vs\.|versus)", re.IGNORECASE)
_TRACTION_METRIC_RE = re.compile(r"(\d+%|\d+k|\d+ users|\d+ customers)", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True)
class DimensionRule:
    """Scoring rule for a single rubric dimension."""

    name: str
    base: BaseRule
    terms: Tuple[str, ...]
    predicates: Tuple[Predicate, ...] = field(default_factory=tuple)
    penalty: float = 0.0


def _constant(value: float) -> BaseRule:
    def _base(_text: str) -> float:
        return value

    return _base


# ── Base terms ────────────────────────────────────────────────────────

def _problem_clarity_base(text: str) -> float:
    words = word_count(text)
    if words >= 30:
        base = 6.0
    elif words >= 15:
        base = 3.0
    else:
        base = 1.0
    if _SENTENCE_END_RE.search(text):
        base += 1.0
    return base


def _market_size_base(text: str) -> float:
    numbers = count_numbers(text)
    if numbers >= 2:
        return 5.0
    if numbers >= 1:
        return 3.0
    return 0.0


def _competition_base(text: str) -> float:
    return 1.0 + (2.0 if _COMPETITION_FRAMING_RE.search(text) else 0.0)


def _evidence_base(text: str) -> float:
    return 3.0 if _TRACTION_METRIC_RE.search(text) else 0.0


# ── Rule table (fixed dimension order) ────────────────────────────────

DIMENSION_RULES: Tuple[DimensionRule, ...] = (
    DimensionRule(
        name="Problem clarity",
        base=_problem_clarity_base,
        terms=("problem", "pain", "today", "manual", "inefficient"),
    ),
    DimensionRule(
        name="Target customer",
        base=_constant(2.0),
        terms=("for ", "mid-market", "enterprise", "consumer", "SMB", "developers", "ops", "finance"),
        predicates=(contains("everyone"), contains("anyone"), contains("all users")),
        penalty=4.0,
    ),
    DimensionRule(
        name="Market size",
        base=_market_size_base,
        terms=("market", "TAM", "billion", "million", "growing", "category"),
        predicates=(contains("niche hobby"), contains("tiny market")),
        penalty=3.0,
    ),
    DimensionRule(
        name="Differentiation",
        base=_constant(2.0),
        terms=("unlike", "differenti", "unique", "only", "moat", "proprietary"),
        predicates=(contains("just like"), contains("clone")),
        penalty=5.0,
    ),
    DimensionRule(
        name="Distribution",
        base=_constant(2.0),
        terms=("SEO", "content", "paid", "ads", "sales", "BD", "marketplace", "virality", "referral", "integrations"),
    ),
    DimensionRule(
        name="Monetization",
        base=_constant(2.0),
        terms=("$", "pricing", "subscription", "SaaS", "ARPU", "unit economics", "take rate", "gross margin"),
    ),
    DimensionRule(
        name="Feasibility",
        base=_constant(5.0),
        terms=("MVP", "prototype", "pilot", "timeline", "scope", "milestone"),
        predicates=(
            contains("solve AGI"),
            contains("cure cancer"),
            contains("fully autonomous level 5"),
            contains("impossible"),
        ),
        penalty=5.0,
    ),
    DimensionRule(
        name="Competition grasp",
        base=_competition_base,
        terms=("competitor", "incumbent", "alt", "switching costs", "status quo"),
    ),
    DimensionRule(
        name="Moat",
        base=_constant(1.0),
        terms=("network effects", "data advantage", "switching costs", "scale", "embedded", "ecosystem"),
    ),
    DimensionRule(
        name="Speed to market",
        base=_constant(6.0),
        terms=("weeks", "months", "sprint", "iterate", "ship"),
        predicates=(contains("FDA"), contains("HIPAA"), contains("hardware"), contains("regulator")),
        penalty=4.0,
    ),
    DimensionRule(
        name="Evidence/traction",
        base=_evidence_base,
        terms=("users", "paying", "revenue", "MRR", "pilot", "waitlist", "conversion", "retention", "NPS"),
    ),
)


def score_dimension(rule: DimensionRule, text: str) -> float:
    """Score one dimension, clamped to [0, 10]."""
    return clamp(
        rule.base(text)
        + presence_score(text, rule.terms)
        - penalty_if(text, rule.predicates, rule.penalty)
    )


def score_dimensions(text: str) -> Dict[str, float]:
    """Score every dimension, keyed by name in the fixed rubric order."""
    return {rule.name: score_dimension(rule, text) for rule in DIMENSION_RULES}
