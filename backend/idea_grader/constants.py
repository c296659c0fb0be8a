"""Centralized constants for the idea scoring engine and its API.

This module is the SINGLE SOURCE OF TRUTH for the rubric dimension order,
the verdict thresholds, and every literal string returned to clients.
LOCKED — the frontend renders these verbatim.
"""

from __future__ import annotations

# ── Rubric dimensions ───────────────────────────────────────────────────
# Order drives the scores mapping, issues, recommendations and display.

DIMENSION_NAMES: tuple[str, ...] = (
    "Problem clarity",
    "Target customer",
    "Market size",
    "Differentiation",
    "Distribution",
    "Monetization",
    "Feasibility",
    "Competition grasp",
    "Moat",
    "Speed to market",
    "Evidence/traction",
)

SCORE_MIN: float = 0.0
SCORE_MAX: float = 10.0

# ── Aggregation thresholds ──────────────────────────────────────────────
WEAK_THRESHOLD: float = 5.0        # below → listed in issues
GOOD_THRESHOLD: float = 7.0        # below → listed in recommendations
BULLETPROOF_THRESHOLD: float = 8.0  # average needed, with zero issues
TRASH_THRESHOLD: float = 5.0       # average below → TRASH

# ── Verdicts ────────────────────────────────────────────────────────────
VERDICT_BULLETPROOF = "BULLETPROOF"
VERDICT_TRASH = "TRASH"
VERDICT_WEAK = "WEAK"

VERDICTS: tuple[str, ...] = (VERDICT_BULLETPROOF, VERDICT_TRASH, VERDICT_WEAK)

SUMMARIES: dict[str, str] = {
    VERDICT_BULLETPROOF: "Solid across the board with credible distribution, monetization, and traction.",
    VERDICT_TRASH: "Vague, undersized, or fantasy-level execution. Fix fundamentals or kill it.",
    VERDICT_WEAK: "Some promise, but missing specifics. Tighten the plan and validate fast.",
}

ISSUE_TEMPLATE = "{name} is weak ({score}/10)"
RECOMMENDATION_TEMPLATE = "Raise {name} to ≥7/10 with concrete proof and specifics."

# ── Validation test plan ────────────────────────────────────────────────
# Returned unmodified with every evaluation.

TEST_PLAN: tuple[str, ...] = (
    "Interview 5 target users in 48h; extract top 3 pains in their words.",
    "Ship a no-code or spreadsheet MVP to simulate core value within 72h.",
    "Run a single-channel acquisition test (e.g. LinkedIn DM or cold email) with 50 leads; measure reply and demo rates.",
    "Put a price on it now; aim for 3 paid pilots, not free trials.",
    "Define one metric that must move (e.g. time saved, conversion %, $ saved) and instrument it.",
    "List 3 real competitors and articulate a win reason that survives a founder-blind test.",
)

# ── Request validation ──────────────────────────────────────────────────
MIN_IDEA_LENGTH: int = 40
IDEA_TOO_SHORT_MESSAGE = "Write at least 40 characters."
BAD_REQUEST_MESSAGE = "Bad request"

# "Try sample" template offered by the frontend.
SAMPLE_PITCH = (
    "A B2B SaaS for mid-market logistics companies that reduces failed deliveries "
    "by 40% using route-level risk scoring. Unlike incumbents, we integrate carrier "
    "telemetry + historical failure patterns to predict and preempt risky drops. "
    "Distribution via direct sales + integrations with existing TMS marketplaces. "
    "Priced per shipment with usage tiers. Early pilots with 3 carriers covering "
    "250k shipments/month; 7% cost reduction observed."
)
