from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import IDEA_TOO_SHORT_MESSAGE, MIN_IDEA_LENGTH, SAMPLE_PITCH


class EvaluationRequest(BaseModel):
    """Request body for ``POST /api/evaluate``."""

    idea: str = Field(
        ...,
        description="Free-text pitch. Who it is for, the problem, distribution, "
        "monetization and proof. At least 40 characters after trimming.",
        examples=[SAMPLE_PITCH],
    )

    @field_validator("idea")
    @classmethod
    def idea_long_enough(cls, v: str) -> str:
        stripped = v.strip()
        if len(stripped) < MIN_IDEA_LENGTH:
            raise ValueError(IDEA_TOO_SHORT_MESSAGE)
        return stripped


class EvaluationResponse(BaseModel):
    """Scored evaluation of a pitch.

    ``scores`` keeps the fixed rubric order; every value is clamped 0-10.
    ``test_plan`` is serialized as ``testPlan`` for the frontend.
    """

    model_config = ConfigDict(populate_by_name=True)

    verdict: Literal["BULLETPROOF", "TRASH", "WEAK"] = Field(
        ...,
        description="BULLETPROOF, TRASH or WEAK",
    )
    summary: str = Field(..., description="Fixed one-line summary selected by verdict")
    scores: Dict[str, float] = Field(
        ...,
        description="Eleven rubric dimensions, each 0-10",
    )
    issues: List[str] = Field(
        default_factory=list,
        description="Dimensions scoring below 5/10",
    )
    recommendations: List[str] = Field(
        default_factory=list,
        description="Dimensions scoring below 7/10",
    )
    test_plan: List[str] = Field(
        ...,
        alias="testPlan",
        description="Fixed six-step validation plan",
    )

    @field_validator("scores")
    @classmethod
    def scores_in_range(cls, v: Dict[str, float]) -> Dict[str, float]:
        for name, score in v.items():
            if not 0.0 <= score <= 10.0:
                raise ValueError(f"{name} score {score} outside 0-10")
        return v


class SamplePitchResponse(BaseModel):
    """Sample pitch the frontend can prefill."""

    idea: str


class ErrorResponse(BaseModel):
    """Body returned for rejected requests."""

    error: str
