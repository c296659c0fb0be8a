"""
Evaluation Router with Timing Instrumentation

Handles the /api/evaluate endpoint. The route stays thin; all scoring
lives in ``services.scoring_engine``.
"""

from fastapi import APIRouter, status

from ..constants import SAMPLE_PITCH
from ..schemas.evaluation_schema import (
    ErrorResponse,
    EvaluationRequest,
    EvaluationResponse,
    SamplePitchResponse,
)
from ..services.scoring_engine import evaluate_idea
from ..timing import sync_timer


router = APIRouter(
    prefix="/api/evaluate",
    tags=["Evaluation"],
    responses={
        400: {"model": ErrorResponse, "description": "Idea missing, not text, or shorter than 40 characters"},
    },
)


@router.post(
    "",
    response_model=EvaluationResponse,
    status_code=status.HTTP_200_OK,
    summary="Evaluate a Business Idea",
    response_description="Verdict, rubric scores, issues, recommendations and test plan",
)
def evaluate(request: EvaluationRequest) -> EvaluationResponse:
    """
    Score a pitch against the eleven-dimension rubric.

    Plain ``def``: FastAPI runs it in the threadpool.
    """
    with sync_timer("evaluate_endpoint", "SCORING"):
        evaluation = evaluate_idea(request.idea)
    return evaluation.to_response()


@router.get(
    "/sample",
    response_model=SamplePitchResponse,
    summary="Sample Pitch",
    description="A complete example pitch the UI can prefill",
)
def sample_pitch() -> SamplePitchResponse:
    """Return the built-in sample pitch."""
    return SamplePitchResponse(idea=SAMPLE_PITCH)
