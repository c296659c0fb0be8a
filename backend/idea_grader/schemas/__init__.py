# Schemas package
from .evaluation_schema import (
    ErrorResponse,
    EvaluationRequest,
    EvaluationResponse,
    SamplePitchResponse,
)

__all__ = [
    "EvaluationRequest",
    "EvaluationResponse",
    "SamplePitchResponse",
    "ErrorResponse",
]
