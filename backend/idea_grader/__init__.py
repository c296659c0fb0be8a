"""Idea Grader: rubric-based scoring of free-text business pitches."""

from .services.scoring_engine import Evaluation, evaluate_idea

__version__ = "0.1.0"

__all__ = ["Evaluation", "evaluate_idea", "__version__"]
