"""
Voter type quiz engine: scores nine answers into one of eight voter types.
"""

from .models import ResultType, RESULT_TYPES, QuizContent, QuizDataset, IncompleteAnswersError
from .scoring import score_quiz, resolve_result_type, ScoringResult, ScoreBreakdown

__all__ = [
    "ResultType",
    "RESULT_TYPES",
    "QuizContent",
    "QuizDataset",
    "IncompleteAnswersError",
    "score_quiz",
    "resolve_result_type",
    "ScoringResult",
    "ScoreBreakdown",
]
