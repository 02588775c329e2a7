# services/voter_type_engine/scoring.py
# Scores a completed answer set and picks the winning voter type.

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
from urllib.parse import unquote

from pydantic import BaseModel

from .models import ResultType, RESULT_TYPES, QuizDataset, IncompleteAnswersError

logger = logging.getLogger(__name__)

# --- Constants ---

# Questions not listed here count once.
QUESTION_WEIGHTS: Mapping[str, int] = MappingProxyType({
    'q4': 2,
    'q5': 2,
    'q6': 2,
})

DEFAULT_WEIGHT = 1

# Tie-break axes, checked after the overall total.
Q5Q6_QUESTIONS = frozenset({'q5', 'q6'})
Q4_QUESTION = 'q4'


# (question id, chosen letter) -> voter types credited by that answer
SCORE_MAP: Mapping[str, Mapping[str, Tuple[ResultType, ...]]] = MappingProxyType({
    'q1': MappingProxyType({
        'A': (ResultType.PROCESS_PRO,),
        'B': (ResultType.INFO_DETECTIVE,),
        'C': (ResultType.LAST_MINUTE_SPRINTER, ResultType.CONFUSION_CUTE),
        'D': (ResultType.CONFUSION_CUTE,),
    }),
    'q2': MappingProxyType({
        'A': (ResultType.PROCESS_PRO, ResultType.PHONE_FREE_HERO),
        'B': (ResultType.INFO_DETECTIVE,),
        'C': (ResultType.QUEUE_ZEN, ResultType.POSTER_NOSTALGIC),
        'D': (ResultType.CONFUSION_CUTE, ResultType.LAST_MINUTE_SPRINTER),
    }),
    'q3': MappingProxyType({
        'A': (ResultType.PROCESS_PRO, ResultType.QUEUE_ZEN),
        'B': (ResultType.QUEUE_ZEN,),
        'C': (ResultType.LAST_MINUTE_SPRINTER,),
        'D': (ResultType.CONFUSION_CUTE,),
    }),
    'q4': MappingProxyType({
        'A': (ResultType.PROCESS_PRO, ResultType.PHONE_FREE_HERO),
        'B': (ResultType.CONFUSION_CUTE,),
        'C': (ResultType.LAST_MINUTE_SPRINTER,),
        'D': (ResultType.CONFUSION_CUTE,),
    }),
    'q5': MappingProxyType({
        'A': (ResultType.PROCESS_PRO,),
        'B': (ResultType.QUEUE_ZEN,),
        'C': (ResultType.CONFUSION_CUTE,),
        'D': (ResultType.LAST_MINUTE_SPRINTER, ResultType.CONFUSION_CUTE),
    }),
    'q6': MappingProxyType({
        'A': (ResultType.SEAL_SNIPER, ResultType.PROCESS_PRO),
        'B': (ResultType.SEAL_SNIPER, ResultType.QUEUE_ZEN),
        'C': (ResultType.PROCESS_PRO,),
        'D': (ResultType.LAST_MINUTE_SPRINTER, ResultType.QUEUE_ZEN),
    }),
    'q7': MappingProxyType({
        'A': (ResultType.PROCESS_PRO, ResultType.SEAL_SNIPER),
        'B': (ResultType.CONFUSION_CUTE,),
        'C': (ResultType.CONFUSION_CUTE, ResultType.POSTER_NOSTALGIC),
        'D': (ResultType.LAST_MINUTE_SPRINTER,),
    }),
    'q8': MappingProxyType({
        'A': (ResultType.QUEUE_ZEN, ResultType.PROCESS_PRO),
        'B': (ResultType.POSTER_NOSTALGIC,),
        'C': (ResultType.INFO_DETECTIVE,),
        'D': (ResultType.PROCESS_PRO, ResultType.INFO_DETECTIVE),
    }),
    'q9': MappingProxyType({
        'A': (ResultType.PROCESS_PRO, ResultType.QUEUE_ZEN),
        'B': (ResultType.LAST_MINUTE_SPRINTER, ResultType.CONFUSION_CUTE),
        'C': (ResultType.INFO_DETECTIVE,),
        'D': (ResultType.PHONE_FREE_HERO, ResultType.QUEUE_ZEN),
    }),
})

_ENUM_POSITION: Mapping[ResultType, int] = MappingProxyType(
    {result_type: index for index, result_type in enumerate(RESULT_TYPES)}
)


class ScoreBreakdown(BaseModel):
    total: Dict[ResultType, int]
    q5q6: Dict[ResultType, int]
    q4: Dict[ResultType, int]

class ScoringResult(BaseModel):
    winner: ResultType
    breakdown: ScoreBreakdown
    ranking: List[ResultType] # full enumeration, best first


# --- Scoring Functions ---

def build_empty_scores() -> Dict[ResultType, int]:
    return {result_type: 0 for result_type in RESULT_TYPES}


def credited_types(question_id: str, option: str) -> Tuple[ResultType, ...]:
    """Voter types credited by one answer. Unknown questions or letters credit nothing."""
    try:
        return SCORE_MAP.get(question_id, {}).get(option, ())
    except TypeError:
        # unhashable answer value
        return ()


def question_weight(question_id: str) -> int:
    return QUESTION_WEIGHTS.get(question_id, DEFAULT_WEIGHT)


def find_missing_answers(answers: Mapping[str, str], dataset: QuizDataset) -> List[str]:
    """Dataset question ids without an answer, in dataset order."""
    return [qid for qid in dataset.question_ids() if not answers.get(qid)]


def rank_result_types(breakdown: ScoreBreakdown) -> List[ResultType]:
    """
    Orders every voter type from best to worst.

    Higher total first, then higher q5+q6 score, then higher q4 score, then
    declaration order of ResultType. The last key never ties, so the order is total.
    """
    return sorted(
        RESULT_TYPES,
        key=lambda result_type: (
            -breakdown.total[result_type],
            -breakdown.q5q6[result_type],
            -breakdown.q4[result_type],
            _ENUM_POSITION[result_type],
        ),
    )


def score_quiz(answers: Mapping[str, str], dataset: Optional[QuizDataset] = None) -> ScoringResult:
    """
    Scores an answer set and returns the winning voter type with its breakdown.

    Args:
        answers: question id -> chosen letter ('A'-'D'). Unknown ids or letters
                 contribute nothing.
        dataset: when given, every question in it must be answered.

    Raises:
        IncompleteAnswersError: a dataset was given and some of its questions are unanswered.
    """
    total = build_empty_scores()
    q5q6 = build_empty_scores()
    q4 = build_empty_scores()

    if dataset is not None:
        missing = find_missing_answers(answers, dataset)
        if missing:
            raise IncompleteAnswersError(missing)

    for question_id, option in answers.items():
        targets = credited_types(question_id, option)
        if not targets:
            logger.debug("Answer %r=%r credits no voter type", question_id, option)
            continue
        weight = question_weight(question_id)

        for result_type in targets:
            total[result_type] += weight
            if question_id in Q5Q6_QUESTIONS:
                q5q6[result_type] += weight
            elif question_id == Q4_QUESTION:
                q4[result_type] += weight

    breakdown = ScoreBreakdown(total=total, q5q6=q5q6, q4=q4)
    ranking = rank_result_types(breakdown)
    return ScoringResult(winner=ranking[0], breakdown=breakdown, ranking=ranking)


def resolve_result_type(raw: str) -> Optional[ResultType]:
    """Matches a URL path segment or query value to a voter type, ignoring case."""
    if not raw:
        return None
    normalized = unquote(raw).strip().lower()
    for result_type in RESULT_TYPES:
        if result_type.value.lower() == normalized:
            return result_type
    return None
