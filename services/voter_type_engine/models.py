from enum import Enum
from typing import List, Dict, Literal, Tuple

from pydantic import BaseModel, Field


class ResultType(str, Enum):
    """The eight voter types. Declaration order is the final tie-break order."""
    PROCESS_PRO = "ProcessPro"
    QUEUE_ZEN = "QueueZen"
    CONFUSION_CUTE = "ConfusionCute"
    SEAL_SNIPER = "SealSniper"
    PHONE_FREE_HERO = "PhoneFreeHero"
    INFO_DETECTIVE = "InfoDetective"
    POSTER_NOSTALGIC = "PosterNostalgic2"
    LAST_MINUTE_SPRINTER = "LastMinuteSprinter"

    def __str__(self) -> str:
        return self.value


RESULT_TYPES: Tuple[ResultType, ...] = tuple(ResultType)

AnswerOption = Literal["A", "B", "C", "D"]
ANSWER_OPTIONS: Tuple[str, ...] = ("A", "B", "C", "D")

IllustrationVariant = Literal["ballots", "stamp", "phone", "map", "shield", "poster", "clock"]


class QuizOption(BaseModel):
    id: AnswerOption
    text: str = Field(..., min_length=1)

class QuizQuestion(BaseModel):
    id: str = Field(..., min_length=2)
    text: str = Field(..., min_length=1)
    options: List[QuizOption] = Field(..., min_length=4, max_length=4)
    fact_bubble: str = Field(..., min_length=1)

class QuizResult(BaseModel):
    title_bn: str = Field(..., min_length=1)
    title_en_tag: str = Field(..., min_length=1)
    roast1: str = Field(..., min_length=1)
    roast2: str = Field(..., min_length=1)
    tip: str = Field(..., min_length=1)
    nudge: str = Field(..., min_length=1)
    share_caption_template: str = Field(..., min_length=1)
    accent_color: str = Field(..., pattern=r"^#[0-9a-fA-F]{6}$")
    illustration_variant: IllustrationVariant

class QuizMeta(BaseModel):
    title: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    disclaimer: str = Field(..., min_length=1)
    share_hashtags: List[str] = Field(..., min_length=1)

class QuizContent(BaseModel):
    """The part of the dataset a client renders before scoring: meta and questions, no result copy."""
    meta: QuizMeta
    questions: List[QuizQuestion]

class QuizDataset(BaseModel):
    meta: QuizMeta
    questions: List[QuizQuestion] = Field(..., min_length=9, max_length=9)
    results: Dict[str, QuizResult] # keyed by ResultType label

    def question_ids(self) -> List[str]:
        return [q.id for q in self.questions]

    def result_for(self, result_type: ResultType) -> QuizResult:
        return self.results[result_type.value]

    def public_questions(self) -> QuizContent:
        return QuizContent(meta=self.meta, questions=self.questions)


# Custom Error Classes
class IncompleteAnswersError(ValueError):
    """Raised when scoring is requested before every dataset question has an answer."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Incomplete answers: missing {', '.join(self.missing)}")
