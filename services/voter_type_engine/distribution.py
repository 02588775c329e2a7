import itertools
import logging
from typing import Dict, Iterable, Iterator, List, Optional

import numpy as np
import pandas as pd

from .models import RESULT_TYPES, ANSWER_OPTIONS
from .scoring import SCORE_MAP, score_quiz

logger = logging.getLogger(__name__)

QUESTION_IDS: List[str] = list(SCORE_MAP.keys())


def all_answer_sets(question_ids: Optional[List[str]] = None) -> Iterator[Dict[str, str]]:
    """Yields every complete answer set (4^9 for the standard quiz)."""
    question_ids = question_ids or QUESTION_IDS
    for letters in itertools.product(ANSWER_OPTIONS, repeat=len(question_ids)):
        yield dict(zip(question_ids, letters))


def simulate_answer_sets(n: int, seed: Optional[int] = None, question_ids: Optional[List[str]] = None) -> List[Dict[str, str]]:
    """Draws n complete answer sets, each letter chosen uniformly at random."""
    if n < 0:
        raise ValueError("n must be non-negative")
    question_ids = question_ids or QUESTION_IDS
    rng = np.random.default_rng(seed)
    choices = rng.integers(0, len(ANSWER_OPTIONS), size=(n, len(question_ids)))
    return [
        {qid: ANSWER_OPTIONS[int(idx)] for qid, idx in zip(question_ids, row)}
        for row in choices
    ]


def winner_distribution(answer_sets: Iterable[Dict[str, str]]) -> pd.DataFrame:
    """
    Scores each answer set and tallies the winners.

    Returns:
        DataFrame indexed by voter type label (all eight, in tie-break order)
        with 'wins' and 'share' columns.
    """
    winners = pd.Series(
        [score_quiz(answers).winner.value for answers in answer_sets],
        dtype="object",
    )
    labels = [rt.value for rt in RESULT_TYPES]
    wins = winners.value_counts().reindex(labels, fill_value=0).astype(int)
    total = int(wins.sum())
    share = wins / total if total else wins.astype(float)

    df = pd.DataFrame({"wins": wins, "share": share.round(4)})
    df.index.name = "result_type"
    return df


def generate_distribution_report(n: Optional[int] = 10000, seed: Optional[int] = None) -> dict:
    """
    Reports how often each voter type wins.

    Args:
        n: number of random answer sets to score, or None to score every possible answer set.
        seed: RNG seed for reproducible sampling.
    """
    if n is None:
        answer_sets: Iterable[Dict[str, str]] = all_answer_sets()
        sample = "exhaustive"
    else:
        answer_sets = simulate_answer_sets(n, seed)
        sample = "random"

    df = winner_distribution(answer_sets)
    unreachable = df.index[df["wins"] == 0].tolist()
    if unreachable:
        logger.warning(f"Voter types that never won: {unreachable}")

    return {
        "sample": sample,
        "answer_sets": int(df["wins"].sum()),
        "seed": seed,
        "wins": {label: int(v) for label, v in df["wins"].items()},
        "share": {label: float(v) for label, v in df["share"].items()},
        "unreachable": unreachable,
    }
