import itertools

import pandas as pd
import pytest

from services.voter_type_engine.distribution import (
    QUESTION_IDS,
    all_answer_sets,
    simulate_answer_sets,
    winner_distribution,
    generate_distribution_report,
)
from services.voter_type_engine.models import RESULT_TYPES


def test_simulated_answer_sets_are_complete():
    answer_sets = simulate_answer_sets(25, seed=3)
    assert len(answer_sets) == 25
    for answers in answer_sets:
        assert list(answers.keys()) == QUESTION_IDS
        assert set(answers.values()) <= {"A", "B", "C", "D"}

def test_simulation_is_reproducible_with_seed():
    assert simulate_answer_sets(10, seed=42) == simulate_answer_sets(10, seed=42)

def test_negative_sample_size_rejected():
    with pytest.raises(ValueError):
        simulate_answer_sets(-1)

def test_all_answer_sets_enumerates_every_combination():
    small = list(all_answer_sets(["q1", "q2"]))
    assert len(small) == 16
    assert {"q1": "A", "q2": "A"} in small
    assert {"q1": "D", "q2": "C"} in small
    assert sum(1 for _ in itertools.islice(all_answer_sets(), 100)) == 100

def test_winner_distribution_frame():
    answer_sets = [{q: "A" for q in QUESTION_IDS}] * 3 + [{q: "D" for q in QUESTION_IDS}]
    df = winner_distribution(answer_sets)

    assert isinstance(df, pd.DataFrame)
    assert list(df.index) == [rt.value for rt in RESULT_TYPES]
    assert df.loc["ProcessPro", "wins"] == 3
    assert df.loc["ConfusionCute", "wins"] == 1
    assert df.loc["ProcessPro", "share"] == pytest.approx(0.75)
    assert df["wins"].sum() == 4

def test_winner_distribution_empty():
    df = winner_distribution([])
    assert df["wins"].sum() == 0
    assert (df["share"] == 0).all()

def test_distribution_report():
    report = generate_distribution_report(n=300, seed=11)

    assert report["sample"] == "random"
    assert report["answer_sets"] == 300
    assert sum(report["wins"].values()) == 300
    assert set(report["wins"]) == {rt.value for rt in RESULT_TYPES}
    assert sum(report["share"].values()) == pytest.approx(1.0, abs=1e-3)
    assert report["unreachable"] == [label for label, wins in report["wins"].items() if wins == 0]
