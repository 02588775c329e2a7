import copy

import pytest

from services.voter_type_engine.loader import get_quiz_data, load_quiz_data, DEFAULT_QUIZ_DATA_PATH
from services.voter_type_engine.models import RESULT_TYPES


def _result_copy(label: str) -> dict:
    return {
        "title_bn": f"{label} বাংলা",
        "title_en_tag": f"The {label}",
        "roast1": f"{label} roast one",
        "roast2": f"{label} roast two",
        "tip": f"{label} tip",
        "nudge": f"{label} nudge",
        "share_caption_template": f"I'm a {label}!",
        "accent_color": "#112233",
        "illustration_variant": "ballots",
    }


MINIMAL_QUIZ_DATA = {
    "meta": {
        "title": "Test Quiz",
        "subtitle": "Subtitle",
        "disclaimer": "Disclaimer",
        "share_hashtags": ["#TestQuiz", "#Vote"],
    },
    "questions": [
        {
            "id": f"q{n}",
            "text": f"Question {n}?",
            "options": [{"id": letter, "text": f"Option {letter}"} for letter in "ABCD"],
            "fact_bubble": f"Fact {n}",
        }
        for n in range(1, 10)
    ],
    "results": {rt.value: _result_copy(rt.value) for rt in RESULT_TYPES},
}


@pytest.fixture
def minimal_quiz_dict() -> dict:
    # Deep copy so tests can mutate freely
    return copy.deepcopy(MINIMAL_QUIZ_DATA)


@pytest.fixture
def minimal_dataset(minimal_quiz_dict):
    return load_quiz_data(minimal_quiz_dict)


@pytest.fixture(scope="session")
def quiz_data():
    """The shipped quiz content."""
    return get_quiz_data(DEFAULT_QUIZ_DATA_PATH)


@pytest.fixture
def all_a_answers() -> dict:
    return {f"q{n}": "A" for n in range(1, 10)}


@pytest.fixture
def all_d_answers() -> dict:
    return {f"q{n}": "D" for n in range(1, 10)}
