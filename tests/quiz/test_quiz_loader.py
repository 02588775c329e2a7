import pytest
import yaml
from pathlib import Path
from pydantic import ValidationError

from services.voter_type_engine.loader import (
    load_quiz_data,
    load_quiz_data_from_file,
    get_quiz_data,
    clear_quiz_data_cache,
    QuizDataValidationError,
    DEFAULT_QUIZ_DATA_PATH,
)
from services.voter_type_engine.models import QuizContent, QuizDataset, ResultType, RESULT_TYPES


@pytest.fixture
def valid_quiz_file(tmp_path: Path, minimal_quiz_dict: dict) -> str:
    file_path = tmp_path / "quiz.yml"
    with open(file_path, "w", encoding="utf-8") as f:
        yaml.dump(minimal_quiz_dict, f, allow_unicode=True)
    return str(file_path)


def test_shipped_quiz_data_is_valid():
    """The bundled content must pass every schema and cross-field rule."""
    dataset = load_quiz_data_from_file(DEFAULT_QUIZ_DATA_PATH)
    assert isinstance(dataset, QuizDataset)
    assert dataset.question_ids() == [f"q{n}" for n in range(1, 10)]
    assert set(dataset.results) == {rt.value for rt in RESULT_TYPES}
    for question in dataset.questions:
        assert [o.id for o in question.options] == ["A", "B", "C", "D"]

def test_successful_parse_from_file(valid_quiz_file: str):
    dataset = load_quiz_data_from_file(valid_quiz_file)
    assert dataset.meta.title == "Test Quiz"
    assert len(dataset.questions) == 9
    assert dataset.result_for(ResultType.SEAL_SNIPER).title_en_tag == "The SealSniper"

def test_successful_parse_from_data(minimal_quiz_dict: dict):
    dataset = load_quiz_data(minimal_quiz_dict)
    assert dataset.meta.share_hashtags == ["#TestQuiz", "#Vote"]

def test_public_questions_drops_result_copy(minimal_quiz_dict: dict):
    dataset = load_quiz_data(minimal_quiz_dict)
    content = dataset.public_questions()

    assert isinstance(content, QuizContent)
    assert content.meta == dataset.meta
    assert [q.id for q in content.questions] == dataset.question_ids()
    assert "results" not in content.model_dump()

def test_duplicate_question_id(minimal_quiz_dict: dict):
    minimal_quiz_dict["questions"][8]["id"] = "q1"
    with pytest.raises(QuizDataValidationError, match="Duplicate question ID found: q1"):
        load_quiz_data(minimal_quiz_dict)

def test_duplicate_option_id(minimal_quiz_dict: dict):
    minimal_quiz_dict["questions"][2]["options"][3]["id"] = "A"
    with pytest.raises(QuizDataValidationError, match="Duplicate option 'A' in question 'q3'"):
        load_quiz_data(minimal_quiz_dict)

def test_missing_result_copy(minimal_quiz_dict: dict):
    del minimal_quiz_dict["results"]["QueueZen"]
    with pytest.raises(QuizDataValidationError, match="Missing result copy for: QueueZen"):
        load_quiz_data(minimal_quiz_dict)

def test_unknown_result_copy(minimal_quiz_dict: dict):
    minimal_quiz_dict["results"]["SofaVoter"] = minimal_quiz_dict["results"]["ProcessPro"]
    with pytest.raises(QuizDataValidationError, match="unknown voter types: SofaVoter"):
        load_quiz_data(minimal_quiz_dict)

def test_wrong_question_count(minimal_quiz_dict: dict):
    minimal_quiz_dict["questions"].pop()
    with pytest.raises(ValidationError, match="questions"):
        load_quiz_data(minimal_quiz_dict)

def test_wrong_option_count(minimal_quiz_dict: dict):
    minimal_quiz_dict["questions"][0]["options"].pop()
    with pytest.raises(ValidationError, match=r"questions\.0\.options"):
        load_quiz_data(minimal_quiz_dict)

def test_invalid_option_letter(minimal_quiz_dict: dict):
    minimal_quiz_dict["questions"][0]["options"][0]["id"] = "E"
    with pytest.raises(ValidationError, match=r"questions\.0\.options\.0\.id"):
        load_quiz_data(minimal_quiz_dict)

def test_invalid_accent_color(minimal_quiz_dict: dict):
    minimal_quiz_dict["results"]["ProcessPro"]["accent_color"] = "blue"
    with pytest.raises(ValidationError, match="accent_color"):
        load_quiz_data(minimal_quiz_dict)

def test_invalid_illustration_variant(minimal_quiz_dict: dict):
    minimal_quiz_dict["results"]["ProcessPro"]["illustration_variant"] = "balloon"
    with pytest.raises(ValidationError, match="illustration_variant"):
        load_quiz_data(minimal_quiz_dict)

def test_empty_hashtags(minimal_quiz_dict: dict):
    minimal_quiz_dict["meta"]["share_hashtags"] = []
    with pytest.raises(ValidationError, match="share_hashtags"):
        load_quiz_data(minimal_quiz_dict)

def test_blank_fact_bubble(minimal_quiz_dict: dict):
    minimal_quiz_dict["questions"][4]["fact_bubble"] = ""
    with pytest.raises(ValidationError, match=r"questions\.4\.fact_bubble"):
        load_quiz_data(minimal_quiz_dict)

def test_load_non_existent_file():
    with pytest.raises(QuizDataValidationError, match="File not found: non_existent_quiz.yml"):
        load_quiz_data_from_file("non_existent_quiz.yml")

def test_load_invalid_yaml_file(tmp_path: Path):
    file_path = tmp_path / "invalid_syntax.yml"
    with open(file_path, "w", encoding="utf-8") as f:
        f.write("questions: [id: q1\n  text: Test")  # Intentionally malformed YAML
    with pytest.raises(QuizDataValidationError, match="Error parsing YAML file"):
        load_quiz_data_from_file(str(file_path))

def test_load_empty_yaml_file(tmp_path: Path):
    file_path = tmp_path / "empty.yml"
    file_path.write_text("", encoding="utf-8")
    with pytest.raises(QuizDataValidationError, match="YAML file is empty or invalid"):
        load_quiz_data_from_file(str(file_path))

def test_get_quiz_data_is_cached(valid_quiz_file: str):
    clear_quiz_data_cache()
    first = get_quiz_data(valid_quiz_file)
    second = get_quiz_data(valid_quiz_file)
    assert first is second

    clear_quiz_data_cache()
    assert get_quiz_data(valid_quiz_file) is not first

def test_get_quiz_data_defaults_to_shipped_file():
    assert get_quiz_data().meta.title == get_quiz_data(DEFAULT_QUIZ_DATA_PATH).meta.title
