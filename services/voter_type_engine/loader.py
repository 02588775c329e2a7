import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml
from pydantic import ValidationError

from services.voter_type_engine.models import QuizDataset, RESULT_TYPES

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_QUIZ_DATA_PATH = PROJECT_ROOT / "assets" / "voter_quiz.yml"


class QuizDataValidationError(ValueError):
    """Custom exception for quiz data problems not covered by Pydantic."""
    pass


def load_quiz_data(data: Dict[str, Any]) -> QuizDataset:
    """
    Validates the raw dictionary data against the QuizDataset model
    and performs additional cross-field validations.
    """
    try:
        dataset = QuizDataset.model_validate(data)
    except ValidationError as e:
        # Re-raise Pydantic's validation error for schema issues
        raise e

    question_ids = set()
    for question in dataset.questions:
        if question.id in question_ids:
            raise QuizDataValidationError(f"Duplicate question ID found: {question.id}")
        question_ids.add(question.id)

        option_ids = set()
        for option in question.options:
            if option.id in option_ids:
                raise QuizDataValidationError(f"Duplicate option '{option.id}' in question '{question.id}'")
            option_ids.add(option.id)

    # Every voter type needs result copy, otherwise its result page cannot render.
    known_labels = {result_type.value for result_type in RESULT_TYPES}
    missing_results = [rt.value for rt in RESULT_TYPES if rt.value not in dataset.results]
    if missing_results:
        raise QuizDataValidationError(f"Missing result copy for: {', '.join(missing_results)}")
    unknown_results = sorted(set(dataset.results) - known_labels)
    if unknown_results:
        raise QuizDataValidationError(f"Result copy for unknown voter types: {', '.join(unknown_results)}")

    return dataset


def load_quiz_data_from_file(file_path: Union[str, Path]) -> QuizDataset:
    """
    Loads the quiz content from a YAML file, validates it,
    and returns a QuizDataset object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise QuizDataValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise QuizDataValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise QuizDataValidationError(f"YAML file is empty or invalid: {file_path}")

    dataset = load_quiz_data(data)
    logger.info(f"Loaded quiz data from {file_path} ({len(dataset.questions)} questions)")
    return dataset


@lru_cache(maxsize=None)
def _cached_quiz_data(resolved_path: str) -> QuizDataset:
    return load_quiz_data_from_file(resolved_path)


def get_quiz_data(file_path: Optional[Union[str, Path]] = None) -> QuizDataset:
    """Returns the parsed quiz dataset, loading each file at most once per process."""
    path = Path(file_path) if file_path else DEFAULT_QUIZ_DATA_PATH
    return _cached_quiz_data(str(path.resolve()))


def clear_quiz_data_cache() -> None:
    _cached_quiz_data.cache_clear()
