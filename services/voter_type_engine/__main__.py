"""
Command-line entry point for the voter type engine.

    python -m services.voter_type_engine q1=A q2=B ... q9=D
    python -m services.voter_type_engine --report 20000 --seed 7
"""
import argparse
import json
import sys
from typing import Dict, List, Optional

from pydantic import ValidationError

from .loader import get_quiz_data, QuizDataValidationError
from .models import IncompleteAnswersError
from .scoring import score_quiz
from .distribution import generate_distribution_report


def parse_answer_tokens(tokens: List[str]) -> Dict[str, str]:
    """Turns ['q1=A', 'q2=b'] into {'q1': 'A', 'q2': 'B'}."""
    answers: Dict[str, str] = {}
    for token in tokens:
        question_id, sep, option = token.partition("=")
        if not sep or not question_id.strip() or not option.strip():
            raise ValueError(f"Invalid answer '{token}'. Expected the form q1=A")
        answers[question_id.strip()] = option.strip().upper()
    return answers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m services.voter_type_engine",
        description="Score a voter type quiz answer set",
    )
    parser.add_argument("answers", nargs="*", help="Answers in the form q1=A")
    parser.add_argument("--data", type=str, default=None, help="Path to the quiz YAML file.")
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Score without checking that every question is answered.",
    )
    parser.add_argument(
        "--report",
        type=int,
        metavar="N",
        default=None,
        help="Print the winner distribution over N random answer sets (0 = every answer set).",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for --report.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.report is not None:
            output = generate_distribution_report(n=args.report or None, seed=args.seed)
        else:
            answers = parse_answer_tokens(args.answers)
            dataset = None if args.no_validate else get_quiz_data(args.data)
            output = score_quiz(answers, dataset).model_dump(mode="json")
    except IncompleteAnswersError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except (QuizDataValidationError, ValidationError) as e:
        print(f"❌ Quiz data error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
