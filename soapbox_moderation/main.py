import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import CONTENT_TYPES, LOG_FORMAT, LOG_LEVEL
from .constants import (
    CHECK_MARK,
    CROSS_MARK,
    DEFAULT_CONTENT_TYPE,
    PREVIEW_LENGTH,
    SEPARATOR_LENGTH,
)
from .exceptions import ValidationError
from .langgraph.nodes.classifier import ClassificationOracle
from .langgraph.nodes.mock_classifier import MockClassificationOracle
from .moderation_system import ModerationLearningSystem
from .processing.evaluation import EvaluationReport, evaluate_classifier

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    stream=sys.stdout,
)

# Suppress HTTP request logging from OpenAI/httpx
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)


def print_separator() -> None:
    print("=" * SEPARATOR_LENGTH)


def print_report(report: EvaluationReport) -> None:
    """Pretty print benchmark results."""
    for result in report.results:
        mark = CHECK_MARK if result.is_correct else CROSS_MARK
        classification = result.classification
        print(f"{mark} \"{result.example.content[:PREVIEW_LENGTH]}...\"")
        print(
            f"   Expected: {result.example.expected.value} | "
            f"Got: {classification.priority.value} | "
            f"Confidence: {classification.confidence:.1%}"
        )
        if not result.is_correct:
            print(f"   Reason: {classification.reason}")

    print_separator()
    print(f"Accuracy: {report.correct}/{report.total} ({report.accuracy:.1%})")
    if report.fallbacks:
        print(f"Fallback classifications: {report.fallbacks}")


def build_system(use_mock: bool) -> ModerationLearningSystem:
    """Create the system with the real or mock oracle."""
    oracle = MockClassificationOracle() if use_mock else ClassificationOracle()
    return ModerationLearningSystem(oracle=oracle)


def main(argv: list[str] | None = None) -> int:
    """Run the moderation learning command line tool."""
    # Load environment variables from .env file
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(env_path)

    parser = argparse.ArgumentParser(
        description="Soapbox AI content moderation with learning feedback"
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use the keyword mock oracle instead of OpenAI",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate_parser = subparsers.add_parser(
        "evaluate", help="Benchmark the classifier on guideline examples"
    )
    evaluate_parser.add_argument(
        "--content-type",
        default=DEFAULT_CONTENT_TYPE,
        choices=sorted(CONTENT_TYPES),
        help="Content type passed to the oracle",
    )

    classify_parser = subparsers.add_parser("classify", help="Classify a single text")
    classify_parser.add_argument("text", help="Content to classify")
    classify_parser.add_argument(
        "--content-type",
        default=DEFAULT_CONTENT_TYPE,
        choices=sorted(CONTENT_TYPES),
        help="Content type passed to the oracle",
    )

    args = parser.parse_args(argv)

    if not args.mock and not os.getenv("OPENAI_API_KEY"):
        print("Error: OPENAI_API_KEY environment variable not set")
        print("Set it in .env or run with --mock")
        return 1

    system = build_system(args.mock)

    if args.command == "evaluate":
        report = evaluate_classifier(system.classifier, content_type=args.content_type)
        print_report(report)
        return 0

    try:
        classification = system.classify(args.text, args.content_type)
    except ValidationError as e:
        print(f"Error: {e}")
        return 1

    for key, value in classification.to_dict().items():
        print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
