"""Benchmark the learning classifier against labelled guideline examples."""

import logging
from dataclasses import dataclass, field

from ..constants import BENCHMARK_EXAMPLES, DEFAULT_CONTENT_TYPE
from ..models.classification import Classification, Priority
from .learning_classifier import LearningClassifier

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkExample:
    """A piece of content with the priority moderators expect."""

    content: str
    expected: Priority
    category: str = ""


@dataclass
class ExampleResult:
    """Outcome of classifying one benchmark example."""

    example: BenchmarkExample
    classification: Classification

    @property
    def is_correct(self) -> bool:
        return self.classification.priority == self.example.expected


@dataclass
class EvaluationReport:
    """Per-example results and overall accuracy."""

    results: list[ExampleResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def correct(self) -> int:
        return sum(1 for r in self.results if r.is_correct)

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0

    @property
    def fallbacks(self) -> int:
        return sum(1 for r in self.results if r.classification.is_fallback)


def load_default_examples() -> list[BenchmarkExample]:
    """Get the built-in guideline examples."""
    return [
        BenchmarkExample(content=content, expected=Priority(expected), category=category)
        for content, expected, category in BENCHMARK_EXAMPLES
    ]


def evaluate_classifier(
    classifier: LearningClassifier,
    examples: list[BenchmarkExample] | None = None,
    content_type: str = DEFAULT_CONTENT_TYPE,
) -> EvaluationReport:
    """Classify each example and compare with the expected priority.

    Examples are classified without a content id, so no pending predictions
    are created.

    Args:
        classifier: The classifier to benchmark
        examples: Examples to run; defaults to the built-in guideline set
        content_type: Content type passed to the oracle

    Returns:
        EvaluationReport with one result per example

    """
    if examples is None:
        examples = load_default_examples()

    report = EvaluationReport()
    for example in examples:
        classification = classifier.analyze_with_learning(example.content, content_type)
        result = ExampleResult(example=example, classification=classification)
        report.results.append(result)

        if not result.is_correct:
            logger.info(
                f"Benchmark miss: expected {example.expected.value}, "
                f"got {classification.priority.value} for '{example.content[:40]}'"
            )

    logger.info(f"Benchmark accuracy: {report.correct}/{report.total} ({report.accuracy:.1%})")
    return report
