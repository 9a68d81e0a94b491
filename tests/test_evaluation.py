"""Tests for benchmark evaluation and the keyword mock oracle."""

import pytest

from conftest import StubOracle
from soapbox_moderation.constants import BENCHMARK_EXAMPLES
from soapbox_moderation.exceptions import ValidationError
from soapbox_moderation.langgraph.nodes.mock_classifier import MockClassificationOracle
from soapbox_moderation.models.classification import Priority
from soapbox_moderation.moderation_system import ModerationLearningSystem
from soapbox_moderation.processing.evaluation import (
    BenchmarkExample,
    evaluate_classifier,
    load_default_examples,
)


class TestMockClassificationOracle:
    """Test the keyword stand-in oracle."""

    @pytest.fixture
    def oracle(self):
        return MockClassificationOracle()

    @pytest.mark.parametrize("content, expected", [
        ("Any personal info for sale?", Priority.CRITICAL),
        ("Prayer is more powerful than medicine. Don't take pills—just pray.", Priority.HIGH),
        ("Catholics aren't real Christians", Priority.MEDIUM),
        ("Is attraction a sin?", Priority.LOW),
    ])
    def test_guideline_examples(self, oracle, content, expected):
        assert oracle.classify(content, "discussion").priority == expected

    def test_clean_content(self, oracle):
        result = oracle.classify("Praying for your family this week!", "prayer_request")

        assert result.priority == Priority.LOW
        assert result.flagged is False

    def test_empty_content(self, oracle):
        with pytest.raises(ValidationError):
            oracle.classify("", "comment")


class TestEvaluation:
    """Test the benchmark runner."""

    def test_default_examples(self):
        examples = load_default_examples()

        assert len(examples) == len(BENCHMARK_EXAMPLES)
        assert {e.expected for e in examples} == set(Priority)

    def test_report_accuracy(self):
        """Test accuracy against a stub that always answers medium."""
        system = ModerationLearningSystem(oracle=StubOracle())
        examples = [
            BenchmarkExample("Catholics aren't real Christians.", Priority.MEDIUM),
            BenchmarkExample("Is attraction a sin?", Priority.LOW),
        ]

        report = evaluate_classifier(system.classifier, examples)

        assert report.total == 2
        assert report.correct == 1
        assert report.accuracy == 0.5
        assert report.fallbacks == 0

    def test_benchmark_creates_no_pending_predictions(self):
        system = ModerationLearningSystem(oracle=MockClassificationOracle())

        report = evaluate_classifier(system.classifier)

        assert report.total == len(BENCHMARK_EXAMPLES)
        assert len(system.predictions) == 0

    def test_empty_report(self):
        system = ModerationLearningSystem(oracle=StubOracle())

        report = evaluate_classifier(system.classifier, [])

        assert report.accuracy == 0.0
