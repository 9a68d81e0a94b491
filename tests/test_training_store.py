"""Tests for the TrainingCaseStore class."""

import threading

import pytest

from conftest import make_classification, make_decision
from soapbox_moderation.exceptions import TrainingStoreError
from soapbox_moderation.models.classification import Outcome, Priority
from soapbox_moderation.models.feedback import TrainingCase
from soapbox_moderation.processing.training_store import TrainingCaseStore


def make_case(ai: str, human: str, content_id: str = "post_1",
              category: str = "other") -> TrainingCase:
    """Build a training case for a predicted/corrected priority pair."""
    return TrainingCase(
        content_id=content_id,
        content=f"Content for {content_id}",
        content_type="discussion",
        ai_classification=make_classification(ai, category),
        human_decision=make_decision(human, category),
        outcome=Outcome.compare(Priority(ai), Priority(human)),
    )


@pytest.fixture
def store():
    """Create a fresh TrainingCaseStore for each test."""
    return TrainingCaseStore()


class TestTrainingCaseStore:
    """Test suite for TrainingCaseStore."""

    def test_initialization(self, store):
        """Test that the store starts empty."""
        assert len(store) == 0
        assert store.all() == []
        assert store.has_cases() is False

    def test_add_and_all(self, store):
        """Test that cases are kept in insertion order."""
        first = make_case("low", "low", "a")
        second = make_case("medium", "high", "b")

        store.add(first)
        store.add(second)

        assert store.all() == [first, second]
        assert len(store) == 2

    def test_all_returns_snapshot(self, store):
        """Test that callers cannot mutate the store through all()."""
        store.add(make_case("low", "low"))

        snapshot = store.all()
        snapshot.clear()

        assert len(store) == 1

    def test_rejects_non_case(self, store):
        with pytest.raises(TrainingStoreError):
            store.add({"outcome": "correct"})

    def test_max_cases_drops_oldest(self):
        """Test that a bounded store keeps only the newest cases."""
        store = TrainingCaseStore(max_cases=2)
        for i in range(3):
            store.add(make_case("low", "low", f"post_{i}"))

        assert [c.content_id for c in store.all()] == ["post_1", "post_2"]

    def test_invalid_max_cases(self):
        with pytest.raises(ValueError):
            TrainingCaseStore(max_cases=0)

    def test_recent_and_corrections(self, store):
        """Test windowed access to the most recent cases."""
        store.add(make_case("low", "high", "a"))
        store.add(make_case("low", "low", "b"))
        store.add(make_case("high", "medium", "c"))

        assert [c.content_id for c in store.recent(2)] == ["b", "c"]
        assert [c.content_id for c in store.corrections(2)] == ["c"]
        assert [c.content_id for c in store.corrections(3)] == ["a", "c"]
        assert store.recent(0) == []

    def test_recent_misclassifications_grouping(self, store):
        """Test that mismatches are grouped by pair and sorted by frequency."""
        store.add(make_case("low", "high"))
        store.add(make_case("medium", "high"))
        store.add(make_case("medium", "high"))
        store.add(make_case("high", "high"))

        patterns = store.recent_misclassifications()

        assert len(patterns) == 2
        assert patterns[0].ai_predicted == Priority.MEDIUM
        assert patterns[0].human_corrected == Priority.HIGH
        assert patterns[0].frequency == 2
        assert patterns[0].pattern == "medium -> high"
        assert patterns[1].frequency == 1

    def test_recent_misclassifications_limit_and_threshold(self, store):
        for ai, human in [("low", "medium"), ("low", "high"), ("low", "critical")]:
            store.add(make_case(ai, human))
        store.add(make_case("low", "critical"))

        assert len(store.recent_misclassifications(2)) == 2
        frequent = store.recent_misclassifications(min_frequency=2)
        assert [p.pattern for p in frequent] == ["low -> critical"]

    def test_concurrent_adds(self, store):
        """Test that concurrent appends are not lost."""
        def worker(offset):
            for i in range(50):
                store.add(make_case("low", "low", f"post_{offset}_{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store) == 200
