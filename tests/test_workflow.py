"""Tests for the LangGraph moderation workflow."""

import pytest

from conftest import FailingOracle, StubOracle, make_classification
from soapbox_moderation.exceptions import WorkflowError
from soapbox_moderation.langgraph.workflow import (
    build_moderation_workflow,
    create_initial_state,
    run_workflow,
    store_prediction,
)
from soapbox_moderation.processing.prediction_cache import PredictionCache
from soapbox_moderation.processing.training_store import TrainingCaseStore
from soapbox_moderation.utils.error_handling import create_fallback_classification


@pytest.fixture
def predictions():
    return PredictionCache()


class TestStorePrediction:
    """Test the store_prediction node on its own."""

    def test_stores_classification(self, predictions):
        state = create_initial_state("Hello", "comment", "post_1")
        state["classification"] = make_classification("high")

        result = store_prediction(state, predictions)

        assert result == {"prediction_stored": True}
        assert predictions.get("post_1").classification.priority.value == "high"

    def test_skips_without_content_id(self, predictions):
        state = create_initial_state("Hello", "comment")
        state["classification"] = make_classification()

        assert store_prediction(state, predictions) == {"prediction_stored": False}
        assert len(predictions) == 0

    def test_fallback_drops_older_prediction(self, predictions):
        state = create_initial_state("Hello", "comment", "post_1")
        state["classification"] = make_classification()
        store_prediction(state, predictions)

        state["classification"] = create_fallback_classification()
        result = store_prediction(state, predictions)

        assert result == {"prediction_stored": False}
        assert "post_1" not in predictions


class TestModerationWorkflow:
    """Test the compiled graph end to end."""

    def test_full_run(self, stub_oracle, predictions):
        app = build_moderation_workflow(stub_oracle, TrainingCaseStore(), predictions)

        result = run_workflow(app, "Hello", "discussion", "post_1")

        assert result["classification"].priority.value == "medium"
        assert result["prediction_stored"] is True
        assert result["training_context"] is None
        assert result["pattern_hints"] == []

    def test_run_without_content_id_ends_after_classify(self, stub_oracle, predictions):
        app = build_moderation_workflow(stub_oracle, TrainingCaseStore(), predictions)

        result = run_workflow(app, "Hello", "discussion")

        assert result["classification"] is not None
        assert result["prediction_stored"] is None

    def test_oracle_error_is_captured_in_state(self, predictions):
        app = build_moderation_workflow(FailingOracle(), TrainingCaseStore(), predictions)

        result = run_workflow(app, "Hello", "discussion", "post_1")

        assert "oracle unavailable" in result["error"]
        assert result["classification"].is_fallback is True
        assert result["prediction_stored"] is False

    def test_graph_failure_raises_workflow_error(self, predictions):
        class BrokenStore(TrainingCaseStore):
            def has_cases(self):
                raise RuntimeError("store offline")

        app = build_moderation_workflow(StubOracle(), BrokenStore(), predictions)

        with pytest.raises(WorkflowError):
            run_workflow(app, "Hello", "discussion", "post_1")
