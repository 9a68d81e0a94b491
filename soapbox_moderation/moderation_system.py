"""Entry point the moderation dashboard talks to."""

import logging
from typing import Any

from .langgraph.nodes.classifier import ClassificationOracle
from .langgraph.workflow import Oracle
from .models.classification import Classification
from .models.content import ContentItem
from .models.feedback import FeedbackSummary, ModeratorDecision, TrainingCase
from .processing.audit_manager import AuditManager
from .processing.decision_recorder import DecisionRecorder
from .processing.feedback_reporter import FeedbackReporter
from .processing.learning_classifier import LearningClassifier
from .processing.prediction_cache import PredictionCache
from .processing.training_store import TrainingCaseStore

logger = logging.getLogger(__name__)


class ModerationLearningSystem:
    """AI moderation classifier with a moderator feedback loop.

    Create one instance at process start and pass it to request handlers.
    All collaborators can be injected for testing.
    """

    def __init__(
        self,
        oracle: Oracle | None = None,
        store: TrainingCaseStore | None = None,
        predictions: PredictionCache | None = None,
        audit_manager: AuditManager | None = None,
    ) -> None:
        self.oracle = oracle if oracle is not None else ClassificationOracle()
        self.store = store if store is not None else TrainingCaseStore()
        self.predictions = predictions if predictions is not None else PredictionCache()
        self.audit_manager = audit_manager if audit_manager is not None else AuditManager()

        self.classifier = LearningClassifier(
            self.oracle, self.store, self.predictions, self.audit_manager
        )
        self.recorder = DecisionRecorder(self.store, self.predictions, self.audit_manager)
        self.reporter = FeedbackReporter(self.store)

    def classify(
        self, content: str, content_type: str, content_id: str | None = None
    ) -> Classification:
        """Classify content when it is created or resubmitted for review."""
        return self.classifier.analyze_with_learning(content, content_type, content_id)

    def classify_item(self, item: ContentItem) -> Classification:
        return self.classify(item.text, item.content_type, item.content_id)

    def record_decision(
        self, content_id: str, decision: ModeratorDecision | dict[str, Any]
    ) -> TrainingCase | None:
        """Record a moderator's decision after the app has persisted it.

        Raises:
            ValidationError: If a dict payload carries an invalid priority or action

        """
        if not isinstance(decision, ModeratorDecision):
            decision = ModeratorDecision.from_dict(decision)
        return self.recorder.record_decision(content_id, decision)

    def get_feedback(self) -> FeedbackSummary:
        """Summarize classifier performance for the moderation statistics view."""
        return self.reporter.summarize()

    def get_statistics(self) -> dict[str, Any]:
        """Get sizes of the in-memory state for monitoring."""
        return {
            "pending_predictions": len(self.predictions),
            "prediction_cache": self.predictions.get_statistics(),
            "training_cases": len(self.store),
            "audit_entries": self.audit_manager.get_entry_count(),
        }
