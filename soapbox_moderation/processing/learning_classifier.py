"""Classifier that feeds moderator corrections back into the oracle prompt."""

import logging
from typing import TYPE_CHECKING

from ..exceptions import ValidationError, WorkflowError
from ..langgraph.workflow import Oracle, build_moderation_workflow, run_workflow
from ..models.classification import Classification
from ..utils.error_handling import check_state_for_errors, create_fallback_classification
from .prediction_cache import PredictionCache
from .training_store import TrainingCaseStore

if TYPE_CHECKING:
    from .audit_manager import AuditManager

logger = logging.getLogger(__name__)


class LearningClassifier:
    """Composes the oracle with the training case store.

    Each call builds learning context from recorded cases, asks the oracle for
    a classification and, when a content id is given, keeps the result as the
    pending prediction for that content.
    """

    def __init__(
        self,
        oracle: Oracle,
        store: TrainingCaseStore,
        predictions: PredictionCache,
        audit_manager: "AuditManager | None" = None,
    ) -> None:
        self.oracle = oracle
        self.store = store
        self.predictions = predictions
        self.audit_manager = audit_manager
        self.workflow = build_moderation_workflow(oracle, store, predictions)

    def analyze_with_learning(
        self,
        content: str,
        content_type: str,
        content_id: str | None = None,
    ) -> Classification:
        """Classify content using the latest correction patterns.

        Args:
            content: The text to classify
            content_type: Kind of content (discussion, comment, soap_entry, prayer_request)
            content_id: Optional id; the result replaces any pending prediction for it

        Returns:
            The classification. Never raises for oracle failures.

        Raises:
            ValidationError: If content is empty

        """
        if not content or not content.strip():
            raise ValidationError("Cannot classify empty content")

        try:
            result = run_workflow(self.workflow, content, content_type, content_id)
        except WorkflowError as e:
            logger.error(f"Classification workflow failed for {content_id or 'content'}: {e!s}")
            if self.audit_manager:
                self.audit_manager.log_error(content_id, str(e))
            return create_fallback_classification(e)

        if check_state_for_errors(result) and self.audit_manager:
            self.audit_manager.log_error(content_id, result["error"])

        classification = result.get("classification") or create_fallback_classification(
            result.get("error")
        )

        if self.audit_manager:
            self.audit_manager.log_classification(content_id, content_type, classification)

        if result.get("pattern_hints"):
            logger.debug(
                f"Classified {content_id or 'content'} with "
                f"{len(result['pattern_hints'])} pattern hints"
            )

        return classification
