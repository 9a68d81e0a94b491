"""Turns moderator decisions into training cases."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from ..models.classification import Outcome
from ..models.feedback import ModeratorDecision, TrainingCase
from .prediction_cache import PredictionCache
from .training_store import TrainingCaseStore

if TYPE_CHECKING:
    from .audit_manager import AuditManager

logger = logging.getLogger(__name__)


class DecisionRecorder:
    """Pairs moderator decisions with pending AI predictions."""

    def __init__(
        self,
        store: TrainingCaseStore,
        predictions: PredictionCache,
        audit_manager: "AuditManager | None" = None,
    ) -> None:
        self.store = store
        self.predictions = predictions
        self.audit_manager = audit_manager

    def record_decision(
        self, content_id: str, decision: ModeratorDecision
    ) -> TrainingCase | None:
        """Record a moderator's final decision for classified content.

        A decision with no pending prediction is not an error: the content may
        predate the classifier or its prediction may have expired.

        Args:
            content_id: The content the decision applies to
            decision: The validated moderator decision

        Returns:
            The new training case, or None if nothing was recorded

        """
        prediction = self.predictions.pop(content_id)
        if prediction is None:
            logger.info(f"No pending prediction for {content_id}, decision not used for learning")
            if self.audit_manager:
                self.audit_manager.log_orphan_decision(
                    content_id, decision.final_priority.value
                )
            return None

        outcome = Outcome.compare(
            prediction.classification.priority, decision.final_priority
        )

        case = TrainingCase(
            content_id=content_id,
            content=prediction.content,
            content_type=prediction.content_type,
            ai_classification=prediction.classification.copy(),
            human_decision=decision.copy(),
            outcome=outcome,
            timestamp=datetime.now(),
        )

        try:
            self.store.add(case)
        except Exception as e:
            # Store failures are logged, never raised to the caller
            logger.error(f"Failed to record training case for {content_id}: {e!s}")
            if self.audit_manager:
                self.audit_manager.log_error(content_id, f"Training case not stored: {e!s}")
            return None

        if self.audit_manager:
            self.audit_manager.log_decision(case)

        return case
