"""Summarizes how the classifier is performing against moderator decisions."""

import logging

from ..config import MAX_COMMON_MISCLASSIFICATIONS, MIN_PATTERN_FREQUENCY
from ..models.feedback import FeedbackSummary
from ..utils.statistics import (
    calculate_outcome_statistics,
    generate_improvement_suggestions,
    group_misclassifications,
)
from .training_store import TrainingCaseStore

logger = logging.getLogger(__name__)


class FeedbackReporter:
    """Builds a FeedbackSummary from the training case store on demand."""

    def __init__(self, store: TrainingCaseStore) -> None:
        self.store = store

    def summarize(self) -> FeedbackSummary:
        """Summarize every recorded training case.

        Recomputed on each call from a single snapshot of the store, so the
        result always reflects the latest decisions.

        Returns:
            Accuracy, common misclassifications and improvement suggestions

        """
        cases = self.store.all()
        stats = calculate_outcome_statistics(cases)
        common = group_misclassifications(cases, MIN_PATTERN_FREQUENCY)
        suggestions = generate_improvement_suggestions(cases, stats, common)
        common = common[:MAX_COMMON_MISCLASSIFICATIONS]

        logger.debug(f"Feedback summary: {stats.to_display_string()}")

        return FeedbackSummary(
            total_cases=stats.total,
            accuracy_rate=stats.accuracy_rate,
            common_misclassifications=common,
            improvement_suggestions=suggestions,
            under_classified=stats.under_classified,
            over_classified=stats.over_classified,
            category_corrections=stats.category_corrections,
        )
