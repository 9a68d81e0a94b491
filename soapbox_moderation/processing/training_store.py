"""Stores training cases recorded from moderator decisions."""

import logging
import threading

from ..config import SNIPPET_LENGTH
from ..exceptions import TrainingStoreError
from ..models.classification import Outcome
from ..models.feedback import MisclassificationPattern, TrainingCase
from ..utils.statistics import group_misclassifications

logger = logging.getLogger(__name__)


class TrainingCaseStore:
    """Append-only collection of prediction/decision pairs.

    Safe to share between request handlers: every read and append holds the
    store lock.
    """

    def __init__(self, max_cases: int | None = None) -> None:
        """Initialize the store.

        Args:
            max_cases: Optional bound; the oldest cases are dropped beyond it

        """
        if max_cases is not None and max_cases < 1:
            raise ValueError("max_cases must be positive")

        self._cases: list[TrainingCase] = []
        self._max_cases = max_cases
        self._lock = threading.RLock()

    def add(self, case: TrainingCase) -> None:
        """Append a training case.

        Args:
            case: The case to record

        Raises:
            TrainingStoreError: If case is not a TrainingCase

        """
        if not isinstance(case, TrainingCase):
            raise TrainingStoreError(f"Expected TrainingCase, got {type(case).__name__}")

        with self._lock:
            self._cases.append(case)
            if self._max_cases is not None and len(self._cases) > self._max_cases:
                dropped = len(self._cases) - self._max_cases
                del self._cases[:dropped]

        snippet = case.content[:SNIPPET_LENGTH // 2]
        logger.info(
            f"Training case recorded for {case.content_id}: "
            f"{case.ai_classification.priority.value} -> "
            f"{case.human_decision.final_priority.value} ({case.outcome.value}) "
            f"'{snippet}'"
        )

    def all(self) -> list[TrainingCase]:
        """Get a snapshot of every recorded case, oldest first."""
        with self._lock:
            return list(self._cases)

    def recent(self, n: int) -> list[TrainingCase]:
        """Get the n most recent cases, oldest first."""
        if n <= 0:
            return []
        with self._lock:
            return list(self._cases[-n:])

    def corrections(self, n: int) -> list[TrainingCase]:
        """Get the cases among the n most recent where the moderator changed the priority."""
        return [case for case in self.recent(n) if case.outcome != Outcome.CORRECT]

    def recent_misclassifications(
        self,
        n: int | None = None,
        min_frequency: int = 1,
    ) -> list[MisclassificationPattern]:
        """Group priority mismatches by (predicted, corrected) pair.

        Args:
            n: Maximum number of patterns to return (all when None)
            min_frequency: Drop pairs seen fewer times than this

        Returns:
            Patterns sorted by frequency, most frequent first

        """
        patterns = group_misclassifications(self.all(), min_frequency)

        if n is not None:
            patterns = patterns[:n]
        return patterns

    def __len__(self) -> int:
        with self._lock:
            return len(self._cases)

    def has_cases(self) -> bool:
        """Check if any cases have been recorded."""
        return len(self) > 0
