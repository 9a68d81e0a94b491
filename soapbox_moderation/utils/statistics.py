"""Utility functions for calculating moderation learning statistics."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from ..config import ACCURACY_TARGET, MIN_PATTERN_FREQUENCY, SOCIAL_CATEGORIES
from ..models.classification import Outcome
from ..models.feedback import MisclassificationPattern, TrainingCase


@dataclass
class OutcomeStatistics:
    """Container for training case outcome counts."""

    total: int
    correct: int
    under_classified: int
    over_classified: int
    category_corrections: int
    accuracy_rate: float

    def to_display_string(self) -> str:
        """Format statistics for display in a report."""
        return (
            f"Total: {self.total} | Correct: {self.correct} | "
            f"Under: {self.under_classified} | Over: {self.over_classified} | "
            f"Accuracy: {self.accuracy_rate:.0%}"
        )


def calculate_outcome_statistics(cases: list[TrainingCase]) -> OutcomeStatistics:
    """Calculate outcome statistics for a list of training cases.

    Args:
        cases: Training cases to analyze

    Returns:
        OutcomeStatistics; accuracy is 0.0 when there are no cases

    """
    total = len(cases)

    if total == 0:
        return OutcomeStatistics(
            total=0,
            correct=0,
            under_classified=0,
            over_classified=0,
            category_corrections=0,
            accuracy_rate=0.0,
        )

    outcomes = Counter(case.outcome for case in cases)
    correct = outcomes[Outcome.CORRECT]

    return OutcomeStatistics(
        total=total,
        correct=correct,
        under_classified=outcomes[Outcome.UNDER_CLASSIFIED],
        over_classified=outcomes[Outcome.OVER_CLASSIFIED],
        category_corrections=sum(1 for case in cases if case.is_category_correction),
        accuracy_rate=correct / total,
    )


def group_misclassifications(
    cases: Iterable[TrainingCase], min_frequency: int = 1
) -> list[MisclassificationPattern]:
    """Group priority mismatches by (predicted, corrected) pair.

    Args:
        cases: Training cases to scan
        min_frequency: Drop pairs seen fewer times than this

    Returns:
        Patterns sorted by frequency, most frequent first; ties keep first-seen order

    """
    counts: Counter = Counter()
    for case in cases:
        predicted = case.ai_classification.priority
        corrected = case.human_decision.final_priority
        if predicted != corrected:
            counts[(predicted, corrected)] += 1

    patterns = [
        MisclassificationPattern(ai_predicted=predicted, human_corrected=corrected, frequency=count)
        for (predicted, corrected), count in counts.items()
        if count >= min_frequency
    ]
    patterns.sort(key=lambda p: p.frequency, reverse=True)
    return patterns


def _case_category(case: TrainingCase) -> str:
    # Moderator's label wins; it is the corrected one
    return (case.human_decision.final_category or case.ai_classification.category).lower()


def generate_improvement_suggestions(
    cases: list[TrainingCase],
    stats: OutcomeStatistics,
    common: list[MisclassificationPattern],
) -> list[str]:
    """Derive advisory suggestions from the misclassification distribution.

    Args:
        cases: All training cases
        stats: Outcome statistics for the same cases
        common: Common misclassification patterns for the same cases

    Returns:
        Suggestion strings in a stable order

    """
    if stats.total == 0:
        return ["Collect more training data"]

    suggestions = []
    if stats.accuracy_rate < ACCURACY_TARGET:
        suggestions.append(
            f"Accuracy below {ACCURACY_TARGET:.0%} - increase training data"
        )
    if common:
        suggestions.append(f"Most common error: {common[0].pattern}")

    under: Counter = Counter()
    over: Counter = Counter()
    relabelled: Counter = Counter()
    for case in cases:
        if case.outcome == Outcome.UNDER_CLASSIFIED:
            under[_case_category(case)] += 1
        elif case.outcome == Outcome.OVER_CLASSIFIED:
            over[_case_category(case)] += 1
        elif case.is_category_correction:
            relabelled[case.ai_classification.category.lower()] += 1

    casual_flagged = False
    for category in sorted(set(under) | set(over)):
        if under[category] >= MIN_PATTERN_FREQUENCY and under[category] > over[category]:
            suggestions.append(f"Increase sensitivity to {category} content")
        elif over[category] >= MIN_PATTERN_FREQUENCY and over[category] > under[category]:
            if category in SOCIAL_CATEGORIES:
                if not casual_flagged:
                    suggestions.append("Reduce false positives on casual language")
                    casual_flagged = True
            else:
                suggestions.append(f"Reduce strictness for {category} content")

    for category in sorted(relabelled):
        count = relabelled[category]
        if count >= MIN_PATTERN_FREQUENCY:
            suggestions.append(
                f"Review category labelling for {category} "
                f"(moderators relabelled it {count} times)"
            )

    return suggestions
