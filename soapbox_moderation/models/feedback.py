"""Feedback data models for learning from moderator decisions."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any

from ..exceptions import ValidationError
from .classification import Classification, Outcome, Priority


class DecisionAction(str, Enum):
    """Action a moderator actually took on the content."""

    APPROVED = "approved"
    HIDDEN = "hidden"
    REMOVED = "removed"
    EDIT_REQUESTED = "edit_requested"


@dataclass
class ModeratorDecision:
    """A moderator's final decision on a previously classified item."""

    final_priority: Priority
    final_category: str
    action: DecisionAction
    moderator_id: str = ""
    moderator_notes: str | None = None

    def __post_init__(self) -> None:
        """Validate enum fields so bad values never reach a training case"""
        priority = (
            self.final_priority
            if isinstance(self.final_priority, Priority)
            else Priority.from_string(self.final_priority)
        )
        if priority is None:
            raise ValidationError(f"Invalid final priority: {self.final_priority!r}")
        self.final_priority = priority

        try:
            self.action = DecisionAction(self.action)
        except ValueError as e:
            raise ValidationError(f"Invalid moderator action: {self.action!r}") from e

        if not isinstance(self.final_category, str):
            raise ValidationError("final_category must be a string")

    def copy(self) -> "ModeratorDecision":
        return replace(self)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ModeratorDecision":
        """Build a decision from a request payload (camelCase or snake_case keys)."""
        if not isinstance(payload, dict):
            raise ValidationError("Moderator decision payload must be an object")

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if key in payload:
                    return payload[key]
            return default

        return cls(
            final_priority=pick("final_priority", "finalPriority"),
            final_category=pick("final_category", "finalCategory", default=""),
            action=pick("action"),
            moderator_id=pick("moderator_id", "moderatorId", default=""),
            moderator_notes=pick("moderator_notes", "moderatorNotes"),
        )


@dataclass(frozen=True)
class TrainingCase:
    """A prediction paired with the human decision that followed it."""

    content_id: str
    content: str
    content_type: str
    ai_classification: Classification
    human_decision: ModeratorDecision
    outcome: Outcome
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_category_correction(self) -> bool:
        """Moderator kept the priority but relabelled the category."""
        return (
            self.outcome == Outcome.CORRECT
            and self.ai_classification.category.lower()
            != self.human_decision.final_category.lower()
            and bool(self.human_decision.final_category)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for export."""
        return {
            "contentId": self.content_id,
            "content": self.content,
            "contentType": self.content_type,
            "aiClassification": self.ai_classification.to_dict(),
            "humanDecision": {
                "finalPriority": self.human_decision.final_priority.value,
                "finalCategory": self.human_decision.final_category,
                "action": self.human_decision.action.value,
                "moderatorNotes": self.human_decision.moderator_notes,
                "moderatorId": self.human_decision.moderator_id,
            },
            "outcome": self.outcome.value,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class MisclassificationPattern:
    """A recurring (predicted, corrected) priority pair."""

    ai_predicted: Priority
    human_corrected: Priority
    frequency: int

    @property
    def pattern(self) -> str:
        return f"{self.ai_predicted.value} -> {self.human_corrected.value}"

    @property
    def outcome(self) -> Outcome:
        return Outcome.compare(self.ai_predicted, self.human_corrected)


@dataclass
class FeedbackSummary:
    """Aggregate view of how the classifier is performing."""

    total_cases: int
    accuracy_rate: float
    common_misclassifications: list[MisclassificationPattern] = field(
        default_factory=list
    )
    improvement_suggestions: list[str] = field(default_factory=list)

    # Breakdown counts
    under_classified: int = 0
    over_classified: int = 0
    category_corrections: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert summary to dictionary for the statistics view."""
        return {
            "totalCases": self.total_cases,
            "accuracyRate": self.accuracy_rate,
            "commonMisclassifications": [
                {
                    "pattern": m.pattern,
                    "aiPredicted": m.ai_predicted.value,
                    "humanCorrected": m.human_corrected.value,
                    "frequency": m.frequency,
                }
                for m in self.common_misclassifications
            ],
            "improvementSuggestions": list(self.improvement_suggestions),
            "underClassified": self.under_classified,
            "overClassified": self.over_classified,
            "categoryCorrections": self.category_corrections,
        }
