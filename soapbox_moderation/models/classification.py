"""Classification types and enums for content moderation."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from ..config import PRIORITY_ORDER


class Priority(str, Enum):
    """Ordered severity tiers shared by the AI oracle and human moderators."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def ordinal(self) -> int:
        """Get the ordinal severity (low=1 ... critical=4)."""
        return PRIORITY_ORDER[self.value]

    @property
    def display_name(self) -> str:
        """Get human-readable display name."""
        return self.value.title()

    @classmethod
    def from_string(cls, value: str | None) -> "Priority | None":
        """Create Priority from string value."""
        if not value or not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class RecommendedAction(str, Enum):
    """Advisory action suggested by the oracle. Not enforced here."""

    APPROVE = "approve"
    HIDE = "hide"
    REMOVE = "remove"
    EDIT_REQUESTED = "edit_requested"
    REVIEW = "review"

    @classmethod
    def from_string(cls, value: str | None) -> "RecommendedAction":
        """Map an oracle action string onto the closed set, defaulting to review."""
        if not value or not isinstance(value, str):
            return cls.REVIEW
        normalized = value.strip().lower()
        aliases = {"none": cls.APPROVE, "coach": cls.REVIEW}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            return cls.REVIEW


class Outcome(str, Enum):
    """How an AI priority compared to the human-corrected priority."""

    CORRECT = "correct"
    UNDER_CLASSIFIED = "under_classified"
    OVER_CLASSIFIED = "over_classified"

    @classmethod
    def compare(cls, predicted: Priority, corrected: Priority) -> "Outcome":
        """Determine the outcome by ordinal severity."""
        if predicted.ordinal == corrected.ordinal:
            return cls.CORRECT
        if predicted.ordinal < corrected.ordinal:
            return cls.UNDER_CLASSIFIED
        return cls.OVER_CLASSIFIED


@dataclass
class Classification:
    """The oracle's verdict on a piece of content."""

    priority: Priority
    category: str
    confidence: float
    action_required: RecommendedAction = RecommendedAction.REVIEW
    reason: str = ""

    # Extra detail the oracle returns alongside the verdict
    flagged: bool = False
    violations: list[str] = field(default_factory=list)
    learning_note: str = ""

    # True when the oracle was unavailable and this is the safe default
    is_fallback: bool = False

    def __post_init__(self) -> None:
        self.confidence = max(0.0, min(1.0, float(self.confidence)))

    def copy(self) -> "Classification":
        """Return an independent copy; edits to it never reach stored predictions."""
        return replace(self, violations=list(self.violations))

    def to_dict(self) -> dict[str, Any]:
        """Convert classification to dictionary for serialization."""
        return {
            "priority": self.priority.value,
            "category": self.category,
            "confidence": self.confidence,
            "actionRequired": self.action_required.value,
            "reason": self.reason,
            "flagged": self.flagged,
            "violations": list(self.violations),
            "learningNote": self.learning_note,
            "isFallback": self.is_fallback,
        }
