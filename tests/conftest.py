"""Shared fixtures for moderation learning tests."""

import pytest

from soapbox_moderation.models.classification import (
    Classification,
    Priority,
    RecommendedAction,
)
from soapbox_moderation.models.feedback import DecisionAction, ModeratorDecision


def make_classification(priority: str = "medium", category: str = "other",
                        confidence: float = 0.8) -> Classification:
    """Build a classification with sensible defaults."""
    return Classification(
        priority=Priority(priority),
        category=category,
        confidence=confidence,
        action_required=RecommendedAction.REVIEW,
        reason="Test classification",
    )


def make_decision(priority: str = "medium", category: str = "other",
                  action: str = "approved", notes: str | None = None) -> ModeratorDecision:
    """Build a moderator decision with sensible defaults."""
    return ModeratorDecision(
        final_priority=Priority(priority),
        final_category=category,
        action=DecisionAction(action),
        moderator_id="moderator_1",
        moderator_notes=notes,
    )


class StubOracle:
    """Oracle that returns scripted classifications and records its calls."""

    def __init__(self, default: Classification | None = None) -> None:
        self.default = default or make_classification()
        self.responses: dict[str, Classification] = {}
        self.queue: list[Classification] = []
        self.calls: list[dict] = []

    def respond(self, content: str, priority: str, category: str = "other") -> None:
        """Script the classification for a specific text."""
        self.responses[content] = make_classification(priority, category)

    def classify(self, content, content_type, context_hint=None):
        self.calls.append({
            "content": content,
            "content_type": content_type,
            "context_hint": context_hint,
        })
        if self.queue:
            return self.queue.pop(0)
        return self.responses.get(content, self.default)


class FailingOracle:
    """Oracle whose backing service is down."""

    def classify(self, content, content_type, context_hint=None):
        raise RuntimeError("oracle unavailable")


@pytest.fixture
def stub_oracle():
    """Create a scripted oracle."""
    return StubOracle()
