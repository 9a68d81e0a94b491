"""Mock classification oracle for running without an OpenAI API key.

This simulates the oracle with keyword rules drawn from the moderation guidelines.
"""

from ...exceptions import ValidationError
from ...models.classification import Classification, Priority, RecommendedAction

# (priority, category, action, keywords), checked most severe first
KEYWORD_RULES: list[tuple[Priority, str, RecommendedAction, tuple[str, ...]]] = [
    (
        Priority.CRITICAL,
        "sexual_content",
        RecommendedAction.REMOVE,
        ("hookup", "nudes", "young ones"),
    ),
    (
        Priority.CRITICAL,
        "privacy_violation",
        RecommendedAction.REMOVE,
        ("ssn", "social security", "bank account", "personal info for sale", "home address"),
    ),
    (
        Priority.CRITICAL,
        "spam",
        RecommendedAction.REMOVE,
        ("buy bitcoin", "invest with me", "click here"),
    ),
    (
        Priority.CRITICAL,
        "inappropriate_content",
        RecommendedAction.REMOVE,
        ("fraud", "sheep", "satan worship", "devil worship"),
    ),
    (
        Priority.HIGH,
        "false_information",
        RecommendedAction.HIDE,
        ("don't take pills", "instead of medicine", "more powerful than medicine"),
    ),
    (
        Priority.HIGH,
        "sexual_content",
        RecommendedAction.HIDE,
        ("thirst trap",),
    ),
    (
        Priority.HIGH,
        "harassment_bullying",
        RecommendedAction.HIDE,
        ("losers", "pervert"),
    ),
    (
        Priority.MEDIUM,
        "inappropriate_content",
        RecommendedAction.REVIEW,
        ("aren't real christians", "not a real believer", "going to hell"),
    ),
    (
        Priority.MEDIUM,
        "sexual_content",
        RecommendedAction.REVIEW,
        ("sex", "babe", "looking fine", "mighty fine"),
    ),
    (
        Priority.MEDIUM,
        "false_information",
        RecommendedAction.REVIEW,
        ("rapture is happening",),
    ),
]


class MockClassificationOracle:
    """Keyword-based stand-in for the LLM oracle."""

    def classify(
        self,
        content: str,
        content_type: str,
        context_hint: str | None = None,
    ) -> Classification:
        """Mock classify content for testing."""
        if not content or not content.strip():
            raise ValidationError("Cannot classify empty content")

        text = content.lower()
        for priority, category, action, keywords in KEYWORD_RULES:
            matched = [k for k in keywords if k in text]
            if matched:
                return Classification(
                    priority=priority,
                    category=category,
                    confidence=0.85 if priority == Priority.CRITICAL else 0.7,
                    action_required=action,
                    reason=f"Matched guideline keywords: {', '.join(matched)}",
                    flagged=True,
                    violations=[category],
                )

        return Classification(
            priority=Priority.LOW,
            category="community_interaction",
            confidence=0.6,
            action_required=RecommendedAction.APPROVE,
            reason=f"No guideline keywords found in this {content_type}",
        )
