from typing import TypedDict

from ..models.classification import Classification


class ModerationState(TypedDict):
    """State that flows through the LangGraph workflow."""

    # Input fields
    content: str
    content_type: str
    content_id: str | None

    # Learning context built from recorded training cases
    training_context: str | None
    pattern_hints: list[str] | None

    # Classification result
    classification: Classification | None
    prediction_stored: bool | None

    # Workflow control
    error: str | None
