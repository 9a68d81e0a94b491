"""Standardized error handling utilities for the moderation learning core."""

from typing import Any

from ..models.classification import Classification, Priority, RecommendedAction

FALLBACK_REASON = "classification unavailable"


def create_fallback_classification(
    error: Exception | str | None = None,
) -> Classification:
    """Create the conservative classification used when the oracle fails.

    Args:
        error: The error that occurred, kept in the learning note

    Returns:
        Medium-priority classification with zero confidence

    """
    note = ""
    if error is not None:
        note = str(error) if isinstance(error, Exception) else error

    return Classification(
        priority=Priority.MEDIUM,
        category="other",
        confidence=0.0,
        action_required=RecommendedAction.REVIEW,
        reason=FALLBACK_REASON,
        learning_note=note,
        is_fallback=True,
    )


def create_error_response(error: Exception | str) -> dict[str, Any]:
    """Create a standardized error response for LangGraph nodes.

    Args:
        error: The error that occurred

    Returns:
        Dictionary with error information and a safe fallback classification

    """
    error_message = str(error) if isinstance(error, Exception) else error

    return {
        "error": error_message,
        "classification": create_fallback_classification(error_message),
    }


def check_state_for_errors(state: dict[str, Any]) -> bool:
    """Check if a state contains errors.

    Args:
        state: The moderation state to check

    Returns:
        True if state contains errors, False otherwise

    """
    return bool(state.get("error"))
