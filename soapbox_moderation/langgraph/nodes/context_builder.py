"""Builds the learning context fed back into the classification prompt."""

import logging
from typing import TYPE_CHECKING

from ...config import MAX_PATTERN_HINTS, SNIPPET_LENGTH, TRAINING_CONTEXT_WINDOW
from ...models.classification import Outcome
from ...models.feedback import MisclassificationPattern, TrainingCase
from ..state import ModerationState

if TYPE_CHECKING:
    from ...processing.training_store import TrainingCaseStore

logger = logging.getLogger(__name__)


def format_pattern_hint(pattern: MisclassificationPattern) -> str:
    """Describe a recurring correction in plain language."""
    if pattern.outcome == Outcome.OVER_CLASSIFIED:
        direction, advice = "over-classified", "Be less strict with similar content."
    else:
        direction, advice = "under-classified", "Be more strict with similar content."

    times = "time" if pattern.frequency == 1 else "times"
    return (
        f"Note: content has previously been {direction} as "
        f"{pattern.ai_predicted.value} when moderators rated it "
        f"{pattern.human_corrected.value} ({pattern.frequency} {times}). {advice}"
    )


def format_learning_case(case: TrainingCase) -> str:
    """Render one correction as a learning case for the prompt."""
    lesson = (
        "Be more strict with this type of content"
        if case.outcome == Outcome.UNDER_CLASSIFIED
        else "Be less strict with this type of content"
    )
    decision = case.human_decision
    return (
        "LEARNING CASE:\n"
        f"Content: \"{case.content[:SNIPPET_LENGTH]}\"\n"
        f"AI Classified: {case.ai_classification.priority.value} "
        f"({case.ai_classification.category})\n"
        f"Human Corrected: {decision.final_priority.value} ({decision.final_category})\n"
        f"Lesson: {lesson}\n"
        f"Notes: {decision.moderator_notes or 'None'}"
    )


def build_context_text(store: "TrainingCaseStore") -> tuple[str, list[str]]:
    """Summarize past corrections for the oracle.

    Args:
        store: The training case store to read from

    Returns:
        Tuple of (context text, pattern hints). Text is empty when nothing
        has been recorded.

    """
    if not store.has_cases():
        return "", []

    patterns = store.recent_misclassifications(MAX_PATTERN_HINTS)
    hints = [format_pattern_hint(p) for p in patterns]
    corrections = store.corrections(TRAINING_CONTEXT_WINDOW)

    if not hints and not corrections:
        return "Recent classifications have been accurate.", []

    sections = []
    if hints:
        sections.append("CORRECTION PATTERNS:\n" + "\n".join(f"- {h}" for h in hints))
    if corrections:
        cases = "\n---\n".join(format_learning_case(c) for c in corrections)
        sections.append(f"RECENT CORRECTIONS TO LEARN FROM:\n{cases}")

    return "\n\n".join(sections), hints


def build_training_context(state: ModerationState, store: "TrainingCaseStore") -> dict:
    """Workflow node: attach learning context to the state."""
    if state.get("error"):
        return {}

    context, hints = build_context_text(store)
    if hints:
        logger.info(f"Classifier using {len(hints)} correction patterns")

    return {"training_context": context or None, "pattern_hints": hints}
