"""Data models for the moderation learning core."""

from .audit import AuditEntry
from .classification import (
    Classification,
    Outcome,
    Priority,
    RecommendedAction,
)
from .content import ContentItem, PendingPrediction
from .feedback import (
    DecisionAction,
    FeedbackSummary,
    MisclassificationPattern,
    ModeratorDecision,
    TrainingCase,
)

__all__ = [
    "AuditEntry",
    "Classification",
    "ContentItem",
    "DecisionAction",
    "FeedbackSummary",
    "MisclassificationPattern",
    "ModeratorDecision",
    "Outcome",
    "PendingPrediction",
    "Priority",
    "RecommendedAction",
    "TrainingCase",
]
