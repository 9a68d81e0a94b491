"""Soapbox Moderation - AI content moderation that learns from moderator decisions."""

from .config import MODEL_CONFIG, PRIORITY_ORDER
from .exceptions import (
    ClassificationError,
    ModerationError,
    TrainingStoreError,
    ValidationError,
    WorkflowError,
)
from .moderation_system import ModerationLearningSystem

__version__ = "0.1.0"
__all__ = [
    "MODEL_CONFIG",
    "PRIORITY_ORDER",
    "ClassificationError",
    "ModerationError",
    "ModerationLearningSystem",
    "TrainingStoreError",
    "ValidationError",
    "WorkflowError",
]
