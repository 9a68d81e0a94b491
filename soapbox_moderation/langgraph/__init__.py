"""LangGraph workflow components for content classification."""

from .state import ModerationState
from .workflow import build_moderation_workflow, run_workflow

__all__ = ["ModerationState", "build_moderation_workflow", "run_workflow"]
