import logging
from datetime import datetime
from functools import partial
from typing import TYPE_CHECKING, Protocol, cast

from langgraph.graph import StateGraph
from langgraph.graph.state import CompiledStateGraph

from ..exceptions import ValidationError, WorkflowError
from ..models.classification import Classification
from ..models.content import PendingPrediction
from .nodes.classifier import classify_content
from .nodes.context_builder import build_training_context
from .state import ModerationState

if TYPE_CHECKING:
    from ..processing.prediction_cache import PredictionCache
    from ..processing.training_store import TrainingCaseStore

logger = logging.getLogger(__name__)


class Oracle(Protocol):
    """Anything that can classify a piece of content."""

    def classify(
        self, content: str, content_type: str, context_hint: str | None = None
    ) -> Classification: ...


def store_prediction(state: ModerationState, predictions: "PredictionCache") -> dict:
    """Workflow node: keep the classification as a pending prediction."""
    classification = state.get("classification")
    content_id = state.get("content_id")
    if classification is None or not content_id:
        return {"prediction_stored": False}

    # No AI suggestion was available: nothing to learn from, and an older
    # prediction for this content is superseded
    if classification.is_fallback:
        predictions.discard(content_id)
        logger.info(f"Fallback classification for {content_id} not cached")
        return {"prediction_stored": False}

    try:
        predictions.put(
            PendingPrediction(
                content_id=content_id,
                content=state["content"],
                content_type=state["content_type"],
                classification=classification.copy(),
                timestamp=datetime.now(),
            )
        )
    except Exception as e:
        # Caching failures are logged, never raised
        logger.error(f"Failed to store pending prediction for {content_id}: {e!s}")
        return {"prediction_stored": False}

    return {"prediction_stored": True}


def build_moderation_workflow(
    oracle: Oracle,
    store: "TrainingCaseStore",
    predictions: "PredictionCache",
) -> CompiledStateGraph:
    """Create the compiled classification workflow.

    Args:
        oracle: Classification oracle used by the classify node
        store: Training case store read for learning context
        predictions: Cache that receives pending predictions

    Returns:
        Compiled LangGraph workflow

    """
    workflow = StateGraph(ModerationState)

    # Add nodes
    workflow.add_node("build_context", partial(build_training_context, store=store))
    workflow.add_node("classify", partial(classify_content, oracle=oracle))
    workflow.add_node("store_prediction", partial(store_prediction, predictions=predictions))

    workflow.add_edge("build_context", "classify")

    def route_after_classify(state: ModerationState) -> str:
        """Only predictions with a content id can be matched to a decision later."""
        if state.get("content_id"):
            return "store_prediction"
        logger.debug("No content id supplied, prediction not cached")
        return "end"

    workflow.add_conditional_edges(
        "classify",
        route_after_classify,
        {
            "store_prediction": "store_prediction",
            "end": "__end__",
        },
    )

    workflow.set_entry_point("build_context")
    workflow.set_finish_point("store_prediction")

    return workflow.compile()


def create_initial_state(
    content: str, content_type: str, content_id: str | None = None
) -> ModerationState:
    """Create initial state for classification.

    Args:
        content: Text to classify
        content_type: Kind of content (discussion, comment, ...)
        content_id: Optional id used to match a later moderator decision

    Returns:
        Initial moderation state

    """
    return {
        "content": content,
        "content_type": content_type,
        "content_id": content_id,
        "training_context": None,
        "pattern_hints": None,
        "classification": None,
        "prediction_stored": None,
        "error": None,
    }


def run_workflow(
    app: CompiledStateGraph, content: str, content_type: str, content_id: str | None = None
) -> ModerationState:
    """Run one piece of content through a compiled workflow.

    Raises:
        ValidationError: If a node rejects the input
        WorkflowError: If the graph itself fails

    """
    try:
        result = app.invoke(create_initial_state(content, content_type, content_id))
    except ValidationError:
        raise
    except Exception as e:
        raise WorkflowError(f"Moderation workflow failed: {e!s}") from e
    return cast(ModerationState, result)

