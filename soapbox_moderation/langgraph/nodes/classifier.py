import logging
import math
import os
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import JsonOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, Field

from ...config import MODEL_CONFIG
from ...exceptions import ClassificationError, ValidationError
from ...models.classification import Classification, Priority, RecommendedAction
from ...utils.error_handling import create_error_response, create_fallback_classification
from ..state import ModerationState

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("priority", "category", "confidence", "reason")


class OracleResponse(BaseModel):
    """Schema for the oracle's moderation verdict."""

    flagged: bool = Field(description="Whether the content violates guidelines")
    priority: str = Field(description="One of: critical, high, medium, low")
    category: str = Field(
        description="Short label such as sexual_content, privacy_violation, community_interaction"
    )
    violations: list[str] = Field(description="Specific violation types found")
    reason: str = Field(description="Brief explanation of the classification")
    confidence: float = Field(description="Confidence score between 0 and 1")
    actionRequired: str = Field(
        description="One of: approve, hide, remove, edit_requested, review"
    )
    learningNote: str = Field(description="What this case teaches about classification")


SYSTEM_PROMPT = """You are a content-safety classifier for a faith-based community platform.
Classify every piece of content into EXACTLY one of these four priority tiers:

CRITICAL (immediate removal and review):
- Explicit sexual requests or solicitation ("Looking for a hookup after church")
- Blasphemous attacks on the faith ("Jesus was a fraud. Christians are sheep")
- Personal attacks naming people ("Everyone should avoid John. He's a pervert")
- Sharing or selling OTHER people's sensitive data (SSN, bank info, addresses)
- Investment or crypto spam ("Buy Bitcoin now! Click here to invest with me")
- Threats of violence, predatory language toward minors, solicitation of devil worship

HIGH (likely harmful or spiritually disruptive):
- Sexualised content dressed up as faith ("thirst traps as long as I quote scripture")
- Dangerous misinformation ("Don't take pills, just pray")
- Group-directed insults ("The youth group is full of losers and sinners")
- Sharing other people's personal details without consent

MEDIUM (unhelpful or distracting):
- Edgy questions about sexuality, denominational put-downs ("Catholics aren't real Christians")
- Invalidating others' struggles, date-setting prophecy, anonymous gossip
- Self-promotion that attacks church leaders

LOW (minor issues or off-topic):
- Sincere faith questions ("Is attraction a sin?"), mild complaints, harmless event promotion

Sharing your OWN contact details is generally fine. Multiple minor violations can raise the tier.

LEARNING FROM PAST DECISIONS:
{training_context}

Respond with ONLY valid JSON containing these exact fields:
{{
    "flagged": true or false,
    "priority": "critical" or "high" or "medium" or "low",
    "category": "short_snake_case_label",
    "violations": ["specific violation types"],
    "reason": "your explanation here",
    "confidence": 0.0 to 1.0,
    "actionRequired": "approve" or "hide" or "remove" or "edit_requested" or "review",
    "learningNote": "what this case teaches about classification"
}}"""

USER_PROMPT = """Analyze this {content_type}:

{content}"""

NO_CONTEXT = "No moderator corrections recorded yet."


def parse_oracle_response(result: Any) -> Classification:
    """Turn a parsed oracle response into a Classification.

    Unknown priorities are clamped to medium; missing required fields are an error.

    Args:
        result: The JSON object returned by the oracle

    Returns:
        Sanitized classification

    Raises:
        ClassificationError: If the response is not an object or lacks required fields

    """
    if not isinstance(result, dict):
        raise ClassificationError(f"Oracle returned {type(result).__name__}, expected object")

    missing = [name for name in REQUIRED_FIELDS if result.get(name) in (None, "")]
    if missing:
        raise ClassificationError(f"Oracle response missing fields: {', '.join(missing)}")

    priority = Priority.from_string(result["priority"])
    if priority is None:
        logger.warning(f"Oracle returned unknown priority {result['priority']!r}, using medium")
        priority = Priority.MEDIUM

    try:
        confidence = float(result["confidence"])
    except (TypeError, ValueError) as e:
        raise ClassificationError(f"Invalid confidence: {result['confidence']!r}") from e
    if not math.isfinite(confidence):
        raise ClassificationError(f"Invalid confidence: {result['confidence']!r}")

    violations = result.get("violations")
    return Classification(
        priority=priority,
        category=str(result["category"]),
        confidence=confidence,
        action_required=RecommendedAction.from_string(result.get("actionRequired")),
        reason=str(result["reason"]),
        flagged=bool(result.get("flagged", False)),
        violations=[str(v) for v in violations] if isinstance(violations, list) else [],
        learning_note=str(result.get("learningNote") or ""),
    )


class ClassificationOracle:
    """Adapter around the external LLM that produces raw classifications."""

    def __init__(self, llm: BaseChatModel | None = None) -> None:
        """Initialize the oracle.

        Args:
            llm: Chat model to use. Defaults to ChatOpenAI built from MODEL_CONFIG
                on first use.

        """
        self._llm = llm

    def _get_llm(self) -> BaseChatModel:
        if self._llm is None:
            if not os.getenv("OPENAI_API_KEY"):
                raise ClassificationError("OPENAI_API_KEY environment variable not set")

            self._llm = ChatOpenAI(
                model=str(MODEL_CONFIG["classification_model"]),
                temperature=float(MODEL_CONFIG["temperature"]),
                max_tokens=int(MODEL_CONFIG["max_tokens"]),
                timeout=float(MODEL_CONFIG["request_timeout"]),
                max_retries=int(MODEL_CONFIG["max_retries"]),
                model_kwargs={"response_format": {"type": "json_object"}},
            )
        return self._llm

    def build_prompt(self) -> ChatPromptTemplate:
        """Create the classification prompt template."""
        return ChatPromptTemplate.from_messages(
            [
                ("system", SYSTEM_PROMPT),
                ("user", USER_PROMPT),
            ]
        )

    def classify(
        self,
        content: str,
        content_type: str,
        context_hint: str | None = None,
    ) -> Classification:
        """Classify content, falling back to a safe default on any oracle failure.

        Args:
            content: The text to classify
            content_type: Advisory content type passed to the oracle
            context_hint: Training context describing recent corrections

        Returns:
            The oracle's classification, or the fallback classification

        Raises:
            ValidationError: If content is empty

        """
        if not content or not content.strip():
            raise ValidationError("Cannot classify empty content")

        try:
            parser = JsonOutputParser(pydantic_object=OracleResponse)
            chain = self.build_prompt() | self._get_llm() | parser

            result = chain.invoke({
                "training_context": context_hint or NO_CONTEXT,
                "content_type": content_type or "content",
                "content": content,
            })

            classification = parse_oracle_response(result)
            logger.debug(
                f"Oracle classified {content_type}: {classification.priority.value} "
                f"({classification.confidence:.0%})"
            )
            return classification

        except Exception as e:
            logger.warning(f"Classification unavailable, using fallback: {e!s}")
            return create_fallback_classification(e)


def classify_content(state: ModerationState, oracle: ClassificationOracle) -> dict:
    """Workflow node: ask the oracle for a classification."""
    if state.get("error"):
        return {}

    try:
        classification = oracle.classify(
            state["content"],
            state["content_type"],
            state.get("training_context"),
        )
        return {"classification": classification}
    except ValidationError:
        raise
    except Exception as e:
        return create_error_response(e)
