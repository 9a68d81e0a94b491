"""Test the classification oracle adapter with a fake chat model."""

import json

import pytest
from langchain_core.language_models import FakeListChatModel

from soapbox_moderation.exceptions import ClassificationError, ValidationError
from soapbox_moderation.langgraph.nodes.classifier import (
    ClassificationOracle,
    parse_oracle_response,
)
from soapbox_moderation.models.classification import Priority, RecommendedAction
from soapbox_moderation.utils.error_handling import FALLBACK_REASON


def oracle_reply(**overrides) -> str:
    """Build a JSON oracle reply."""
    payload = {
        "flagged": True,
        "priority": "critical",
        "category": "privacy_violation",
        "violations": ["selling personal data"],
        "reason": "Offers other people's personal information for sale",
        "confidence": 0.93,
        "actionRequired": "remove",
        "learningNote": "Sale of personal data is always critical",
    }
    payload.update(overrides)
    return json.dumps(payload)


def make_oracle(*responses: str) -> ClassificationOracle:
    return ClassificationOracle(llm=FakeListChatModel(responses=list(responses)))


class TestClassificationOracle:
    """Test the oracle's parsing and fallback behaviour."""

    def test_valid_response(self):
        """Test that a well-formed reply becomes a Classification."""
        oracle = make_oracle(oracle_reply())

        result = oracle.classify("Any personal info for sale?", "discussion")

        assert result.priority == Priority.CRITICAL
        assert result.category == "privacy_violation"
        assert result.confidence == pytest.approx(0.93)
        assert result.action_required == RecommendedAction.REMOVE
        assert result.flagged is True
        assert result.violations == ["selling personal data"]
        assert result.is_fallback is False

    def test_code_fenced_response(self):
        """Test that markdown code fences around the JSON are tolerated."""
        oracle = make_oracle(f"```json\n{oracle_reply(priority='high')}\n```")

        result = oracle.classify("Some post", "comment")

        assert result.priority == Priority.HIGH
        assert result.is_fallback is False

    def test_unknown_priority_is_clamped(self):
        """Test that an unknown priority becomes medium instead of propagating."""
        oracle = make_oracle(oracle_reply(priority="severe"))

        result = oracle.classify("Some post", "comment")

        assert result.priority == Priority.MEDIUM
        assert result.is_fallback is False

    def test_missing_field_falls_back(self):
        """Test that a reply without a priority yields the fallback."""
        reply = json.loads(oracle_reply())
        del reply["priority"]
        oracle = make_oracle(json.dumps(reply))

        result = oracle.classify("Some post", "comment")

        assert result.is_fallback is True
        assert result.priority == Priority.MEDIUM
        assert result.confidence == 0.0
        assert result.reason == FALLBACK_REASON

    def test_malformed_json_falls_back(self):
        oracle = make_oracle("I think this is fine, no JSON here")

        result = oracle.classify("Some post", "comment")

        assert result.is_fallback is True
        assert result.reason == FALLBACK_REASON

    def test_missing_api_key_falls_back(self, monkeypatch):
        """Test that no API key degrades to the fallback rather than raising."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        oracle = ClassificationOracle()

        result = oracle.classify("Some post", "comment")

        assert result.is_fallback is True
        assert "OPENAI_API_KEY" in result.learning_note

    def test_empty_content_rejected(self):
        oracle = make_oracle(oracle_reply())

        with pytest.raises(ValidationError):
            oracle.classify("   ", "comment")

    def test_prompt_includes_context_hint(self):
        """Test that training context is rendered into the system prompt."""
        oracle = make_oracle(oracle_reply())
        hint = "Note: content has previously been under-classified as medium"

        messages = oracle.build_prompt().format_messages(
            training_context=hint,
            content_type="discussion",
            content="Hey babe! you look mighty fine.",
        )

        system_text = messages[0].content
        assert hint in system_text
        for tier in ("CRITICAL", "HIGH", "MEDIUM", "LOW"):
            assert tier in system_text
        assert "Hey babe!" in messages[1].content

    def test_content_with_braces(self):
        """Test that user content is passed as data, not template syntax."""
        oracle = make_oracle(oracle_reply(priority="low"))

        result = oracle.classify("Verse {John 3:16} for you {name}", "soap_entry")

        assert result.priority == Priority.LOW
        assert result.is_fallback is False


class TestParseOracleResponse:

    def test_rejects_non_object(self):
        with pytest.raises(ClassificationError):
            parse_oracle_response(["critical"])

    def test_rejects_bad_confidence(self):
        with pytest.raises(ClassificationError):
            parse_oracle_response(json.loads(oracle_reply(confidence="very")))

    def test_defaults_optional_fields(self):
        """Test that optional fields get safe defaults."""
        result = parse_oracle_response({
            "priority": "low",
            "category": "community_interaction",
            "confidence": 0.6,
            "reason": "Friendly greeting",
        })

        assert result.action_required == RecommendedAction.REVIEW
        assert result.violations == []
        assert result.flagged is False

    @pytest.mark.parametrize("confidence", ["nan", "inf", float("nan"), float("-inf")])
    def test_rejects_non_finite_confidence(self, confidence):
        with pytest.raises(ClassificationError):
            parse_oracle_response({
                "priority": "low",
                "category": "community_interaction",
                "confidence": confidence,
                "reason": "Friendly greeting",
            })

    def test_nan_confidence_reply_falls_back(self):
        """Test that a JSON NaN confidence is treated as a malformed reply."""
        oracle = make_oracle(oracle_reply().replace("0.93", "NaN"))

        result = oracle.classify("Any personal info for sale?", "discussion")

        assert result.is_fallback is True
        assert result.confidence == 0.0
