from dataclasses import dataclass, field
from datetime import datetime

from .classification import Classification


@dataclass
class ContentItem:
    """A piece of user-generated content supplied by the surrounding app."""

    content_id: str
    content_type: str  # "discussion", "comment", "soap_entry", "prayer_request"
    text: str


@dataclass
class PendingPrediction:
    """An AI classification awaiting a matching moderator decision."""

    content_id: str
    content: str
    content_type: str
    classification: Classification
    timestamp: datetime = field(default_factory=datetime.now)
