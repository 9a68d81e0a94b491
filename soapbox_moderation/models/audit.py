"""Audit trail data models for moderation activity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class AuditEntry:
    """Represents a single audit log entry."""

    timestamp: datetime = field(default_factory=datetime.now)
    content_id: str | None = None
    content_type: str | None = None
    event_type: str = ""  # "classify", "fallback", "decision", "orphan_decision", "error"
    details: str = ""
    ai_priority: str | None = None
    human_priority: str | None = None
    outcome: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for CSV export.

        Returns:
            Dictionary with all fields formatted for export

        """
        return {
            'timestamp': self.timestamp.strftime('%Y-%m-%d %H:%M:%S'),
            'content_id': self.content_id or '',
            'content_type': self.content_type or '',
            'event': self.event_type,
            'details': self.details,
            'ai_priority': self.ai_priority or '',
            'human_priority': self.human_priority or '',
            'outcome': self.outcome or ''
        }
