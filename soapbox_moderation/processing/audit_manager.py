"""Audit manager for logging and tracking moderation learning activity.
"""
import csv
import threading
from pathlib import Path

from ..models.audit import AuditEntry
from ..models.classification import Classification
from ..models.feedback import TrainingCase


class AuditManager:
    """Manages audit trail logging and export."""

    def __init__(self):
        """Initialize empty audit log."""
        self._entries: list[AuditEntry] = []
        self._lock = threading.Lock()

    def _append(self, entry: AuditEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def log_classification(self, content_id: str | None, content_type: str,
                           classification: Classification) -> None:
        """Log an AI classification event.

        Fallback classifications are logged as "fallback" so the trail shows
        when no AI suggestion was available.

        Args:
            content_id: The content id, if the caller supplied one
            content_type: The content type
            classification: The classification returned to the caller

        """
        if classification.is_fallback:
            event_type = "fallback"
            details = "No AI suggestion available"
            if classification.learning_note:
                details += f" ({classification.learning_note})"
        else:
            event_type = "classify"
            details = (f"AI Classification - {classification.category} - "
                       f"Confidence: {classification.confidence:.2f}")

        self._append(AuditEntry(
            content_id=content_id,
            content_type=content_type,
            event_type=event_type,
            ai_priority=classification.priority.value,
            details=details
        ))

    def log_decision(self, case: TrainingCase) -> None:
        """Log a moderator decision that produced a training case.

        Args:
            case: The recorded training case

        """
        decision = case.human_decision
        details = f"Moderator {decision.action.value}"
        if decision.moderator_id:
            details += f" by {decision.moderator_id}"

        self._append(AuditEntry(
            content_id=case.content_id,
            content_type=case.content_type,
            event_type="decision",
            ai_priority=case.ai_classification.priority.value,
            human_priority=decision.final_priority.value,
            outcome=case.outcome.value,
            details=details
        ))

    def log_orphan_decision(self, content_id: str, human_priority: str) -> None:
        """Log a moderator decision that had no matching prediction.

        Args:
            content_id: The content id
            human_priority: The moderator's final priority

        """
        self._append(AuditEntry(
            content_id=content_id,
            event_type="orphan_decision",
            human_priority=human_priority,
            details="No pending AI prediction for this content"
        ))

    def log_error(self, content_id: str | None, error_message: str) -> None:
        """Log an error event.

        Args:
            content_id: The content id (optional)
            error_message: The error message

        """
        self._append(AuditEntry(
            content_id=content_id,
            event_type="error",
            details=f"Error: {error_message}"
        ))

    def get_entries(self, content_id: str | None = None,
                    event_type: str | None = None) -> list[AuditEntry]:
        """Get audit entries with optional filtering.

        Args:
            content_id: Filter by content id (optional)
            event_type: Filter by event type (optional)

        Returns:
            List of matching audit entries

        """
        with self._lock:
            entries = list(self._entries)

        if content_id:
            entries = [e for e in entries if e.content_id == content_id]

        if event_type:
            entries = [e for e in entries if e.event_type == event_type]

        return entries

    def export_csv(self, filepath: Path) -> None:
        """Export all audit entries to CSV file.

        Args:
            filepath: Path to save the CSV file

        """
        # Sort entries chronologically
        entries = sorted(self.get_entries(), key=lambda e: e.timestamp)

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            fieldnames = ['timestamp', 'content_id', 'content_type', 'event',
                          'details', 'ai_priority', 'human_priority', 'outcome']
            writer = csv.DictWriter(f, fieldnames=fieldnames)

            writer.writeheader()

            for entry in entries:
                writer.writerow(entry.to_dict())

    def get_entry_count(self) -> int:
        """Get total number of audit entries.

        Returns:
            Number of audit entries

        """
        with self._lock:
            return len(self._entries)
