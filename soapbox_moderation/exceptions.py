"""Custom exceptions for the Soapbox moderation learning core."""


class ModerationError(Exception):
    """Base exception for the moderation learning core."""

    pass


class ValidationError(ModerationError):
    """Raised when input validation fails."""

    pass


class ClassificationError(ModerationError):
    """Raised when the classification oracle returns an unusable response."""

    pass


class TrainingStoreError(ModerationError):
    """Raised when a training case cannot be stored."""

    pass


class WorkflowError(ModerationError):
    """Raised when workflow execution fails."""

    pass
