"""Configuration settings for the Soapbox moderation learning core."""

# Model configuration
MODEL_CONFIG: dict[str, str | float | int] = {
    "classification_model": "gpt-4o",
    "temperature": 0.1,
    "max_tokens": 500,
    "request_timeout": 30,  # seconds
    "max_retries": 1,
}

# Priority tiers and their ordinal severity
PRIORITY_ORDER: dict[str, int] = {
    "low": 1,
    "medium": 2,
    "high": 3,
    "critical": 4,
}

# Content types supplied by the surrounding application
CONTENT_TYPES = {
    "discussion": "Community discussion post",
    "comment": "Comment on a post",
    "soap_entry": "S.O.A.P. journal entry",
    "prayer_request": "Prayer request",
}

# Pending prediction cache bounds
PREDICTION_CACHE_CONFIG: dict[str, int] = {
    "max_entries": 1000,
    "ttl_seconds": 7 * 24 * 60 * 60,
}

# Learning context
TRAINING_CONTEXT_WINDOW = 20  # Most recent cases scanned for corrections
MAX_PATTERN_HINTS = 5  # Misclassification patterns fed back into the prompt
MIN_PATTERN_FREQUENCY = 2  # Pairs below this are not "common"
MAX_COMMON_MISCLASSIFICATIONS = 5  # Pairs reported in the feedback summary
SNIPPET_LENGTH = 100

# Feedback thresholds
ACCURACY_TARGET = 0.8

# Categories treated as friendly/social chatter when reporting false positives
SOCIAL_CATEGORIES = frozenset(
    {
        "community_interaction",
        "fellowship",
        "encouragement",
        "social",
        "casual",
        "other",
    }
)

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = "INFO"
