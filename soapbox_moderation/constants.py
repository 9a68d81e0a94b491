"""Constants used throughout the moderation learning core."""

# Guideline examples used to benchmark the classifier: (content, expected priority, category)
BENCHMARK_EXAMPLES: list[tuple[str, str, str]] = [
    # Critical
    ("Looking for a hookup after church 💦 DM me", "critical", "sexual_content"),
    ("Jesus was a fraud. Christians are sheep.", "critical", "inappropriate_content"),
    ("Everyone should avoid John. He's a pervert and a liar.", "critical", "harassment_bullying"),
    ("Tithing is optional. Jesus never told anyone to give.", "critical", "false_information"),
    ("Here's Pastor Mark's phone number and home address 🏠📞", "critical", "privacy_violation"),
    # High
    ("Is it okay if I post thirst traps as long as I quote scripture?", "high", "sexual_content"),
    ("The Bible supports slavery. Read it again.", "high", "inappropriate_content"),
    ("Prayer is more powerful than medicine. Don't take pills—just pray.", "high", "false_information"),
    # Medium
    ("Can Christian couples use sex toys? Just asking here.", "medium", "sexual_content"),
    ("Catholics aren't real Christians.", "medium", "inappropriate_content"),
    ("The rapture is happening next Friday. Be ready!", "medium", "false_information"),
    # Low
    ("Is attraction a sin?", "low", "sexual_content"),
    ("I feel like sermons are boring sometimes.", "low", "inappropriate_content"),
    ("Come to our revival event! Free pizza 🍕🎉", "low", "spam"),
]

DEFAULT_CONTENT_TYPE = "discussion"

# Report formatting
SEPARATOR_LENGTH = 80
PREVIEW_LENGTH = 40
CHECK_MARK = "✅"
CROSS_MARK = "❌"
