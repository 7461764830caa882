"""Configuration constants for the digest system."""

TECHMEME_URL = "https://techmeme.com/"
TECHMEME_ORIGIN = "https://techmeme.com"

# Upper bound on headlines handed to the model
MAX_ITEMS = 15
# Emphasis text at or below this length is not a headline
FALLBACK_MIN_TEXT_LEN = 20

DEFAULT_MODEL = "gemini-pro-latest"
DEFAULT_HTTP_TIMEOUT = 30.0

SLACK_POST_URL = "https://slack.com/api/chat.postMessage"

DEFAULT_LABELS = {
    "digest_title": "Techmeme Top 10 Digest",
    "header_emoji": ":newspaper:",
    "read_more": "read more",
}

# Environment keys
ENV_API_KEY = "GEMINI_API_KEY"
ENV_MODEL = "GEMINI_MODEL"
ENV_CHANNEL_TOKEN = "SLACK_BOT_TOKEN"
ENV_CHANNEL_ID = "SLACK_CHANNEL_ID"
ENV_HTTP_TIMEOUT = "HTTP_TIMEOUT_SEC"
