"""Daily Techmeme headline digest, summarized by Gemini and posted to Slack."""

__version__ = "0.1.0"
