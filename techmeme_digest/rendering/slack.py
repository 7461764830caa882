"""Rewrite model output into Slack mrkdwn."""

import re

from techmeme_digest.config.constants import DEFAULT_LABELS

_EMPHASIS_RUN = re.compile(r"\*{2,}")
_BARE_URL = re.compile(r"https?://[^\s)\]]+")


def collapse_emphasis(text: str) -> str:
    """Slack bold is a single asterisk; ``**x**`` and ``***x***`` become ``*x*``."""
    return _EMPHASIS_RUN.sub("*", text)


def link_urls(text: str, label: str = DEFAULT_LABELS["read_more"]) -> str:
    return _BARE_URL.sub(lambda m: f"<{m.group(0)}|{label}>", text)


def to_slack_mrkdwn(raw: str, label: str = DEFAULT_LABELS["read_more"]) -> str:
    return link_urls(collapse_emphasis(raw or ""), label)
