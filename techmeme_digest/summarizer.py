from typing import Any, List

from techmeme_digest.errors import SummarizationError
from techmeme_digest.llm.registry import generate_text
from techmeme_digest.models import HeadlineItem
from techmeme_digest.rendering.prompt_loader import render_prompt
from techmeme_digest.rendering.slack import to_slack_mrkdwn
from techmeme_digest.utils import get_logger

logger = get_logger(__name__)


def render_items(items: List[HeadlineItem]) -> str:
    """Number each headline and put its URL on the following line."""
    return "\n\n".join(
        f"{i}. {item.text}\n   URL: {item.url}" for i, item in enumerate(items, 1)
    )


def build_prompt(content: str) -> str:
    return render_prompt(content)


class DigestSummarizer:
    def __init__(self, client: Any, model_name: str):
        self.client = client
        self.model_name = model_name

    def summarize(self, items: List[HeadlineItem]) -> str:
        """Ask the model for the top stories and return Slack-ready text.

        The model is trusted to pick ten stories; the bullet count is not
        checked.
        """
        prompt = build_prompt(render_items(items))
        logger.info("summarizing items=%d model=%s prompt_chars=%d", len(items), self.model_name, len(prompt))
        try:
            raw = generate_text(self.client, self.model_name, prompt)
        except SummarizationError as e:
            logger.error("summarize failed: %s", e)
            raise
        text = to_slack_mrkdwn(raw)
        logger.info("summarized raw_chars=%d formatted_chars=%d", len(raw), len(text))
        return text
