"""Slack publisher for the finished digest."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from techmeme_digest.config.constants import DEFAULT_HTTP_TIMEOUT, DEFAULT_LABELS, SLACK_POST_URL
from techmeme_digest.errors import PublishError
from techmeme_digest.models import PublishReceipt
from techmeme_digest.net import single_attempt_session
from techmeme_digest.utils import get_logger, long_date, redact_secrets, today_local

logger = get_logger(__name__)


def digest_header(day: dt.date) -> str:
    return f"*{DEFAULT_LABELS['digest_title']} - {long_date(day)}* {DEFAULT_LABELS['header_emoji']}"


def compose_message(body: str, day: dt.date) -> str:
    return f"{digest_header(day)}\n\n{body}"


@dataclass
class SlackConfig:
    channel_id: str
    bot_token: str
    mrkdwn: bool = True
    timeout_sec: float = DEFAULT_HTTP_TIMEOUT
    api_url: str = SLACK_POST_URL


class DigestPublisher:
    def __init__(self, cfg: SlackConfig, session: Optional[requests.Session] = None,
                 today: Callable[[], dt.date] = today_local):
        self.cfg = cfg
        self.session = session or single_attempt_session()
        self.today = today
        self._secrets = (cfg.bot_token,)
        self.headers = {
            "Authorization": f"Bearer {cfg.bot_token}",
            "Content-Type": "application/json; charset=utf-8",
        }

    def publish(self, text: str) -> PublishReceipt:
        payload = {
            "channel": self.cfg.channel_id,
            "text": compose_message(text, self.today()),
            "mrkdwn": self.cfg.mrkdwn,
        }
        try:
            response = self.session.post(self.cfg.api_url, headers=self.headers, json=payload,
                                         timeout=self.cfg.timeout_sec)
        except requests.RequestException as e:
            logger.error("slack_post failed error=%s", redact_secrets(str(e), self._secrets))
            raise PublishError(f"Slack post failed: {redact_secrets(str(e), self._secrets)}", cause=e) from e

        if response.status_code != 200:
            logger.error(
                "slack_post failed status=%s body=%s",
                response.status_code,
                redact_secrets(response.text, self._secrets),
            )
            raise PublishError(f"Slack post failed: HTTP {response.status_code} {redact_secrets(response.text[:256], self._secrets)}")

        try:
            body = response.json()
        except ValueError as e:
            logger.error("slack_post failed non-json body=%s", redact_secrets(response.text[:256], self._secrets))
            raise PublishError(f"Slack returned a non-JSON body: {redact_secrets(response.text[:256], self._secrets)}", cause=e) from e

        if not body.get("ok"):
            error = body.get("error", "unknown_error")
            logger.error("slack_post rejected channel=%s error=%s", self.cfg.channel_id, error)
            raise PublishError(f"Slack rejected the message: {error}")

        receipt = PublishReceipt(channel=body.get("channel") or self.cfg.channel_id, ts=str(body.get("ts", "")))
        logger.info("slack_post success channel=%s ts=%s", receipt.channel, receipt.ts)
        return receipt
