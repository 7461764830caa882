"""Pydantic models passed between the digest stages."""

from __future__ import annotations

from typing import Any, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

from techmeme_digest.config.constants import DEFAULT_MODEL
from techmeme_digest.errors import DigestError


class BaseModelWithConfig(BaseModel):
    """Immutable base model forbidding silent data loss."""

    model_config = ConfigDict(frozen=True, extra="forbid")


def is_absolute_url(value: str) -> bool:
    parsed = urlparse(value or "")
    return bool(parsed.scheme and parsed.netloc)


class HeadlineItem(BaseModelWithConfig):
    """One headline scraped from the aggregator front page."""

    text: str
    url: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, text: str) -> str:
        text = text.strip()
        if not text:
            raise ValueError("headline text cannot be empty")
        return text

    @field_validator("url")
    @classmethod
    def validate_url(cls, url: str) -> str:
        if not is_absolute_url(url):
            raise ValueError(f"headline url must be absolute: {url!r}")
        return url


class RunConfig(BaseModelWithConfig):
    """Settings read once from the environment at process start."""

    api_key: str = Field(repr=False)
    model_name: str = DEFAULT_MODEL
    channel_token: str = Field(repr=False)
    channel_id: str
    http_timeout: float = Field(default=30.0, gt=0)


class PublishReceipt(BaseModelWithConfig):
    channel: str
    ts: str


class ModelInfo(BaseModelWithConfig):
    """Catalog entry returned by the model provider."""

    name: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    supported_actions: List[str] = Field(default_factory=list)
    input_token_limit: Optional[int] = None
    output_token_limit: Optional[int] = None

    def supports(self, action: str) -> bool:
        return action in self.supported_actions


class StageOutcome(BaseModel):
    """Result/error union for a single pipeline stage."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stage: str
    value: Any = None
    error: Optional[DigestError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RunResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    run_id: str
    item_count: int = 0
    receipt: Optional[PublishReceipt] = None
    failed_stage: Optional[str] = None
    error: Optional[DigestError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
