"""Error taxonomy for a digest run. Every error is fatal to the run."""

from __future__ import annotations

from typing import Optional


class DigestError(Exception):
    """Base class; ``stage`` names the pipeline stage that failed."""

    stage = "run"

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ConfigError(DigestError):
    stage = "config"

    def __init__(self, message: str, missing: tuple[str, ...] = ()):
        super().__init__(message)
        self.missing = missing


class FetchError(DigestError):
    stage = "fetch"


class EmptyResultError(DigestError):
    stage = "fetch"


class SummarizationError(DigestError):
    stage = "summarize"


class PublishError(DigestError):
    stage = "publish"
