import time
import uuid
from typing import Any, Callable, Optional

import requests

from techmeme_digest.errors import DigestError
from techmeme_digest.llm.registry import build_client
from techmeme_digest.models import RunConfig, RunResult, StageOutcome
from techmeme_digest.net import single_attempt_session
from techmeme_digest.publisher import DigestPublisher, SlackConfig
from techmeme_digest.sources.techmeme_adapter import HeadlineExtractor
from techmeme_digest.summarizer import DigestSummarizer
from techmeme_digest.utils import get_logger

logger = get_logger(__name__)


def _run_stage(stage: str, fn: Callable[..., Any], *args: Any) -> StageOutcome:
    """Run one stage, turning a DigestError into a failed outcome."""
    t0 = time.monotonic()
    try:
        value = fn(*args)
    except DigestError as e:
        logger.error("stage=%s failed error_type=%s error=%s", stage, type(e).__name__, e)
        return StageOutcome(stage=stage, error=e)
    logger.info("stage=%s ok took_ms=%d", stage, int((time.monotonic() - t0) * 1000))
    return StageOutcome(stage=stage, value=value)


def _failed(result: RunResult, outcome: StageOutcome) -> RunResult:
    result.failed_stage = outcome.stage
    result.error = outcome.error
    return result


def run_once(config: RunConfig, *, session: Optional[requests.Session] = None,
             client: Any = None) -> RunResult:
    """Execute fetch -> summarize -> publish once.

    The first failing stage ends the run; nothing is published unless every
    earlier stage succeeded.
    """
    run_id = uuid.uuid4().hex[:8]
    logger.info("=== run start id=%s model=%s channel=%s ===", run_id, config.model_name, config.channel_id)
    result = RunResult(run_id=run_id)
    crashed = False

    try:
        session = session or single_attempt_session()
        client = client if client is not None else build_client(config.api_key)

        extractor = HeadlineExtractor(session, timeout=config.http_timeout)
        summarizer = DigestSummarizer(client, config.model_name)
        publisher = DigestPublisher(
            SlackConfig(
                channel_id=config.channel_id,
                bot_token=config.channel_token,
                timeout_sec=config.http_timeout,
            ),
            session=session,
        )

        fetched = _run_stage("fetch", extractor.fetch)
        if not fetched.ok:
            return _failed(result, fetched)
        result.item_count = len(fetched.value)

        summary = _run_stage("summarize", summarizer.summarize, fetched.value)
        if not summary.ok:
            return _failed(result, summary)

        published = _run_stage("publish", publisher.publish, summary.value)
        if not published.ok:
            return _failed(result, published)
        result.receipt = published.value

        logger.info("OK: digest published items=%d ts=%s", result.item_count, result.receipt.ts)
        return result
    except Exception as e:
        crashed = True
        logger.error("Pipeline execution failed: %s", e)
        raise
    finally:
        logger.info("=== run end id=%s ok=%s ===", run_id, result.ok and not crashed)
