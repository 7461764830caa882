"""Fail-fast gate that builds the RunConfig from the environment."""

from __future__ import annotations

import math
import os
from typing import Mapping, Optional

from techmeme_digest.config.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_MODEL,
    ENV_API_KEY,
    ENV_CHANNEL_ID,
    ENV_CHANNEL_TOKEN,
    ENV_HTTP_TIMEOUT,
    ENV_MODEL,
)
from techmeme_digest.errors import ConfigError
from techmeme_digest.models import RunConfig

REQUIRED_KEYS = (ENV_API_KEY, ENV_CHANNEL_TOKEN, ENV_CHANNEL_ID)


def _value(env: Mapping[str, str], key: str) -> str:
    return (env.get(key) or "").strip()


def _timeout(env: Mapping[str, str]) -> float:
    raw = _value(env, ENV_HTTP_TIMEOUT)
    if not raw:
        return DEFAULT_HTTP_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{ENV_HTTP_TIMEOUT} must be a number, got {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{ENV_HTTP_TIMEOUT} must be positive, got {raw!r}")
    return value


def load_run_config(environ: Optional[Mapping[str, str]] = None) -> RunConfig:
    """Read the run settings, raising ConfigError naming every missing key.

    Must be called before any client is constructed: nothing here touches
    the network.
    """
    env = os.environ if environ is None else environ

    missing = tuple(k for k in REQUIRED_KEYS if not _value(env, k))
    if missing:
        raise ConfigError(
            "Missing required environment variables: " + ", ".join(missing),
            missing=missing,
        )

    return RunConfig(
        api_key=_value(env, ENV_API_KEY),
        model_name=_value(env, ENV_MODEL) or DEFAULT_MODEL,
        channel_token=_value(env, ENV_CHANNEL_TOKEN),
        channel_id=_value(env, ENV_CHANNEL_ID),
        http_timeout=_timeout(env),
    )
