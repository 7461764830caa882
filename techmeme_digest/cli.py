#!/usr/bin/env python3
import sys

from dotenv import load_dotenv

from techmeme_digest.config.settings import load_run_config
from techmeme_digest.errors import ConfigError
from techmeme_digest.orchestrator import run_once
from techmeme_digest.utils import get_logger

logger = get_logger(__name__)


def main() -> int:
    load_dotenv()
    try:
        config = load_run_config()
    except ConfigError as e:
        logger.error("Error: %s. Please check your .env file.", e)
        return 1

    result = run_once(config)
    if not result.ok:
        logger.error("Workflow failed at stage=%s: %s", result.failed_stage, result.error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
