#!/usr/bin/env python3
"""Print the Gemini model catalog for operators choosing GEMINI_MODEL."""

import os
import sys
from typing import List

from dotenv import load_dotenv

from techmeme_digest.config.constants import ENV_API_KEY
from techmeme_digest.llm.registry import build_client, list_models
from techmeme_digest.models import ModelInfo
from techmeme_digest.utils import get_logger, redact_secrets

logger = get_logger(__name__)

GENERATE_CONTENT = "generateContent"
RULE = "=" * 75


def _limit(value) -> str:
    return f"{value:,}" if value is not None else "N/A"


def format_catalog(models: List[ModelInfo]) -> str:
    lines = [RULE, f"FOUND {len(models)} MODELS", RULE]
    for i, m in enumerate(models, 1):
        lines += [
            "",
            f"{i}. {m.name}",
            "-" * 75,
            f"   Display Name: {m.display_name or ''}",
            f"   Description: {m.description or ''}",
            f"   Supported Methods: {', '.join(m.supported_actions)}",
            f"   Input Token Limit: {_limit(m.input_token_limit)}",
            f"   Output Token Limit: {_limit(m.output_token_limit)}",
        ]

    generators = [m for m in models if m.supports(GENERATE_CONTENT)]
    lines += ["", RULE, f"MODELS SUPPORTING {GENERATE_CONTENT}", RULE]
    if not generators:
        lines.append(f"   No models found with {GENERATE_CONTENT} support")
    for i, m in enumerate(generators, 1):
        lines.append(f"   {i}. {m.name}")
        lines.append(f"      - {m.display_name or ''}")
    lines += ["", RULE,
              f"COMPLETED - Listed {len(models)} total models ({len(generators)} support {GENERATE_CONTENT})",
              RULE]
    return "\n".join(lines)


def main() -> int:
    load_dotenv()
    api_key = (os.getenv(ENV_API_KEY) or "").strip()
    if not api_key:
        logger.error("Error: %s not found in environment or .env file", ENV_API_KEY)
        return 1

    try:
        models = list_models(build_client(api_key))
    except Exception as e:
        logger.error("model listing failed: %s", redact_secrets(str(e), (api_key,)))
        return 1

    print(format_catalog(models))
    return 0


if __name__ == "__main__":
    sys.exit(main())
