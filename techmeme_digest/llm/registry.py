"""Thin wrappers around the google-genai client."""

from typing import Any, List

from techmeme_digest.errors import SummarizationError
from techmeme_digest.models import ModelInfo


def build_client(api_key: str) -> Any:
    """Construct a Gemini client. Makes no network call."""
    from google import genai

    return genai.Client(api_key=api_key)


def generate_text(client: Any, model: str, prompt: str) -> str:
    """Single generate_content call; any failure becomes SummarizationError."""
    try:
        resp = client.models.generate_content(model=model, contents=prompt)
        text = resp.text
    except Exception as e:
        raise SummarizationError(f"Gemini call failed model={model}: {e}", cause=e) from e

    if not text or not text.strip():
        raise SummarizationError(f"Gemini returned an empty response model={model}")
    return text


def list_models(client: Any) -> List[ModelInfo]:
    """Fetch the provider's model catalog."""
    models = []
    for m in client.models.list():
        models.append(ModelInfo(
            name=m.name,
            display_name=getattr(m, "display_name", None),
            description=getattr(m, "description", None),
            supported_actions=list(getattr(m, "supported_actions", None) or []),
            input_token_limit=getattr(m, "input_token_limit", None),
            output_token_limit=getattr(m, "output_token_limit", None),
        ))
    return models
