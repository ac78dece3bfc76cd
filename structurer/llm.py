# structurer/llm.py
import re
import logging
from typing import Any, Dict, Optional
from openai import OpenAI
from openai import APIError, APIConnectionError, RateLimitError

from .config import get_settings

logger = logging.getLogger(__name__)

_client_instance: Optional[OpenAI] = None
_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")

class LLMError(RuntimeError):
    pass

def _get_client() -> OpenAI:
    global _client_instance
    if _client_instance is None:
        api_key = get_settings().openai_api_key
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is not set in your environment (.env).")
        _client_instance = OpenAI(api_key=api_key)
    return _client_instance

def _complete(system: str, user: str, model: Optional[str], temperature: float, **extra: Any) -> str:
    client = _get_client()
    model_name = model or get_settings().model_name
    logger.debug("chat completion model=%s prompt_chars=%d", model_name, len(system) + len(user))

    try:
        resp = client.chat.completions.create(
            model=model_name,
            temperature=temperature,
            messages=[
                {"role": "system", "content": system},
                {"role": "user",   "content": user},
            ],
            **extra,
        )
    except (APIConnectionError, RateLimitError, APIError) as e:
        raise LLMError(f"OpenAI API error: {e}") from e

    content = resp.choices[0].message.content if resp.choices and resp.choices[0].message else ""
    return (content or "").strip()

def generate_text(
    system: str,
    user: str,
    model: Optional[str] = None,
    temperature: float = 0.3
) -> str:
    """
    Call the chat model and return plain text, trimmed.

    Args:
        system: System prompt text
        user: User prompt text
        model: Override model name (defaults to MODEL_NAME or 'gpt-4o-mini')
        temperature: Sampling temperature (0.0-2.0). Lower = more deterministic.
    """
    return _complete(system, user, model, temperature)

def generate_json(
    system: str,
    user: str,
    schema: Dict[str, Any],
    schema_name: str = "response",
    model: Optional[str] = None,
    temperature: float = 0.3
) -> str:
    """
    Call the chat model constrained to a JSON schema and return the raw JSON text.
    Parsing is left to the caller.
    """
    text = _complete(
        system, user, model, temperature,
        response_format={
            "type": "json_schema",
            "json_schema": {"name": schema_name, "schema": schema, "strict": True},
        },
    )
    # Strip a fence wrapping the whole payload; fences inside values stay
    return _FENCE_RE.sub("", text).strip()

