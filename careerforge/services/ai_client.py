import logging
from typing import Optional

from openai import OpenAI

from careerforge.core.config import settings

log = logging.getLogger("careerforge.ai")


class AIUnavailable(RuntimeError):
    """No AI credential configured; callers fall back to static data."""


def can_generate() -> bool:
    """
    True if OpenAI is configured.
    """
    return bool((settings.openai_api_key or "").strip())


def get_client() -> Optional[OpenAI]:
    if not can_generate():
        return None
    # Single attempt: failures go straight to the caller's fallback
    return OpenAI(api_key=settings.openai_api_key.strip(), max_retries=0)


def generate_text(prompt: str, temperature: float = 0.4) -> str:
    """
    Send one prompt and return the stripped reply text.

    Raises AIUnavailable when OPENAI_API_KEY is unset. SDK errors propagate.
    """
    client = get_client()
    if client is None:
        raise AIUnavailable("OPENAI_API_KEY not set")

    resp = client.chat.completions.create(
        model=settings.openai_model,
        messages=[{"role": "user", "content": prompt}],
        temperature=temperature,
    )
    text = resp.choices[0].message.content or ""
    log.debug("AI reply (%d chars) from %s", len(text), settings.openai_model)
    return text.strip()
