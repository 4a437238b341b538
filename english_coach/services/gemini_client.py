# english_coach/services/gemini_client.py
import logging
from typing import Any, Optional

import google.generativeai as genai

from english_coach.core.config import Settings
from english_coach.core.errors import ConfigurationError, UpstreamError

logger = logging.getLogger("english_coach.services.gemini_client")  # Logger for this module


class GeminiCompletionClient:
    """
    Sends one prompt to Gemini and returns one text completion.

    Built per request: the constructor is the credential check, so a missing
    key fails before anything is sent.
    """

    def __init__(self, settings: Settings):
        if not settings.gemini_configured:
            raise ConfigurationError("GEMINI_API_KEY environment variable not set")

        self.model_name = settings.GEMINI_MODEL_NAME_LITE
        try:
            genai.configure(api_key=settings.GEMINI_API_KEY)
            self.model = genai.GenerativeModel(self.model_name)
        except Exception as e:
            raise ConfigurationError(f"Error creating Gemini client: {e}") from e

    async def complete(self, prompt: str) -> str:
        try:
            response = await self.model.generate_content_async(prompt)
        except Exception as e:
            raise UpstreamError(f"Gemini call to '{self.model_name}' failed: {e}") from e

        text = _first_candidate_text(response)
        if text is None or not text.strip():
            raise UpstreamError("empty or invalid response from Gemini")
        return text.strip()


def _first_candidate_text(response: Any) -> Optional[str]:
    """Text of the first part of the first candidate, or None if there is none."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return None

    text = getattr(parts[0], "text", None)
    return text if isinstance(text, str) else None
