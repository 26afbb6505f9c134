"""Google Gemini API wrapper with error handling."""

import json
import logging

from google import genai
from google.genai import types

from config import settings
from services.errors import ExternalServiceError

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_text(
    prompt: str,
    system_instruction: str | None = None,
    temperature: float = 0.3,
    max_output_tokens: int = 4096,
) -> str:
    """Send a prompt to Gemini and return the raw reply text.

    Raises:
        ExternalServiceError: no credential configured or the API call failed.
    """
    client = get_client()
    if client is None:
        raise ExternalServiceError("Gemini API key is not configured")

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        raise ExternalServiceError(f"Gemini API error: {e}") from e

    return (response.text or "").strip()


async def generate_json(
    prompt: str,
    system_instruction: str | None = None,
    temperature: float = 0.3,
    max_output_tokens: int = 4096,
) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response.

    Returns None when the reply is not a JSON object; API failures raise
    ``ExternalServiceError`` as in ``generate_text``.
    """
    text = await generate_text(prompt, system_instruction, temperature, max_output_tokens)
    try:
        data = json.loads(_strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse Gemini response as JSON: %s", e)
        return None
    if not isinstance(data, dict):
        logger.warning("Gemini response is JSON but not an object")
        return None
    return data
