import asyncio
import json
import logging
import re
from typing import Optional

from google import genai
from google.genai import types
from pydantic import BaseModel

from infinite_wiki.config import ART_MAX_ATTEMPTS, ART_MODEL, GOOGLE_API_KEY
from infinite_wiki.prompts import ART_PALETTE, ASCII_ART_PROMPT

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


class AsciiArt(BaseModel):
    art: str
    # Blocky title text. Generation of it is switched off, so it stays empty.
    text: Optional[str] = None


class MalformedArtResponse(ValueError):
    """The art service answered with something that is not a usable art object."""


class ArtGenerationError(RuntimeError):
    """Raised when no attempt produced valid ASCII art."""


def parse_art_response(raw: str) -> AsciiArt:
    """Repair and validate a raw art completion.

    Strips surrounding whitespace and an optional markdown code fence, then
    requires a JSON object with a non-empty string ``art``. Any other fields
    the model volunteered are dropped.
    """
    text = raw.strip()
    match = _FENCE_RE.match(text)
    if match and match.group(1):
        text = match.group(1).strip()

    if not text.startswith("{") or not text.endswith("}"):
        raise MalformedArtResponse("Response is not a valid JSON object")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedArtResponse(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedArtResponse("Response is not a valid JSON object")

    art = data.get("art")
    if not isinstance(art, str) or not art.strip():
        raise MalformedArtResponse("Invalid or empty ASCII art in response")

    return AsciiArt(art=art)


class AsciiArtGenerator:
    """Asks the Gemini model for a single JSON object holding ASCII art."""

    def __init__(
        self,
        client=None,
        api_key: str = GOOGLE_API_KEY,
        model: str = ART_MODEL,
        max_attempts: int = ART_MAX_ATTEMPTS,
        retry_delay: float = 0.0,
    ):
        self._client = client
        self.api_key = api_key
        self.model = model
        self.max_attempts = max(1, max_attempts)
        self.retry_delay = retry_delay

    def _get_client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, topic: str) -> AsciiArt:
        if not self.api_key:
            raise ArtGenerationError("GOOGLE_API_KEY is not configured.")

        prompt = ASCII_ART_PROMPT.format(topic=topic, palette=ART_PALETTE)
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            thinking_config=types.ThinkingConfig(thinking_budget=0),
        )

        last_error: Optional[Exception] = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                response = await self._get_client().aio.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=config,
                )
                raw = response.text or ""
                logger.debug(f"Attempt {attempt}/{self.max_attempts} raw art response: {raw}")
                return parse_art_response(raw)
            except Exception as e:
                last_error = e
                logger.warning(f"Art attempt {attempt}/{self.max_attempts} for {topic!r} failed: {e}")

            if attempt < self.max_attempts and self.retry_delay:
                await asyncio.sleep(self.retry_delay)

        logger.error(f"All {self.max_attempts} attempts to generate ASCII art for {topic!r} failed")
        raise ArtGenerationError(
            f"Could not generate ASCII art after {self.max_attempts} attempts: {last_error}"
        )


art_generator = AsciiArtGenerator()
