import logging
from typing import AsyncIterator

from google import genai
from google.genai import types

from infinite_wiki.config import GOOGLE_API_KEY, TEXT_MODEL
from infinite_wiki.prompts import DEFINITION_PROMPT, RANDOM_WORD_PROMPT

logger = logging.getLogger(__name__)

ERROR_MARKERS = ("Error:", "Fehler:")
MISSING_KEY_MESSAGE = (
    "Error: GOOGLE_API_KEY is not configured. "
    "Please check your environment variables to continue."
)


class DefinitionStreamError(RuntimeError):
    """Raised when the text service fails while producing a definition."""


def is_error_fragment(fragment: str) -> bool:
    """True if a streamed fragment carries the in-band error marker."""
    return fragment.startswith(ERROR_MARKERS)


class DefinitionStreamer:
    """Streams single-paragraph definitions from the Gemini text model."""

    def __init__(self, client=None, api_key: str = GOOGLE_API_KEY, model: str = TEXT_MODEL):
        self._client = client
        self.api_key = api_key
        self.model = model

    def _get_client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _config(self) -> types.GenerateContentConfig:
        # No thinking: lowest possible latency for the first fragment.
        return types.GenerateContentConfig(
            thinking_config=types.ThinkingConfig(thinking_budget=0),
        )

    async def stream(self, topic: str) -> AsyncIterator[str]:
        """Yield the definition of ``topic`` fragment by fragment.

        Without an API key a single error-marked fragment is yielded instead
        of calling the service. Upstream failures raise DefinitionStreamError.
        """
        if not self.api_key:
            yield MISSING_KEY_MESSAGE
            return

        prompt = DEFINITION_PROMPT.format(topic=topic)
        try:
            response = await self._get_client().aio.models.generate_content_stream(
                model=self.model,
                contents=prompt,
                config=self._config(),
            )
            async for chunk in response:
                if chunk.text:
                    yield chunk.text
        except Exception as e:
            logger.error(f"Definition stream failed for {topic!r}: {e}", exc_info=True)
            raise DefinitionStreamError(
                f'Could not generate content for "{topic}". {e}'
            ) from e

    async def random_word(self) -> str:
        """Ask the text model for one random, interesting word."""
        if not self.api_key:
            raise DefinitionStreamError("GOOGLE_API_KEY is not configured.")

        try:
            response = await self._get_client().aio.models.generate_content(
                model=self.model,
                contents=RANDOM_WORD_PROMPT,
                config=self._config(),
            )
        except Exception as e:
            logger.error(f"Random word request failed: {e}", exc_info=True)
            raise DefinitionStreamError(f"Could not get a random word: {e}") from e

        word = (response.text or "").strip()
        if not word:
            raise DefinitionStreamError("Could not get a random word: empty response")
        return word


definition_streamer = DefinitionStreamer()
