# boilr/llm/gemini_client.py
"""Gemini client using google-genai JSON mode with a response schema."""

import logging
from typing import TYPE_CHECKING, Any

from boilr.config.schema import Provider

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)


class GeminiClient:
    """Async Gemini client (google-genai)."""

    provider = Provider.GEMINI

    def __init__(self, api_key: str, model: str = "gemini-2.5-pro"):
        self._api_key = api_key
        self.model = model
        self._client: "genai.Client | None" = None

    @property
    def client(self) -> "genai.Client":
        """Lazy-loaded google-genai client."""
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate_structured(
        self, system: str, prompt: str, schema: dict, name: str
    ) -> Any:
        """
        Request a JSON reply constrained to schema.

        Returns:
            Reply text (JSON)
        """
        from google.genai import types

        logger.info(f"Gemini.generate_structured: model={self.model}, output={name}")
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system,
                response_mime_type="application/json",
                response_json_schema=schema,
            ),
        )
        text = response.text or ""
        logger.info(f"Gemini.generate_structured: {len(text)} chars")
        return text

    async def close(self) -> None:
        self._client = None
