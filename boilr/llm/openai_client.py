# boilr/llm/openai_client.py
"""OpenAI client using the Responses API with a json_schema text format."""

import logging
from typing import TYPE_CHECKING, Any

from boilr.config.schema import Provider

if TYPE_CHECKING:
    import openai

logger = logging.getLogger(__name__)


class OpenAIClient:
    """Async OpenAI client."""

    provider = Provider.OPENAI

    def __init__(self, api_key: str, model: str = "gpt-5-codex"):
        self._api_key = api_key
        self.model = model
        self._client: "openai.AsyncOpenAI | None" = None

    @property
    def client(self) -> "openai.AsyncOpenAI":
        """Lazy-loaded OpenAI client."""
        if self._client is None:
            import openai

            self._client = openai.AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def generate_structured(
        self, system: str, prompt: str, schema: dict, name: str
    ) -> Any:
        """
        Request a reply whose text must follow schema.

        Returns:
            Reply text (JSON)
        """
        logger.info(f"OpenAI.generate_structured: model={self.model}, output={name}")
        response = await self.client.responses.create(
            model=self.model,
            instructions=system,
            input=prompt,
            text={
                "format": {
                    "type": "json_schema",
                    "name": name,
                    "schema": schema,
                    # optional fields with defaults are not allowed in strict mode
                    "strict": False,
                }
            },
        )
        text = response.output_text or ""
        logger.info(f"OpenAI.generate_structured: {len(text)} chars")
        return text

    async def close(self) -> None:
        """Close the async client if initialized."""
        if self._client is not None:
            await self._client.close()
            self._client = None
