# boilr/llm/anthropic_client.py
"""
Anthropic client.

Structured output is obtained by forcing a single tool call whose
input_schema is the requested shape; the tool input is the reply.
"""

import logging
from typing import TYPE_CHECKING, Any

from boilr.config.schema import Provider
from boilr.errors import SchemaValidationError

if TYPE_CHECKING:
    import anthropic

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Async Anthropic client."""

    provider = Provider.ANTHROPIC

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        max_tokens: int = 8192,
    ):
        self._api_key = api_key
        self.model = model
        self._max_tokens = max_tokens
        self._client: "anthropic.AsyncAnthropic | None" = None

    @property
    def client(self) -> "anthropic.AsyncAnthropic":
        """Lazy-loaded Anthropic client."""
        if self._client is None:
            import anthropic

            self._client = anthropic.AsyncAnthropic(api_key=self._api_key)
        return self._client

    async def generate_structured(
        self, system: str, prompt: str, schema: dict, name: str
    ) -> Any:
        """
        Force a tool call with schema as input_schema.

        Returns:
            The tool input dict

        Raises:
            SchemaValidationError: If the reply carries no tool call
        """
        logger.info(f"Anthropic.generate_structured: model={self.model}, output={name}")
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self._max_tokens,
            system=system,
            messages=[{"role": "user", "content": prompt}],
            tools=[
                {
                    "name": name,
                    "description": "Return the complete database schema.",
                    "input_schema": schema,
                }
            ],
            tool_choice={"type": "tool", "name": name},
        )

        for block in response.content:
            if getattr(block, "type", None) == "tool_use":
                logger.info(
                    f"Anthropic.generate_structured: stop_reason={response.stop_reason}"
                )
                return block.input

        raise SchemaValidationError("Model reply did not contain a structured schema")

    async def close(self) -> None:
        """Close the async client if initialized."""
        if self._client is not None:
            await self._client.close()
            self._client = None
