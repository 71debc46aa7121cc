# boilr/llm/designer.py
"""
Schema design calls: generate a schema from an idea, revise it from feedback.

Each operation is exactly one structured-output exchange. Provider failures
are rewritten into a single descriptive error; nothing is retried.
"""

import logging

from boilr.config.schema import BoilrConfig
from boilr.errors import (
    AuthenticationError,
    BoilrError,
    ProviderCallError,
    RateLimitError,
    SchemaValidationError,
)
from boilr.schema import AbstractSchema, validate_schema

from .factory import create_llm_client
from .prompts import load_prompt, render_prompt
from .types import StructuredClient

logger = logging.getLogger(__name__)

OUTPUT_NAME = "abstract_schema"


def _status_code(exc: BaseException) -> int | None:
    """HTTP status from SDK errors (status_code for openai/anthropic, code for google-genai)."""
    for attr in ("status_code", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def map_provider_error(exc: BaseException, provider: str, operation: str) -> BoilrError:
    """
    Rewrite a failed call into a user-facing error.

    Args:
        exc: The exception raised by the client
        provider: Provider name for the auth message
        operation: "generate schema" or "revise schema"

    Returns:
        SchemaValidationError, AuthenticationError, RateLimitError or ProviderCallError
    """
    if isinstance(exc, SchemaValidationError):
        return SchemaValidationError(
            f"Failed to {operation}: the model reply did not match the schema. {exc}",
            errors=exc.errors,
        )

    message = str(exc)
    status = _status_code(exc)

    if status == 401 or "401" in message or "Unauthorized" in message:
        return AuthenticationError(
            f"AI call failed. Your API key for {provider} seems to be invalid. "
            f"Please run 'boilr config' to update it.",
            provider=provider,
            operation=operation,
        )
    if status == 429 or "429" in message or "rate limit" in message.lower():
        return RateLimitError(
            "AI call failed due to rate limiting. Please try again in a moment.",
            provider=provider,
            operation=operation,
        )
    return ProviderCallError(
        f"Failed to {operation}: {message or type(exc).__name__}",
        provider=provider,
        operation=operation,
    )


class SchemaDesigner:
    """Turns a config into a model handle and runs generate/revise calls."""

    def __init__(self, config: BoilrConfig, client: StructuredClient | None = None):
        """
        Args:
            config: Loaded config (provider + keys)
            client: Pre-built client; created from config when omitted

        Raises:
            CredentialMissingError: If the selected provider has no key
        """
        self._config = config
        self._client = client if client is not None else create_llm_client(config)
        self._output_schema = AbstractSchema.json_schema()

    @property
    def provider(self) -> str:
        return self._config.llm_provider.value

    @property
    def model(self) -> str:
        return self._client.model

    async def _call(self, system: str, prompt: str, operation: str) -> AbstractSchema:
        try:
            reply = await self._client.generate_structured(
                system=system,
                prompt=prompt,
                schema=self._output_schema,
                name=OUTPUT_NAME,
            )
            schema = validate_schema(reply)
        except Exception as e:
            logger.debug(f"{operation} failed ({self.provider}/{self.model})", exc_info=True)
            raise map_provider_error(e, self.provider, operation) from e

        logger.info(f"{operation}: {len(schema.models)} model(s) {schema.model_names()}")
        return schema

    async def generate_schema(self, idea: str) -> AbstractSchema:
        """
        Generate a schema from a natural-language app idea.

        Args:
            idea: e.g. "A clinic management app for clinicians to manage appointments"

        Returns:
            Validated AbstractSchema
        """
        system = load_prompt("generate_system")
        prompt = render_prompt("generate_user", idea=idea)
        return await self._call(system, prompt, "generate schema")

    async def revise_schema(self, schema: AbstractSchema, request: str) -> AbstractSchema:
        """
        Revise an existing schema from free-text feedback.

        The model returns the complete revised schema; it replaces the old one.

        Args:
            schema: Current schema
            request: e.g. "Add 'dateOfBirth:date' to patients"

        Returns:
            Validated revised AbstractSchema
        """
        system = load_prompt("revise_system")
        prompt = render_prompt(
            "revise_user",
            schema_json=schema.to_json(),
            request=request,
        )
        return await self._call(system, prompt, "revise schema")

    async def close(self) -> None:
        await self._client.close()
