# boilr/llm/factory.py
"""Factory for creating the configured provider client."""

import logging

from boilr.config.schema import BoilrConfig, Provider
from boilr.errors import CredentialMissingError

from .anthropic_client import AnthropicClient
from .gemini_client import GeminiClient
from .openai_client import OpenAIClient
from .types import ProviderSpec, StructuredClient

logger = logging.getLogger(__name__)

# One entry per provider; the default model is not user-selectable.
PROVIDERS: dict[Provider, ProviderSpec] = {
    Provider.GEMINI: ProviderSpec(
        provider=Provider.GEMINI,
        label="Gemini",
        default_model="gemini-2.5-pro",
        client_class=GeminiClient,
    ),
    Provider.OPENAI: ProviderSpec(
        provider=Provider.OPENAI,
        label="OpenAI",
        default_model="gpt-5-codex",
        client_class=OpenAIClient,
    ),
    Provider.ANTHROPIC: ProviderSpec(
        provider=Provider.ANTHROPIC,
        label="Anthropic",
        default_model="claude-sonnet-4-5-20250929",
        client_class=AnthropicClient,
    ),
}


def create_llm_client(config: BoilrConfig) -> StructuredClient:
    """
    Create the client for config.llm_provider.

    Args:
        config: Loaded BoilrConfig

    Returns:
        Client bound to the provider's default model

    Raises:
        CredentialMissingError: If the provider has no stored key (no network I/O happens)
    """
    spec = PROVIDERS[config.llm_provider]
    api_key = config.api_key_for(spec.provider)
    if api_key is None:
        raise CredentialMissingError(
            f"{spec.label} API key not found in config. "
            f"Please run 'boilr config' to set it up."
        )

    logger.info(f"Creating {spec.provider.value} client (model={spec.default_model})")
    return spec.client_class(api_key=api_key, model=spec.default_model)
