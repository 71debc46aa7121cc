# boilr/config/schema.py
"""
Pydantic configuration models for boilr.

Models use extra="ignore" so unknown YAML keys do not crash loading.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Provider(str, Enum):
    """Supported hosted LLM providers."""

    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def key_prompt(self) -> str:
        return _KEY_PROMPTS[self]


_DISPLAY_NAMES = {
    Provider.GEMINI: "Gemini",
    Provider.OPENAI: "OpenAI",
    Provider.ANTHROPIC: "Claude",
}

_KEY_PROMPTS = {
    Provider.GEMINI: "Please enter your Google AI Studio API Key",
    Provider.OPENAI: "Please enter your OpenAI API Key",
    Provider.ANTHROPIC: "Please enter your Anthropic API Key",
}


class ApiKeys(BaseModel):
    """Per-provider API keys. Only the active provider's key is required."""

    model_config = ConfigDict(extra="ignore")

    gemini: str | None = Field(default=None, description="Google AI Studio API key")
    openai: str | None = Field(default=None, description="OpenAI API key")
    anthropic: str | None = Field(default=None, description="Anthropic API key")


class BoilrConfig(BaseModel):
    """Root configuration persisted to config.yaml."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    llm_provider: Provider = Field(alias="llmProvider", description="LLM provider to use")
    api_keys: ApiKeys = Field(alias="apiKeys", description="API key per provider")

    @classmethod
    def for_provider(cls, provider: Provider, api_key: str) -> "BoilrConfig":
        """Config holding a single provider and its key."""
        return cls(llm_provider=provider, api_keys=ApiKeys(**{provider.value: api_key}))

    def api_key_for(self, provider: Provider | None = None) -> str | None:
        """Stored key for provider (defaults to the active one). Blank counts as missing."""
        provider = provider or self.llm_provider
        key = getattr(self.api_keys, provider.value)
        if key is None or not key.strip():
            return None
        return key

    def to_yaml_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
