# boilr/llm/__init__.py
"""LLM integration: provider clients and schema design calls."""

from .anthropic_client import AnthropicClient
from .designer import SchemaDesigner, map_provider_error
from .factory import PROVIDERS, create_llm_client
from .gemini_client import GeminiClient
from .openai_client import OpenAIClient
from .types import ProviderSpec, StructuredClient

__all__ = [
    "SchemaDesigner",
    "map_provider_error",
    "create_llm_client",
    "PROVIDERS",
    "ProviderSpec",
    "StructuredClient",
    "GeminiClient",
    "OpenAIClient",
    "AnthropicClient",
]
