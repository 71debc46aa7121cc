# tests/unit/test_llm_clients.py
"""Tests for the provider lookup table and the per-provider clients."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from boilr.config import ApiKeys, BoilrConfig, Provider
from boilr.errors import CredentialMissingError, SchemaValidationError
from boilr.llm import (
    PROVIDERS,
    AnthropicClient,
    GeminiClient,
    OpenAIClient,
    create_llm_client,
)
from boilr.schema import AbstractSchema

SCHEMA = AbstractSchema.json_schema()


class TestProviderTable:
    def test_every_provider_has_an_entry(self):
        assert set(PROVIDERS) == set(Provider)

    @pytest.mark.parametrize(
        "provider, client_class, model",
        [
            (Provider.GEMINI, GeminiClient, "gemini-2.5-pro"),
            (Provider.OPENAI, OpenAIClient, "gpt-5-codex"),
            (Provider.ANTHROPIC, AnthropicClient, "claude-sonnet-4-5-20250929"),
        ],
    )
    def test_create_llm_client(self, provider, client_class, model):
        client = create_llm_client(BoilrConfig.for_provider(provider, "key"))
        assert isinstance(client, client_class)
        assert client.model == model
        assert client.provider is provider
        assert client._client is None  # Lazy-loaded


class TestMissingCredential:
    def test_openai_with_empty_keys_fails_before_network(self):
        config = BoilrConfig(llm_provider=Provider.OPENAI, api_keys=ApiKeys())

        with patch("openai.AsyncOpenAI") as mock_openai:
            with pytest.raises(CredentialMissingError) as exc_info:
                create_llm_client(config)

        mock_openai.assert_not_called()
        assert "OpenAI API key not found in config" in str(exc_info.value)
        assert "boilr config" in str(exc_info.value)

    def test_key_for_other_provider_does_not_count(self):
        config = BoilrConfig(llm_provider=Provider.ANTHROPIC, api_keys=ApiKeys(gemini="g"))
        with pytest.raises(CredentialMissingError, match="Anthropic API key not found"):
            create_llm_client(config)

    @pytest.mark.parametrize("key", ["", "   "])
    def test_blank_key(self, key):
        config = BoilrConfig(llm_provider=Provider.GEMINI, api_keys=ApiKeys(gemini=key))
        with pytest.raises(CredentialMissingError, match="Gemini API key not found"):
            create_llm_client(config)

    def test_uses_config_key_lookup(self):
        config = BoilrConfig.for_provider(Provider.OPENAI, "sk-test")
        with patch.object(BoilrConfig, "api_key_for", return_value=None) as mock_lookup:
            with pytest.raises(CredentialMissingError):
                create_llm_client(config)
        mock_lookup.assert_called_once_with(Provider.OPENAI)


class TestOpenAIClient:
    @pytest.fixture
    def mock_openai(self):
        with patch("openai.AsyncOpenAI") as mock_openai_class:
            mock_client = AsyncMock()
            mock_openai_class.return_value = mock_client
            mock_client.responses.create.return_value = MagicMock(output_text='{"models": []}')
            yield mock_openai_class, mock_client

    @pytest.mark.asyncio
    async def test_generate_structured(self, mock_openai):
        mock_openai_class, mock_client = mock_openai
        client = OpenAIClient(api_key="sk-test", model="test-model")

        reply = await client.generate_structured("SYS", "USER", SCHEMA, "abstract_schema")

        assert reply == '{"models": []}'
        mock_openai_class.assert_called_once_with(api_key="sk-test")
        kwargs = mock_client.responses.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["instructions"] == "SYS"
        assert kwargs["input"] == "USER"
        fmt = kwargs["text"]["format"]
        assert fmt["type"] == "json_schema"
        assert fmt["name"] == "abstract_schema"
        assert fmt["schema"] is SCHEMA

    @pytest.mark.asyncio
    async def test_errors_propagate(self, mock_openai):
        _, mock_client = mock_openai
        mock_client.responses.create.side_effect = RuntimeError("Error code: 401")
        client = OpenAIClient(api_key="sk-test")

        with pytest.raises(RuntimeError, match="401"):
            await client.generate_structured("SYS", "USER", SCHEMA, "abstract_schema")

    @pytest.mark.asyncio
    async def test_close(self, mock_openai):
        _, mock_client = mock_openai
        client = OpenAIClient(api_key="sk-test")
        _ = client.client
        await client.close()
        mock_client.close.assert_awaited_once()
        assert client._client is None


class TestAnthropicClient:
    @pytest.fixture
    def mock_anthropic(self):
        with patch("anthropic.AsyncAnthropic") as mock_anthropic_class:
            mock_client = AsyncMock()
            mock_anthropic_class.return_value = mock_client
            yield mock_client

    @staticmethod
    def _response(*blocks):
        response = MagicMock()
        response.content = list(blocks)
        response.stop_reason = "tool_use"
        return response

    @staticmethod
    def _block(kind, **attrs):
        block = MagicMock()
        block.type = kind
        for key, value in attrs.items():
            setattr(block, key, value)
        return block

    @pytest.mark.asyncio
    async def test_returns_forced_tool_input(self, mock_anthropic, todo_schema_dict):
        mock_anthropic.messages.create.return_value = self._response(
            self._block("text", text="Here you go"),
            self._block("tool_use", input=todo_schema_dict),
        )
        client = AnthropicClient(api_key="sk-ant", model="test-model")

        reply = await client.generate_structured("SYS", "USER", SCHEMA, "abstract_schema")

        assert reply == todo_schema_dict
        kwargs = mock_anthropic.messages.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["system"] == "SYS"
        assert kwargs["messages"] == [{"role": "user", "content": "USER"}]
        assert kwargs["tools"][0]["name"] == "abstract_schema"
        assert kwargs["tools"][0]["input_schema"] is SCHEMA
        assert kwargs["tool_choice"] == {"type": "tool", "name": "abstract_schema"}

    @pytest.mark.asyncio
    async def test_no_tool_call(self, mock_anthropic):
        mock_anthropic.messages.create.return_value = self._response(
            self._block("text", text="I cannot help")
        )
        client = AnthropicClient(api_key="sk-ant")

        with pytest.raises(SchemaValidationError, match="did not contain"):
            await client.generate_structured("SYS", "USER", SCHEMA, "abstract_schema")


class TestGeminiClient:
    @pytest.fixture
    def mock_genai(self):
        with patch("google.genai.Client") as mock_genai_class:
            mock_client = MagicMock()
            mock_client.aio.models.generate_content = AsyncMock(
                return_value=MagicMock(text='{"models": []}')
            )
            mock_genai_class.return_value = mock_client
            yield mock_genai_class, mock_client

    @pytest.mark.asyncio
    async def test_generate_structured(self, mock_genai):
        mock_genai_class, mock_client = mock_genai
        client = GeminiClient(api_key="g-key", model="test-model")

        reply = await client.generate_structured("SYS", "USER", SCHEMA, "abstract_schema")

        assert reply == '{"models": []}'
        mock_genai_class.assert_called_once_with(api_key="g-key")
        kwargs = mock_client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["contents"] == "USER"
        assert kwargs["config"].system_instruction == "SYS"
        assert kwargs["config"].response_mime_type == "application/json"
        assert kwargs["config"].response_json_schema == SCHEMA
