"""Tests for vendor-specific request shaping in model handles."""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from llmrelay.llm.interfaces.provider_interfaces.anthropic import AnthropicModelHandle
from llmrelay.llm.interfaces.provider_interfaces.openai import OpenAIModelHandle
from llmrelay.llm.models import ChatMessage

MESSAGES = [
    ChatMessage(role="system", content="ignored"),
    ChatMessage(role="user", content="Write a function"),
    ChatMessage(role="assistant", content="Which language?"),
    ChatMessage(role="user", content="Python"),
]


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content="def f(): pass"))]
    )
    return client


@pytest.fixture
def anthropic_client():
    client = MagicMock()
    client.messages.create.return_value = SimpleNamespace(
        content=[
            SimpleNamespace(type="thinking", thinking="hmm"),
            SimpleNamespace(type="text", text="def f():"),
            SimpleNamespace(type="text", text=" pass"),
        ]
    )
    return client


class TestOpenAIModelHandle:
    def test_complete_shapes_chat_completion(self, openai_client):
        handle = OpenAIModelHandle(provider="GLM", model="glm-4-plus", base_url="https://x.test", client=openai_client)

        result = handle.complete("SYSTEM", MESSAGES, max_tokens=4096, temperature=0.7)

        assert result == "def f(): pass"
        openai_client.chat.completions.create.assert_called_once_with(
            model="glm-4-plus",
            messages=[
                {"role": "system", "content": "SYSTEM"},
                {"role": "user", "content": "Write a function"},
                {"role": "assistant", "content": "Which language?"},
                {"role": "user", "content": "Python"},
            ],
            max_tokens=4096,
            temperature=0.7,
        )

    def test_reasoning_token_param_and_no_temperature(self, openai_client):
        handle = OpenAIModelHandle(provider="OpenAI", model="o3-mini", base_url="https://x.test", client=openai_client)

        handle.complete("SYSTEM", [], max_tokens=1000, token_param="max_completion_tokens", timeout=30)

        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["max_completion_tokens"] == 1000
        assert "max_tokens" not in kwargs
        assert "temperature" not in kwargs
        assert kwargs["timeout"] == 30

    def test_empty_content_returns_empty_string(self, openai_client):
        openai_client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=None))]
        )
        handle = OpenAIModelHandle(provider="OpenAI", model="gpt-4o", base_url="https://x.test", client=openai_client)
        assert handle.complete("SYSTEM", [], max_tokens=10) == ""


class TestAnthropicModelHandle:
    def test_complete_uses_messages_api(self, anthropic_client):
        handle = AnthropicModelHandle(
            provider="Anthropic", model="claude-3-5-haiku-latest", base_url="https://x.test", client=anthropic_client
        )

        result = handle.complete("SYSTEM", MESSAGES, max_tokens=8192, temperature=0.3)

        assert result == "def f(): pass"
        anthropic_client.messages.create.assert_called_once_with(
            model="claude-3-5-haiku-latest",
            system="SYSTEM",
            messages=[
                {"role": "user", "content": "Write a function"},
                {"role": "assistant", "content": "Which language?"},
                {"role": "user", "content": "Python"},
            ],
            max_tokens=8192,
            temperature=0.3,
        )

    def test_token_param_is_always_max_tokens(self, anthropic_client):
        handle = AnthropicModelHandle(
            provider="Anthropic", model="claude-3-5-haiku-latest", base_url="https://x.test", client=anthropic_client
        )
        handle.complete("SYSTEM", [], max_tokens=100, token_param="max_completion_tokens")
        kwargs = anthropic_client.messages.create.call_args.kwargs
        assert kwargs["max_tokens"] == 100
        assert "max_completion_tokens" not in kwargs


def test_handles_are_immutable(openai_client):
    handle = OpenAIModelHandle(provider="OpenAI", model="gpt-4o", base_url="https://x.test", client=openai_client)
    with pytest.raises(ValidationError):
        handle.model = "gpt-4o-mini"


def test_handle_repr_hides_client(openai_client):
    handle = OpenAIModelHandle(provider="OpenAI", model="gpt-4o", base_url="https://x.test", client=openai_client)
    assert "client" not in repr(handle)
