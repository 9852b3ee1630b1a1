"""Root test configuration and common fixtures."""
import logging
from typing import Any, Dict, Optional, Sequence
from unittest.mock import MagicMock

import pytest

from llmrelay.default_library import create_default_registry
from llmrelay.llm.credentials import ResolvedCredentials
from llmrelay.llm.interfaces.base import ModelHandle
from llmrelay.llm.models import ChatMessage, ModelInfo, ProviderConfig, ProviderSpec
from llmrelay.llm.provider import Provider
from llmrelay.llm.provider_registry import ProviderRegistry
from llmrelay.prompts.manager import PromptManager

# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

TEST_API_KEY = "test-api-key"


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as an integration test"
    )


class RecordingHandle(ModelHandle):
    """Handle that records requests instead of calling a backend."""

    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        max_tokens: int,
        temperature: Optional[float] = None,
        token_param: str = "max_tokens",
        **kwargs: Any,
    ) -> str:
        self.client(
            system_prompt=system_prompt,
            messages=list(messages),
            max_tokens=max_tokens,
            temperature=temperature,
            token_param=token_param,
            **kwargs,
        )
        return "recorded"


def create_recording_handle(provider_name: str, model: str, credentials: ResolvedCredentials) -> RecordingHandle:
    return RecordingHandle(provider=provider_name, model=model, base_url=credentials.base_url, client=MagicMock())


def make_spec(name: str = "Acme", models: Sequence[str] = ("acme-large", "acme-small"), **kwargs) -> ProviderSpec:
    """Build a provider spec with simple models for tests."""
    return ProviderSpec(
        name=name,
        default_base_url=kwargs.pop("default_base_url", "https://api.acme.test/v1"),
        config=kwargs.pop("config", ProviderConfig(api_token_key=f"{name.upper()}_API_KEY")),
        static_models=tuple(
            ModelInfo(
                name=model,
                label=model.title(),
                provider=name,
                max_token_allowed=32000,
                max_completion_tokens=4096,
            )
            for model in models
        ),
        **kwargs,
    )


@pytest.fixture
def acme_provider() -> Provider:
    """A provider backed by recording handles."""
    return Provider(make_spec(), create_recording_handle)


@pytest.fixture
def empty_registry() -> ProviderRegistry:
    return ProviderRegistry()


@pytest.fixture
def default_registry() -> ProviderRegistry:
    """Registry with the providers shipped in the default library."""
    return create_default_registry()


@pytest.fixture
def prompt_manager() -> PromptManager:
    return PromptManager()


@pytest.fixture
def server_env() -> Dict[str, str]:
    """Environment with a key for every default provider."""
    return {
        "OPENAI_API_KEY": "env-openai-key",
        "ANTHROPIC_API_KEY": "env-anthropic-key",
        "DEEPSEEK_API_KEY": "env-deepseek-key",
        "GLM_API_KEY": "env-glm-key",
        "ACME_API_KEY": "env-acme-key",
    }


@pytest.fixture
def spec_factory():
    """Factory for provider specs, see ``make_spec``."""
    return make_spec


@pytest.fixture
def handle_factory():
    """Handle factory producing RecordingHandle instances."""
    return create_recording_handle
