"""Anthropic provider configuration."""
from llmrelay.llm.interfaces.provider_interfaces.anthropic import create_anthropic_handle
from llmrelay.llm.models import ModelInfo, ProviderConfig, ProviderSpec
from llmrelay.llm.provider import Provider

ANTHROPIC_PROVIDER_SPEC = ProviderSpec(
    name="Anthropic",
    default_base_url="https://api.anthropic.com",
    config=ProviderConfig(api_token_key="ANTHROPIC_API_KEY"),
    get_api_key_link="https://console.anthropic.com/settings/keys",
    static_models=(
        ModelInfo(
            name="claude-3-5-sonnet-latest",
            label="Claude 3.5 Sonnet",
            provider="Anthropic",
            max_token_allowed=200000,
            max_completion_tokens=8192,
        ),
        ModelInfo(
            name="claude-3-5-haiku-latest",
            label="Claude 3.5 Haiku",
            provider="Anthropic",
            max_token_allowed=200000,
            max_completion_tokens=8192,
        ),
    ),
)

ANTHROPIC_PROVIDER = Provider(ANTHROPIC_PROVIDER_SPEC, create_anthropic_handle)
