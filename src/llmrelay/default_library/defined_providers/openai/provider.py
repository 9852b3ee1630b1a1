"""OpenAI provider configuration."""
from llmrelay.llm.interfaces.provider_interfaces.openai import create_openai_handle
from llmrelay.llm.models import ModelInfo, ProviderConfig, ProviderSpec
from llmrelay.llm.provider import Provider

OPENAI_PROVIDER_SPEC = ProviderSpec(
    name="OpenAI",
    default_base_url="https://api.openai.com/v1",
    config=ProviderConfig(api_token_key="OPENAI_API_KEY", base_url_key="OPENAI_BASE_URL"),
    get_api_key_link="https://platform.openai.com/api-keys",
    static_models=(
        ModelInfo(
            name="gpt-4o",
            label="GPT-4o",
            provider="OpenAI",
            max_token_allowed=128000,
            max_completion_tokens=16384,
        ),
        ModelInfo(
            name="gpt-4o-mini",
            label="GPT-4o Mini",
            provider="OpenAI",
            max_token_allowed=128000,
            max_completion_tokens=16384,
        ),
        ModelInfo(
            name="o3-mini",
            label="o3-mini",
            provider="OpenAI",
            max_token_allowed=200000,
            max_completion_tokens=100000,
        ),
    ),
)

OPENAI_PROVIDER = Provider(OPENAI_PROVIDER_SPEC, create_openai_handle)
