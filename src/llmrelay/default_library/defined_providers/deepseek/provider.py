"""DeepSeek provider configuration (OpenAI-compatible API)."""
from llmrelay.llm.interfaces.provider_interfaces.openai import create_openai_handle
from llmrelay.llm.models import ModelInfo, ProviderConfig, ProviderSpec
from llmrelay.llm.provider import Provider

DEEPSEEK_PROVIDER_SPEC = ProviderSpec(
    name="Deepseek",
    default_base_url="https://api.deepseek.com",
    config=ProviderConfig(api_token_key="DEEPSEEK_API_KEY"),
    get_api_key_link="https://platform.deepseek.com/apiKeys",
    static_models=(
        ModelInfo(
            name="deepseek-coder",
            label="Deepseek-Coder",
            provider="Deepseek",
            max_token_allowed=64000,
            max_completion_tokens=8192,
        ),
        ModelInfo(
            name="deepseek-chat",
            label="Deepseek-Chat",
            provider="Deepseek",
            max_token_allowed=64000,
            max_completion_tokens=8192,
        ),
        ModelInfo(
            name="deepseek-reasoner",
            label="Deepseek-Reasoner",
            provider="Deepseek",
            max_token_allowed=64000,
            max_completion_tokens=8192,
        ),
    ),
)

DEEPSEEK_PROVIDER = Provider(DEEPSEEK_PROVIDER_SPEC, create_openai_handle)
