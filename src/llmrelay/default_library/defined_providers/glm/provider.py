"""GLM (Zhipu AI / BigModel) provider configuration."""
from llmrelay.llm.interfaces.provider_interfaces.openai import create_openai_handle
from llmrelay.llm.models import ModelInfo, ProviderConfig, ProviderSpec
from llmrelay.llm.provider import Provider

GLM_PROVIDER_SPEC = ProviderSpec(
    name="GLM",
    default_base_url="https://open.bigmodel.cn/api/paas/v4",
    config=ProviderConfig(api_token_key="GLM_API_KEY"),
    get_api_key_link="https://open.bigmodel.cn/usercenter/apikeys",
    static_models=(
        ModelInfo(
            name="glm-4-plus",
            label="GLM-4-Plus",
            provider="GLM",
            max_token_allowed=128000,
            max_completion_tokens=4096,
        ),
        ModelInfo(
            name="glm-4-air",
            label="GLM-4-Air",
            provider="GLM",
            max_token_allowed=128000,
            max_completion_tokens=4096,
        ),
        ModelInfo(
            name="glm-4-flash",
            label="GLM-4-Flash",
            provider="GLM",
            max_token_allowed=128000,
            max_completion_tokens=4096,
        ),
    ),
)

GLM_PROVIDER = Provider(GLM_PROVIDER_SPEC, create_openai_handle)
