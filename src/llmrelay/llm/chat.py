"""Preparation of chat requests: the path from a provider name to a ready-to-send request."""
import logging
import re
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from llmrelay.llm.enums import MessageRole
from llmrelay.llm.exceptions import ModelNotFoundError
from llmrelay.llm.interfaces.base import ModelHandle
from llmrelay.llm.models import ChatMessage, ModelInfo, ProviderSetting
from llmrelay.llm.provider_registry import ProviderRegistry
from llmrelay.prompts.manager import PromptManager

if TYPE_CHECKING:
    from llmrelay.config.user import UserConfig

logger = logging.getLogger(__name__)

MAX_TOKENS = 32000

# Used when a model does not declare its own completion limit
PROVIDER_COMPLETION_LIMITS: Dict[str, int] = {
    "OpenAI": 16384,
    "Anthropic": 8192,
    "Deepseek": 8192,
    "GLM": 4096,
}

REASONING_MODEL_PATTERN = re.compile(r"^(o1|o3|o4|gpt-5)", re.IGNORECASE)

_THOUGHT_DIV = re.compile(r'<div class=\\?"__boltThought__\\?">.*?</div>', re.DOTALL)
_THINK_BLOCK = re.compile(r"<think>.*?</think>", re.DOTALL)
_LOCKFILE_ACTION = re.compile(r'<boltAction type="file" filePath="package-lock\.json">.*?</boltAction>', re.DOTALL)


def is_reasoning_model(model_name: str) -> bool:
    """Reasoning models reject sampling parameters and use max_completion_tokens."""
    return bool(REASONING_MODEL_PATTERN.match(model_name))


def get_completion_token_limit(model: ModelInfo) -> int:
    if model.max_completion_tokens and model.max_completion_tokens > 0:
        return model.max_completion_tokens

    provider_default = PROVIDER_COMPLETION_LIMITS.get(model.provider)
    if provider_default:
        return provider_default

    return min(MAX_TOKENS, 16384)


def sanitize_text(text: str) -> str:
    """Remove model thinking blocks and generated lockfile actions from message content."""
    sanitized = _THOUGHT_DIV.sub("", text)
    sanitized = _THINK_BLOCK.sub("", sanitized)
    sanitized = _LOCKFILE_ACTION.sub("", sanitized)
    return sanitized.strip()


def sanitize_messages(messages: Sequence[ChatMessage]) -> List[ChatMessage]:
    return [
        message.model_copy(update={"content": sanitize_text(message.content)})
        if message.role in (MessageRole.USER, MessageRole.ASSISTANT)
        else message
        for message in messages
    ]


class ChatRequest(BaseModel):
    """Everything needed to issue one chat completion."""

    handle: ModelHandle
    model: ModelInfo
    system_prompt: str
    messages: List[ChatMessage] = Field(default_factory=list)
    max_tokens: int = Field(gt=0)
    temperature: Optional[float] = None
    token_param: str = "max_tokens"

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def send(self, **kwargs: Any) -> str:
        """Send the request through the bound handle and return the generated text."""
        return self.handle.complete(
            self.system_prompt,
            self.messages,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            token_param=self.token_param,
            **kwargs,
        )


def resolve_model(registry: ProviderRegistry, provider_name: str, model_name: Optional[str]) -> ModelInfo:
    """Find a provider's model, falling back to its first static model.

    Raises:
        ProviderNotFoundError: If the provider is not registered
        ModelNotFoundError: If the provider has no static models
    """
    provider = registry.get(provider_name)
    if not provider.static_models:
        raise ModelNotFoundError(provider_name, model_name)

    model = registry.get_model(provider_name, model_name) if model_name else None
    if model is None:
        model = provider.static_models[0]
        logger.warning(f"Model {model_name} not found for {provider_name}, falling back to {model.name}")
    return model


def prepare_chat_request(
    registry: ProviderRegistry,
    prompt_manager: PromptManager,
    provider_name: Optional[str],
    model_name: Optional[str],
    base_prompt: str,
    messages: Sequence[ChatMessage],
    server_env: Optional[Mapping[str, str]] = None,
    api_keys: Optional[Mapping[str, str]] = None,
    provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
    preset_name: Optional[str] = None,
    config: Optional["UserConfig"] = None,
) -> ChatRequest:
    """Resolve provider, model, credentials and system prompt for a chat turn.

    Args:
        registry: Registry holding the available providers
        prompt_manager: Composes the system prompt
        provider_name: Provider the request targets; None uses ``config.default_provider``
        model_name: Requested model; unknown names fall back to the provider's first model
        base_prompt: Base system prompt before preset and provider directives
        messages: Conversation so far
        server_env: Environment variable mapping
        api_keys: Explicit per-request keys keyed by provider name
        provider_settings: Persisted settings keyed by provider name
        preset_name: Optional prompt preset; None uses ``config.default_preset``
        config: Optional user configuration supplying defaults, keys and settings.
            Per-call ``api_keys`` and ``provider_settings`` entries override the
            configured ones for the same provider.

    Returns:
        ChatRequest ready to send

    Raises:
        ValueError: If neither provider_name nor config names a provider
        ProviderNotFoundError: If the provider is not registered
        ModelNotFoundError: If the provider offers no models
        MissingCredentialError: If no API key can be resolved
    """
    if config is not None:
        if provider_name is None:
            provider_name = config.default_provider
            model_name = model_name or config.default_model
        preset_name = preset_name or config.default_preset
        api_keys = {**config.api_keys, **(api_keys or {})}
        provider_settings = {**config.provider_settings, **(provider_settings or {})}
    if not provider_name:
        raise ValueError("provider_name is required when no user configuration is given")

    provider = registry.get(provider_name)
    model = resolve_model(registry, provider_name, model_name)

    handle = provider.get_model_instance(
        model.name,
        server_env=server_env,
        api_keys=api_keys,
        provider_settings=provider_settings,
    )
    system_prompt = prompt_manager.enhance_system_prompt(base_prompt, provider.name, preset_name)
    preset = prompt_manager.get_preset(preset_name)

    reasoning = is_reasoning_model(model.name)
    request = ChatRequest(
        handle=handle,
        model=model,
        system_prompt=system_prompt,
        messages=sanitize_messages(messages),
        max_tokens=get_completion_token_limit(model),
        temperature=1.0 if reasoning else preset.temperature,
        token_param="max_completion_tokens" if reasoning else "max_tokens",
    )
    logger.debug(
        f"Prepared chat request for {provider.name}/{model.name} "
        f"({request.token_param}={request.max_tokens}, temperature={request.temperature})"
    )
    return request
