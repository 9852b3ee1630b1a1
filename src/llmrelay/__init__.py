"""llmrelay: provider registry, credential resolution and system prompt composition."""
import logging

from llmrelay.default_library import DEFAULT_PROVIDER_NAME, create_default_registry
from llmrelay.llm import (
    ChatMessage,
    MissingCredentialError,
    ModelInfo,
    ProviderNotFoundError,
    ProviderRegistry,
    ProviderSetting,
)
from llmrelay.llm.chat import ChatRequest, prepare_chat_request
from llmrelay.prompts import PromptManager

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "DEFAULT_PROVIDER_NAME",
    "MissingCredentialError",
    "ModelInfo",
    "PromptManager",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "ProviderSetting",
    "create_default_registry",
    "prepare_chat_request",
]
