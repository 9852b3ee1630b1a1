"""LLM module initialization."""
from .credentials import ResolvedCredentials, resolve_credentials
from .enums import CredentialSource, MessageRole
from .exceptions import LLMRelayError, MissingCredentialError, ModelNotFoundError, ProviderNotFoundError
from .interfaces.base import ModelHandle, ProviderInterface
from .models import ChatMessage, ModelInfo, ProviderConfig, ProviderSetting, ProviderSpec
from .provider import Provider
from .provider_registry import ProviderRegistry

__all__ = [
    "ChatMessage",
    "CredentialSource",
    "LLMRelayError",
    "MessageRole",
    "MissingCredentialError",
    "ModelHandle",
    "ModelInfo",
    "ModelNotFoundError",
    "Provider",
    "ProviderConfig",
    "ProviderInterface",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "ProviderSetting",
    "ProviderSpec",
    "ResolvedCredentials",
    "resolve_credentials",
]
