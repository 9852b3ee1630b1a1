"""Common enums for LLM functionality."""
from enum import Enum


class CredentialSource(str, Enum):
    """The credential tier an API key was resolved from, highest precedence first."""

    EXPLICIT = "explicit"
    PROVIDER_SETTINGS = "provider_settings"
    ENVIRONMENT = "environment"

    def __str__(self) -> str:
        return self.value


class MessageRole(str, Enum):
    """Roles a chat message can carry."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"

    def __str__(self) -> str:
        return self.value
