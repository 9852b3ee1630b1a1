"""Exceptions raised while resolving providers, models and credentials."""
from typing import Optional


class LLMRelayError(Exception):
    """Base class for all llmrelay errors."""


class ProviderNotFoundError(LLMRelayError, LookupError):
    """Raised when no provider with the requested name has been registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Provider '{name}' is not registered")


class ModelNotFoundError(LLMRelayError, LookupError):
    """Raised when a provider has no model that can serve a request."""

    def __init__(self, provider_name: str, model_name: Optional[str] = None):
        self.provider_name = provider_name
        self.model_name = model_name
        if model_name:
            message = f"Model '{model_name}' not found for provider {provider_name}"
        else:
            message = f"Provider {provider_name} does not offer any models"
        super().__init__(message)


class MissingCredentialError(LLMRelayError, ValueError):
    """Raised when no API key can be resolved for a provider from any credential tier.

    This is user-actionable: the user has to configure a key, either per request,
    in the provider settings, or in the environment variable named by ``env_var``.
    """

    def __init__(self, provider_name: str, env_var: Optional[str] = None):
        self.provider_name = provider_name
        self.env_var = env_var
        super().__init__(f"Missing API key for {provider_name} provider")
