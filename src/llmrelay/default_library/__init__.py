"""Compiled-in provider catalog."""
from .default_llm_factory import DEFAULT_PROVIDER_NAME, create_default_registry, default_providers

__all__ = ["DEFAULT_PROVIDER_NAME", "create_default_registry", "default_providers"]
