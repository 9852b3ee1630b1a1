"""Credential resolution for provider API keys and base URLs.

This module is the only place in llmrelay that reads secrets. Keys are looked
up across three tiers, in strict order of precedence:

1. An explicit per-request key in ``api_keys[provider_name]``.
2. The persisted provider setting in ``provider_settings[provider_name]``.
3. The environment variable named by ``ProviderConfig.api_token_key``.

The base URL is resolved independently and falls back to the provider's
compiled-in default when no tier supplies one.
"""
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from llmrelay.llm.enums import CredentialSource
from llmrelay.llm.exceptions import MissingCredentialError
from llmrelay.llm.models import ProviderConfig, ProviderSetting

logger = logging.getLogger(__name__)


class ResolvedCredentials(BaseModel):
    """API key and base URL selected for one provider call."""

    api_key: str
    base_url: str
    source: CredentialSource

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return f"ResolvedCredentials(api_key='********', base_url={self.base_url!r}, source={self.source.value!r})"

    __str__ = __repr__


def _clean(value: Optional[str]) -> Optional[str]:
    """Normalise blank values to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _strip_trailing_slash(url: str) -> str:
    return url.rstrip("/")


def resolve_credentials(
    provider_name: str,
    config: ProviderConfig,
    default_base_url: str,
    server_env: Optional[Mapping[str, str]] = None,
    api_keys: Optional[Mapping[str, str]] = None,
    provider_settings: Optional[Mapping[str, Union[ProviderSetting, Mapping[str, Any]]]] = None,
) -> ResolvedCredentials:
    """Resolve the API key and base URL to use for a provider.

    Args:
        provider_name: Declared name of the provider
        config: The provider's environment variable declarations
        default_base_url: Base URL used when no tier overrides it
        server_env: Mapping of environment variable name to value
        api_keys: Explicit per-request keys keyed by provider name
        provider_settings: Persisted per-provider settings keyed by provider name,
            as ``ProviderSetting`` objects or plain mappings with the same fields

    Returns:
        ResolvedCredentials for this call

    Raises:
        MissingCredentialError: If no tier supplies a non-empty key
        ValidationError: If a plain-mapping setting has invalid fields
    """
    server_env = server_env or {}
    setting = (provider_settings or {}).get(provider_name)
    if isinstance(setting, Mapping):
        setting = ProviderSetting.model_validate(setting)
    if setting is not None and not setting.enabled:
        logger.debug(f"Ignoring disabled provider settings for {provider_name}")
        setting = None

    candidates = (
        (CredentialSource.EXPLICIT, (api_keys or {}).get(provider_name)),
        (CredentialSource.PROVIDER_SETTINGS, setting.api_key if setting else None),
        (CredentialSource.ENVIRONMENT, server_env.get(config.api_token_key)),
    )
    api_key, source = None, None
    for tier, value in candidates:
        api_key = _clean(value)
        if api_key:
            source = tier
            break

    if not api_key or source is None:
        logger.error(f"No API key found for {provider_name}; set {config.api_token_key} or pass one explicitly")
        raise MissingCredentialError(provider_name, config.api_token_key)

    base_url = _clean(setting.base_url if setting else None)
    if not base_url and config.base_url_key:
        base_url = _clean(server_env.get(config.base_url_key))
    base_url = _strip_trailing_slash(base_url or default_base_url)

    logger.debug(f"Resolved {provider_name} credentials from {source.value} (base URL {base_url})")
    return ResolvedCredentials(api_key=api_key, base_url=base_url, source=source)
