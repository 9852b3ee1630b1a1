"""User-specific configuration models."""

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from llmrelay.config.base import LoggingConfig
from llmrelay.default_library import DEFAULT_PROVIDER_NAME
from llmrelay.llm.models import ProviderSetting
from llmrelay.prompts.presets import DEFAULT_PRESET_NAME

logger = logging.getLogger(__name__)

SECRET_FIELDS = {"api_keys": True, "provider_settings": {"__all__": {"api_key"}}}


class UserConfig(BaseModel):
    """User-level LLM configuration: keys, provider overrides and defaults."""

    api_keys: Dict[str, str] = Field(default_factory=dict, description="Explicit API keys keyed by provider name")
    provider_settings: Dict[str, ProviderSetting] = Field(
        default_factory=dict, description="Per-provider base URL and API key overrides"
    )
    default_provider: str = Field(default=DEFAULT_PROVIDER_NAME)
    default_model: Optional[str] = None
    default_preset: str = Field(default=DEFAULT_PRESET_NAME)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(validate_assignment=True)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        provider_names: Iterable[str] = (),
    ) -> "UserConfig":
        """Create configuration from environment variables.

        ``<PROVIDER>_BASE_URL`` variables become provider settings for each name in
        ``provider_names``. API keys are deliberately not copied: providers read them
        from the environment themselves as the lowest-precedence credential tier.
        """
        environ = os.environ if environ is None else environ

        provider_settings = {}
        for name in provider_names:
            base_url = environ.get(f"{name.upper()}_BASE_URL")
            if base_url:
                provider_settings[name] = ProviderSetting(base_url=base_url)

        return cls(
            provider_settings=provider_settings,
            default_provider=environ.get("LLMRELAY_DEFAULT_PROVIDER", DEFAULT_PROVIDER_NAME),
            default_model=environ.get("LLMRELAY_DEFAULT_MODEL"),
            default_preset=environ.get("LLMRELAY_DEFAULT_PRESET", DEFAULT_PRESET_NAME),
            logging=LoggingConfig(
                level=environ.get("LLMRELAY_LOG_LEVEL", "INFO"),
                file=environ.get("LLMRELAY_LOG_FILE"),
            ),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "UserConfig":
        """Create configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        logger.debug(f"Loaded user configuration from {path}")
        return cls(**data)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to a YAML file.

        API keys are never written; only base URLs, flags and defaults are saved.
        """
        data = self.model_dump(mode="json", exclude=SECRET_FIELDS)
        with open(path, "w") as f:
            yaml.dump(data, f, sort_keys=False)
