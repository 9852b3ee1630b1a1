"""Model and provider definitions for the provider catalog."""
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from llmrelay.llm.enums import MessageRole


class ModelInfo(BaseModel):
    """A selectable model offered by a provider."""

    name: str = Field(min_length=1, description="Identifier passed to the provider's backend")
    label: str = Field(description="Human-readable display name")
    provider: str = Field(description="Name of the owning provider")
    max_token_allowed: int = Field(gt=0, description="Total context window")
    max_completion_tokens: int = Field(gt=0, description="Maximum generated tokens per response")

    model_config = ConfigDict(frozen=True)

    @field_validator("max_completion_tokens")
    def completion_must_fit_context(cls, v: int, info) -> int:
        if "max_token_allowed" in info.data and v > info.data["max_token_allowed"]:
            raise ValueError("max_completion_tokens must not exceed max_token_allowed")
        return v


class ProviderConfig(BaseModel):
    """Environment variables a provider reads its defaults from."""

    api_token_key: str = Field(description="Environment variable holding the default API key")
    base_url_key: Optional[str] = Field(
        default=None, description="Environment variable that may override the default base URL"
    )

    model_config = ConfigDict(frozen=True)


class ProviderSpec(BaseModel):
    """Static description of a provider: its identity, models and defaults."""

    name: str = Field(min_length=1)
    default_base_url: str = Field(
        description="Base URL used when no override is configured",
        pattern=r"^https?://[^\s/$.?#].[^\s]*$",
    )
    config: ProviderConfig
    static_models: Tuple[ModelInfo, ...] = Field(default_factory=tuple)
    get_api_key_link: Optional[str] = Field(default=None, description="Where users obtain an API key")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_static_models(self) -> "ProviderSpec":
        seen = set()
        for model in self.static_models:
            if model.provider != self.name:
                raise ValueError(f"Model {model.name} belongs to {model.provider}, not {self.name}")
            if model.name in seen:
                raise ValueError(f"Duplicate model {model.name} for provider {self.name}")
            seen.add(model.name)
        return self

    def __str__(self) -> str:
        return f"Provider ({self.name})"


class ProviderSetting(BaseModel):
    """Per-provider override from persisted user configuration."""

    base_url: Optional[str] = None
    api_key: Optional[str] = None
    enabled: bool = True

    model_config = ConfigDict(frozen=True)


class ChatMessage(BaseModel):
    """A single chat message."""

    role: MessageRole
    content: str

    model_config = ConfigDict(use_enum_values=True)
