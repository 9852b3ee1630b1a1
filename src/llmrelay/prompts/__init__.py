"""Prompt presets and system prompt composition."""
from .manager import PromptManager
from .presets import (
    DEFAULT_CATALOG,
    DEFAULT_PRESET_NAME,
    PROMPT_PRESETS,
    PROVIDER_SPECIFIC_PROMPTS,
    PresetCatalog,
    PromptPreset,
    ProviderPromptConfig,
)

__all__ = [
    "DEFAULT_CATALOG",
    "DEFAULT_PRESET_NAME",
    "PROMPT_PRESETS",
    "PROVIDER_SPECIFIC_PROMPTS",
    "PresetCatalog",
    "PromptManager",
    "PromptPreset",
    "ProviderPromptConfig",
]
