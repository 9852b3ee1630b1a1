"""Prompt presets and provider-specific prompt fragments."""
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PRESET_NAME = "codeGeneration"


class PromptPreset(BaseModel):
    """Reusable task-specific system prompt instructions."""

    name: str
    system_prompt: str
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    max_tokens: int = Field(default=4096, gt=0)

    model_config = ConfigDict(frozen=True)


class ProviderPromptConfig(BaseModel):
    """Provider-specific prefix and formatting directives."""

    prefix: str
    format: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class PresetCatalog:
    """Read-only lookup tables for presets and provider prompt fragments.

    Preset lookups never fail: unknown names resolve to the default preset.
    Provider prompt keys are stored lower-cased.
    """

    def __init__(
        self,
        presets: Mapping[str, PromptPreset],
        provider_prompts: Mapping[str, ProviderPromptConfig],
        default_preset: str = DEFAULT_PRESET_NAME,
    ):
        if default_preset not in presets:
            raise ValueError(f"Default preset {default_preset} is not defined")
        self._presets = MappingProxyType(dict(presets))
        self._provider_prompts = MappingProxyType({key.lower(): value for key, value in provider_prompts.items()})
        self._default_preset = default_preset

    @property
    def presets(self) -> Mapping[str, PromptPreset]:
        return self._presets

    @property
    def provider_prompts(self) -> Mapping[str, ProviderPromptConfig]:
        return self._provider_prompts

    @property
    def default_preset(self) -> PromptPreset:
        return self._presets[self._default_preset]

    def get_preset(self, name: Optional[str]) -> PromptPreset:
        """Get a preset by name, falling back to the default preset."""
        if name is None:
            return self.default_preset
        return self._presets.get(name, self.default_preset)

    def get_provider_prompt(self, provider_key: str) -> Optional[ProviderPromptConfig]:
        """Get the prompt fragments for a lower-cased provider key."""
        return self._provider_prompts.get(provider_key)

    def preset_names(self) -> List[str]:
        return list(self._presets)


PROMPT_PRESETS: Dict[str, PromptPreset] = {
    "codeGeneration": PromptPreset(
        name="codeGeneration",
        system_prompt=(
            "You are an expert programming assistant. Focus on writing clean, maintainable code "
            "and following best practices."
        ),
        temperature=0.7,
        max_tokens=4096,
    ),
    "debug": PromptPreset(
        name="debug",
        system_prompt=(
            "You are a debugging expert. Focus on identifying the root cause of the problem "
            "and suggesting precise fixes."
        ),
        temperature=0.3,
        max_tokens=2048,
    ),
    "refactor": PromptPreset(
        name="refactor",
        system_prompt=(
            "You are a code refactoring expert. Focus on improving readability and performance "
            "and simplifying complex logic."
        ),
        temperature=0.5,
        max_tokens=4096,
    ),
}

PROVIDER_SPECIFIC_PROMPTS: Dict[str, ProviderPromptConfig] = {
    "anthropic": ProviderPromptConfig(
        prefix="You are Claude, an AI assistant by Anthropic.",
        format="Think step by step.",
    ),
    "openai": ProviderPromptConfig(
        prefix="You are GPT, a helpful coding assistant by OpenAI.",
        format="Provide concise and accurate responses.",
    ),
    "deepseek": ProviderPromptConfig(
        prefix="You are DeepSeek Coder, an expert in programming.",
        format="Focus on code quality and performance.",
    ),
    "glm": ProviderPromptConfig(
        prefix="You are GLM, a coding assistant by Zhipu AI.",
        format="Answer with complete, runnable code and keep explanations brief.",
    ),
}

DEFAULT_CATALOG = PresetCatalog(PROMPT_PRESETS, PROVIDER_SPECIFIC_PROMPTS)
