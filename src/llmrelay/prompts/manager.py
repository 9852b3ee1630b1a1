"""Composition of the system prompt sent to a model."""
import logging
from typing import Optional

from llmrelay.prompts.presets import DEFAULT_CATALOG, PresetCatalog, PromptPreset

logger = logging.getLogger(__name__)


class PromptManager:
    """Builds system prompts from a base prompt, a preset and provider directives.

    The composed prompt always reads, top to bottom:

    1. Provider prefix and format directives (only for known providers)
    2. Preset instructions (only when a preset name is given)
    3. The caller's base prompt

    Sections are separated by a blank line.
    """

    def __init__(self, catalog: PresetCatalog = DEFAULT_CATALOG):
        self._catalog = catalog

    @property
    def catalog(self) -> PresetCatalog:
        return self._catalog

    def get_preset(self, name: Optional[str]) -> PromptPreset:
        return self._catalog.get_preset(name)

    def enhance_system_prompt(self, base_prompt: str, provider: str, preset_name: Optional[str] = None) -> str:
        """Compose the system prompt for ``provider``.

        Args:
            base_prompt: Caller-supplied system prompt
            provider: Provider name; matched case-insensitively
            preset_name: Optional preset; unknown names use the default preset

        Returns:
            The composed system prompt
        """
        enhanced_prompt = base_prompt

        if preset_name:
            preset = self.get_preset(preset_name)
            if preset.name != preset_name:
                logger.debug(f"Unknown preset {preset_name}, using {preset.name}")
            enhanced_prompt = f"{preset.system_prompt}\n\n{enhanced_prompt}"

        provider_config = self._catalog.get_provider_prompt(provider.lower())
        if provider_config:
            enhanced_prompt = f"{provider_config.prefix}\n{provider_config.format or ''}\n\n{enhanced_prompt}"

        return enhanced_prompt
