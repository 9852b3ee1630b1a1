"""Default factory for the provider registry."""
import logging
from typing import List

from llmrelay.default_library.defined_providers.anthropic.provider import ANTHROPIC_PROVIDER
from llmrelay.default_library.defined_providers.deepseek.provider import DEEPSEEK_PROVIDER
from llmrelay.default_library.defined_providers.glm.provider import GLM_PROVIDER
from llmrelay.default_library.defined_providers.openai.provider import OPENAI_PROVIDER
from llmrelay.llm.interfaces.base import ProviderInterface
from llmrelay.llm.provider_registry import ProviderRegistry

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_NAME = OPENAI_PROVIDER.name


def default_providers() -> List[ProviderInterface]:
    """Providers shipped with llmrelay, in catalog order."""
    return [OPENAI_PROVIDER, ANTHROPIC_PROVIDER, DEEPSEEK_PROVIDER, GLM_PROVIDER]


def create_default_registry() -> ProviderRegistry:
    """Create a ProviderRegistry populated with the default providers.

    Returns:
        ProviderRegistry containing every provider from ``default_providers()``
    """
    registry = ProviderRegistry.from_providers(default_providers())
    logger.info(f"Registered {len(registry)} default providers: {', '.join(p.name for p in registry.list())}")
    return registry
