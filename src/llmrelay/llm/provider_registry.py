"""Registry for LLM providers."""
import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .exceptions import ProviderNotFoundError
from .interfaces.base import ProviderInterface
from .models import ModelInfo

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry of providers indexed by their declared name.

    Providers are registered once at startup. Iteration follows registration
    order and lookups are case-sensitive.
    """

    def __init__(self):
        self._providers: Dict[str, ProviderInterface] = {}

    def register(self, provider: ProviderInterface) -> None:
        """Register a provider.

        Args:
            provider: Provider to register

        Raises:
            ValueError: If a provider with the same name is already registered
        """
        if not isinstance(provider, ProviderInterface):
            raise TypeError(f"{provider!r} does not implement the provider interface")
        if provider.name in self._providers:
            logger.error(f"Provider {provider.name} is already registered")
            raise ValueError(f"Provider {provider.name} is already registered")
        self._providers[provider.name] = provider
        logger.debug(f"Registered provider {provider.name} with {len(provider.static_models)} models")

    def get(self, name: str) -> ProviderInterface:
        """Get a provider by name.

        Raises:
            ProviderNotFoundError: If no provider with this name is registered
        """
        try:
            return self._providers[name]
        except KeyError:
            raise ProviderNotFoundError(name) from None

    def list(self) -> List[ProviderInterface]:
        """Get all registered providers in registration order."""
        return list(self._providers.values())

    def get_model(self, provider: str, model_name: str) -> Optional[ModelInfo]:
        """Get a static model from a provider.

        Args:
            provider: Provider name
            model_name: Model name

        Returns:
            ModelInfo if found, None otherwise

        Raises:
            ProviderNotFoundError: If the provider is not registered
        """
        return next((m for m in self.get(provider).static_models if m.name == model_name), None)

    def list_models(self) -> List[ModelInfo]:
        """Get the static models of every provider, in registration order."""
        return [model for provider in self._providers.values() for model in provider.static_models]

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[ProviderInterface]:
        return iter(self.list())

    @classmethod
    def from_providers(cls, providers: Iterable[ProviderInterface]) -> "ProviderRegistry":
        """Create a registry populated with ``providers`` in the given order."""
        registry = cls()
        for provider in providers:
            registry.register(provider)
        return registry
