"""Concrete provider built by composing a static spec with a handle factory."""
import logging
from typing import Callable, Mapping, Optional, Tuple

from llmrelay.llm.credentials import ResolvedCredentials, resolve_credentials
from llmrelay.llm.interfaces.base import ModelHandle
from llmrelay.llm.models import ModelInfo, ProviderConfig, ProviderSetting, ProviderSpec

logger = logging.getLogger(__name__)

HandleFactory = Callable[[str, str, ResolvedCredentials], ModelHandle]


class Provider:
    """A named backend offering a fixed set of models.

    The provider's identity and model catalog come from its ``ProviderSpec``;
    the vendor SDK it binds to comes from its ``handle_factory``. Every vendor
    is expressed this way, so callers can treat all providers identically.
    """

    def __init__(self, spec: ProviderSpec, handle_factory: HandleFactory):
        self._spec = spec
        self._handle_factory = handle_factory

    @property
    def spec(self) -> ProviderSpec:
        return self._spec

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def static_models(self) -> Tuple[ModelInfo, ...]:
        return self._spec.static_models

    @property
    def config(self) -> ProviderConfig:
        return self._spec.config

    @property
    def get_api_key_link(self) -> Optional[str]:
        return self._spec.get_api_key_link

    @property
    def default_base_url(self) -> str:
        return self._spec.default_base_url

    def get_model(self, model_name: str) -> Optional[ModelInfo]:
        """Get a static model by name."""
        return next((m for m in self._spec.static_models if m.name == model_name), None)

    def get_model_instance(
        self,
        model: str,
        server_env: Optional[Mapping[str, str]] = None,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
    ) -> ModelHandle:
        """Create a credential-bound handle for ``model``.

        Args:
            model: Model identifier passed to the backend
            server_env: Environment variable mapping
            api_keys: Explicit per-request keys keyed by provider name
            provider_settings: Persisted settings keyed by provider name

        Returns:
            A handle ready for use; no network I/O is performed

        Raises:
            MissingCredentialError: If no API key can be resolved
        """
        credentials = resolve_credentials(
            self.name,
            self.config,
            self.default_base_url,
            server_env=server_env,
            api_keys=api_keys,
            provider_settings=provider_settings,
        )
        logger.debug(f"Creating {self.name} handle for model {model}")
        return self._handle_factory(self.name, model, credentials)

    def __repr__(self) -> str:
        return f"Provider(name={self.name!r}, models={len(self.static_models)})"
