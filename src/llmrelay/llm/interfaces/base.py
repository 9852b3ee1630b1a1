"""Base interfaces for LLM providers and model handles."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from llmrelay.llm.enums import MessageRole
from llmrelay.llm.models import ChatMessage, ModelInfo, ProviderConfig, ProviderSetting


class ModelHandle(BaseModel, ABC):
    """Credential-bound handle for one model of one provider.

    A handle wraps a vendor SDK client that has already been parameterised with
    the resolved base URL and API key. Building a handle never touches the
    network; only :meth:`complete` does.

    Subclasses shape requests and responses for their vendor:

    1. Override :meth:`complete` to translate ``ChatMessage`` objects into the
       vendor's request format.
    2. Return the generated text as a plain string.
    """

    provider: str = Field(description="Name of the provider the handle belongs to")
    model: str = Field(description="Model identifier sent to the backend")
    base_url: str = Field(description="Base URL the client is bound to")
    client: Any = Field(description="Vendor SDK client", repr=False)

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        max_tokens: int,
        temperature: Optional[float] = None,
        token_param: str = "max_tokens",
        **kwargs: Any,
    ) -> str:
        """Issue a single non-streaming completion request and return the text."""

    @staticmethod
    def _conversation(messages: Sequence[ChatMessage]) -> List[Dict[str, str]]:
        """Convert messages to role/content dicts, dropping system messages."""
        return [
            {"role": str(message.role), "content": message.content}
            for message in messages
            if message.role != MessageRole.SYSTEM
        ]


@runtime_checkable
class ProviderInterface(Protocol):
    """Contract every provider satisfies.

    The registry and the chat layer only rely on this contract, so any object
    exposing these members can be registered.
    """

    @property
    def name(self) -> str: ...

    @property
    def static_models(self) -> Tuple[ModelInfo, ...]: ...

    @property
    def config(self) -> ProviderConfig: ...

    @property
    def get_api_key_link(self) -> Optional[str]: ...

    @property
    def default_base_url(self) -> str: ...

    def get_model_instance(
        self,
        model: str,
        server_env: Optional[Mapping[str, str]] = None,
        api_keys: Optional[Mapping[str, str]] = None,
        provider_settings: Optional[Mapping[str, ProviderSetting]] = None,
    ) -> ModelHandle: ...
