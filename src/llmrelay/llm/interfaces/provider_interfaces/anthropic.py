import logging
from typing import Any, Optional, Sequence

from anthropic import Anthropic

from llmrelay.llm.credentials import ResolvedCredentials
from llmrelay.llm.interfaces.base import ModelHandle
from llmrelay.llm.models import ChatMessage

logger = logging.getLogger(__name__)


class AnthropicModelHandle(ModelHandle):
    """Anthropic Claude handle using the Messages API."""

    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        max_tokens: int,
        temperature: Optional[float] = None,
        token_param: str = "max_tokens",
        **kwargs: Any,
    ) -> str:
        # The Messages API takes the system prompt separately and always names the limit max_tokens
        request = {
            "model": self.model,
            "system": system_prompt,
            "messages": self._conversation(messages),
            "max_tokens": max_tokens,
        }
        if temperature is not None:
            request["temperature"] = temperature
        request.update(kwargs)

        logger.debug(f"Sending message request to {self.provider} ({self.model}) at {self.base_url}")
        response = self.client.messages.create(**request)
        return "".join(block.text for block in response.content if getattr(block, "type", None) == "text")


def create_anthropic_handle(provider_name: str, model: str, credentials: ResolvedCredentials) -> AnthropicModelHandle:
    """Bind an Anthropic SDK client to the resolved credentials."""
    client = Anthropic(api_key=credentials.api_key, base_url=credentials.base_url)
    return AnthropicModelHandle(provider=provider_name, model=model, base_url=credentials.base_url, client=client)
