import logging
from typing import Any, Optional, Sequence

from openai import OpenAI

from llmrelay.llm.credentials import ResolvedCredentials
from llmrelay.llm.interfaces.base import ModelHandle
from llmrelay.llm.models import ChatMessage

logger = logging.getLogger(__name__)


class OpenAIModelHandle(ModelHandle):
    """Handle for any backend speaking the OpenAI chat completions API."""

    def complete(
        self,
        system_prompt: str,
        messages: Sequence[ChatMessage],
        max_tokens: int,
        temperature: Optional[float] = None,
        token_param: str = "max_tokens",
        **kwargs: Any,
    ) -> str:
        """Process messages using the chat completions endpoint."""
        request = {
            "model": self.model,
            "messages": [{"role": "system", "content": system_prompt}, *self._conversation(messages)],
            token_param: max_tokens,
        }
        if temperature is not None:
            request["temperature"] = temperature
        request.update(kwargs)

        logger.debug(f"Sending chat completion to {self.provider} ({self.model}) at {self.base_url}")
        response = self.client.chat.completions.create(**request)
        return response.choices[0].message.content or ""


def create_openai_handle(provider_name: str, model: str, credentials: ResolvedCredentials) -> OpenAIModelHandle:
    """Bind an OpenAI SDK client to the resolved credentials."""
    client = OpenAI(api_key=credentials.api_key, base_url=credentials.base_url)
    return OpenAIModelHandle(provider=provider_name, model=model, base_url=credentials.base_url, client=client)
