"""Vendor-specific model handles."""
from .anthropic import AnthropicModelHandle, create_anthropic_handle
from .openai import OpenAIModelHandle, create_openai_handle

__all__ = ["AnthropicModelHandle", "OpenAIModelHandle", "create_anthropic_handle", "create_openai_handle"]
