"""Provider and model handle interfaces."""
from .base import ModelHandle, ProviderInterface

__all__ = ["ModelHandle", "ProviderInterface"]
