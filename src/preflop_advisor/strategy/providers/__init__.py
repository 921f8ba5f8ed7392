"""Chat-completion providers."""

from .base import ChatProvider
from .openai_ import OpenAIChatProvider

__all__ = ["ChatProvider", "OpenAIChatProvider"]
