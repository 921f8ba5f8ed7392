"""Chat provider base interface."""

from abc import ABC, abstractmethod
from typing import Dict, List


class ChatProvider(ABC):
    @abstractmethod
    def complete(self, messages: List[Dict[str, str]]) -> str:  # pragma: no cover
        """Send the messages and return the completion text, stripped."""
        raise NotImplementedError
