"""OpenAI-compatible chat-completion provider."""

from typing import Any, Dict, List, Optional

import httpx

from ...config import AppSettings
from ...errors import ConfigurationError, UpstreamError
from ...telemetry.logger import get_logger
from .base import ChatProvider


def extract_content(data: Any) -> str:
    """Lit choices[0].message.content ; chaîne vide si le chemin est absent."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content.strip() if isinstance(content, str) else ""


class OpenAIChatProvider(ChatProvider):
    """One POST per call, no retry, no streaming."""

    def __init__(
        self,
        config: AppSettings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config
        self.transport = transport

    def _client(self) -> httpx.Client:
        kwargs: Dict[str, Any] = {"transport": self.transport}
        if self.config.TIMEOUT_S is not None:
            kwargs["timeout"] = self.config.TIMEOUT_S
        return httpx.Client(**kwargs)

    def complete(self, messages: List[Dict[str, str]]) -> str:
        api_key = self.config.OPENAI_API_KEY
        if not api_key:
            raise ConfigurationError()

        logger = get_logger(self.config)
        payload = {
            "model": self.config.MODEL_NAME,
            "temperature": self.config.TEMPERATURE,
            "messages": messages,
        }
        headers = {"Authorization": f"Bearer {api_key}"}

        logger.debug("POST %s model=%s", self.config.chat_url, self.config.MODEL_NAME)
        with self._client() as client:
            resp = client.post(self.config.chat_url, json=payload, headers=headers)

        if not resp.is_success:
            raise UpstreamError(resp.text, upstream_status=resp.status_code)

        return extract_content(resp.json())
