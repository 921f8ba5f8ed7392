"""Decision engine: prompt, single upstream call, normalization."""

from typing import Optional

from ..config import AppSettings
from ..errors import ConfigurationError
from ..state.model import Decision, DecisionRequest
from ..telemetry.logger import get_logger
from .normalize import normalize_decision, parse_completion
from .prompts import build_messages
from .providers.base import ChatProvider
from .providers.openai_ import OpenAIChatProvider


class DecisionEngine:
    def __init__(self, settings: AppSettings, provider: Optional[ChatProvider] = None) -> None:
        self.settings = settings
        self.provider = provider or OpenAIChatProvider(settings)

    @classmethod
    def from_config(cls, settings: AppSettings) -> "DecisionEngine":
        return cls(settings)

    def decide(self, request: DecisionRequest) -> Decision:
        """
        Produit une décision normalisée pour le scénario donné.

        Args:
            request: Scénario validé (DecisionRequest)

        Returns:
            Decision: toujours complète, même si le modèle renvoie un JSON invalide

        Raises:
            ConfigurationError: credential absent, aucun appel réseau effectué
            UpstreamError: statut non-2xx du provider
        """
        if not self.settings.OPENAI_API_KEY:
            raise ConfigurationError()

        logger = get_logger(self.settings)
        logger.info(
            "Decision request: position=%s hand=%s situation=%s",
            request.position, request.hand, request.situation,
        )
        raw = self.provider.complete(build_messages(request))
        decision = normalize_decision(parse_completion(raw))
        logger.info("Decision: %s (confidence=%.2f)", decision.decision, decision.confidence)
        return decision
