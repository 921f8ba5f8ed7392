"""Types and schemas for preflop advisor I/O."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping

from pydantic import BaseModel, Field

from ..errors import REQUIRED_FIELDS, MissingFieldsError


PLACEHOLDER = "-"


class OpponentStyle(str, Enum):
    """Opponent playing style."""
    AGGRESSIVE = "aggressive"
    PASSIVE = "passive"
    STANDARD = "standard"


class Bluffing(str, Enum):
    """Opponent bluffing frequency."""
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class DecisionRequest(BaseModel):
    """Scénario pre-flop validé.

    Toutes les valeurs restent des chaînes : aucune conversion de type ni
    contrôle de bornes. Les champs optionnels absents prennent le marqueur
    ``PLACEHOLDER`` ; le profil adverse prend ``standard``/``normal``.
    """
    players: str = Field(..., description="Nombre de joueurs à la table")
    position: str = Field(..., description="Position du hero (BTN, CO, ...)")
    hand: str = Field(..., description="Main du hero, ex: AKo")
    situation: str = Field(..., description="Scénario, ex: facing open")

    limpers: str = PLACEHOLDER
    openSize: str = PLACEHOLDER
    openPos: str = PLACEHOLDER
    openCallers: str = PLACEHOLDER
    threeBetSize: str = PLACEHOLDER
    threeBetIP: str = PLACEHOLDER
    threeBetCallers: str = PLACEHOLDER

    style: str = Field(default=OpponentStyle.STANDARD.value, description="aggressive|passive|standard")
    bluffing: str = Field(default=Bluffing.NORMAL.value, description="high|normal|low")

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> DecisionRequest:
        """Build a request from raw query parameters.

        Raises:
            MissingFieldsError: if a required field is absent or empty.
        """
        if any(not params.get(name) for name in REQUIRED_FIELDS):
            raise MissingFieldsError()

        data = {}
        for name in cls.model_fields:
            value = params.get(name)
            if value is not None:
                data[name] = str(value)
        return cls(**data)


class Decision(BaseModel):
    """Normalized decision returned to callers."""
    decision: str = Field("Call", description="Fold | Call | Raise | 3-bet | 4-bet/Call")
    confidence: float = Field(0.5, description="0.0-1.0 by convention, not clamped")
    rationale: str = "No rationale provided."
    when_fold: List[str] = Field(default_factory=list)
    when_call: List[str] = Field(default_factory=list)
    when_raise: List[str] = Field(default_factory=list)
    risk_flags: List[str] = Field(default_factory=list)

