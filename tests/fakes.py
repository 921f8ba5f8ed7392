from __future__ import annotations

import json
from typing import Dict, List, Optional

from preflop_advisor.strategy.providers.base import ChatProvider


VALID_REPLY = json.dumps(
    {
        "decision": "3-bet",
        "confidence": 0.8,
        "rationale": "AKo plays well as a 3-bet in position.",
        "when_fold": ["Facing a 4-bet jam from a nit"],
        "when_call": ["Versus a small 4-bet"],
        "when_raise": ["Versus late position opens"],
        "risk_flags": [],
    }
)

SCENARIO = {
    "players": "6",
    "position": "BTN",
    "hand": "AKo",
    "situation": "facing open",
    "openSize": "3",
    "openPos": "CO",
}


class FakeProvider(ChatProvider):
    def __init__(self, reply: str = VALID_REPLY, error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[List[Dict[str, str]]] = []

    def complete(self, messages: List[Dict[str, str]]) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.reply
