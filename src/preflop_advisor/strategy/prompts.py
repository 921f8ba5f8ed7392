"""Prompt templates for the preflop decision model."""

from typing import Dict, List

from ..state.model import DecisionRequest


SYSTEM_PROMPT = """You are a poker pre-flop decision assistant.
Return STRICT JSON ONLY with this shape:
{
  "decision": "Fold | Call | Raise | 3-bet | 4-bet/Call",
  "confidence": 0.0,
  "rationale": "One or two sentences, plain English.",
  "when_fold": ["..."],
  "when_call": ["..."],
  "when_raise": ["..."],
  "risk_flags": ["..."]
}
Rules of thumb:
- Consider price (pot odds), position, hand group (premium/strong/playable/speculative), table size, and opponent tendencies.
- More bluffs -> calling becomes better, especially in position at a good price.
- Tight/large sizings -> folding becomes better, especially out of position.
- Premium hands prefer aggression (3-bet/raise), especially in position.
- Multiway pots increase risk; tighten marginal calls out of position.
Output valid minified JSON. Do not include backticks or any extra text."""


USER_PROMPT = """Table: {players} players
Position: {position}
Hand: {hand}
Situation: {situation}
Details: limpers={limpers}, openSize={openSize}xBB, openPos={openPos}, openCallers={openCallers}, threeBetSize={threeBetSize}xBB, threeBetIP={threeBetIP}, threeBetCallers={threeBetCallers}
Opponent profile: style={style}, bluffing={bluffing}
Return JSON only as specified."""


def build_user_prompt(request: DecisionRequest) -> str:
    """Interpolate the scenario into the user message."""
    return USER_PROMPT.format(**request.model_dump())


def build_messages(request: DecisionRequest) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(request)},
    ]
