"""State management module for preflop advisor."""

from .model import (
    PLACEHOLDER,
    Bluffing,
    Decision,
    DecisionRequest,
    OpponentStyle,
)

__all__ = [
    "PLACEHOLDER",
    "Bluffing",
    "Decision",
    "DecisionRequest",
    "OpponentStyle",
]
