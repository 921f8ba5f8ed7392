"""Preflop decision advisor backed by a chat-completion model."""

__version__ = "0.1.0"
