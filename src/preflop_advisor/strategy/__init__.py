"""Decision strategy: prompts, upstream providers, normalization."""
