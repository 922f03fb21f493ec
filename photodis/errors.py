from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid setup: unknown photon field, missing table file, bad config."""


class InteractionStateError(RuntimeError):
    """An interaction was applied without a previously recorded state."""
