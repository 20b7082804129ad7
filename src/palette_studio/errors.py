from __future__ import annotations


class ProviderNotConfigured(RuntimeError):
    """A provider was requested but its API key is not set."""

    def __init__(self, env_var: str) -> None:
        super().__init__(f"{env_var} is not set")
        self.env_var = env_var


class GenerationError(RuntimeError):
    """A provider call failed or returned nothing usable.

    ``text_response`` keeps whatever text the model sent back alongside the failure.
    """

    def __init__(self, message: str, text_response: str | None = None) -> None:
        super().__init__(message)
        self.text_response = text_response


class InvalidRequest(ValueError):
    """The request is well-formed but names something that does not exist or is missing a field."""
