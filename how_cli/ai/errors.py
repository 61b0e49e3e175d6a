"""
Errors raised by the provider factory and the provider adapters.

The response parser never raises; everything here originates either from
choosing a provider or from talking to it.
"""


class HowError(Exception):
    """Base class for all errors raised by `how_cli`."""


class ConfigurationError(HowError):
    """The configuration cannot be used to build a provider."""


class UnknownProviderError(ConfigurationError):
    def __init__(self, name: str):
        super().__init__(f"unknown provider: {name}")
        self.name = name


class ProviderError(HowError):
    """A provider was selected but could not produce an answer."""

    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider


class TransportError(ProviderError):
    """The vendor API call failed (network, authentication or API error)."""

    def __init__(self, provider: str, cause: Exception, message: str = ""):
        super().__init__(provider, message or f"{provider} API error: {cause}")
        self.cause = cause


class ClientNotInitializedError(TransportError):
    """The vendor client could not be built when the provider was created."""

    def __init__(self, provider: str, cause: Exception):
        super().__init__(
            provider, cause, f"{provider} client not initialized: {cause}"
        )


class EmptyResponseError(ProviderError):
    """The vendor answered, but the reply carried no text."""

    def __init__(self, provider: str, detail: str = ""):
        message = f"no response from {provider}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(provider, message)
