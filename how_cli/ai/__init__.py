"""
The `ai` package is the core of the assistant: prompt building, the provider
adapters and the parser turning model replies into runnable commands.
"""

from .errors import (
    ClientNotInitializedError,
    ConfigurationError,
    EmptyResponseError,
    HowError,
    ProviderError,
    TransportError,
    UnknownProviderError,
)
from .parser import parse_response
from .prompt import build_system_prompt, build_user_prompt
from .providers import Provider, available_providers, create_provider, create_provider_from_config
from .types import Answer, ProviderConfig, ProviderName, SystemContext


__all__ = [
    "Answer",
    "ClientNotInitializedError",
    "ConfigurationError",
    "EmptyResponseError",
    "HowError",
    "Provider",
    "ProviderConfig",
    "ProviderError",
    "ProviderName",
    "SystemContext",
    "TransportError",
    "UnknownProviderError",
    "available_providers",
    "build_system_prompt",
    "build_user_prompt",
    "create_provider",
    "create_provider_from_config",
    "parse_response",
]
