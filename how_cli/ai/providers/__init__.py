"""
Provider adapters and the factory selecting one of them by name.

Adding a backend means writing a `Provider` subclass and registering one
constructor in `PROVIDERS`.
"""

from typing import Callable, Dict, List

from ..errors import UnknownProviderError
from ..types import ProviderConfig, ProviderName
from .anthropic import AnthropicProvider
from .base import ClientHandle, Provider
from .google import GoogleProvider
from .openai import OpenAICompatibleProvider, OpenAIProvider, XAIProvider


# Every constructor takes (api_key, model, base_url).
PROVIDERS: Dict[ProviderName, Callable[[str, str, str], Provider]] = {
    ProviderName.OPENAI: lambda api_key, model, base_url: OpenAIProvider(api_key, model),
    ProviderName.ANTHROPIC: lambda api_key, model, base_url: AnthropicProvider(api_key, model),
    ProviderName.GOOGLE: lambda api_key, model, base_url: GoogleProvider(api_key, model),
    ProviderName.XAI: lambda api_key, model, base_url: XAIProvider(api_key, model),
    ProviderName.OPENAI_COMPATIBLE: OpenAICompatibleProvider,
}


def available_providers() -> List[str]:
    """Provider labels in menu order."""
    return [name.value for name in ProviderName]


def create_provider(name: str, api_key: str, model: str, base_url: str = "") -> Provider:
    try:
        provider_name = ProviderName(name)
    except ValueError:
        raise UnknownProviderError(name) from None

    return PROVIDERS[provider_name](api_key, model, base_url)


def create_provider_from_config(config: ProviderConfig) -> Provider:
    return create_provider(config.name, config.api_key, config.model, config.base_url)


__all__ = [
    "AnthropicProvider",
    "ClientHandle",
    "GoogleProvider",
    "OpenAICompatibleProvider",
    "OpenAIProvider",
    "PROVIDERS",
    "Provider",
    "XAIProvider",
    "available_providers",
    "create_provider",
    "create_provider_from_config",
]
