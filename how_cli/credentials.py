"""API keys live in the system keyring, one entry per provider label."""

import keyring

from keyring.errors import PasswordDeleteError
from typing import List

from .ai.providers import available_providers


SERVICE_NAME = "how"


def set_api_key(provider: str, api_key: str):
    keyring.set_password(SERVICE_NAME, provider, api_key)


def get_api_key(provider: str) -> str:
    """Returns the stored key, or an empty string if there is none."""
    return keyring.get_password(SERVICE_NAME, provider) or ""


def delete_api_key(provider: str):
    try:
        keyring.delete_password(SERVICE_NAME, provider)
    except PasswordDeleteError:
        # Nothing stored for this provider.
        pass


def has_api_key(provider: str) -> bool:
    return bool(get_api_key(provider))


def providers_with_keys() -> List[str]:
    return [provider for provider in available_providers() if has_api_key(provider)]


def mask_api_key(key: str) -> str:
    """Hides all but the last 8 characters of a key."""
    if len(key) <= 8:
        half = len(key) // 2
        return "*" * (8 - half) + key[half:]
    return "****" + key[-8:]
