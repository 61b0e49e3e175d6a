import json
import os
import sys

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from urllib.parse import urlparse

from .ai.errors import ConfigurationError
from .ai.types import ProviderConfig, ProviderName
from . import credentials


CONFIG_DIR_NAME = "how"
CONFIG_FILE_NAME = "config.json"

# Suggested models per provider. OpenAI-Compatible servers host arbitrary
# models, so the user always types the name.
PROVIDER_MODELS: Dict[str, List[str]] = {
    ProviderName.OPENAI.value: [
        "gpt-5",
        "gpt-5-mini",
        "gpt-5-nano",
        "o4-mini",
        "o3",
        "o3-mini",
        "o1",
        "o1-mini",
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4.1-nano",
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-4-turbo",
        "gpt-4",
        "gpt-3.5-turbo",
    ],
    ProviderName.ANTHROPIC.value: [
        "claude-opus-4-1",
        "claude-opus-4-0",
        "claude-sonnet-4-5",
        "claude-sonnet-4-0",
        "claude-3-7-sonnet-latest",
        "claude-3-5-haiku-latest",
    ],
    ProviderName.GOOGLE.value: [
        "gemini-2.5-pro",
        "gemini-2.5-flash",
        "gemini-2.5-flash-lite",
        "gemini-2.0-flash",
        "gemini-2.0-flash-lite",
    ],
    ProviderName.XAI.value: [
        "grok-code-fast-1",
        "grok-4-fast-reasoning",
        "grok-4-fast-non-reasoning",
        "grok-3-mini",
        "grok-3",
    ],
    ProviderName.OPENAI_COMPATIBLE.value: [],
}


@dataclass
class Config:
    current_provider: str = ""
    current_model: str = ""
    base_url: str = ""

    def set_provider(self, provider: str, model: str):
        self.current_provider = provider
        self.current_model = model

    def is_configured(self) -> Tuple[bool, List[str]]:
        """Returns whether a question can be asked, and what is missing if not."""
        missing = []
        if not self.current_provider:
            missing.append("provider")
        if not self.current_model:
            missing.append("model")

        if self.current_provider == ProviderName.OPENAI_COMPATIBLE.value:
            if not self.base_url:
                missing.append("base URL")
        elif not credentials.has_api_key(self.current_provider):
            missing.append("API key")

        return not missing, missing

    def provider_config(self, api_key: str) -> ProviderConfig:
        return ProviderConfig(
            name=ProviderName(self.current_provider),
            model=self.current_model,
            api_key=api_key,
            base_url=self.base_url,
        )

    def to_dict(self) -> Dict:
        data = {
            "current_provider": self.current_provider,
            "current_model": self.current_model,
        }
        if self.base_url:
            data["base_url"] = self.base_url
        return data


def get_config_dir() -> str:
    xdg_config = os.getenv("XDG_CONFIG_HOME")
    if xdg_config:
        base_dir = xdg_config
    elif sys.platform == "win32":
        base_dir = os.getenv("APPDATA") or os.path.join(
            os.path.expanduser("~"), "AppData", "Roaming"
        )
    else:
        # macOS included: ~/.config rather than ~/Library/Application Support.
        base_dir = os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base_dir, CONFIG_DIR_NAME)


def get_config_path() -> str:
    return os.path.join(get_config_dir(), CONFIG_FILE_NAME)


def load_config(path: Optional[str] = None) -> Config:
    """Reads the configuration file, or returns an empty config if there is none."""
    path = path or get_config_path()
    if not os.path.exists(path):
        return Config()

    try:
        with open(path, "r") as config_file:
            data = json.load(config_file)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error reading or parsing {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Error reading or parsing {path}: expected a JSON object")

    config = Config(
        current_provider=data.get("current_provider", ""),
        current_model=data.get("current_model", ""),
        base_url=data.get("base_url", ""),
    )
    if config.current_provider and config.current_provider not in PROVIDER_MODELS:
        raise ConfigurationError(f"invalid provider: {config.current_provider}")

    return config


def save_config(config: Config, path: Optional[str] = None):
    path = path or get_config_path()
    os.makedirs(os.path.dirname(path), mode=0o700, exist_ok=True)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as config_file:
        json.dump(config.to_dict(), config_file, indent=2)


def validate_base_url(url: str) -> str:
    """Checks a base URL for an OpenAI-compatible server.

    Returns a warning for plain-http remote hosts, an empty string otherwise.

    Raises:
        ConfigurationError: the URL is malformed or not http(s).
    """
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise ConfigurationError(f"invalid URL format: {e}") from e

    if parsed.scheme not in ("http", "https"):
        raise ConfigurationError("URL must use http or https")
    if not parsed.netloc:
        raise ConfigurationError("invalid URL format: missing host")

    host = parsed.hostname or ""
    if parsed.scheme == "http" and not host.startswith(("localhost", "127.0.0.1")):
        return "Using HTTP (not HTTPS) for remote endpoint. API keys will be sent unencrypted."
    return ""
