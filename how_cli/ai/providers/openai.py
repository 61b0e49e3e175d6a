"""Providers speaking the OpenAI chat-completions schema."""

from typing import Dict

from ..errors import EmptyResponseError, TransportError
from ..llm import LLMClient
from ..types import ProviderName
from .base import Provider


XAI_BASE_URL = "https://api.x.ai/v1"

# The OpenAI SDK refuses to build a client without a key, but self-hosted
# servers usually ignore the Authorization header entirely.
NO_AUTH_API_KEY = "no-key-required"


class ChatCompletionsProvider(Provider):
    """Sends separate system and user messages through aisuite's OpenAI backend."""

    def __init__(self, model: str, provider_config: Dict):
        super().__init__(model)
        self.llm = LLMClient({"openai": provider_config})

    def _complete(self, system_prompt: str, user_prompt: str) -> str:
        messages = [
            LLMClient.format_system_message(system_prompt),
            LLMClient.format_user_message(user_prompt),
        ]
        try:
            response = self.llm.completion(model=f"openai:{self.model}", messages=messages)
        except Exception as e:
            raise TransportError(self.name, e) from e

        if not response.content:
            raise EmptyResponseError(self.name)
        return response.content


class OpenAIProvider(ChatCompletionsProvider):
    name = ProviderName.OPENAI.value

    def __init__(self, api_key: str, model: str):
        super().__init__(model, {"api_key": api_key})


class XAIProvider(ChatCompletionsProvider):
    # xAI has no SDK of its own here; its API is OpenAI-compatible.
    name = ProviderName.XAI.value

    def __init__(self, api_key: str, model: str):
        super().__init__(model, {"api_key": api_key, "base_url": XAI_BASE_URL})


class OpenAICompatibleProvider(ChatCompletionsProvider):
    """Any self-hosted or third-party server exposing `/chat/completions`.

    An empty API key is valid here: many local servers need no authentication.
    """

    name = ProviderName.OPENAI_COMPATIBLE.value

    def __init__(self, api_key: str, model: str, base_url: str):
        super().__init__(
            model, {"api_key": api_key or NO_AUTH_API_KEY, "base_url": base_url}
        )
        self.base_url = base_url
