import anthropic

from ..errors import EmptyResponseError, TransportError
from ..types import ProviderName
from .base import Provider


MAX_TOKENS = 1024


class AnthropicProvider(Provider):
    """Claude models through the Anthropic Messages API."""

    name = ProviderName.ANTHROPIC.value

    def __init__(self, api_key: str, model: str):
        super().__init__(model)
        self.client = anthropic.Anthropic(api_key=api_key)

    def _complete(self, system_prompt: str, user_prompt: str) -> str:
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=MAX_TOKENS,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except Exception as e:
            raise TransportError(self.name, e) from e

        if not message.content:
            raise EmptyResponseError(self.name)

        # The first text block is the answer; other block types are ignored.
        for block in message.content:
            if block.type == "text" and block.text:
                return block.text

        raise EmptyResponseError(self.name, "no text content")
