from google import genai

from ..errors import EmptyResponseError, TransportError
from ..types import ProviderName
from .base import ClientHandle, Provider


class GoogleProvider(Provider):
    """Gemini models through the google-genai SDK.

    Building the client can fail (for instance without a usable key). The
    provider is still created and the failure is raised by every `ask` call
    as a ClientNotInitializedError.
    """

    name = ProviderName.GOOGLE.value

    def __init__(self, api_key: str, model: str):
        super().__init__(model)
        self.client = ClientHandle.build(lambda: genai.Client(api_key=api_key))

    def _complete(self, system_prompt: str, user_prompt: str) -> str:
        client = self.client.get(self.name)

        # Gemini gets a single combined prompt instead of separate roles.
        prompt = f"{system_prompt}\n\nUser question: {user_prompt}"
        try:
            response = client.models.generate_content(model=self.model, contents=prompt)
        except Exception as e:
            raise TransportError(self.name, e) from e

        if not response.candidates:
            raise EmptyResponseError(self.name)

        content = response.candidates[0].content
        if content is None or not content.parts:
            raise EmptyResponseError(self.name, "no content")

        text = "".join(part.text for part in content.parts if part.text)
        if not text:
            raise EmptyResponseError(self.name, "no text content")
        return text
