import logging

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from ..errors import ClientNotInitializedError
from ..parser import parse_response
from ..prompt import build_system_prompt, build_user_prompt
from ..types import Answer, SystemContext


logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT")


class ClientHandle(Generic[ClientT]):
    """Either a ready vendor client or the error raised while building it."""

    def __init__(
        self, client: Optional[ClientT] = None, error: Optional[Exception] = None
    ):
        self._client = client
        self.error = error

    @classmethod
    def build(cls, factory: Callable[[], ClientT]) -> "ClientHandle[ClientT]":
        try:
            return cls(client=factory())
        except Exception as e:
            logger.debug("Client construction failed: %s", e)
            return cls(error=e)

    @property
    def ready(self) -> bool:
        return self.error is None

    def get(self, provider: str) -> ClientT:
        if self.error is not None:
            raise ClientNotInitializedError(provider, self.error)
        return self._client


class Provider(ABC):
    """
    A single LLM backend behind the common "ask a question" contract.

    Subclasses own the vendor authentication and payload mapping in
    `_complete`; prompting and reply parsing are shared.
    """

    name: str = ""

    def __init__(self, model: str):
        self.model = model

    def ask(self, question: str, context: SystemContext) -> Answer:
        system_prompt = build_system_prompt(context)
        user_prompt = build_user_prompt(question)

        logger.debug("Asking %s (model %s): %s", self.name, self.model, user_prompt)
        raw_text = self._complete(system_prompt, user_prompt)
        logger.debug("%s replied with %d characters", self.name, len(raw_text))

        return parse_response(raw_text)

    @abstractmethod
    def _complete(self, system_prompt: str, user_prompt: str) -> str:
        """Sends both prompts to the vendor and returns the first reply text.

        Raises:
            TransportError: the vendor call failed.
            EmptyResponseError: the vendor replied without any text.
        """
