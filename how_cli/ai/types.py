from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ProviderName(str, Enum):
    """Labels of the supported LLM backends, as stored in the configuration."""

    OPENAI = "OpenAI"
    ANTHROPIC = "Anthropic"
    GOOGLE = "Google"
    XAI = "xAI"
    OPENAI_COMPATIBLE = "OpenAI-Compatible"


@dataclass(frozen=True)
class SystemContext:
    """Snapshot of the host environment the answer should target."""

    os_name: str
    shell: str
    package_manager: str

    def describe(self) -> str:
        return f"{self.os_name} using {self.shell} shell"


@dataclass
class Answer:
    """A parsed model reply.

    `commands` holds single-line commands first, followed by at most one
    multi-line script. `raw_text` is the reply exactly as received.
    """

    title: str = ""
    description: str = ""
    commands: List[str] = field(default_factory=list)
    raw_text: str = ""


@dataclass(frozen=True)
class ProviderConfig:
    name: ProviderName
    model: str
    api_key: str = ""
    base_url: str = ""
