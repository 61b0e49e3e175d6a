import logging

import pyperclip

from rich.console import Console

from ..ai import Answer, build_user_prompt, create_provider_from_config
from ..clipboard import copy_commands
from ..config import Config
from .. import credentials
from ..system import detect_system


logger = logging.getLogger(__name__)

PROMPT_SYMBOL = "$ "


def render_answer(console: Console, answer: Answer):
    if answer.title:
        console.print(answer.title, style="bold cyan", markup=False, highlight=False)
    if answer.description:
        console.print(answer.description, style="dim", markup=False, highlight=False)

    for command in answer.commands:
        # Scripts are shown as-is; a prompt symbol would break copy and paste.
        text = command if "\n" in command else PROMPT_SYMBOL + command
        console.print(text, style="bold green", markup=False, highlight=False)


def ask(config: Config, question: str, console: Console = None):
    """Sends the question to the configured provider and prints the answer."""
    console = console or Console()

    context = detect_system()
    logger.debug("Detected %s, package manager %s", context.describe(), context.package_manager)

    api_key = credentials.get_api_key(config.current_provider)
    provider = create_provider_from_config(config.provider_config(api_key))

    console.print(f"⚡ {build_user_prompt(question)}", style="bold", markup=False)
    console.print()

    with console.status("Thinking..."):
        answer = provider.ask(question, context)

    render_answer(console, answer)

    if answer.commands:
        try:
            copy_commands(answer.commands)
        except pyperclip.PyperclipException as e:
            logger.warning("Could not copy to clipboard: %s", e)
        else:
            console.print()
            console.print("✓ Copied to clipboard", style="green")

    return answer
