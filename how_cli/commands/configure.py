from typing import List

from rich.console import Console
from rich.prompt import Prompt

from ..ai import ConfigurationError, ProviderName, available_providers
from ..config import PROVIDER_MODELS, Config, save_config, validate_base_url
from .. import credentials


CUSTOM_MODEL_CHOICE = "Model not listed?"


def _choose(console: Console, title: str, options: List[str], default: str = "") -> str:
    console.print(f"[bold]{title}[/]")
    for index, option in enumerate(options, start=1):
        console.print(f"  {index}. {option}", markup=False)

    choices = [str(index) for index in range(1, len(options) + 1)]
    kwargs = {}
    if default in options:
        kwargs["default"] = str(options.index(default) + 1)
    selected = Prompt.ask("Choice", choices=choices, console=console, **kwargs)
    return options[int(selected) - 1]


def _ask_base_url(console: Console, current: str) -> str:
    while True:
        base_url = Prompt.ask(
            "Enter Base URL", default=current, show_default=bool(current), console=console
        ).strip()
        if not base_url:
            continue
        try:
            warning = validate_base_url(base_url)
        except ConfigurationError as e:
            console.print(f"[red]✗ {e}[/]")
            continue
        if warning:
            console.print(f"[yellow]⚠ {warning}[/]")
        return base_url


def _ask_model(console: Console, provider: str, current: str) -> str:
    models = PROVIDER_MODELS.get(provider, [])
    if models:
        model = _choose(
            console, f"{provider} - Select Model", models + [CUSTOM_MODEL_CHOICE], default=current
        )
        if model != CUSTOM_MODEL_CHOICE:
            return model

    while True:
        model = Prompt.ask(f"{provider} - Enter Model Name", console=console).strip()
        if model:
            return model


def _ask_api_key(console: Console, provider: str):
    """Stores a new key for the provider unless the user keeps the existing one."""
    has_existing_key = credentials.has_api_key(provider)
    key_optional = provider == ProviderName.OPENAI_COMPATIBLE.value

    hint = ""
    if has_existing_key:
        hint = " (existing key found, leave blank to use)"
    elif key_optional:
        hint = " (leave empty if no auth required)"

    while True:
        api_key = Prompt.ask(
            f"Enter {provider} API Key{hint}", password=True, default="", show_default=False, console=console
        ).strip()
        if api_key:
            credentials.set_api_key(provider, api_key)
            return
        if has_existing_key or key_optional:
            return
        console.print("[red]✗ An API key is required for this provider.[/]")


def configure(config: Config, console: Console = None):
    """Walks the user through choosing a provider, model, base URL and API key."""
    console = console or Console()

    provider = _choose(
        console, "Select AI Provider", available_providers(), default=config.current_provider
    )

    if provider == ProviderName.OPENAI_COMPATIBLE.value:
        config.base_url = _ask_base_url(console, config.base_url)

    current_model = config.current_model if provider == config.current_provider else ""
    model = _ask_model(console, provider, current_model)
    _ask_api_key(console, provider)

    config.set_provider(provider, model)
    save_config(config)
    console.print("[green]✓ Configuration saved![/]")
