from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..ai import ProviderName, available_providers
from ..config import Config
from .. import credentials


NOT_SET = "[italic dim](not set)[/]"


def _format_key(provider: str, reveal_full: bool) -> str:
    api_key = credentials.get_api_key(provider)
    if not api_key:
        return NOT_SET
    return escape(api_key if reveal_full else credentials.mask_api_key(api_key))


def status(
    config: Config,
    show_key: bool = False,
    show_all: bool = False,
    reveal_full: bool = False,
    console: Console = None,
):
    """Prints the current provider configuration."""
    console = console or Console()

    ready, missing = config.is_configured()
    if not ready:
        console.print("[bold red]Status: Not configured[/]")
        console.print(f"[dim]Missing: {', '.join(missing)}[/]")
        console.print("[dim]Run 'how --configure' to set up.[/]")
        return

    table = Table.grid(padding=(0, 1, 0, 0))
    table.add_column(justify="right", style="bold magenta")
    table.add_column()

    table.add_row("Provider:", config.current_provider)
    table.add_row("Model:", escape(config.current_model))
    if config.current_provider == ProviderName.OPENAI_COMPATIBLE.value:
        table.add_row("Base URL:", escape(config.base_url))

    if show_key:
        if show_all:
            table.add_row("API Keys:", "")
            for provider in available_providers():
                table.add_row(f"{provider}:", _format_key(provider, reveal_full))
        else:
            table.add_row("API Key:", _format_key(config.current_provider, reveal_full))

    console.print(table)
