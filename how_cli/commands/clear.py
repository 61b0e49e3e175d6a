from rich.console import Console
from rich.prompt import Confirm

from .. import credentials


def clear(clear_all: bool = False, console: Console = None) -> int:
    """Removes stored API keys and returns how many were removed.

    With `clear_all` every stored key goes without asking; otherwise the
    user confirms each provider that has a key.
    """
    console = console or Console()

    providers = credentials.providers_with_keys()
    if not providers:
        console.print("No API keys to clear.")
        return 0

    cleared = 0
    for provider in providers:
        if clear_all or Confirm.ask(f"Clear the {provider} API key?", default=False, console=console):
            credentials.delete_api_key(provider)
            cleared += 1

    if cleared:
        console.print(f"[green]✓ Cleared {cleared} API key(s)[/]")
    else:
        console.print("No API keys cleared.")
    return cleared
