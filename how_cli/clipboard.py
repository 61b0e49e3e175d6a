import pyperclip

from typing import List


def copy_commands(commands: List[str]):
    """Puts the commands on the system clipboard, one per line."""
    pyperclip.copy("\n".join(commands))
