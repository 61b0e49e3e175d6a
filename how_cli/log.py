"""Logging goes to stderr through rich, so it never mixes with answers on stdout."""

import logging

from rich.console import Console
from rich.logging import RichHandler


LOG_FORMAT = "%(message)s"


def setup_logging(verbose: bool = False):
    """Configures the root logger. Only warnings are shown unless `verbose` is set."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=verbose,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )

    # SDK transports are chatty at DEBUG; keep them at INFO even when verbose.
    for noisy in ("httpx", "httpcore", "openai", "anthropic", "google_genai"):
        logging.getLogger(noisy).setLevel(max(level, logging.INFO))
