#!/usr/bin/env python3

import argparse
import argcomplete
import logging
import sys

from abc import ABC, abstractmethod
from typing import List, Optional

from rich.console import Console

from . import __version__
from .commands.ask import ask
from .commands.clear import clear
from .commands.configure import configure
from .commands.status import status
from .config import Config, load_config
from .log import setup_logging


logger = logging.getLogger(__name__)

EPILOG = """Examples:
  how do I check if a process is listening on port 3000
  how do I compress png images over 20MB in a folder
  how --configure
  how --status --key
  how --status --key --reveal-full    # Shows full keys
  how --clear --all
"""


class Argument(ABC):
    def __init__(self, help: str, kwargs: Optional[dict] = None):
        self.help = help
        self.kwargs = kwargs if kwargs is not None else {}

    @abstractmethod
    def add_to_parser(self, parser: argparse.ArgumentParser):
        pass


class OptionalArg(Argument):
    def __init__(
        self,
        long_option: str,
        help: str,
        short_option: Optional[str] = None,
        kwargs: Optional[dict] = None,
    ):
        super().__init__(help=help, kwargs=kwargs)
        self.short_option = short_option
        self.long_option = long_option

    def add_to_parser(self, parser: argparse.ArgumentParser):
        options = [self.short_option] if self.short_option else []
        parser.add_argument(*options, self.long_option, help=self.help, **self.kwargs)


class PositionalArg(Argument):
    def __init__(self, name: str, help: str, kwargs: Optional[dict] = None):
        super().__init__(help=help, kwargs=kwargs)
        self.name = name

    def add_to_parser(self, parser: argparse.ArgumentParser):
        parser.add_argument(self.name, help=self.help, **self.kwargs)


_FLAG = {"action": "store_true"}

ARGUMENTS: List[Argument] = [
    OptionalArg("--configure", "Configure AI provider and API key.", "-c", _FLAG),
    OptionalArg("--status", "Show current configuration status.", "-s", _FLAG),
    OptionalArg("--key", "Show API key(s) with --status (masked by default).", "-k", _FLAG),
    OptionalArg("--reveal-full", "Show full unmasked API keys (use with --status --key).", kwargs=_FLAG),
    OptionalArg("--clear", "Clear API keys from configuration.", "-r", _FLAG),
    OptionalArg("--all", "Use with --status/--clear for all providers.", "-a", _FLAG),
    OptionalArg("--version", "Print version and exit.", "-v", _FLAG),
    OptionalArg("--verbose", "Log provider requests and parsing details to stderr.", kwargs=_FLAG),
    PositionalArg("question", "The question to answer, e.g. 'do I list open ports'.", {"nargs": "*"}),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="how",
        description="AI-powered terminal command assistant.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    for arg in ARGUMENTS:
        arg.add_to_parser(parser)
    return parser


def _dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace, config: Config):
    if args.configure:
        configure(config)
    elif args.clear:
        clear(clear_all=args.all)
    elif args.status:
        status(config, show_key=args.key, show_all=args.all, reveal_full=args.reveal_full)
    else:
        ready, missing = config.is_configured()
        if not ready:
            print(
                f"Not configured. Missing: {', '.join(missing)}. Run 'how --configure' to set up.",
                file=sys.stderr,
            )
            sys.exit(1)

        if not args.question:
            parser.print_usage(sys.stderr)
            sys.exit(1)

        ask(config, " ".join(args.question))


def run_cli(argv: Optional[List[str]] = None):
    """
    Parses command-line arguments and runs the selected action.

    Args:
        argv: A list of strings representing the command-line arguments.
              If None, `sys.argv[1:]` is used automatically by `parse_args`.
    """
    parser = build_parser()

    # Enable argument auto-completion.
    argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.version:
        print(f"how version {__version__}")
        return

    try:
        config = load_config()
        _dispatch(parser, args, config)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        Console(stderr=True).print(f"Error: {e}", style="bold red", markup=False)
        sys.exit(1)


def main():
    """The main entry point for the command-line interface, called by the `how` script."""
    run_cli()


if __name__ == "__main__":
    main()
