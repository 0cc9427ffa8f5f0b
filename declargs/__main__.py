"""
declargs — declarative command-line arguments

Licensed under the MIT License. See LICENSE file for details.

Checks a command line against the arguments declared in a YAML or TOML file:

    declargs args.yaml -- -i 12 --ports 80.443..450 input.txt
    declargs --usage args.yaml
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Sequence

from rich.markup import escape

from declargs import __version__
from declargs.config import loader
from declargs.console import console
from declargs.exceptions import ArgumentConfigError
from declargs.logger import logger
from declargs.parser import ArgRegistry, Args
from declargs.utils import setup_logging


def get_root_parser(prog: str | None = "declargs") -> ArgumentParser:
    """Construct the parser for the `declargs` command itself."""
    parser = ArgumentParser(
        prog=prog,
        description="Check a command line against declared arguments.",
        epilog="Tokens after the declaration file are read as the checked command line.",
    )
    parser.add_argument("declarations", help="YAML or TOML declaration file")
    parser.add_argument(
        "tokens",
        nargs=REMAINDER,
        help="Command line to check; use ': PATH' to read an argument script",
    )
    parser.add_argument(
        "--usage", action="store_true", help="Print the declared arguments and exit"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Print every argument's value after reading"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--log-mode", choices=["cli", "json"], help="Logging output mode")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(namespace: Namespace) -> int:
    registry = ArgRegistry()
    try:
        loader(namespace.declarations, registry)
    except ArgumentConfigError as error:
        console.print(f"[declargs.error]❌ {escape(str(error))}[/]")
        return 2

    args = Args(registry)
    if namespace.usage:
        args.render_help()
        return 0

    tokens = list(namespace.tokens)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]
    result = args.read([namespace.declarations, *tokens])

    args.render_diagnostics()
    if namespace.debug:
        console.print(escape(args.debug()))
    return 0 if result.good else 1


def main(argv: Sequence[str] | None = None) -> int:
    namespace = get_root_parser().parse_args(argv)
    setup_logging(
        mode=namespace.log_mode,
        console_log_level=logging.DEBUG if namespace.verbose else logging.WARNING,
    )
    logger.debug("Checking command line against '%s'", namespace.declarations)
    return run(namespace)


if __name__ == "__main__":
    sys.exit(main())
