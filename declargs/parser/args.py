# declargs — declarative command-line arguments — MIT Licensed
"""
Implements `Args`, the single entry point that reads a command line against every
argument declared in a registry, and `ParseResult`, the diagnostics of one read.

`Args.read()` walks the registry once. Each argument claims the token positions
it matched; every position nobody claimed (the program name at index 0 aside) is
then classified as *unrecognized* when it starts with "-" and as *anonymous*
otherwise. Anonymous tokens are ordinary positional values and do not make a
read fail; arguments with errors and unrecognized tokens do.

Argument scripts hold tokens in a plain text file where "#" starts a comment
running to the end of the line. They are read with `read_file()`/`read_stream()`,
or by passing `prog : path` as the whole command line.

Example:
    args = Args()
    result = args.read(sys.argv)
    if result.fail:
        args.render_diagnostics()
        print(args.usage(indent=2))
        sys.exit(1)

Module-level `read`, `read_file`, `read_stream`, `usage` and `debug` operate on
the process-wide registry.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence, TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from declargs.console import console
from declargs.exceptions import ArgumentScriptError
from declargs.logger import logger
from declargs.parser.argument import Arg
from declargs.parser.registry import SHORT_PREFIX, ArgRegistry, get_registry

SCRIPT_SEPARATOR = ":"
SCRIPT_PROGRAM = "<ignore>"
COMMENT_MARKER = "#"


@dataclass
class ParseResult:
    """
    Diagnostics of one `Args.read()` invocation.

    Attributes:
        errors (list[Arg]): Arguments whose read recorded an error.
        duplicates (list[Arg]): Arguments whose aliases appeared more than once.
        unrecognized (list[str]): Unclaimed tokens starting with "-".
        anonymous (list[str]): Other unclaimed tokens.
    """

    errors: list[Arg] = field(default_factory=list)
    duplicates: list[Arg] = field(default_factory=list)
    unrecognized: list[str] = field(default_factory=list)
    anonymous: list[str] = field(default_factory=list)

    @property
    def error(self) -> bool:
        return bool(self.errors)

    @property
    def duplicate(self) -> bool:
        return bool(self.duplicates)

    @property
    def good(self) -> bool:
        """No argument errors and no unrecognized tokens."""
        return not self.errors and not self.unrecognized

    @property
    def fail(self) -> bool:
        return not self.good


def strip_comments(text: str) -> str:
    """Remove "#"-to-end-of-line comments, keeping the line structure."""
    return "\n".join(
        line.split(COMMENT_MARKER, 1)[0] for line in text.splitlines()
    )


def tokenize_script(text: str) -> list[str]:
    """Return the argument vector described by a script, program placeholder first."""
    return [SCRIPT_PROGRAM, *strip_comments(text).split()]


class Args:
    """
    Reads command lines against the arguments of one registry.

    Attributes:
        registry (ArgRegistry): The declared arguments.
        result (ParseResult): Diagnostics of the most recent read.

    `read` mutates every registered argument and must not be called
    concurrently against the same registry.
    """

    def __init__(self, registry: ArgRegistry | None = None) -> None:
        self.registry: ArgRegistry = registry if registry is not None else get_registry()
        self.console: Console = console
        self.result: ParseResult = ParseResult()

    def read(self, tokens: Sequence[str]) -> ParseResult:
        """
        Parse `tokens` (program name first) against every registered argument.

        A vector of exactly `[prog, ":", path]` reads the argument script at `path`.
        When that script cannot be read, the arguments are read as if none were
        given and ":" and `path` are reported as unrecognized.

        Returns:
            ParseResult: The diagnostics, also stored as `self.result`.
        """
        tokens = [str(token) for token in tokens]
        if len(tokens) == 3 and tokens[1] == SCRIPT_SEPARATOR:
            try:
                return self.read_file(tokens[2])
            except ArgumentScriptError:
                result = self._read_tokens(tokens[:1])
                result.unrecognized.extend(tokens[1:])
                return result
        return self._read_tokens(tokens)

    def _read_tokens(self, tokens: list[str]) -> ParseResult:
        result = ParseResult()
        used = [False] * len(tokens)
        for arg in self.registry:
            for first, last in arg.read(tokens):
                for index in range(first, last + 1):
                    used[index] = True
            for index in arg.appearances:
                used[index] = True
            if arg.duplicated:
                result.duplicates.append(arg)
            if arg.error:
                result.errors.append(arg)

        for index in range(1, len(tokens)):
            if used[index]:
                continue
            if tokens[index].startswith(SHORT_PREFIX):
                result.unrecognized.append(tokens[index])
            else:
                result.anonymous.append(tokens[index])

        logger.debug(
            "Read %d tokens against %d args: %d errors, %d duplicates, "
            "%d unrecognized, %d anonymous",
            len(tokens),
            len(self.registry),
            len(result.errors),
            len(result.duplicates),
            len(result.unrecognized),
            len(result.anonymous),
        )
        self.result = result
        return result

    def read_text(self, text: str) -> ParseResult:
        """Read the tokens of an argument script given as text."""
        return self.read(tokenize_script(text))

    def read_stream(self, stream: TextIO) -> ParseResult:
        """Read the tokens of an argument script from a text stream."""
        return self.read_text(stream.read())

    def read_file(self, path: str | Path) -> ParseResult:
        """
        Read the tokens of the argument script at `path`.

        Raises:
            ArgumentScriptError: If the script cannot be read.
        """
        try:
            text = Path(path).read_text(encoding="UTF-8")
        except (OSError, UnicodeDecodeError) as error:
            logger.error("Unable to read argument script '%s': %s", path, error)
            raise ArgumentScriptError(
                f"Unable to read argument script '{path}': {error}"
            ) from error
        logger.debug("Reading argument script '%s'", path)
        return self.read_text(text)

    @property
    def errors(self) -> list[Arg]:
        return self.result.errors

    @property
    def duplicates(self) -> list[Arg]:
        return self.result.duplicates

    @property
    def unrecognized(self) -> list[str]:
        return self.result.unrecognized

    @property
    def anonymous(self) -> list[str]:
        return self.result.anonymous

    @property
    def good(self) -> bool:
        return self.result.good

    @property
    def fail(self) -> bool:
        return self.result.fail

    def _usage_groups(self) -> list[tuple[str | None, list[Arg]]]:
        return [
            (title, sorted(args, key=lambda arg: arg.usage()))
            for title, args in self.registry.groups()
            if args
        ]

    def _usage_width(self) -> int:
        return max((len(arg.usage_prefix()) for arg in self.registry), default=0)

    def usage(self, indent: int = 0) -> str:
        """
        Render one line per argument: aliases and usage hint padded with dots to
        a common width, then the description.

        Arguments are sorted by usage text within each heading. When headings are
        declared, their titles are printed at `indent` and their arguments two
        columns further in.
        """
        width = self._usage_width()
        grouped = bool(self.registry.headings)
        lines: list[str] = []
        for title, args in self._usage_groups():
            if title is not None:
                lines.append(f"{' ' * indent}{title}")
            arg_indent = indent + 2 if grouped else indent
            for arg in args:
                prefix = arg.usage_prefix()
                lines.append(
                    f"{' ' * arg_indent}{prefix}{'.' * (width - len(prefix))}"
                    f"... {arg.description}"
                )
        return "\n".join(lines)

    def debug(self) -> str:
        """Render every argument's current value, separated by blank lines."""
        args = sorted(self.registry, key=lambda arg: arg.usage())
        return "\n\n".join(arg.debug() for arg in args)

    def render_help(self, indent: int = 2) -> None:
        """Print the usage listing with rich styling."""
        width = self._usage_width()
        grouped = bool(self.registry.headings)
        for title, args in self._usage_groups():
            if title is not None:
                self.console.print(
                    f"{' ' * indent}[declargs.heading]{escape(title)}[/]"
                )
            arg_indent = indent + 2 if grouped else indent
            for arg in args:
                prefix = arg.usage_prefix()
                line = Text(" " * arg_indent)
                line.append(" ".join(sorted(arg.aliases)), style="declargs.alias")
                if arg.usage_hint:
                    line.append(f" {arg.usage_hint}", style="declargs.hint")
                line.append(" " + "." * (width - len(prefix)), style="declargs.dim")
                line.append(f"... {arg.description}")
                self.console.print(line)

    def render_diagnostics(self) -> None:
        """Print the diagnostics of the most recent read as a table."""
        result = self.result
        if result.good and not result.duplicates and not result.anonymous:
            self.console.print("[declargs.ok]✅ All arguments read successfully.[/]")
            return

        table = Table(title="Argument Diagnostics", box=box.SIMPLE)
        table.add_column("Kind", style="bold")
        table.add_column("Detail")
        for arg in result.errors:
            table.add_row("[declargs.error]error[/]", escape(arg.reason))
        for arg in result.duplicates:
            table.add_row(
                "duplicate",
                f"{escape(arg.name)} appeared {len(arg.appearances)} times",
            )
        for token in result.unrecognized:
            table.add_row("[declargs.error]unrecognized[/]", escape(token))
        for token in result.anonymous:
            table.add_row("[declargs.dim]anonymous[/]", escape(token))
        self.console.print(table)

    def __str__(self) -> str:
        return f"Args(registry={self.registry}, good={self.result.good})"

    def __repr__(self) -> str:
        return str(self)


def read(tokens: Sequence[str] | None = None) -> ParseResult:
    """Read `tokens` (default `sys.argv`) against the process-wide registry."""
    return Args().read(sys.argv if tokens is None else tokens)


def read_stream(stream: TextIO) -> ParseResult:
    return Args().read_stream(stream)


def read_file(path: str | Path) -> ParseResult:
    return Args().read_file(path)


def usage(indent: int = 0) -> str:
    return Args().usage(indent)


def debug() -> str:
    return Args().debug()
