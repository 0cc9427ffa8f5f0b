# declargs — declarative command-line arguments — MIT Licensed
"""
Provides `ArgRegistry`, the ordered store of every declared argument.

Arguments register themselves on construction, either into a registry passed
explicitly or into the process-wide registry returned by `get_registry()`, which
is created lazily on first access and lives until the process exits. Tests and
embedding applications build their own `ArgRegistry` instances instead of
sharing the process-wide one.

Aliases are validated and claimed here. A declaration mistake (empty, reserved
or duplicate alias) is not user input and has no recovery path: it is reported
and the process exits through `fatal_error()`.

Headings split the registry into titled groups for usage rendering; arguments
belong to the most recently declared heading at the time they are registered.

Public Interface:
- ArgRegistry: register(), claim(), exists(), heading(), iteration.
- Heading: a titled group of arguments.
- get_registry(): the lazily created process-wide registry.
- heading(title): declare a heading in the process-wide registry.
- to_alias(name): "h" -> "-h", "help" -> "--help".
- fatal_error(message): report a declaration error and exit.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from threading import Lock
from typing import TYPE_CHECKING, Iterator, NoReturn

from rich.markup import escape

from declargs.console import console
from declargs.logger import logger

if TYPE_CHECKING:
    from declargs.parser.argument import Arg

SHORT_PREFIX = "-"
LONG_PREFIX = "--"


def fatal_error(message: str) -> NoReturn:
    """Report a declaration error and terminate the process."""
    logger.critical(message)
    console.print("[declargs.fatal]FATAL ERROR (declargs)[/]")
    console.print(escape(message))
    sys.exit(1)


def to_alias(name: str) -> str:
    """Return the command-line form of an argument name, exiting on illegal names."""
    if not isinstance(name, str) or len(name) == 0:
        fatal_error(f'Unable to register an arg named "{name}"!')
    if len(name) == 1:
        if name == SHORT_PREFIX:
            fatal_error(f'Unable to register an arg named "{SHORT_PREFIX}"!')
        return f"{SHORT_PREFIX}{name}"
    if name == LONG_PREFIX:
        fatal_error(f'Unable to register an arg named "{LONG_PREFIX}"!')
    return f"{LONG_PREFIX}{name}"


@dataclass
class Heading:
    """A titled group of arguments."""

    title: str
    args: list[Arg] = field(default_factory=list)


class ArgRegistry:
    """
    Ordered collection of declared arguments.

    Registration is append-only and guarded by a lock; reading arguments is
    expected to happen from a single thread once declaration is complete.

    Attributes:
        _args (list[Arg]): Arguments in registration order.
        _aliases (dict[str, Arg]): Claimed aliases and their owners.
        _ungrouped (list[Arg]): Arguments declared before any heading.
        _headings (list[Heading]): Declared headings in order.
    """

    def __init__(self) -> None:
        self._args: list[Arg] = []
        self._aliases: dict[str, Arg] = {}
        self._ungrouped: list[Arg] = []
        self._headings: list[Heading] = []
        self._lock = Lock()

    def claim(self, alias: str, arg: Arg) -> None:
        """Reserve `alias` for `arg`, exiting if another argument already owns it."""
        with self._lock:
            if alias in self._aliases:
                owner = self._aliases[alias]
                logger.debug("Alias '%s' already owned by %r", alias, owner)
                fatal_error(f'Unable to register duplicate arg name "{alias}"!')
            self._aliases[alias] = arg

    def register(self, arg: Arg) -> None:
        """Append `arg` to the registry and to the current heading."""
        with self._lock:
            self._args.append(arg)
            if self._headings:
                self._headings[-1].args.append(arg)
            else:
                self._ungrouped.append(arg)
        logger.debug("Registered %r", arg)

    def heading(self, title: str) -> Heading:
        """Start a new heading; arguments registered afterwards belong to it."""
        with self._lock:
            group = Heading(title)
            self._headings.append(group)
        return group

    def exists(self, alias: str) -> bool:
        return alias in self._aliases

    def get(self, alias: str) -> Arg | None:
        """Return the argument owning `alias` ("-h", "--help"), if any."""
        return self._aliases.get(alias)

    @property
    def headings(self) -> list[Heading]:
        return list(self._headings)

    def groups(self) -> list[tuple[str | None, list[Arg]]]:
        """Return `(title, args)` pairs, ungrouped arguments first with no title."""
        groups: list[tuple[str | None, list[Arg]]] = []
        if self._ungrouped:
            groups.append((None, list(self._ungrouped)))
        for group in self._headings:
            groups.append((group.title, list(group.args)))
        return groups

    def __iter__(self) -> Iterator[Arg]:
        return iter(list(self._args))

    def __len__(self) -> int:
        return len(self._args)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._aliases
        return item in self._args

    def __str__(self) -> str:
        return (
            f"ArgRegistry(args={len(self._args)}, aliases={len(self._aliases)}, "
            f"headings={len(self._headings)})"
        )

    def __repr__(self) -> str:
        return str(self)


_registry: ArgRegistry | None = None
_registry_lock = Lock()


def get_registry() -> ArgRegistry:
    """Return the process-wide registry, creating it on first access."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = ArgRegistry()
            logger.debug("Created process-wide argument registry")
        return _registry


def heading(title: str, registry: ArgRegistry | None = None) -> Heading:
    """Declare a heading in `registry`, or in the process-wide registry."""
    if registry is None:
        registry = get_registry()
    return registry.heading(title)
