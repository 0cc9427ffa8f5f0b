# declargs — declarative command-line arguments — MIT Licensed
"""
Defines the declared argument types: `FlagArg`, `ValueArg`, `RangeArg` and `FileArg`.

Every argument is created once, usually at module level, and registers itself
into an `ArgRegistry` on construction. Each later call to `Args.read()` asks
every registered argument to find its aliases in the token vector, parse what
follows them, and report which token positions it consumed.

Parse problems never raise. They are recorded as the argument's `reason`
(`error` is true exactly when `reason` is non-empty) and the previously held
value is kept, so a program may choose to carry on with its defaults.

Example:
    verbose = FlagArg("v", "verbose", description="Print more output")
    jobs = ValueArg("j", "jobs", type=int, default=1, usage="<n>")
    ports = ValueArg(
        "ports",
        reader=SequenceArgRangeReader(RangeDomain.integers(1, 65536)),
        writer=SequenceArgWriter(),
        default=[],
    )
    hosts = FileArg("hosts", type=str, default_path="/etc/hosts")

    Args().read(sys.argv)
    if verbose:
        print(jobs.value, ports.value)

Aliases:
    A one-character name is matched as `-x`, a longer one as `--name`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Sequence

from declargs.logger import logger
from declargs.parser.readers import ArgReader, ArgWriter, ensure_callable
from declargs.parser.registry import (
    SHORT_PREFIX,
    ArgRegistry,
    get_registry,
    to_alias,
)

Consumed = tuple[int, int]


class Arg(ABC):
    """
    Common registration, matching and error reporting for declared arguments.

    Attributes:
        name (str): The alias the argument was constructed with (e.g. "-h").
        aliases (set[str]): Every alias of the argument.
        usage_hint (str): Placeholder shown after the aliases in usage text.
        description (str): Help text.
        appearances (list[int]): Token positions of the aliases in the last read.
        reason (str): Error message of the last read, empty when it succeeded.
    """

    default_usage: str = ""
    default_description: str = ""

    def __init__(
        self,
        name: str,
        *alternates: str,
        usage: str | None = None,
        description: str | None = None,
        registry: ArgRegistry | None = None,
    ) -> None:
        self.registry: ArgRegistry = registry if registry is not None else get_registry()
        self.aliases: set[str] = set()
        self.appearances: list[int] = []
        self.usage_hint: str = self.default_usage if usage is None else usage
        self.description: str = (
            self.default_description if description is None else description
        )
        self.reason: str = ""
        self.name: str = self._claim(name)
        for alternate in alternates:
            self.alternate(alternate)
        self.registry.register(self)

    def _claim(self, name: str) -> str:
        alias = to_alias(name)
        self.registry.claim(alias, self)
        self.aliases.add(alias)
        return alias

    def alternate(self, name: str) -> Arg:
        """Add another alias."""
        self._claim(name)
        return self

    def set_usage(self, usage: str) -> Arg:
        self.usage_hint = usage
        return self

    def set_description(self, description: str) -> Arg:
        self.description = description
        return self

    @property
    def error(self) -> bool:
        return self.reason != ""

    @property
    def duplicated(self) -> bool:
        """True when an alias appeared more than once in the last read."""
        return len(self.appearances) > 1

    def _fail(self, reason: str) -> None:
        logger.debug("[%s] %s", self.name, reason)
        self.reason = reason

    def _reset(self) -> None:
        self.reason = ""
        self.appearances = []

    def find_appearances(self, tokens: Sequence[str]) -> list[int]:
        """Record the positions (program name excluded) of tokens equal to an alias."""
        self.appearances = [
            index for index in range(1, len(tokens)) if tokens[index] in self.aliases
        ]
        return self.appearances

    @staticmethod
    def _value_follows(tokens: Sequence[str], index: int) -> bool:
        return index + 1 < len(tokens) and not tokens[index + 1].startswith(SHORT_PREFIX)

    @abstractmethod
    def read(self, tokens: Sequence[str]) -> list[Consumed]:
        """
        Match and parse this argument against `tokens`.

        Returns:
            list[tuple[int, int]]: Inclusive `(first, last)` index ranges of the
            tokens this argument consumed.
        """

    @abstractmethod
    def debug(self) -> str:
        """Return a verbose rendering of the argument and its current value."""

    def usage_prefix(self) -> str:
        """Aliases followed by the usage hint, as shown in the usage listing."""
        text = "".join(f"{alias} " for alias in sorted(self.aliases))
        if self.usage_hint:
            text += f"{self.usage_hint} "
        return text

    def usage(self, indent: int = 0) -> str:
        """Return this argument's usage line."""
        return f"{' ' * indent}{self.usage_prefix()}... {self.description}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(sorted(self.aliases))})"


class FlagArg(Arg):
    """A presence-only argument; `value` is true when any alias appears."""

    default_description = "Flag Arg"

    def __init__(
        self,
        name: str,
        *alternates: str,
        usage: str | None = None,
        description: str | None = None,
        registry: ArgRegistry | None = None,
    ) -> None:
        self.value: bool = False
        super().__init__(
            name, *alternates, usage=usage, description=description, registry=registry
        )

    def read(self, tokens: Sequence[str]) -> list[Consumed]:
        self._reset()
        appearances = self.find_appearances(tokens)
        self.value = bool(appearances)
        return [(index, index) for index in appearances]

    def debug(self) -> str:
        return f"Flag Arg ({self.name}):\n{'true' if self.value else 'false'}"

    def __bool__(self) -> bool:
        return self.value


class ValueArg(Arg):
    """
    An argument followed by exactly one value token.

    The token is parsed with `reader` (by default `ArgReader(type)`). Each
    appearance is processed in order, so the last well-formed occurrence wins.
    An error from any appearance, a missing value token included, is kept for
    the rest of that read even when a later appearance parses:
    `-n -n 5` sets the value to 5 and still reports `-n` as an error.

    Attributes:
        value (Any): Current value, the default until a read succeeds.
        reader (Callable[[str], Any]): Parses the value token.
        writer (Callable[[Any], str]): Renders the value in `debug()`.
        parse_error_message (str): Reason recorded when a value cannot be parsed.
    """

    default_usage = "<arg>"
    default_description = "Value Arg"

    def __init__(
        self,
        name: str,
        *alternates: str,
        type: Any = str,
        default: Any = None,
        reader: Callable[[str], Any] | None = None,
        writer: Callable[[Any], str] | None = None,
        parse_error: str | None = None,
        usage: str | None = None,
        description: str | None = None,
        registry: ArgRegistry | None = None,
    ) -> None:
        self.reader: Callable[[str], Any] = ensure_callable(
            reader or ArgReader(type), "reader"
        )
        self.writer: Callable[[Any], str] = ensure_callable(
            writer or ArgWriter(), "writer"
        )
        self.value: Any = default
        super().__init__(
            name, *alternates, usage=usage, description=description, registry=registry
        )
        self.parse_error_message: str = (
            parse_error or f"Error ({self.name}) Unable to parse argument!"
        )

    def set_default(self, value: Any) -> ValueArg:
        self.value = value
        return self

    def set_parse_error(self, message: str) -> ValueArg:
        self.parse_error_message = message
        return self

    def _accept(self, value: Any) -> bool:
        """Commit a parsed value; subclasses may reject it by recording an error."""
        self.value = value
        return True

    def _assign(self, text: str) -> None:
        try:
            parsed = self.reader(text)
        except (ValueError, TypeError) as error:
            logger.debug("[%s] Unable to parse '%s': %s", self.name, text, error)
            self._fail(self.parse_error_message)
            return
        self._accept(parsed)

    def read(self, tokens: Sequence[str]) -> list[Consumed]:
        self._reset()
        consumed: list[Consumed] = []
        for index in self.find_appearances(tokens):
            if not self._value_follows(tokens, index):
                self._fail(self.parse_error_message)
                consumed.append((index, index))
                continue
            self._assign(tokens[index + 1])
            consumed.append((index, index + 1))
        return consumed

    def debug(self) -> str:
        return f"Value Arg ({self.name}):\n{self.writer(self.value)}"


class RangeArg(ValueArg):
    """
    A value argument whose parsed value must lie within `[lower, upper]`.

    Out-of-range values record `range_error_message` and keep the old value.
    """

    def __init__(
        self,
        name: str,
        *alternates: str,
        lower: Any = None,
        upper: Any = None,
        range_error: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.lower: Any = lower
        self.upper: Any = upper
        super().__init__(name, *alternates, **kwargs)
        self.range_error_message: str = (
            range_error or f"Error ({self.name}) Value out of range!"
        )

    def set_range(self, lower: Any, upper: Any) -> RangeArg:
        self.lower = lower
        self.upper = upper
        return self

    def set_range_error(self, message: str) -> RangeArg:
        self.range_error_message = message
        return self

    def in_range(self, value: Any) -> bool:
        """False when `value` lies outside the bounds or cannot be compared with them."""
        try:
            if self.lower is not None and value < self.lower:
                return False
            if self.upper is not None and value > self.upper:
                return False
        except TypeError:
            logger.debug(
                "[%s] %r is not comparable with [%r, %r]",
                self.name,
                value,
                self.lower,
                self.upper,
            )
            return False
        return True

    def _accept(self, value: Any) -> bool:
        if not self.in_range(value):
            self._fail(self.range_error_message)
            return False
        return super()._accept(value)

    def debug(self) -> str:
        return (
            f"Range Arg ({self.name}, [{self.writer(self.lower)}, "
            f"{self.writer(self.upper)}]):\n{self.writer(self.value)}"
        )


class FileArg(Arg):
    """
    An argument whose value is parsed from the contents of a file.

    The token after the alias overrides `default_path`. Whether or not the alias
    appears, the resolved path is opened and parsed on every read: an unreadable
    path records `file_error_message`, malformed contents `parse_error_message`.

    Attributes:
        value (Any): Current value, the default until a read succeeds.
        default_path (str): Path used when the alias does not appear.
        path (str): Path resolved by the last read.
    """

    default_usage = "<path>"
    default_description = "File Arg"

    def __init__(
        self,
        name: str,
        *alternates: str,
        type: Any = str,
        default: Any = None,
        default_path: str | Path = "",
        reader: Callable[[str], Any] | None = None,
        writer: Callable[[Any], str] | None = None,
        parse_error: str | None = None,
        file_error: str | None = None,
        usage: str | None = None,
        description: str | None = None,
        registry: ArgRegistry | None = None,
    ) -> None:
        self.reader: Callable[[str], Any] = ensure_callable(
            reader or ArgReader(type), "reader"
        )
        self.writer: Callable[[Any], str] = ensure_callable(
            writer or ArgWriter(), "writer"
        )
        self.value: Any = default
        self.default_path: str = str(default_path)
        self.path: str = self.default_path
        super().__init__(
            name, *alternates, usage=usage, description=description, registry=registry
        )
        self.parse_error_message: str = (
            parse_error or f"Error ({self.name}) Unable to parse input!"
        )
        self.file_error_message: str = (
            file_error or f"Error ({self.name}) Unable to read input file!"
        )

    def set_default(self, value: Any) -> FileArg:
        self.value = value
        return self

    def set_default_path(self, path: str | Path) -> FileArg:
        self.default_path = str(path)
        self.path = self.default_path
        return self

    def set_parse_error(self, message: str) -> FileArg:
        self.parse_error_message = message
        return self

    def set_file_error(self, message: str) -> FileArg:
        self.file_error_message = message
        return self

    def read(self, tokens: Sequence[str]) -> list[Consumed]:
        self._reset()
        self.path = self.default_path
        consumed: list[Consumed] = []
        for index in self.find_appearances(tokens):
            if not self._value_follows(tokens, index):
                self._fail(self.file_error_message)
                consumed.append((index, index))
                continue
            self.path = tokens[index + 1]
            consumed.append((index, index + 1))

        if self.error:
            return consumed

        if not self.path:
            logger.debug("[%s] No path given and no default path declared", self.name)
            self._fail(self.file_error_message)
            return consumed

        try:
            contents = Path(self.path).read_text(encoding="UTF-8")
        except (OSError, UnicodeDecodeError) as error:
            logger.debug("[%s] Unable to read '%s': %s", self.name, self.path, error)
            self._fail(self.file_error_message)
            return consumed

        try:
            parsed = self.reader(contents)
        except (ValueError, TypeError) as error:
            logger.debug(
                "[%s] Unable to parse contents of '%s': %s", self.name, self.path, error
            )
            self._fail(self.parse_error_message)
            return consumed

        self.value = parsed
        return consumed

    def debug(self) -> str:
        return f'File Arg ({self.name}, "{self.path}"):\n{self.writer(self.value)}'
