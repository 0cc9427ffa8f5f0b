# declargs — declarative command-line arguments — MIT Licensed
"""
Readers and writers that convert argument text to typed values and back.

A reader is any callable taking the raw text of a token (or of a file) and
returning a typed value, raising `ValueError` when the text is malformed. A
writer is the inverse: it renders a value back to text for debug output.

Besides the default `ArgReader`/`ArgWriter`, this module provides readers for
delimiter-separated collections written as a single token:

    SequenceArgReader(ArgReader(int))("1.2.3")          -> [1, 2, 3]
    AssociativeArgReader(ArgReader(int))("3.1.3")       -> {1, 3}

The range-aware variants treat an empty segment as "continue the range":

    domain = RangeDomain(ArgReader(int), minimum=1, maximum=10)
    SequenceArgRangeReader(domain)("2..8.10")           -> [2, 3, 4, 5, 6, 7, 8, 10]
    SequenceArgRangeReader(domain)("7.")                -> [7, 8, 9]

Exports:
- ReaderProtocol, WriterProtocol
- ArgReader, ArgWriter
- RangeDomain
- SequenceArgReader, SequenceArgRangeReader, SequenceArgWriter
- AssociativeArgReader, AssociativeArgRangeReader, AssociativeArgWriter
"""
from __future__ import annotations

import types
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Protocol,
    get_origin,
    runtime_checkable,
)

from declargs.exceptions import InvalidReaderError
from declargs.logger import logger
from declargs.parser.utils import coerce_value


@runtime_checkable
class ReaderProtocol(Protocol):
    def __call__(self, text: str) -> Any: ...


@runtime_checkable
class WriterProtocol(Protocol):
    def __call__(self, value: Any) -> str: ...


def ensure_callable(obj: Any, role: str) -> Any:
    if not callable(obj):
        raise InvalidReaderError(
            f"{role} must be callable, got {type(obj).__name__}: {obj!r}"
        )
    return obj


def _validate_delimiter(delimiter: str) -> str:
    if not isinstance(delimiter, str) or not delimiter:
        raise InvalidReaderError(
            f"delimiter must be a non-empty string, got {delimiter!r}"
        )
    return delimiter


class ArgReader:
    """
    Default reader: strips surrounding whitespace and coerces the text to `type_`.

    `type_` may be anything `coerce_value` understands: builtin scalars, `bool`,
    `Enum` subclasses, `Literal[...]`, unions, `datetime`, or any callable
    converter such as `Path`.
    """

    def __init__(self, type_: Any = str) -> None:
        if get_origin(type_) is None and not isinstance(type_, types.UnionType):
            ensure_callable(type_, "type")
        self.type = type_

    def __call__(self, text: str) -> Any:
        return coerce_value(text.strip(), self.type)

    def __repr__(self) -> str:
        return f"ArgReader({getattr(self.type, '__name__', self.type)})"


class ArgWriter:
    """Default writer, the inverse of `ArgReader` for primitive types."""

    def __call__(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, datetime):
            return value.isoformat()
        return str(value)

    def __repr__(self) -> str:
        return "ArgWriter()"


def _increment(value: Any) -> Any:
    return value + 1


@dataclass(frozen=True)
class RangeDomain:
    """
    Element type description required by the range-aware collection readers.

    Attributes:
        reader: Parses one segment into an element.
        minimum: Seed value used when a collection starts with an open range.
        maximum: Exclusive bound for a trailing open range.
        successor: Returns the element that follows a given element.
    """

    reader: Callable[[str], Any]
    minimum: Any
    maximum: Any
    successor: Callable[[Any], Any] = _increment

    def __post_init__(self) -> None:
        ensure_callable(self.reader, "reader")
        ensure_callable(self.successor, "successor")
        try:
            inverted = self.minimum > self.maximum
        except TypeError as error:
            raise InvalidReaderError(
                f"minimum {self.minimum!r} and maximum {self.maximum!r} are not comparable"
            ) from error
        if inverted:
            raise InvalidReaderError(
                f"minimum {self.minimum!r} is greater than maximum {self.maximum!r}"
            )

    @classmethod
    def integers(cls, minimum: int, maximum: int) -> RangeDomain:
        return cls(ArgReader(int), minimum, maximum)

    def contains(self, value: Any) -> bool:
        return self.minimum <= value <= self.maximum

    def between(self, low: Any, high: Any) -> Iterator[Any]:
        """
        Yield every element strictly between `low` and `high`, ascending.

        Raises:
            ValueError: If `successor` does not return a greater element.
        """
        current = low
        while True:
            following = self.successor(current)
            if not following > current:
                raise ValueError(
                    f"successor of {current!r} does not advance (got {following!r})"
                )
            if not following < high:
                return
            yield following
            current = following


class _DelimitedReader:
    """Shared splitting and segment parsing for the collection readers."""

    def __init__(self, reader: Callable[[str], Any], delimiter: str) -> None:
        self.reader = ensure_callable(reader, "reader")
        self.delimiter = _validate_delimiter(delimiter)

    def _segments(self, text: str) -> list[str]:
        if text == "":
            return []
        return text.split(self.delimiter)

    def _parse(self, segment: str) -> Any:
        try:
            return self.reader(segment)
        except (ValueError, TypeError) as error:
            raise ValueError(f"Unable to parse segment '{segment}': {error}") from error

    def _values(self, text: str) -> Iterator[Any]:
        for segment in self._segments(text):
            if segment:
                yield self._parse(segment)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reader!r}, delimiter={self.delimiter!r})"


class _DelimitedRangeReader(_DelimitedReader):
    """Range fill over the segments of a delimited token."""

    def __init__(self, domain: RangeDomain, delimiter: str) -> None:
        if not isinstance(domain, RangeDomain):
            raise InvalidReaderError(
                f"domain must be a RangeDomain, got {type(domain).__name__}"
            )
        super().__init__(domain.reader, delimiter)
        self.domain = domain

    def _values(self, text: str) -> Iterator[Any]:
        domain = self.domain
        last: Any = None
        started = False
        pending = False
        for segment in self._segments(text):
            if segment == "":
                if not started:
                    yield domain.minimum
                    last = domain.minimum
                    started = True
                pending = True
                continue

            value = self._parse(segment)
            if pending:
                self._check_span(last, value)
                yield from domain.between(last, value)
                pending = False
            yield value
            last = value
            started = True

        if pending:
            if last >= domain.maximum:
                logger.debug(
                    "Open range after %r is already at or past maximum %r",
                    last,
                    domain.maximum,
                )
                return
            self._check_span(last, domain.maximum)
            yield from domain.between(last, domain.maximum)

    def _check_span(self, low: Any, high: Any) -> None:
        """Reject fills whose endpoints lie outside the domain."""
        for endpoint in (low, high):
            if not self.domain.contains(endpoint):
                raise ValueError(
                    f"range endpoint {endpoint!r} is outside "
                    f"[{self.domain.minimum!r}, {self.domain.maximum!r}]"
                )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min={self.domain.minimum!r}, "
            f"max={self.domain.maximum!r}, delimiter={self.delimiter!r})"
        )


class SequenceArgReader(_DelimitedReader):
    """Reads a delimited token into a list, keeping encounter order."""

    def __init__(
        self, reader: Callable[[str], Any] | None = None, delimiter: str = "."
    ) -> None:
        super().__init__(reader or ArgReader(), delimiter)

    def __call__(self, text: str) -> list[Any]:
        return list(self._values(text))


class SequenceArgRangeReader(_DelimitedRangeReader):
    """Reads a delimited token into a list, expanding empty segments as ranges."""

    def __init__(self, domain: RangeDomain, delimiter: str = ".") -> None:
        super().__init__(domain, delimiter)

    def __call__(self, text: str) -> list[Any]:
        return list(self._values(text))


class AssociativeArgReader(_DelimitedReader):
    """Reads a delimited token into a set; duplicate values coalesce."""

    def __init__(
        self, reader: Callable[[str], Any] | None = None, delimiter: str = "."
    ) -> None:
        super().__init__(reader or ArgReader(), delimiter)

    def __call__(self, text: str) -> set[Any]:
        return set(self._values(text))


class AssociativeArgRangeReader(_DelimitedRangeReader):
    """Reads a delimited token into a set, expanding empty segments as ranges."""

    def __init__(self, domain: RangeDomain, delimiter: str = ".") -> None:
        super().__init__(domain, delimiter)

    def __call__(self, text: str) -> set[Any]:
        return set(self._values(text))


class SequenceArgWriter:
    """Renders a sequence as one delimited token."""

    def __init__(
        self, writer: Callable[[Any], str] | None = None, delimiter: str = "."
    ) -> None:
        self.writer = ensure_callable(writer or ArgWriter(), "writer")
        self.delimiter = _validate_delimiter(delimiter)

    def _ordered(self, values: Iterable[Any]) -> Iterable[Any]:
        return values

    def __call__(self, values: Iterable[Any]) -> str:
        return self.delimiter.join(self.writer(value) for value in self._ordered(values))


class AssociativeArgWriter(SequenceArgWriter):
    """Renders a set as one delimited token, in sorted order."""

    def _ordered(self, values: Iterable[Any]) -> Iterable[Any]:
        return sorted(values)
