# declargs — declarative command-line arguments — MIT Licensed
"""config.py
Declares arguments from YAML or TOML files.

A declaration file lists arguments under an `arguments` key:

    arguments:
      - names: [h, help]
        kind: flag
        description: Print this message
      - names: [i, iterations]
        type: int
        default: 10
      - names: [ports]
        type: int
        collection: sequence
        minimum: 1
        maximum: 65536
        default: []
        heading: Network
      - names: [config]
        kind: file
        default_path: ./settings.txt

Each entry is validated with pydantic and turned into the matching `FlagArg`,
`ValueArg`, `RangeArg` or `FileArg` registered into the given registry.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Literal

import toml
import yaml
from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from declargs.exceptions import ArgumentConfigError, InvalidReaderError
from declargs.logger import logger
from declargs.parser.argument import Arg, FileArg, FlagArg, RangeArg, ValueArg
from declargs.parser.readers import (
    ArgReader,
    ArgWriter,
    AssociativeArgRangeReader,
    AssociativeArgReader,
    AssociativeArgWriter,
    RangeDomain,
    SequenceArgRangeReader,
    SequenceArgReader,
    SequenceArgWriter,
)
from declargs.parser.registry import ArgRegistry, get_registry

TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
    "datetime": datetime,
}


class RawArgument(BaseModel):
    """One argument declaration."""

    names: list[str] = Field(min_length=1)
    kind: Literal["flag", "value", "range", "file"] = "value"
    type: Literal["str", "int", "float", "bool", "path", "datetime"] = "str"
    usage: str | None = None
    description: str | None = None
    heading: str | None = None

    default: Any = None
    default_path: str = ""
    parse_error: str | None = None
    file_error: str | None = None

    lower: Any = None
    upper: Any = None
    range_error: str | None = None

    collection: Literal["sequence", "set"] | None = None
    delimiter: str = Field(default=".", min_length=1)
    minimum: Any = None
    maximum: Any = None

    @field_validator("names")
    @classmethod
    def strip_prefixes(cls, names: list[str]) -> list[str]:
        return [name.lstrip("-") or name for name in names]

    @model_validator(mode="after")
    def validate_kind_options(self) -> RawArgument:
        if self.kind == "flag" and (self.collection or self.default is not None):
            raise ValueError("flag arguments take no collection or default")
        if self.kind == "range" and self.lower is None and self.upper is None:
            raise ValueError("range arguments need a lower or upper bound")
        if (self.minimum is None) != (self.maximum is None):
            raise ValueError("minimum and maximum must be declared together")
        if self.minimum is not None and not self.collection:
            raise ValueError("minimum and maximum only apply to collections")
        return self


class DeclarationsConfig(BaseModel):
    """A declaration file."""

    arguments: list[RawArgument] = Field(default_factory=list)


def build_reader(raw: RawArgument) -> Callable[[str], Any]:
    element = ArgReader(TYPES[raw.type])
    if raw.collection is None:
        return element
    if raw.minimum is not None:
        domain = RangeDomain(
            element, element(str(raw.minimum)), element(str(raw.maximum))
        )
        if raw.collection == "sequence":
            return SequenceArgRangeReader(domain, raw.delimiter)
        return AssociativeArgRangeReader(domain, raw.delimiter)
    if raw.collection == "sequence":
        return SequenceArgReader(element, raw.delimiter)
    return AssociativeArgReader(element, raw.delimiter)


def build_writer(raw: RawArgument) -> Callable[[Any], str]:
    if raw.collection == "sequence":
        return SequenceArgWriter(ArgWriter(), raw.delimiter)
    if raw.collection == "set":
        return AssociativeArgWriter(ArgWriter(), raw.delimiter)
    return ArgWriter()


def declare(raw: RawArgument, registry: ArgRegistry) -> Arg:
    """Create the argument described by `raw` in `registry`."""
    common: dict[str, Any] = {
        "usage": raw.usage,
        "description": raw.description,
        "registry": registry,
    }
    if raw.kind == "flag":
        return FlagArg(*raw.names, **common)

    default = raw.default
    if raw.collection == "set" and isinstance(default, list):
        default = set(default)
    typed: dict[str, Any] = {
        **common,
        "default": default,
        "reader": build_reader(raw),
        "writer": build_writer(raw),
        "parse_error": raw.parse_error,
    }
    if raw.kind == "file":
        return FileArg(
            *raw.names,
            default_path=raw.default_path,
            file_error=raw.file_error,
            **typed,
        )
    if raw.kind == "range":
        return RangeArg(
            *raw.names,
            lower=raw.lower,
            upper=raw.upper,
            range_error=raw.range_error,
            **typed,
        )
    return ValueArg(*raw.names, **typed)


def load_declarations(path: str | Path) -> DeclarationsConfig:
    """
    Load and validate a YAML or TOML declaration file.

    Raises:
        ArgumentConfigError: If the file is missing, malformed or invalid.
    """
    path = Path(path)
    if not path.is_file():
        raise ArgumentConfigError(f"Declaration file not found: {path}")

    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ArgumentConfigError(
                    f"Unsupported declaration file type: {path.suffix}"
                )
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ArgumentConfigError(f"Unable to parse {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ArgumentConfigError(f"{path} must contain a mapping at the top level")

    try:
        return DeclarationsConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ArgumentConfigError(f"Invalid declarations in {path}:\n{error}") from error


def loader(path: str | Path, registry: ArgRegistry | None = None) -> list[Arg]:
    """
    Declare every argument listed in the file at `path`.

    Arguments land in `registry`, or in the process-wide registry when omitted.
    A new heading is opened whenever an entry names a heading different from the
    previous entry's.
    """
    if registry is None:
        registry = get_registry()
    config = load_declarations(path)
    declared: list[Arg] = []
    current_heading: str | None = None
    for raw in config.arguments:
        if raw.heading and raw.heading != current_heading:
            registry.heading(raw.heading)
            current_heading = raw.heading
        try:
            declared.append(declare(raw, registry))
        except (ValueError, TypeError, InvalidReaderError) as error:
            raise ArgumentConfigError(
                f"Invalid declaration for {raw.names}: {error}"
            ) from error
    logger.debug("Declared %d arguments from '%s'", len(declared), path)
    return declared
